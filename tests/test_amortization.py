# This project was developed with assistance from AI tools.
"""Tests for fixed-rate amortization math."""

import pytest

from evae.services.amortization import monthly_payment, principal_from_payment


def test_monthly_payment_standard_loan():
    """3000 over 35 years at 1.5% is about 9.19 per month."""
    assert monthly_payment(3000, 1.5, 35) == pytest.approx(9.1855, abs=1e-3)


def test_zero_rate_is_straight_line():
    assert monthly_payment(4200, 0, 35) == 10.0
    assert principal_from_payment(10, 0, 35) == 4200.0


@pytest.mark.parametrize("principal", [0, -100])
def test_non_positive_principal_pays_nothing(principal):
    assert monthly_payment(principal, 1.5, 35) == 0.0


@pytest.mark.parametrize("payment", [0, -5])
def test_non_positive_payment_supports_nothing(payment):
    assert principal_from_payment(payment, 1.5, 35) == 0.0


def test_term_is_at_least_one_month():
    """A term that rounds to zero months still amortizes over one payment."""
    assert monthly_payment(100, 0, 0.01) == 100.0
    assert principal_from_payment(100, 0, 0.01) == 100.0


def test_half_month_term_rounds_up():
    """4.5 months is five payments, not four."""
    assert monthly_payment(100, 0, 0.375) == 20.0
    assert principal_from_payment(20, 0, 0.375) == 100.0


@pytest.mark.parametrize(
    ("principal", "rate", "years"),
    [
        (3000, 1.5, 35),
        (150, 0, 10),
        (8000, 4.25, 25),
        (0.5, 12, 1),
        (12345.6, 0.3, 50),
    ],
)
def test_principal_from_payment_inverts_monthly_payment(principal, rate, years):
    payment = monthly_payment(principal, rate, years)
    assert principal_from_payment(payment, rate, years) == pytest.approx(principal, rel=1e-9)


def test_higher_rate_means_higher_payment():
    assert monthly_payment(3000, 2.0, 35) > monthly_payment(3000, 1.5, 35)


def test_longer_term_means_lower_payment():
    assert monthly_payment(3000, 1.5, 35) < monthly_payment(3000, 1.5, 20)
