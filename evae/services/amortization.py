# This project was developed with assistance from AI tools.
"""Fixed-rate amortization math.

Pure math, no I/O. ``monthly_payment`` and ``principal_from_payment`` are
algebraic inverses of each other, including the zero-rate case.
"""

import math


def _monthly_rate_and_term(annual_rate_pct: float, years: float) -> tuple[float, int]:
    monthly_rate = annual_rate_pct / 100 / 12
    # Half a month rounds up to a whole payment
    n_payments = max(1, math.floor(years * 12 + 0.5))
    return monthly_rate, n_payments


def monthly_payment(principal: float, annual_rate_pct: float, years: float) -> float:
    """Monthly payment that fully repays ``principal`` over ``years``.

    P = L * [r(1+r)^n] / [(1+r)^n - 1], or L / n when the rate is zero.
    """
    if principal <= 0:
        return 0.0
    monthly_rate, n_payments = _monthly_rate_and_term(annual_rate_pct, years)
    if monthly_rate == 0:
        return principal / n_payments

    compound = (1 + monthly_rate) ** n_payments
    return principal * monthly_rate * compound / (compound - 1)


def principal_from_payment(payment: float, annual_rate_pct: float, years: float) -> float:
    """Largest principal that ``payment`` per month can repay over ``years``."""
    if payment <= 0:
        return 0.0
    monthly_rate, n_payments = _monthly_rate_and_term(annual_rate_pct, years)
    if monthly_rate == 0:
        return payment * n_payments

    compound = (1 + monthly_rate) ** n_payments
    return payment * (compound - 1) / (monthly_rate * compound)
