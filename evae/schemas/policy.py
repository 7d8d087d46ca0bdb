# This project was developed with assistance from AI tools.
"""Lending policy schema."""

from pydantic import Field

from . import CamelModel


class Policy(CamelModel):
    """Thresholds and assumptions the Policy Gate evaluates against.

    Monetary figures are in man-yen (10,000 JPY). ``other_debt_monthly_pct``
    approximates the monthly repayment on an outstanding debt balance.
    """

    bank: str = "仮想銀行A"
    dti_max_pct: float = Field(default=35, ge=0)
    down_payment_min_pct: float = Field(default=10, ge=0, lt=100)
    annual_rate_pct: float = Field(default=1.5, ge=0)
    years: float = Field(default=35, gt=0)
    lti_max: float = Field(default=7, gt=0)
    other_debt_monthly_pct: float = Field(default=2, ge=0)
    max_completion_age: int = 80


DEFAULT_POLICY = Policy()
