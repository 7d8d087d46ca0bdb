# This project was developed with assistance from AI tools.
"""Policy Gate result schemas."""

from typing import Literal

from pydantic import Field

from . import CamelModel
from .policy import Policy

Decision = Literal["PASS", "HOLD"]
Bottleneck = Literal["DTI", "DOWN", "LTI"]


class Metrics(CamelModel):
    """Affordability ratios derived from the applicant figures, rounded to 0.1."""

    monthly_income_man: float
    principal_man: float
    est_mortgage_pay_man: float
    est_other_debt_pay_man: float
    dti_pct: float
    down_payment_pct: float
    lti: float


class Headroom(CamelModel):
    """Signed margin to each threshold: positive is room to spare, negative a violation."""

    dti_pct: float
    down_payment_pct: float
    lti: float


class Required(CamelModel):
    """Minimum adjustment (man-yen, >= 0) that clears each constraint on its own."""

    reduce_loan_man_for_dti: float = Field(default=0.0, alias="reduceLoanManForDTI")
    increase_assets_man_for_down_payment: float = 0.0
    reduce_other_debt_man: float = 0.0
    reduce_loan_man_for_lti: float = Field(default=0.0, alias="reduceLoanManForLTI")
    increase_income_man_for_lti: float = Field(default=0.0, alias="increaseIncomeManForLTI")


class GateResult(CamelModel):
    """Outcome of one Policy Gate evaluation."""

    decision: Decision = Field(alias="result")
    gate_reasons: list[str]
    soft_flags: list[str]
    bottleneck: Bottleneck | None
    headroom: Headroom
    required: Required
    metrics: Metrics
    policy: Policy


class Plan(CamelModel):
    """One ranked improvement plan."""

    title: str
    impact: str
    steps: list[str]
