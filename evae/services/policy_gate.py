# This project was developed with assistance from AI tools.
"""Policy Gate: affordability ratios, PASS/HOLD classification and remediation.

Pure functions over an ``ApplicantInput`` and an explicit ``Policy``; no I/O
and no module state, so the same inputs always produce the same result.

Ratios are compared against the policy unrounded. Only the reported figures
(metrics, headroom, required) are rounded to one decimal.
"""

import logging
import math
import sys
from dataclasses import dataclass

from ..schemas.applicant import ApplicantInput
from ..schemas.gate import Bottleneck, GateResult, Headroom, Metrics, Required
from ..schemas.policy import Policy
from .amortization import monthly_payment, principal_from_payment

logger = logging.getLogger(__name__)

RULE_ID = "MORTGAGE_STD_001"

REASON_INCOME_MISSING = "年収が未入力/0のため、指標計算が成立しない"
REASON_LOAN_MISSING = "申込金額が未入力/0のため、指標計算が成立しない"
REASON_ASSETS_NEGATIVE = "自己資金が負の値"
REASON_DEBT_NEGATIVE = "他債務が負の値"

FLAG_COMPLETION_AGE = "完済時年齢が高い可能性（追加確認が必要）"
FLAG_EMPLOYMENT = "雇用形態により収入安定性の追加確認が必要（デモ）"
FLAG_FAMILY = "家族構成により生活費前提の精緻化余地（デモ）"

# Employment categories whose income stability needs a second look
UNSTABLE_JOBS = frozenset({"自営業", "契約/派遣", "パート/アルバイト"})

# Fixed precedence for equal gaps (stable sort keeps this order)
_BOTTLENECK_ORDER: tuple[Bottleneck, ...] = ("DTI", "DOWN", "LTI")

_EXACT_INT_LIMIT = 2.0**52


def _bounded(value: float) -> float:
    """Clamp a ratio that overflowed to the largest finite float."""
    return max(-sys.float_info.max, min(value, sys.float_info.max))


def round1(value: float) -> float:
    """Round to one decimal place, halves away from zero.

    Magnitudes beyond 2**52 carry no fractional digits and are returned as-is,
    as are infinities and NaN.
    """
    if not abs(value) < _EXACT_INT_LIMIT:
        return value
    scaled = math.floor(abs(value) * 10 + 0.5) / 10
    return -scaled if value < 0 and scaled else scaled


@dataclass(frozen=True)
class Ratios:
    """Unrounded affordability figures for one applicant under one policy."""

    monthly_income_man: float
    principal_man: float
    est_mortgage_pay_man: float
    est_other_debt_pay_man: float
    dti_pct: float
    down_payment_pct: float
    lti: float

    def to_metrics(self) -> Metrics:
        return Metrics(
            monthly_income_man=round1(self.monthly_income_man),
            principal_man=round1(self.principal_man),
            est_mortgage_pay_man=round1(self.est_mortgage_pay_man),
            est_other_debt_pay_man=round1(self.est_other_debt_pay_man),
            dti_pct=round1(self.dti_pct),
            down_payment_pct=round1(self.down_payment_pct),
            lti=round1(self.lti),
        )


def _share_pct(part: float, other: float) -> float:
    """``part`` as a percentage of ``part + other``; 0 when the total is not positive."""
    total = part + other
    if math.isinf(total):
        part, total = part / 2, part / 2 + other / 2
    return part / total * 100 if total > 0 else 0.0


def compute_ratios(applicant: ApplicantInput, policy: Policy) -> Ratios:
    """Derive DTI, down-payment share and LTI from the applicant figures.

    The requested loan is the mortgage principal as-is; assets are not
    netted off before amortizing.
    """
    income = applicant.income_man
    loan = applicant.loan_request_man
    assets = applicant.assets_man
    other_debt = applicant.other_debt_man

    monthly_income = income / 12 if income > 0 else 0.0
    est_other_debt_pay = (
        other_debt * (policy.other_debt_monthly_pct / 100) if other_debt > 0 else 0.0
    )
    est_mortgage_pay = monthly_payment(loan, policy.annual_rate_pct, policy.years)

    total_pay = est_mortgage_pay + est_other_debt_pay
    dti_pct = total_pay / monthly_income * 100 if monthly_income > 0 else 0.0
    down_payment_pct = _share_pct(assets, loan)
    lti = loan / income if income > 0 else 0.0

    # Finite inputs can still overflow a quotient (a tiny income, say)
    dti_pct = _bounded(dti_pct)
    down_payment_pct = _bounded(down_payment_pct)
    lti = _bounded(lti)

    return Ratios(
        monthly_income_man=monthly_income,
        principal_man=loan,
        est_mortgage_pay_man=est_mortgage_pay,
        est_other_debt_pay_man=est_other_debt_pay,
        dti_pct=dti_pct,
        down_payment_pct=down_payment_pct,
        lti=lti,
    )


def input_validity_reasons(applicant: ApplicantInput) -> list[str]:
    """Reasons the figures cannot support a ratio check at all."""
    reasons: list[str] = []
    if applicant.income_man <= 0:
        reasons.append(REASON_INCOME_MISSING)
    if applicant.loan_request_man <= 0:
        reasons.append(REASON_LOAN_MISSING)
    if applicant.assets_man < 0:
        reasons.append(REASON_ASSETS_NEGATIVE)
    if applicant.other_debt_man < 0:
        reasons.append(REASON_DEBT_NEGATIVE)
    return reasons


def _fmt_threshold(value: float) -> str:
    return f"{value:g}"


def ratio_reasons(ratios: Ratios, policy: Policy) -> list[str]:
    """Reasons for each ratio threshold the applicant violates, in fixed order."""
    reasons: list[str] = []
    if ratios.dti_pct > policy.dti_max_pct:
        reasons.append(f"DTIが上限({_fmt_threshold(policy.dti_max_pct)}%)を超過")
    if ratios.down_payment_pct < policy.down_payment_min_pct:
        minimum = _fmt_threshold(policy.down_payment_min_pct)
        reasons.append(f"頭金比率が最低({minimum}%)を下回る")
    if ratios.lti > policy.lti_max:
        reasons.append(f"LTIが目安上限({_fmt_threshold(policy.lti_max)}倍)を超過")
    return reasons


def soft_flags(applicant: ApplicantInput, policy: Policy) -> list[str]:
    """Advisory notes. These never change the PASS/HOLD decision."""
    flags: list[str] = []
    age = applicant.age
    if age and age > 0 and age + policy.years > policy.max_completion_age:
        flags.append(FLAG_COMPLETION_AGE)
    if applicant.job in UNSTABLE_JOBS:
        flags.append(FLAG_EMPLOYMENT)
    if applicant.family and "子" in applicant.family:
        flags.append(FLAG_FAMILY)
    return flags


def pick_bottleneck(ratios: Ratios, policy: Policy) -> Bottleneck | None:
    """Return the constraint with the largest positive gap, or None.

    Gaps are compared in their own units (percentage points for DTI and
    down payment, income multiples for LTI).
    """
    gaps: dict[Bottleneck, float] = {
        "DTI": ratios.dti_pct - policy.dti_max_pct,
        "DOWN": policy.down_payment_min_pct - ratios.down_payment_pct,
        "LTI": ratios.lti - policy.lti_max,
    }
    violated = [(key, gaps[key]) for key in _BOTTLENECK_ORDER if gaps[key] > 0]
    if not violated:
        return None
    violated.sort(key=lambda item: item[1], reverse=True)
    return violated[0][0]


def compute_headroom(ratios: Ratios, policy: Policy) -> Headroom:
    return Headroom(
        dti_pct=round1(policy.dti_max_pct - ratios.dti_pct),
        down_payment_pct=round1(ratios.down_payment_pct - policy.down_payment_min_pct),
        lti=round1(policy.lti_max - ratios.lti),
    )


def _report_amount(value: float) -> float:
    return round1(_bounded(max(0.0, value)))


def solve_required(applicant: ApplicantInput, ratios: Ratios, policy: Policy) -> Required:
    """Back-solve the smallest change that clears each constraint independently.

    All figures are 0 when income or the requested loan is missing, since no
    ratio is defined then.
    """
    income = applicant.income_man
    loan = applicant.loan_request_man
    if income <= 0 or loan <= 0:
        return Required()

    reduce_loan_for_dti = 0.0
    reduce_other_debt = 0.0

    max_pay = ratios.monthly_income_man * (policy.dti_max_pct / 100)
    allow_mortgage_pay = max_pay - ratios.est_other_debt_pay_man
    if allow_mortgage_pay <= 0:
        # Other debt alone uses up the DTI budget; no loan size fixes that
        excess_pay = ratios.est_other_debt_pay_man - max_pay
        if excess_pay > 0 and policy.other_debt_monthly_pct > 0:
            reduce_other_debt = excess_pay / (policy.other_debt_monthly_pct / 100)
    else:
        principal_allowed = principal_from_payment(
            allow_mortgage_pay, policy.annual_rate_pct, policy.years
        )
        reduce_loan_for_dti = loan - principal_allowed

    min_pct = policy.down_payment_min_pct
    required_assets = min_pct / (100 - min_pct) * loan if min_pct < 100 else 0.0
    increase_assets = required_assets - applicant.assets_man

    reduce_loan_for_lti = loan - policy.lti_max * income
    increase_income_for_lti = loan / policy.lti_max - income if policy.lti_max > 0 else 0.0

    return Required(
        reduce_loan_man_for_dti=_report_amount(reduce_loan_for_dti),
        increase_assets_man_for_down_payment=_report_amount(increase_assets),
        reduce_other_debt_man=_report_amount(reduce_other_debt),
        reduce_loan_man_for_lti=_report_amount(reduce_loan_for_lti),
        increase_income_man_for_lti=_report_amount(increase_income_for_lti),
    )


def evaluate(applicant: ApplicantInput, policy: Policy) -> GateResult:
    """Run the full gate: ratios, reasons, decision, bottleneck and remediation."""
    ratios = compute_ratios(applicant, policy)

    gate_reasons = input_validity_reasons(applicant)
    bottleneck: Bottleneck | None = None
    if not gate_reasons:
        gate_reasons = ratio_reasons(ratios, policy)
        bottleneck = pick_bottleneck(ratios, policy)

    decision = "HOLD" if gate_reasons else "PASS"
    logger.info(
        "Policy gate %s: decision=%s bottleneck=%s reasons=%d",
        RULE_ID,
        decision,
        bottleneck,
        len(gate_reasons),
    )

    return GateResult(
        decision=decision,
        gate_reasons=gate_reasons,
        soft_flags=soft_flags(applicant, policy),
        bottleneck=bottleneck,
        headroom=compute_headroom(ratios, policy),
        required=solve_required(applicant, ratios, policy),
        metrics=ratios.to_metrics(),
        policy=policy,
    )
