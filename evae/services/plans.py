# This project was developed with assistance from AI tools.
"""Improvement plans built from the gate's remediation figures.

Plan A targets the bottleneck (or builds margin on PASS), Plan B spreads a
partial adjustment across every lever, Plan C keeps the inputs and tightens
the assumptions instead.
"""

from ..schemas.gate import GateResult, Plan
from .policy_gate import round1

# Share of each remediation figure used by the balanced plan
BALANCED_SHARE = 0.6


def format_number(value: float) -> str:
    """Render a rounded figure without a trailing ``.0`` (12.0 -> "12")."""
    return f"{value:.1f}".rstrip("0").rstrip(".")


def format_man(value: float) -> str:
    return f"{format_number(round1(max(0.0, value)))}万円"


def _plan_a(gate: GateResult) -> Plan:
    required = gate.required

    if gate.bottleneck == "DOWN":
        return Plan(
            title="Plan A（最短）",
            impact="頭金比率を最低基準へ到達させる",
            steps=[
                f"自己資金を +{format_man(required.increase_assets_man_for_down_payment)}",
                f"（代替）申込金額を -{format_man(required.reduce_loan_man_for_dti)}"
                " ※DTI側も同時に改善する可能性",
            ],
        )
    if gate.bottleneck == "DTI":
        return Plan(
            title="Plan A（最短）",
            impact="DTIを上限内へ戻す",
            steps=[
                f"申込金額を -{format_man(required.reduce_loan_man_for_dti)}",
                f"（代替）他の借入を -{format_man(required.reduce_other_debt_man)}"
                "（月返済負担を軽くする）",
            ],
        )
    if gate.bottleneck == "LTI":
        return Plan(
            title="Plan A（最短）",
            impact="LTIを目安内へ戻す",
            steps=[
                f"申込金額を -{format_man(required.reduce_loan_man_for_lti)}",
                f"（代替）年収を +{format_man(required.increase_income_man_for_lti)}（到達目安）",
            ],
        )
    return Plan(
        title="Plan A（余裕を増やす）",
        impact="将来変動（金利/生活費）に備えて余裕度を増やす",
        steps=[
            "頭金をもう1段積む（リスク低下・金利条件の改善余地）",
            "他債務を圧縮してDTIの余裕を確保する",
        ],
    )


def _plan_b(gate: GateResult) -> Plan:
    required = gate.required
    steps = [
        f"申込金額を -{format_man(required.reduce_loan_man_for_dti * BALANCED_SHARE)}"
        if required.reduce_loan_man_for_dti > 0
        else "申込金額の微調整（レンジで再計算）",
        f"自己資金を +{format_man(required.increase_assets_man_for_down_payment * BALANCED_SHARE)}"
        if required.increase_assets_man_for_down_payment > 0
        else "自己資金の上積み（ボーナス等）",
        f"他の借入を -{format_man(required.reduce_other_debt_man * BALANCED_SHARE)}"
        if required.reduce_other_debt_man > 0
        else "他債務の支払計画を見直す",
    ]
    return Plan(
        title="Plan B（現実）",
        impact="複数項目を少しずつ改善してリスクを分散",
        steps=steps,
    )


def _plan_c() -> Plan:
    return Plan(
        title="Plan C（保守）",
        impact="前提を変えずに“条件”側で安全域を確保",
        steps=[
            "金利が上振れした場合（+0.5〜1.0%）で再計算する",
            "返済期間・物件価格帯を見直して月返済の上限を固定する",
            "実運用では勤続年数・貯蓄推移などを追加して精緻化する",
        ],
    )


def build_plans(gate: GateResult) -> list[Plan]:
    """Return the three ranked plans: fastest, realistic, conservative."""
    return [_plan_a(gate), _plan_b(gate), _plan_c()]
