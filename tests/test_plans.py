# This project was developed with assistance from AI tools.
"""Tests for improvement plan templates."""

import pytest

from evae.services.plans import build_plans, format_man, format_number
from evae.services.policy_gate import evaluate

from .factories import make_applicant


@pytest.mark.parametrize(
    ("value", "expected"),
    [(12.0, "12"), (33.3, "33.3"), (0.0, "0"), (100.0, "100"), (-0.9, "-0.9")],
)
def test_format_number_drops_trailing_zero(value, expected):
    assert format_number(value) == expected


def test_format_man_floors_at_zero():
    assert format_man(-12.3) == "0万円"
    assert format_man(19.98) == "20万円"


def test_always_three_plans(policy):
    plans = build_plans(evaluate(make_applicant(), policy))
    assert [plan.title for plan in plans] == [
        "Plan A（余裕を増やす）",
        "Plan B（現実）",
        "Plan C（保守）",
    ]


def test_down_payment_bottleneck_plan(policy):
    plans = build_plans(evaluate(make_applicant(assets_man=300), policy))

    assert plans[0].title == "Plan A（最短）"
    assert plans[0].impact == "頭金比率を最低基準へ到達させる"
    assert plans[0].steps[0] == "自己資金を +33.3万円"
    assert plans[1].steps == [
        "申込金額の微調整（レンジで再計算）",
        "自己資金を +20万円",
        "他債務の支払計画を見直す",
    ]


def test_dti_bottleneck_plan(policy):
    gate = evaluate(make_applicant(income_man=400, loan_request_man=5000, assets_man=1000), policy)
    plan_a = build_plans(gate)[0]

    assert plan_a.impact == "DTIを上限内へ戻す"
    assert plan_a.steps[0].startswith("申込金額を -")
    assert plan_a.steps[1] == "（代替）他の借入を -0万円（月返済負担を軽くする）"


def test_lti_bottleneck_plan(policy):
    gate = evaluate(make_applicant(income_man=100, loan_request_man=900, assets_man=200), policy)
    plan_a = build_plans(gate)[0]

    assert plan_a.impact == "LTIを目安内へ戻す"
    assert plan_a.steps == ["申込金額を -200万円", "（代替）年収を +28.6万円（到達目安）"]


def test_conservative_plan_is_fixed(policy):
    pass_plan = build_plans(evaluate(make_applicant(), policy))[2]
    hold_plan = build_plans(evaluate(make_applicant(income_man=0), policy))[2]
    assert pass_plan == hold_plan
    assert len(pass_plan.steps) == 3
