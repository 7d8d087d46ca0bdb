# This project was developed with assistance from AI tools.
"""Assemble the E / V / Λ / Ǝ response for one applicant.

The gate result is deterministic; only ``meta.traceId`` and
``meta.generatedAt`` vary between identical requests.
"""

import json
import logging
from datetime import UTC, datetime
from typing import Any

from ..schemas.applicant import ApplicantInput
from ..schemas.gate import GateResult, Headroom
from ..schemas.policy import Policy
from ..schemas.structure import LambdaSection, Meta, StructureResponse, Trace, TraceLog
from .discussion import DiscussionResult
from .plans import build_plans, format_number
from .policy_gate import RULE_ID, evaluate

logger = logging.getLogger(__name__)

GATE_NOTE = "実行時の人介在なし（ルール確定）"
VISION_NOTE = "論点生成のみ（可否判断なし）"

PASS_REASON = "主要指標がポリシー範囲内（ただし可否は決定しない）。余裕度はTraceとして固定。"
HOLD_REASON_PREFIX = "ポリシーゲートにより再検討が必要："

HOLD_ACTIONS = (
    "HOLD要因（ゲート理由）を最優先に改善する",
    "Plan A/B/C に沿って、借入・自己資金・他債務のどれを動かすか決める",
)


def _signed(value: float) -> str:
    text = format_number(value)
    return text if text.startswith("-") else f"+{text}"


def trace_reason(gate: GateResult) -> str:
    if gate.decision == "PASS":
        return PASS_REASON
    return HOLD_REASON_PREFIX + " / ".join(gate.gate_reasons)


def trace_actions(gate: GateResult) -> list[str]:
    if gate.decision == "HOLD":
        return list(HOLD_ACTIONS)
    headroom: Headroom = gate.headroom
    return [
        f"余裕度：DTI {_signed(headroom.dti_pct)}% / 頭金 {_signed(headroom.down_payment_pct)}%"
        f" / LTI {_signed(headroom.lti)}倍（境界に対する余裕）",
        "金利上振れ（+0.5〜1.0%）でも成立するかを再計算する",
        "実運用では勤続年数・貯蓄推移等の追加で精緻化する",
    ]


def _dumps(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False)


def build_structure(
    applicant: ApplicantInput,
    policy: Policy,
    discussion: DiscussionResult,
    *,
    now: datetime | None = None,
) -> StructureResponse:
    """Run the gate and wrap it with discussion points, trace and metadata.

    Args:
        applicant: Normalized applicant input.
        policy: Policy to evaluate against.
        discussion: Discussion points already produced for this applicant.
        now: Override the generation time (for testing).
    """
    if now is None:
        now = datetime.now(UTC)
    trace_id = f"trace_{int(now.timestamp() * 1000)}"
    generated_at = now.isoformat()

    gate = evaluate(applicant, policy)
    gate_dump = gate.model_dump(by_alias=True)

    policy_gate = LambdaSection(
        rule_id=RULE_ID,
        result=gate.decision,
        note=GATE_NOTE,
        gate_reasons=gate.gate_reasons,
        soft_flags=gate.soft_flags,
        bottleneck=gate.bottleneck,
        headroom=gate.headroom,
        plans=build_plans(gate),
        flags=[*gate.gate_reasons, *gate.soft_flags],
        policy=policy,
        metrics=gate.metrics,
        required=gate.required,
    )

    log = TraceLog(
        evidence=_dumps(applicant.model_dump(by_alias=True)),
        vision=_dumps(discussion.points),
        policy_gate=_dumps({"ruleId": RULE_ID, **gate_dump}),
        trace=_dumps({"traceId": trace_id, "generatedAt": generated_at}),
    )

    trace = Trace(
        reason=trace_reason(gate),
        actions=trace_actions(gate),
        log=log,
        confirmed=applicant.user_confirmed,
        confirmed_at=applicant.confirmed_at,
        confirm_text=applicant.confirm_text,
    )

    logger.debug("Built structure %s (decision=%s)", trace_id, gate.decision)

    return StructureResponse(
        vision=discussion.points,
        policy_gate=policy_gate,
        trace=trace,
        meta=Meta(
            model=discussion.model,
            vision_note=VISION_NOTE,
            trace_id=trace_id,
            generated_at=generated_at,
        ),
    )
