# This project was developed with assistance from AI tools.
"""Response envelope for ``POST /api/generate-structure``.

The wire keys follow the framework's stages: ``V`` (discussion points),
``Lambda`` (Policy Gate), ``Trace`` (reproducible record) and ``meta``.
"""

from pydantic import Field

from . import CamelModel
from .gate import Bottleneck, Decision, Headroom, Metrics, Plan, Required
from .policy import Policy


class LambdaSection(CamelModel):
    """Policy Gate section, as rendered by the front end."""

    method: str = "Policy Gate"
    rule_id: str
    result: Decision
    note: str
    gate_reasons: list[str]
    soft_flags: list[str]
    bottleneck: Bottleneck | None
    headroom: Headroom
    plans: list[Plan]
    flags: list[str]
    policy: Policy
    metrics: Metrics
    required: Required


class TraceLog(CamelModel):
    """JSON snapshot of each stage, serialized to strings for display."""

    evidence: str = Field(alias="E")
    vision: str = Field(alias="V")
    policy_gate: str = Field(alias="Lambda")
    trace: str = Field(alias="Trace")


class Trace(CamelModel):
    reason: str
    actions: list[str]
    log: TraceLog
    confirmed: bool = False
    confirmed_at: str | None = None
    confirm_text: dict[str, str] | None = None


class Meta(CamelModel):
    model: str
    vision_note: str
    trace_id: str
    generated_at: str


class StructureResponse(CamelModel):
    """Full response: discussion points, gate result, trace and metadata."""

    vision: list[str] = Field(alias="V")
    policy_gate: LambdaSection = Field(alias="Lambda")
    trace: Trace = Field(alias="Trace")
    meta: Meta
