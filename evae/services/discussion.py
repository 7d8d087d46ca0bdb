# This project was developed with assistance from AI tools.
"""Discussion points (the "V" stage).

An LLM drafts up to four short topics for the consultation. Nothing in the
Policy Gate reads them. When the model is disabled, unconfigured or failing,
a fixed set of points is returned instead; there is no retry.
"""

import logging
import re
from dataclasses import dataclass, field

from ..core.config import settings
from ..inference.client import get_completion
from ..inference.config import CONFIG_ERRORS, get_model_config, is_tier_configured
from ..schemas.applicant import ApplicantInput
from .discussion_prompts import build_discussion_prompt

logger = logging.getLogger(__name__)

MAX_POINTS = 4
MIN_POINT_LENGTH = 8
FALLBACK_MODEL = "rule-based"

FALLBACK_POINTS: tuple[str, ...] = (
    "返済負担（DTI）・頭金比率・年収倍率（LTI）で、ルール判定の前提となる構造を数値化します。",
    "本デモは融資の可否を決定しません。Policy Gate の結果は「検討状態（PASS/HOLD）」として表示します。",
    "PASSでも境界（しきい値）に対する余裕度を可視化し、再検討の論点として残します。",
)

# Leading bullets or numbering: "- ", "・", "*", "•", "1.", "2)", "（3）"
_BULLET_RE = re.compile(r"^\s*(?:[-*・•●]+|[（(]?\d+[.)）:])\s*")


@dataclass(frozen=True)
class DiscussionResult:
    points: list[str] = field(default_factory=list)
    model: str = FALLBACK_MODEL


def fallback_result() -> DiscussionResult:
    return DiscussionResult(points=list(FALLBACK_POINTS), model=FALLBACK_MODEL)


def parse_points(raw: str) -> list[str]:
    """Split a model reply into at most ``MAX_POINTS`` bullet lines.

    Markers and numbering are stripped; lines shorter than
    ``MIN_POINT_LENGTH`` characters after stripping are dropped.
    """
    points: list[str] = []
    for line in raw.splitlines():
        text = _BULLET_RE.sub("", line).strip()
        if len(text) < MIN_POINT_LENGTH:
            continue
        points.append(text)
        if len(points) == MAX_POINTS:
            break
    return points


async def produce_discussion_points(applicant: ApplicantInput) -> DiscussionResult:
    """Return discussion points for the applicant, falling back to fixed text."""
    tier = settings.DISCUSSION_TIER
    if not settings.DISCUSSION_ENABLED or not is_tier_configured(tier):
        return fallback_result()

    messages = build_discussion_prompt(applicant.profile_summary())
    try:
        raw = await get_completion(messages, tier=tier)
        model_name = get_model_config(tier)["model_name"]
    except Exception:
        logger.warning("Discussion point generation failed, using fallback", exc_info=True)
        return fallback_result()

    points = parse_points(raw)
    if not points:
        logger.warning("LLM reply had no usable discussion points, using fallback")
        return fallback_result()
    return DiscussionResult(points=points, model=model_name)


def log_discussion_status() -> None:
    """Log whether LLM discussion points are active or degraded. Call at startup."""
    tier = settings.DISCUSSION_TIER
    if not settings.DISCUSSION_ENABLED:
        logger.warning("Discussion points: DISABLED (DISCUSSION_ENABLED=false, fixed text)")
        return
    try:
        get_model_config(tier)
    except CONFIG_ERRORS as exc:
        logger.warning(
            "Discussion points: DEGRADED (model config unusable for tier=%s: %s, fixed text)",
            tier,
            exc,
        )
        return
    if is_tier_configured(tier):
        logger.warning("Discussion points: ACTIVE (tier=%s)", tier)
    else:
        logger.warning("Discussion points: DEGRADED (no API key for tier=%s, fixed text)", tier)
