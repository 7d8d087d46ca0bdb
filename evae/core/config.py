# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
The lending policy thresholds live here too so a deployment can tune the gate
without touching code; ``get_policy()`` freezes them into a ``Policy`` value.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..schemas.policy import Policy

# Resolve project root .env regardless of CWD (matches inference/config.py approach)
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "evae-framework"
    DEBUG: bool = False

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # -- Discussion points (LLM) --
    DISCUSSION_ENABLED: bool = Field(
        default=True,
        description="Call the LLM for discussion points. False always uses the fixed fallback.",
    )
    DISCUSSION_TIER: str = Field(
        default="fast_small",
        description="Model tier in config/models.yaml used for discussion points.",
    )

    # -- Policy gate --
    POLICY_BANK: str = "仮想銀行A"
    POLICY_DTI_MAX_PCT: float = Field(default=35, ge=0)
    POLICY_DOWN_PAYMENT_MIN_PCT: float = Field(default=10, ge=0, lt=100)
    POLICY_ANNUAL_RATE_PCT: float = Field(default=1.5, ge=0)
    POLICY_YEARS: float = Field(default=35, gt=0)
    POLICY_LTI_MAX: float = Field(default=7, gt=0)
    POLICY_OTHER_DEBT_MONTHLY_PCT: float = Field(
        default=2,
        ge=0,
        description="Share of the other-debt balance assumed to be repaid each month.",
    )
    POLICY_MAX_COMPLETION_AGE: int = Field(
        default=80,
        description="Age at full repayment above which a soft flag is raised.",
    )


settings = Settings()


def get_policy() -> Policy:
    """Build the active policy from settings. Used as a FastAPI dependency."""
    return Policy(
        bank=settings.POLICY_BANK,
        dti_max_pct=settings.POLICY_DTI_MAX_PCT,
        down_payment_min_pct=settings.POLICY_DOWN_PAYMENT_MIN_PCT,
        annual_rate_pct=settings.POLICY_ANNUAL_RATE_PCT,
        years=settings.POLICY_YEARS,
        lti_max=settings.POLICY_LTI_MAX,
        other_debt_monthly_pct=settings.POLICY_OTHER_DEBT_MONTHLY_PCT,
        max_completion_age=settings.POLICY_MAX_COMPLETION_AGE,
    )
