# This project was developed with assistance from AI tools.
"""Applicant input schema.

Sparse input never fails validation: missing or unparseable money fields
become 0 and the Policy Gate reports them as input-validity reasons instead.
"""

import math
from typing import Any

from pydantic import field_validator

from . import CamelModel


def _finite_or_zero(value: Any) -> float:
    """Coerce a loosely-typed JSON value to a finite float, 0 when impossible."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


class ApplicantInput(CamelModel):
    """Applicant figures (man-yen) plus the optional profile and confirmation."""

    age: int | None = None
    job: str | None = None
    family: str | None = None
    income_man: float = 0.0
    assets_man: float = 0.0
    other_debt_man: float = 0.0
    loan_request_man: float = 0.0

    user_confirmed: bool = False
    confirmed_at: str | None = None
    confirm_text: dict[str, str] | None = None

    @field_validator(
        "income_man", "assets_man", "other_debt_man", "loan_request_man", mode="before"
    )
    @classmethod
    def _coerce_money(cls, value: Any) -> float:
        return _finite_or_zero(value)

    @field_validator("age", mode="before")
    @classmethod
    def _coerce_age(cls, value: Any) -> int | None:
        number = _finite_or_zero(value)
        if number <= 0:
            return None
        return int(number)

    @field_validator("job", "family", "confirmed_at", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        if value is None or isinstance(value, dict | list):
            return None
        text = str(value).strip()
        return text or None

    @field_validator("user_confirmed", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        return value is True

    @field_validator("confirm_text", mode="before")
    @classmethod
    def _coerce_confirm_text(cls, value: Any) -> dict[str, str] | None:
        if not isinstance(value, dict):
            return None
        return {str(k): str(v) for k, v in value.items() if v is not None}

    def profile_summary(self) -> dict[str, Any]:
        """Return the fields that describe the applicant, for prompts and the trace log."""
        return self.model_dump(
            by_alias=True,
            exclude={"user_confirmed", "confirmed_at", "confirm_text"},
        )

