# This project was developed with assistance from AI tools.
"""Inference module -- LLM client and model tier config loading."""

from .client import get_completion
from .config import get_model_config, is_tier_configured

__all__ = [
    "get_completion",
    "get_model_config",
    "is_tier_configured",
]
