# This project was developed with assistance from AI tools.
"""Model tier configuration.

config/models.yaml names each tier's endpoint, model and key. String values
may carry ``${ENV_VAR:-default}`` placeholders, resolved from the process
environment when the file is read. The file is read once per process;
``reset_config_cache`` forces the next lookup to read it again.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

# Settings reads .env for itself only; the YAML placeholders look at os.environ
load_dotenv()

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "models.yaml"
_cached_config: dict[str, Any] | None = None

_PLACEHOLDER = re.compile(r"\$\{(\w+)(?::-(.*?))?\}")

REQUIRED_TIER_FIELDS = frozenset({"provider", "model_name", "endpoint"})

# Everything a missing, malformed or incomplete models.yaml can raise
CONFIG_ERRORS: tuple[type[Exception], ...] = (
    FileNotFoundError,
    KeyError,
    ValueError,
    yaml.YAMLError,
)


def _expand(value: Any) -> Any:
    """Resolve ``${VAR:-default}`` placeholders anywhere in a parsed YAML tree."""
    if isinstance(value, str):
        return _PLACEHOLDER.sub(
            lambda m: os.environ.get(m.group(1), m.group(2) or ""), value
        )
    if isinstance(value, dict):
        return {key: _expand(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand(item) for item in value]
    return value


def _check_tiers(config: Any) -> None:
    if not isinstance(config, dict):
        raise ValueError("models.yaml must be a mapping")

    tiers = config.get("models")
    if not tiers or not isinstance(tiers, dict):
        raise ValueError("models.yaml must contain a 'models' section with at least one model")

    for name, tier in tiers.items():
        if not isinstance(tier, dict):
            raise ValueError(f"Model '{name}' must be a mapping")
        missing = REQUIRED_TIER_FIELDS - tier.keys()
        if missing:
            raise ValueError(f"Model '{name}' is missing required fields: {sorted(missing)}")
        timeout = tier.get("timeout_seconds")
        if timeout in (None, ""):
            continue
        try:
            float(timeout)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Model '{name}' has a non-numeric timeout_seconds") from exc


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Read, expand and check models.yaml. Raises one of ``CONFIG_ERRORS``."""
    config_path = path or _CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Model config not found: {config_path}")

    config = _expand(yaml.safe_load(config_path.read_text(encoding="utf-8")))
    _check_tiers(config)
    return config


def get_config() -> dict[str, Any]:
    """Return the process-wide model config, reading it on first use."""
    global _cached_config  # noqa: PLW0603
    if _cached_config is None:
        logger.info("Loading model config from %s", _CONFIG_PATH)
        _cached_config = load_config(_CONFIG_PATH)
    return _cached_config


def reset_config_cache() -> None:
    """Drop the cached config and the clients built from it."""
    global _cached_config  # noqa: PLW0603
    _cached_config = None

    from .client import clear_client_cache

    clear_client_cache()


def get_model_config(tier: str) -> dict[str, Any]:
    """Return config for a specific model tier (e.g. 'fast_small')."""
    tiers = get_config()["models"]
    if tier not in tiers:
        raise KeyError(f"Unknown model tier '{tier}'. Available: {list(tiers.keys())}")
    return tiers[tier]


def is_tier_configured(tier: str) -> bool:
    """True when the tier exists and has a non-empty API key.

    Runs on every request, so a broken config is only noted at DEBUG here;
    the startup status line reports it once.
    """
    try:
        tier_cfg = get_model_config(tier)
    except CONFIG_ERRORS:
        logger.debug("Model tier '%s' unavailable", tier, exc_info=True)
        return False
    return bool(str(tier_cfg.get("api_key") or "").strip())
