# This project was developed with assistance from AI tools.
"""Tests for model tier config loading."""

import logging
import textwrap
from pathlib import Path

import pytest

from evae.inference import client as client_mod
from evae.inference import config as config_mod
from evae.inference.config import (
    _expand,
    get_config,
    get_model_config,
    is_tier_configured,
    load_config,
    reset_config_cache,
)


@pytest.fixture(autouse=True)
def _reset_config_cache():
    """Reset the config module cache before each test."""
    reset_config_cache()
    original_path = config_mod._CONFIG_PATH
    yield
    config_mod._CONFIG_PATH = original_path
    reset_config_cache()


def _write_config(tmp_path: Path, api_key: str = "${TEST_LLM_KEY:-}") -> Path:
    cfg = tmp_path / "models.yaml"
    cfg.write_text(
        textwrap.dedent(f"""\
        models:
          fast_small:
            provider: openai_compatible
            model_name: test-small
            endpoint: http://localhost:8000/v1
            api_key: {api_key}
            timeout_seconds: 5
        """)
    )
    config_mod._CONFIG_PATH = cfg
    return cfg


# -- Validation --


def test_load_config_rejects_missing_model_fields(tmp_path):
    cfg = tmp_path / "models.yaml"
    cfg.write_text("models:\n  fast_small:\n    provider: openai_compatible\n")
    with pytest.raises(ValueError, match="missing required fields"):
        load_config(cfg)


def test_load_config_rejects_empty_models(tmp_path):
    cfg = tmp_path / "models.yaml"
    cfg.write_text("models: {}\n")
    with pytest.raises(ValueError, match="'models' section"):
        load_config(cfg)


def test_load_config_rejects_bad_timeout(tmp_path):
    cfg = tmp_path / "models.yaml"
    cfg.write_text(
        "models:\n  t:\n    provider: p\n    model_name: m\n    endpoint: e\n"
        "    timeout_seconds: soon\n"
    )
    with pytest.raises(ValueError, match="timeout_seconds"):
        load_config(cfg)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_shipped_config_is_valid():
    config = load_config()
    assert "fast_small" in config["models"]


# -- Env substitution --


def test_placeholders_use_environment_and_defaults(monkeypatch):
    monkeypatch.setenv("EVAE_TEST_MODEL", "from-env")
    monkeypatch.delenv("EVAE_TEST_MISSING", raising=False)
    resolved = _expand(
        {"a": "${EVAE_TEST_MODEL:-x}", "b": ["${EVAE_TEST_MISSING:-fallback}"], "c": 3}
    )
    assert resolved == {"a": "from-env", "b": ["fallback"], "c": 3}


# -- Tier lookup --


def test_tier_without_key_is_not_configured(tmp_path, monkeypatch):
    monkeypatch.delenv("TEST_LLM_KEY", raising=False)
    _write_config(tmp_path)
    assert is_tier_configured("fast_small") is False


def test_tier_with_key_is_configured(tmp_path, monkeypatch):
    monkeypatch.setenv("TEST_LLM_KEY", "sk-test")
    _write_config(tmp_path)
    assert is_tier_configured("fast_small") is True
    assert get_model_config("fast_small")["api_key"] == "sk-test"


def test_unknown_tier_is_not_configured(tmp_path):
    _write_config(tmp_path, api_key="sk-test")
    assert is_tier_configured("capable_large") is False
    with pytest.raises(KeyError, match="Unknown model tier"):
        get_model_config("capable_large")


def test_missing_config_file_is_not_configured(tmp_path):
    config_mod._CONFIG_PATH = tmp_path / "absent.yaml"
    assert is_tier_configured("fast_small") is False


# -- Caching --


def test_get_config_is_read_once_until_reset(tmp_path):
    cfg = _write_config(tmp_path, api_key="sk-one")
    first = get_config()
    cfg.write_text(cfg.read_text().replace("sk-one", "sk-two"))
    assert get_config() is first

    reset_config_cache()
    assert get_config()["models"]["fast_small"]["api_key"] == "sk-two"


def test_reset_clears_client_cache(tmp_path):
    _write_config(tmp_path, api_key="sk-test")
    client = client_mod._get_client("fast_small")
    assert client_mod._get_client("fast_small") is client
    assert client.max_retries == 0

    reset_config_cache()
    assert client_mod._clients == {}


def test_broken_config_is_quiet_per_request(tmp_path, caplog):
    cfg = tmp_path / "models.yaml"
    cfg.write_text("models: [unclosed\n")
    config_mod._CONFIG_PATH = cfg

    with caplog.at_level("DEBUG", logger="evae.inference.config"):
        assert is_tier_configured("fast_small") is False
        assert is_tier_configured("fast_small") is False

    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert any(r.levelname == "DEBUG" and r.exc_info for r in caplog.records)
