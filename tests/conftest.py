# This project was developed with assistance from AI tools.
"""Shared fixtures.

The app from ``evae.main`` is a module singleton; dependency overrides are
cleared after every test so a custom policy never leaks into the next one.
LLM discussion points are disabled by default and enabled per test.
"""

import pytest
from fastapi.testclient import TestClient

from evae.core.config import settings
from evae.main import app as real_app
from evae.schemas.policy import Policy


@pytest.fixture(autouse=True)
def _disable_llm(monkeypatch):
    monkeypatch.setattr(settings, "DISCUSSION_ENABLED", False)


@pytest.fixture(autouse=True)
def _clean_overrides():
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture
def app():
    return real_app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def policy():
    return Policy()

