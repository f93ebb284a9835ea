"""Fixtures for the HTTP handlers: a TestClient wired to stub backends."""

import pytest
from fastapi.testclient import TestClient

from api.common import get_infrastructure
from infra import InfraBootstrap, InfraConfig
from main import app


@pytest.fixture
def stub_infra() -> InfraBootstrap:
    return InfraBootstrap(InfraConfig(llm_backend="stub", news_backend="stub"))


@pytest.fixture
def client(stub_infra):
    """TestClient whose handlers see stub_infra instead of the process singleton."""
    app.dependency_overrides[get_infrastructure] = lambda: stub_infra
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def api_keys(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gemini-test-key")
    monkeypatch.setenv("GNEWS_API_KEY", "gnews-test-key")


@pytest.fixture
def no_api_keys(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GNEWS_API_KEY", raising=False)
