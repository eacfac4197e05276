"""Testes do ciclo de vida da aplicação ASGI."""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from app import app as app_module
from config.settings import IdMapSettings


@pytest.fixture(autouse=True)
def _quiet_startup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(app_module, "validate_runtime_settings", lambda: None)


def test_health_through_lifespan(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(app_module, "get_id_map_settings", lambda: IdMapSettings(backend="none"))

    with TestClient(app_module.create_app()) as client:
        response = client.get("/health")
        assert client.app.state.redis_client is None

    assert response.status_code == 200
    assert response.json()["service"] == "slack-mirror"


def test_redis_backend_without_url_keeps_booting(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(app_module, "get_id_map_settings", lambda: IdMapSettings(backend="redis"))

    def _no_url() -> None:
        raise ValueError("REDIS_URL não configurado")

    monkeypatch.setattr(app_module, "create_async_redis_client", _no_url)

    with caplog.at_level(logging.WARNING), TestClient(app_module.create_app()) as client:
        assert client.app.state.redis_client is None

    assert "redis_client_not_ready" in caplog.text


def test_shutdown_drains_background_tasks(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(app_module, "get_id_map_settings", lambda: IdMapSettings(backend="none"))
    drained: list[float] = []

    async def _drain(timeout_seconds: float) -> None:
        drained.append(timeout_seconds)

    monkeypatch.setattr(app_module, "drain_background_tasks", _drain)

    with TestClient(app_module.create_app()):
        pass

    assert drained == [app_module.SHUTDOWN_DRAIN_SECONDS]
