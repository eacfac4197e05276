"""Testes para helpers runtime do webhook Slack."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from api.routes.slack import webhook_runtime
from app.protocols.models import RootMessage
from utils.errors import IdMapStoreError

MESSAGE = RootMessage(channel_id="C1", source_id="100.1", text="hi")


@pytest.fixture(autouse=True)
def _reset_use_case() -> None:
    webhook_runtime.reset_mirror_use_case()
    yield
    webhook_runtime.reset_mirror_use_case()


@pytest.mark.asyncio
async def test_dispatch_inline_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    use_case = object()
    captured: dict[str, object] = {}

    monkeypatch.setattr(webhook_runtime, "get_mirror_use_case", lambda: use_case)

    async def _fake_safe(*, message: RootMessage, correlation_id: str, use_case: object) -> None:
        captured.update(message=message, correlation_id=correlation_id, use_case=use_case)

    monkeypatch.setattr(webhook_runtime, "process_inbound_message_safe", _fake_safe)

    await webhook_runtime.dispatch_inbound_processing(
        message=MESSAGE,
        correlation_id="corr-inline",
        settings=SimpleNamespace(webhook_processing_mode="inline"),
    )

    assert captured == {"message": MESSAGE, "correlation_id": "corr-inline", "use_case": use_case}


@pytest.mark.asyncio
async def test_dispatch_async_mode_schedules_task(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    monkeypatch.setattr(webhook_runtime, "get_mirror_use_case", lambda: object())

    def _fake_schedule(*, correlation_id: str, coroutine: object) -> int:
        captured["correlation_id"] = correlation_id
        coroutine.close()
        return 1

    monkeypatch.setattr(webhook_runtime, "schedule_processing_task", _fake_schedule)

    await webhook_runtime.dispatch_inbound_processing(
        message=MESSAGE,
        correlation_id="corr-async",
        settings=SimpleNamespace(webhook_processing_mode="async"),
    )

    assert captured == {"correlation_id": "corr-async"}


@pytest.mark.asyncio
async def test_dispatch_without_use_case_logs_warning(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(webhook_runtime, "get_mirror_use_case", lambda: None)

    with caplog.at_level("WARNING"):
        await webhook_runtime.dispatch_inbound_processing(
            message=MESSAGE,
            correlation_id="corr-x",
            settings=SimpleNamespace(webhook_processing_mode="inline"),
        )

    assert "webhook_use_case_unavailable" in caplog.text


def test_get_mirror_use_case_returns_none_when_unconfigured(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    from app.bootstrap import dependencies

    def _raise() -> None:
        raise ValueError("endpoint GraphQL é obrigatório")

    monkeypatch.setattr(dependencies, "create_mirror_use_case", _raise)

    assert webhook_runtime.get_mirror_use_case() is None


@pytest.mark.asyncio
async def test_safe_processing_reraises_infra_errors(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    async def _boom(**kwargs: object) -> None:
        raise IdMapStoreError("down", backend="redis", operation="find")

    monkeypatch.setattr(webhook_runtime, "process_inbound_message", _boom)

    with caplog.at_level("ERROR"), pytest.raises(IdMapStoreError):
        await webhook_runtime.process_inbound_message_safe(
            message=MESSAGE,
            correlation_id="corr-infra",
            use_case=object(),
        )

    assert "webhook_processing_infra_failed" in caplog.text


@pytest.mark.asyncio
async def test_safe_processing_logs_unexpected_errors(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    async def _boom(**kwargs: object) -> None:
        raise KeyError("x")

    monkeypatch.setattr(webhook_runtime, "process_inbound_message", _boom)

    with caplog.at_level("ERROR"), pytest.raises(KeyError):
        await webhook_runtime.process_inbound_message_safe(
            message=MESSAGE,
            correlation_id="corr-bug",
            use_case=object(),
        )

    assert "webhook_processing_failed" in caplog.text
