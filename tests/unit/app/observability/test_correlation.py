"""Testes de correlation_id e métricas estruturadas."""

from __future__ import annotations

import asyncio
import logging

import pytest

from app.observability import (
    correlation_scope,
    get_correlation_id,
    record_mirror_outcome,
    reset_correlation_id,
    set_correlation_id,
)


def test_default_is_empty() -> None:
    assert get_correlation_id() == ""


def test_set_generates_id_when_missing() -> None:
    token = set_correlation_id(None)
    try:
        assert len(get_correlation_id()) == 32
    finally:
        reset_correlation_id(token)

    assert get_correlation_id() == ""


def test_scope_restores_previous_value() -> None:
    with correlation_scope("outer"):
        with correlation_scope("inner") as cid:
            assert cid == "inner"
        assert get_correlation_id() == "outer"

    assert get_correlation_id() == ""


def test_background_task_keeps_request_id() -> None:
    """Task criada dentro do escopo enxerga o id mesmo após a saída."""

    async def scenario() -> str:
        gate = asyncio.Event()

        async def worker() -> str:
            await gate.wait()
            return get_correlation_id()

        with correlation_scope("req-1"):
            task = asyncio.create_task(worker())
        gate.set()
        return await task

    assert asyncio.run(scenario()) == "req-1"


def test_failed_outcome_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
        record_mirror_outcome("failed", reason="destination_error", source_id="1.1")
        record_mirror_outcome("mirrored", destination_id="P1", operation="create_post")

    failed, mirrored = caplog.records
    assert failed.levelno == logging.WARNING
    assert failed.reason == "destination_error"
    assert mirrored.levelno == logging.INFO
    assert mirrored.destination_id == "P1"
