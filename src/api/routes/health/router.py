"""Probes de liveness (/health) e readiness (/ready).

/ready só reprova por dependências que o processo realmente usa: o Redis
entra apenas com ID_MAP_BACKEND=redis, e o destino Slashwork precisa
estar configurado para qualquer espelhamento funcionar.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from redis.exceptions import RedisError

from api.routes.slack.webhook_runtime_tasks import active_task_count
from config.settings import get_id_map_settings, get_slack_settings, get_slashwork_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE = "slack-mirror"
VERSION = "1.0.0"
REDIS_PING_TIMEOUT_SECONDS = 2.0

CheckStatus = Literal["ok", "skipped", "failed"]


class HealthResponse(BaseModel):
    status: str
    service: str
    timestamp: str
    version: str = VERSION


class CheckResult(BaseModel):
    status: CheckStatus
    detail: str | None = None
    latency_ms: float | None = None
    error: str | None = None


class ProcessingInfo(BaseModel):
    mode: str
    active_tasks: int
    mapped_channels: int


class ReadinessResponse(BaseModel):
    status: Literal["ready", "not_ready"]
    checks: dict[str, CheckResult] = Field(default_factory=dict)
    processing: ProcessingInfo
    timestamp: str


def _now() -> str:
    return datetime.now(UTC).isoformat()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: o processo responde."""
    return HealthResponse(status="healthy", service=SERVICE, timestamp=_now())


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness: store de mapeamento alcançável e destino configurado (200 ou 503)."""
    slack = get_slack_settings()
    checks = {
        "id_map": await _check_id_map(getattr(request.app.state, "redis_client", None)),
        "slashwork": _check_slashwork(),
    }
    ready = all(check.status != "failed" for check in checks.values())
    body = ReadinessResponse(
        status="ready" if ready else "not_ready",
        checks=checks,
        processing=ProcessingInfo(
            mode=slack.webhook_processing_mode,
            active_tasks=active_task_count(),
            mapped_channels=len(slack.channel_group_mappings),
        ),
        timestamp=_now(),
    )
    return JSONResponse(content=body.model_dump(), status_code=200 if ready else 503)


async def _check_id_map(redis_client: Any | None) -> CheckResult:
    backend = get_id_map_settings().backend
    if backend != "redis":
        return CheckResult(status="skipped", detail=backend)
    if redis_client is None:
        return CheckResult(status="failed", detail=backend, error="not_configured")

    started = time.perf_counter()
    try:
        await asyncio.wait_for(redis_client.ping(), timeout=REDIS_PING_TIMEOUT_SECONDS)
    except TimeoutError:
        return CheckResult(status="failed", detail=backend, error="timeout")
    except (RedisError, OSError) as exc:
        logger.warning("readiness_redis_check_failed", extra={"error_type": type(exc).__name__})
        return CheckResult(status="failed", detail=backend, error=type(exc).__name__)
    return CheckResult(
        status="ok",
        detail=backend,
        latency_ms=round((time.perf_counter() - started) * 1000, 2),
    )


def _check_slashwork() -> CheckResult:
    if get_slashwork_settings().validate():
        return CheckResult(status="failed", error="not_configured")
    return CheckResult(status="ok")
