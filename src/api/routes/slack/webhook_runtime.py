"""Runtime helpers para processamento do webhook Slack."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.routes.slack.webhook_runtime_tasks import (
    drain_processing_tasks,
    schedule_processing_task,
)
from app.coordinators.slack.inbound.handler import process_inbound_message
from utils.errors import InfrastructureError

if TYPE_CHECKING:
    from app.protocols.models import SlackMessageEvent
    from app.use_cases.slack.mirror_message import MirrorSlackMessageUseCase

logger = logging.getLogger(__name__)

_mirror_use_case: MirrorSlackMessageUseCase | None = None


def get_mirror_use_case() -> MirrorSlackMessageUseCase | None:
    """Obtém o use case de espelhamento (lazy-loading).

    Retorna None quando o destino não está configurado.
    """
    global _mirror_use_case
    if _mirror_use_case is None:
        from app.bootstrap.dependencies import create_mirror_use_case

        try:
            _mirror_use_case = create_mirror_use_case()
        except ValueError as exc:
            logger.warning(
                "mirror_use_case_init_failed",
                extra={"channel": "slack", "error": str(exc)},
            )
            return None
    return _mirror_use_case


def reset_mirror_use_case() -> None:
    """Descarta o use case cacheado (testes e reconfiguração)."""
    global _mirror_use_case
    _mirror_use_case = None


async def process_inbound_message_safe(
    *,
    message: SlackMessageEvent,
    correlation_id: str,
    use_case: MirrorSlackMessageUseCase,
) -> None:
    """Executa processamento inbound com classificação explícita de erros."""
    try:
        await process_inbound_message(
            message=message,
            correlation_id=correlation_id,
            use_case=use_case,
        )
    except Exception as exc:
        if _is_infrastructure_error(exc):
            logger.error(
                "webhook_processing_infra_failed",
                extra={
                    "channel": "slack",
                    "correlation_id": correlation_id,
                    "error_type": type(exc).__name__,
                },
            )
            raise
        logger.exception(
            "webhook_processing_failed",
            extra={
                "channel": "slack",
                "correlation_id": correlation_id,
            },
        )
        raise


async def dispatch_inbound_processing(
    *,
    message: SlackMessageEvent,
    correlation_id: str,
    settings: Any,
) -> None:
    """Despacha processamento inline ou async conforme configuração."""
    use_case = get_mirror_use_case()
    if use_case is None:
        _log_use_case_unavailable(correlation_id)
        return

    processing_mode = (settings.webhook_processing_mode or "async").lower()
    if processing_mode == "inline":
        await process_inbound_message_safe(
            message=message,
            correlation_id=correlation_id,
            use_case=use_case,
        )
        logger.info(
            "webhook_processing_completed",
            extra={
                "channel": "slack",
                "correlation_id": correlation_id,
                "mode": "inline",
            },
        )
        return

    schedule_processing_task(
        correlation_id=correlation_id,
        coroutine=process_inbound_message_safe(
            message=message,
            correlation_id=correlation_id,
            use_case=use_case,
        ),
    )


def _log_use_case_unavailable(correlation_id: str) -> None:
    logger.warning(
        "webhook_use_case_unavailable",
        extra={
            "channel": "slack",
            "correlation_id": correlation_id,
            "reason": "MirrorSlackMessageUseCase could not be initialized",
        },
    )


async def drain_background_tasks(timeout_seconds: float = 30.0) -> None:
    """Aguarda tasks async pendentes durante shutdown do processo."""
    await drain_processing_tasks(timeout_seconds=timeout_seconds)


def _is_infrastructure_error(exc: Exception) -> bool:
    if isinstance(exc, InfrastructureError):
        return True
    return type(exc).__module__.startswith("redis.")
