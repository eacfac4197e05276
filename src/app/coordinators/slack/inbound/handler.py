"""Processamento inbound: entrega a mensagem classificada ao use case de espelhamento."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.models import MirrorResult, SlackMessageEvent
    from app.use_cases.slack.mirror_message import MirrorSlackMessageUseCase

logger = logging.getLogger(__name__)


async def process_inbound_message(
    message: SlackMessageEvent,
    correlation_id: str,
    use_case: MirrorSlackMessageUseCase,
) -> MirrorResult:
    """Processa uma mensagem de canal via pipeline de espelhamento.

    Sem logs de conteúdo: apenas IDs e resultado.

    Args:
        message: RootMessage ou ReplyMessage extraída do evento
        correlation_id: ID de correlação para rastreamento
        use_case: Use case de espelhamento injetado

    Returns:
        MirrorResult do processamento
    """
    result = await use_case.execute(message, correlation_id=correlation_id)

    logger.info(
        "inbound_processed",
        extra={
            "correlation_id": correlation_id,
            "channel_id": message.channel_id,
            "source_id": message.source_id,
            "is_reply": message.is_reply,
            "outcome": result.outcome,
            "reason": result.reason,
        },
    )

    return result
