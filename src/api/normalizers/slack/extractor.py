"""Extrator de mensagens do evento Slack (Events API).

Responsabilidades:
- Estreitar o dict `event` do envelope para RootMessage | ReplyMessage
- Rejeitar mensagens de canal sem `ts` (contrato upstream violado)

Não faz validação de negócio (mapeamento de canais, dedupe).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.protocols.models import ReplyMessage, RootMessage

from ._helpers import as_dicts, as_str

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.models import SlackMessageEvent

logger = logging.getLogger(__name__)


class MissingMessageIdError(ValueError):
    """Evento de canal sem `ts` (identificador da mensagem)."""


def extract_message_event(event: Mapping[str, Any]) -> SlackMessageEvent | None:
    """Converte o evento bruto em mensagem tipada.

    Args:
        event: Campo `event` do envelope Slack

    Returns:
        RootMessage ou ReplyMessage; None se o evento não é de canal.

    Raises:
        MissingMessageIdError: Se o evento tem canal mas não tem `ts`.
    """
    channel_id = as_str(event.get("channel"))
    if not channel_id:
        logger.info(
            "slack_event_without_channel",
            extra={"event_type": as_str(event.get("type")) or "unknown"},
        )
        return None

    source_id = as_str(event.get("ts"))
    if not source_id:
        raise MissingMessageIdError("missing_message_ts")

    common: dict[str, Any] = {
        "channel_id": channel_id,
        "source_id": source_id,
        "text": as_str(event.get("text")),
        "author_id": as_str(event.get("user")) or None,
        "blocks": tuple(as_dicts(event.get("blocks"))),
        "attachments": tuple(as_dicts(event.get("attachments"))),
    }

    thread_root_id = as_str(event.get("thread_ts"))
    if thread_root_id and thread_root_id != source_id:
        return ReplyMessage(**common, thread_root_id=thread_root_id)
    return RootMessage(**common)
