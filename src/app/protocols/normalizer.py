"""Protocolo de normalização de conteúdo (mensagem Slack → markdown)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import SlackMessage


class ContentNormalizerProtocol(Protocol):
    """Contrato mínimo: função pura que gera o markdown da mensagem."""

    def __call__(self, message: SlackMessage) -> str: ...
