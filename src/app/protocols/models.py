"""Modelos internos do pipeline de espelhamento Slack → Slashwork.

A mensagem Slack é estreitada uma única vez na borda (extractor) para
`RootMessage` ou `ReplyMessage`; o resto do pipeline nunca volta a
inspecionar o payload bruto.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

MirrorOutcome = Literal["mirrored", "skipped", "failed"]
MirrorOperation = Literal["create_post", "create_comment"]


@dataclass(frozen=True, slots=True)
class SlackMessage:
    """Campos comuns a qualquer mensagem de canal Slack."""

    channel_id: str
    source_id: str  # ts da mensagem, único dentro do canal
    text: str = ""
    author_id: str | None = None
    blocks: tuple[dict[str, Any], ...] = ()
    attachments: tuple[dict[str, Any], ...] = ()

    @property
    def is_reply(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class RootMessage(SlackMessage):
    """Mensagem de nível superior (vira post no Slashwork)."""


@dataclass(frozen=True, slots=True)
class ReplyMessage(SlackMessage):
    """Resposta em thread (vira comentário sob o post da thread)."""

    thread_root_id: str = field(kw_only=True)

    @property
    def is_reply(self) -> bool:
        return True


SlackMessageEvent = RootMessage | ReplyMessage


@dataclass(frozen=True, slots=True)
class MirrorResult:
    """Resultado do processamento de um evento."""

    outcome: MirrorOutcome
    source_id: str | None = None
    reason: str | None = None
    destination_id: str | None = None
    operation: MirrorOperation | None = None

    @classmethod
    def skipped(cls, reason: str, source_id: str | None = None) -> MirrorResult:
        return cls(outcome="skipped", source_id=source_id, reason=reason)

    @classmethod
    def failed(
        cls,
        reason: str,
        source_id: str | None = None,
        operation: MirrorOperation | None = None,
    ) -> MirrorResult:
        return cls(outcome="failed", source_id=source_id, reason=reason, operation=operation)
