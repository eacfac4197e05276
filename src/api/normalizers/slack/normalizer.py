"""Normalizer de conteúdo Slack → markdown canônico.

Combina, nesta ordem, texto principal, layout blocks e legacy
attachments, separados por linha em branco. Seções vazias são omitidas.

Função pura: mesma entrada → mesmo markdown, byte a byte.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._helpers import join_non_empty
from .attachments import render_attachments
from .blocks import render_blocks

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.protocols.models import SlackMessage

SECTION_SEPARATOR = "\n\n"


def normalize_message_content(
    text: str | None,
    blocks: Iterable[Any] = (),
    attachments: Iterable[Any] = (),
) -> str:
    """Gera o documento markdown de uma mensagem.

    Args:
        text: Texto principal (mrkdwn do Slack), pode ser vazio
        blocks: Layout blocks na ordem original
        attachments: Legacy attachments na ordem original

    Returns:
        Markdown canônico (string vazia se nada contribuir).
    """
    sections = [
        text or "",
        render_blocks(blocks),
        render_attachments(attachments),
    ]
    return join_non_empty(sections, SECTION_SEPARATOR)


def normalize_message(message: SlackMessage) -> str:
    """Atalho: normaliza o conteúdo de uma mensagem já extraída."""
    return normalize_message_content(message.text, message.blocks, message.attachments)
