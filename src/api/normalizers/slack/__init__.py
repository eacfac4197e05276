"""Normalizer Slack — extração de mensagens e conversão para markdown.

Responsabilidades:
- Estreitar o evento Slack para RootMessage | ReplyMessage (extractor)
- Converter texto + blocks + attachments em um único markdown (normalizer)

Blocos suportados: section, header, context, divider, markdown, image,
rich_text. Demais tipos são ignorados.
"""

from .attachments import render_attachment, render_attachments
from .blocks import render_block, render_blocks
from .extractor import MissingMessageIdError, extract_message_event
from .normalizer import normalize_message, normalize_message_content
from .rich_text import render_rich_text

__all__ = [
    "MissingMessageIdError",
    "extract_message_event",
    "normalize_message",
    "normalize_message_content",
    "render_attachment",
    "render_attachments",
    "render_block",
    "render_blocks",
    "render_rich_text",
]
