"""Renderização de layout blocks (Block Kit) para markdown.

Um renderer por tipo de bloco; tipos desconhecidos não contribuem nada
(novos tipos do Slack não quebram o espelhamento).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._helpers import as_dicts, as_str, join_non_empty, text_of
from .rich_text import render_rich_text

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

BLOCK_SEPARATOR = "\n\n"
DIVIDER = "---"
CONTEXT_SEPARATOR = " | "


def render_blocks(blocks: Iterable[Any]) -> str:
    """Renderiza a sequência de blocos, na ordem original."""
    rendered = [render_block(block) for block in as_dicts(list(blocks))]
    return join_non_empty(rendered, BLOCK_SEPARATOR)


def render_block(block: dict[str, Any]) -> str:
    """Renderiza um único bloco; tipo desconhecido → string vazia."""
    renderer = _BLOCK_RENDERERS.get(as_str(block.get("type")))
    if renderer is None:
        return ""
    return renderer(block)


def _render_section(block: dict[str, Any]) -> str:
    fields = "\n".join(
        text for text in (text_of(field) for field in as_dicts(block.get("fields"))) if text
    )
    return join_non_empty([text_of(block.get("text")), fields], BLOCK_SEPARATOR)


def _render_header(block: dict[str, Any]) -> str:
    text = text_of(block.get("text"))
    return f"## {text}" if text else ""


def _render_context(block: dict[str, Any]) -> str:
    texts: list[str] = []
    for element in as_dicts(block.get("elements")):
        if element.get("type") == "image":
            texts.append(as_str(element.get("alt_text")))
        else:
            texts.append(text_of(element))
    joined = CONTEXT_SEPARATOR.join(text for text in texts if text)
    return f"_{joined}_" if joined else ""


def _render_divider(block: dict[str, Any]) -> str:
    return DIVIDER


def _render_markdown(block: dict[str, Any]) -> str:
    return as_str(block.get("text"))


def _render_image(block: dict[str, Any]) -> str:
    caption = text_of(block.get("title")) or as_str(block.get("alt_text"))
    url = as_str(block.get("image_url"))
    if not url:
        slack_file = block.get("slack_file")
        if isinstance(slack_file, dict):
            url = as_str(slack_file.get("url"))
    if url:
        return f"![{caption}]({url})"
    return f"[Image: {caption or 'image'}]"


_BLOCK_RENDERERS: dict[str, Callable[[dict[str, Any]], str]] = {
    "section": _render_section,
    "header": _render_header,
    "context": _render_context,
    "divider": _render_divider,
    "markdown": _render_markdown,
    "image": _render_image,
    "rich_text": render_rich_text,
}
