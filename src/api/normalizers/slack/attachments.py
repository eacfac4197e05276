"""Renderização de legacy attachments (formato secundário do Slack).

Partes montadas em ordem: pretext, autor, título, texto, campos, rodapé.
Sem nenhuma delas, usa `fallback`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._helpers import as_dicts, as_str, join_non_empty

if TYPE_CHECKING:
    from collections.abc import Iterable

ATTACHMENT_SEPARATOR = "\n\n---\n\n"
PART_SEPARATOR = "\n\n"


def render_attachments(attachments: Iterable[Any]) -> str:
    """Renderiza todos os attachments separados por régua horizontal."""
    rendered = [render_attachment(attachment) for attachment in as_dicts(list(attachments))]
    return join_non_empty(rendered, ATTACHMENT_SEPARATOR)


def render_attachment(attachment: dict[str, Any]) -> str:
    """Renderiza um attachment; vazio → string vazia."""
    parts = [
        as_str(attachment.get("pretext")),
        _linked_or(attachment.get("author_name"), attachment.get("author_link"), "_{}_"),
        _linked_or(attachment.get("title"), attachment.get("title_link"), "**{}**"),
        as_str(attachment.get("text")),
        _render_fields(attachment.get("fields")),
        _wrap(as_str(attachment.get("footer")), "_{}_"),
    ]
    rendered = join_non_empty(parts, PART_SEPARATOR)
    if rendered:
        return rendered
    return as_str(attachment.get("fallback"))


def _render_fields(fields: Any) -> str:
    lines: list[str] = []
    for field in as_dicts(fields):
        title = as_str(field.get("title"))
        value = as_str(field.get("value"))
        if title and value:
            lines.append(f"**{title}:** {value}")
        elif value:
            lines.append(value)
        elif title:
            lines.append(f"**{title}**")
    return "\n".join(lines)


def _linked_or(label: Any, link: Any, plain_template: str) -> str:
    text = as_str(label)
    if not text:
        return ""
    url = as_str(link)
    if url:
        return f"[{text}]({url})"
    return plain_template.format(text)


def _wrap(text: str, template: str) -> str:
    return template.format(text) if text else ""
