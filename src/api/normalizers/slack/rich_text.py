"""Renderização recursiva de blocos rich_text para markdown.

Estrutura Slack:
    rich_text
    └── elements: rich_text_section | rich_text_preformatted
                  | rich_text_quote | rich_text_list
        └── elements: text | link | emoji | user | channel | ...

Listas aninhadas chegam como rich_text_list irmãs com `indent` crescente.
"""

from __future__ import annotations

from typing import Any

from ._helpers import as_dicts, as_int, as_str

_LIST_INDENT = "  "


def render_rich_text(block: dict[str, Any]) -> str:
    """Renderiza um bloco rich_text completo."""
    rendered = [render_rich_text_element(element) for element in as_dicts(block.get("elements"))]
    return "\n".join(part for part in rendered if part)


def render_rich_text_element(element: dict[str, Any]) -> str:
    """Renderiza um elemento de primeiro nível do rich_text."""
    kind = element.get("type")
    if kind == "rich_text_section":
        return render_inline_runs(element.get("elements"))
    if kind == "rich_text_preformatted":
        content = render_inline_runs(element.get("elements"))
        return f"```\n{content}\n```" if content else ""
    if kind == "rich_text_quote":
        content = render_inline_runs(element.get("elements"))
        if not content:
            return ""
        return "\n".join(f"> {line}" for line in content.split("\n"))
    if kind == "rich_text_list":
        return _render_list(element)
    return ""


def render_inline_runs(elements: Any) -> str:
    """Concatena os runs inline de uma seção."""
    return "".join(_render_inline(run) for run in as_dicts(elements))


def _render_inline(run: dict[str, Any]) -> str:
    kind = run.get("type")
    if kind == "text":
        return as_str(run.get("text"))
    if kind == "link":
        url = as_str(run.get("url"))
        label = as_str(run.get("text"))
        return f"[{label}]({url})" if label else url
    if kind == "emoji":
        name = as_str(run.get("name"))
        return f":{name}:" if name else ""
    if kind == "user":
        user_id = as_str(run.get("user_id"))
        return f"<@{user_id}>" if user_id else ""
    if kind == "channel":
        channel_id = as_str(run.get("channel_id"))
        return f"<#{channel_id}>" if channel_id else ""
    if kind == "usergroup":
        usergroup_id = as_str(run.get("usergroup_id"))
        return f"<!subteam^{usergroup_id}>" if usergroup_id else ""
    if kind == "broadcast":
        scope = as_str(run.get("range"))
        return f"@{scope}" if scope else ""
    if kind == "date":
        return as_str(run.get("fallback"))
    return as_str(run.get("text"))


def _render_list(element: dict[str, Any]) -> str:
    ordered = element.get("style") == "ordered"
    indent = _LIST_INDENT * max(as_int(element.get("indent")), 0)
    start = max(as_int(element.get("offset")), 0) + 1

    lines: list[str] = []
    for number, item in enumerate(as_dicts(element.get("elements")), start=start):
        marker = f"{number}. " if ordered else "- "
        lines.append(f"{indent}{marker}{render_rich_text_element(item)}")
    return "\n".join(lines)
