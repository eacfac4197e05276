"""Testes de renderização de blocos rich_text."""

from __future__ import annotations

from api.normalizers.slack import render_rich_text


def _section(*runs: dict[str, object]) -> dict[str, object]:
    return {"type": "rich_text_section", "elements": list(runs)}


def _rich_text(*elements: dict[str, object]) -> dict[str, object]:
    return {"type": "rich_text", "elements": list(elements)}


def test_section_concatenates_runs() -> None:
    block = _rich_text(
        _section(
            {"type": "text", "text": "veja "},
            {"type": "link", "url": "https://a.b", "text": "aqui"},
            {"type": "text", "text": " e "},
            {"type": "link", "url": "https://c.d"},
        )
    )

    assert render_rich_text(block) == "veja [aqui](https://a.b) e https://c.d"


def test_inline_mentions_and_emoji() -> None:
    block = _rich_text(
        _section(
            {"type": "user", "user_id": "U1"},
            {"type": "text", "text": " "},
            {"type": "channel", "channel_id": "C9"},
            {"type": "text", "text": " "},
            {"type": "usergroup", "usergroup_id": "S2"},
            {"type": "text", "text": " "},
            {"type": "broadcast", "range": "here"},
            {"type": "text", "text": " "},
            {"type": "emoji", "name": "tada"},
        )
    )

    assert render_rich_text(block) == "<@U1> <#C9> <!subteam^S2> @here :tada:"


def test_preformatted_is_fenced() -> None:
    block = _rich_text(
        {
            "type": "rich_text_preformatted",
            "elements": [{"type": "text", "text": "print(1)\nprint(2)"}],
        }
    )

    assert render_rich_text(block) == "```\nprint(1)\nprint(2)\n```"


def test_quote_prefixes_each_line() -> None:
    block = _rich_text(
        {"type": "rich_text_quote", "elements": [{"type": "text", "text": "a\nb"}]}
    )

    assert render_rich_text(block) == "> a\n> b"


def test_bullet_list() -> None:
    block = _rich_text(
        {
            "type": "rich_text_list",
            "style": "bullet",
            "elements": [
                _section({"type": "text", "text": "um"}),
                _section({"type": "text", "text": "dois"}),
            ],
        }
    )

    assert render_rich_text(block) == "- um\n- dois"


def test_ordered_list_with_offset_and_indent() -> None:
    block = _rich_text(
        {
            "type": "rich_text_list",
            "style": "ordered",
            "elements": [_section({"type": "text", "text": "a"})],
        },
        {
            "type": "rich_text_list",
            "style": "ordered",
            "indent": 1,
            "offset": 2,
            "elements": [
                _section({"type": "text", "text": "b"}),
                _section({"type": "text", "text": "c"}),
            ],
        },
    )

    assert render_rich_text(block) == "1. a\n  3. b\n  4. c"


def test_elements_are_joined_by_newline() -> None:
    block = _rich_text(
        _section({"type": "text", "text": "intro"}),
        {"type": "rich_text_quote", "elements": [{"type": "text", "text": "citação"}]},
    )

    assert render_rich_text(block) == "intro\n> citação"


def test_empty_and_unknown_elements_are_dropped() -> None:
    block = _rich_text(
        {"type": "rich_text_unknown"},
        {"type": "rich_text_preformatted", "elements": []},
        _section({"type": "text", "text": "x"}),
    )

    assert render_rich_text(block) == "x"
