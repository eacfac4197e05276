"""Testes de renderização de layout blocks."""

from __future__ import annotations

import pytest

from api.normalizers.slack import render_block, render_blocks


class TestRenderBlock:
    """Um caso por tipo de bloco suportado."""

    def test_section_with_text_and_fields(self) -> None:
        block = {
            "type": "section",
            "text": {"type": "mrkdwn", "text": "Resumo"},
            "fields": [
                {"type": "mrkdwn", "text": "*Status:* ok"},
                {"type": "plain_text", "text": "Prioridade: alta"},
            ],
        }

        assert render_block(block) == "Resumo\n\n*Status:* ok\nPrioridade: alta"

    def test_section_only_fields(self) -> None:
        block = {"type": "section", "fields": [{"type": "mrkdwn", "text": "a"}]}

        assert render_block(block) == "a"

    def test_header(self) -> None:
        block = {"type": "header", "text": {"type": "plain_text", "text": "Deploy"}}

        assert render_block(block) == "## Deploy"

    def test_header_without_text_is_empty(self) -> None:
        assert render_block({"type": "header"}) == ""

    def test_context_with_image_alt_text(self) -> None:
        block = {
            "type": "context",
            "elements": [
                {"type": "image", "image_url": "https://img", "alt_text": "avatar"},
                {"type": "mrkdwn", "text": "postado por bot"},
            ],
        }

        assert render_block(block) == "_avatar | postado por bot_"

    def test_empty_context(self) -> None:
        assert render_block({"type": "context", "elements": []}) == ""

    def test_divider(self) -> None:
        assert render_block({"type": "divider"}) == "---"

    def test_markdown_is_verbatim(self) -> None:
        block = {"type": "markdown", "text": "**negrito** e `código`"}

        assert render_block(block) == "**negrito** e `código`"

    def test_image_with_title(self) -> None:
        block = {
            "type": "image",
            "image_url": "https://img/1.png",
            "alt_text": "alt",
            "title": {"type": "plain_text", "text": "Gráfico"},
        }

        assert render_block(block) == "![Gráfico](https://img/1.png)"

    def test_image_uses_alt_text_when_no_title(self) -> None:
        block = {"type": "image", "image_url": "https://img/1.png", "alt_text": "alt"}

        assert render_block(block) == "![alt](https://img/1.png)"

    def test_image_from_slack_file(self) -> None:
        block = {"type": "image", "alt_text": "foto", "slack_file": {"url": "https://files/1"}}

        assert render_block(block) == "![foto](https://files/1)"

    @pytest.mark.parametrize(
        ("block", "expected"),
        [
            ({"type": "image", "alt_text": "foto"}, "[Image: foto]"),
            ({"type": "image"}, "[Image: image]"),
        ],
    )
    def test_image_without_url(self, block: dict[str, object], expected: str) -> None:
        assert render_block(block) == expected

    def test_unknown_block_contributes_nothing(self) -> None:
        assert render_block({"type": "actions", "elements": [{"type": "button"}]}) == ""


def test_render_blocks_joins_with_blank_line_and_skips_empty() -> None:
    blocks = [
        {"type": "header", "text": {"type": "plain_text", "text": "H"}},
        {"type": "actions"},
        {"type": "divider"},
        "não é dict",
    ]

    assert render_blocks(blocks) == "## H\n\n---"
