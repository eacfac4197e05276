"""Admissão de canal: só canais mapeados para um grupo Slashwork são espelhados."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


def admit_channel(channel_id: str, mappings: Mapping[str, str]) -> str | None:
    """Retorna o group_id de destino do canal, ou None se não mapeado."""
    group_id = mappings.get(channel_id)
    return group_id or None
