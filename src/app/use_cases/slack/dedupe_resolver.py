"""Resolução de dedupe antes de qualquer escrita no destino.

O `ts` do Slack só é único dentro de um canal, então toda chave do
Mapping Store é `<channel_id>:<ts>`. A chave de dedupe é a da própria
mensagem; respostas também registram `source_id → comment_id` após o
espelhamento, então um reenvio da Events API é detectado para raízes e
respostas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols import IdMapStoreProtocol, SlackMessageEvent


def mapping_key(channel_id: str, ts: str) -> str:
    """Chave do Mapping Store para um `ts` de um canal."""
    return f"{channel_id}:{ts}"


def dedupe_key(message: SlackMessageEvent) -> str:
    """Chave canônica de dedupe de uma mensagem."""
    return mapping_key(message.channel_id, message.source_id)


class DedupeResolver:
    """Consulta o Mapping Store para saber se a mensagem já foi espelhada."""

    def __init__(self, id_map: IdMapStoreProtocol | None = None) -> None:
        self._id_map = id_map

    @property
    def enabled(self) -> bool:
        return self._id_map is not None

    async def already_mirrored(self, message: SlackMessageEvent) -> bool:
        """True se já existe mapeamento para a chave de dedupe.

        Sem store configurado a checagem é no-op (sempre False).

        Raises:
            Exception: Erros do store são propagados para o use case
        """
        if self._id_map is None:
            return False
        existing = await self._id_map.find(dedupe_key(message))
        return existing is not None
