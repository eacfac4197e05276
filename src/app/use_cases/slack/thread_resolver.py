"""Resolução de thread: decide entre createPost e createComment.

- raiz: post no grupo mapeado; grava `source_id → post_id`
- resposta: comentário sob o ID mapeado para `thread_root_id`; grava
  `source_id → comment_id` (dedupe de reenvio) e depois
  `thread_root_id → comment_id` (a thread passa a apontar para a última
  resposta)

Chaves no formato de `mapping_key` (canal + ts). A chave de dedupe vem
sempre primeiro em `mapping_keys`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.protocols.models import MirrorOperation, MirrorResult, ReplyMessage
from app.use_cases.slack.dedupe_resolver import dedupe_key, mapping_key

if TYPE_CHECKING:
    from app.protocols import IdMapStoreProtocol, SlackMessageEvent


@dataclass(frozen=True, slots=True)
class ThreadTarget:
    """Destino resolvido de uma mensagem."""

    operation: MirrorOperation
    parent_id: str  # group_id (post) ou post/comment id (comentário)
    mapping_keys: tuple[str, ...]  # dedupe primeiro


class ThreadResolver:
    """Resolve o pai de destino a partir do Mapping Store."""

    def __init__(self, id_map: IdMapStoreProtocol | None = None) -> None:
        self._id_map = id_map

    async def resolve(
        self,
        message: SlackMessageEvent,
        group_id: str,
    ) -> ThreadTarget | MirrorResult:
        """Resolve destino da mensagem.

        Args:
            message: Mensagem já classificada
            group_id: Grupo Slashwork do canal de origem

        Returns:
            ThreadTarget, ou MirrorResult de skip com o motivo
        """
        if not isinstance(message, ReplyMessage):
            return ThreadTarget(
                operation="create_post",
                parent_id=group_id,
                mapping_keys=(dedupe_key(message),),
            )

        if self._id_map is None:
            return MirrorResult.skipped("id_map_not_configured", message.source_id)

        root_key = mapping_key(message.channel_id, message.thread_root_id)
        parent_id = await self._id_map.find(root_key)
        if parent_id is None:
            return MirrorResult.skipped("thread_parent_not_found", message.source_id)

        return ThreadTarget(
            operation="create_comment",
            parent_id=parent_id,
            mapping_keys=(dedupe_key(message), root_key),
        )
