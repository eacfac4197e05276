"""Use case de espelhamento de uma mensagem Slack no Slashwork.

Pipeline: admissão de canal → dedupe → normalização → prefixo de autor
(opcional) → resolução de thread → mutation → gravação do mapeamento.

Falhas de destino, do Mapping Store e do resolver de usuário viram
`MirrorResult(outcome="failed")`; nada é retentado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from app.observability import record_mirror_outcome
from app.protocols.destination_client import DestinationError
from app.protocols.models import MirrorResult
from app.use_cases.slack.channel_admission import admit_channel
from app.use_cases.slack.dedupe_resolver import DedupeResolver
from app.use_cases.slack.thread_resolver import ThreadResolver, ThreadTarget

if TYPE_CHECKING:
    from collections.abc import Awaitable, Mapping

    from app.protocols import (
        ContentNormalizerProtocol,
        DestinationClientProtocol,
        IdMapStoreProtocol,
        SlackMessageEvent,
        UsernameResolverProtocol,
    )

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class _CollaboratorError(Exception):
    """Falha de colaborador (store/resolver) já classificada com motivo."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def apply_username_prefix(markdown: str, username: str | None) -> str:
    """Prefixa o corpo com `[nome]` quando o autor é conhecido."""
    if not username:
        return markdown
    if not markdown:
        return f"[{username}]"
    return f"[{username}] {markdown}"


class MirrorSlackMessageUseCase:
    """Espelha uma mensagem de canal Slack como post ou comentário."""

    def __init__(
        self,
        *,
        destination: DestinationClientProtocol,
        normalizer: ContentNormalizerProtocol,
        channel_mappings: Mapping[str, str],
        id_map: IdMapStoreProtocol | None = None,
        username_resolver: UsernameResolverProtocol | None = None,
    ) -> None:
        self._destination = destination
        self._normalizer = normalizer
        self._channel_mappings = dict(channel_mappings)
        self._id_map = id_map
        self._username_resolver = username_resolver
        self._dedupe = DedupeResolver(id_map)
        self._threads = ThreadResolver(id_map)

    async def execute(
        self,
        message: SlackMessageEvent,
        correlation_id: str | None = None,
    ) -> MirrorResult:
        """Executa o pipeline para uma mensagem e registra o resultado."""
        try:
            result = await self._mirror(message, correlation_id)
        except _CollaboratorError as exc:
            result = MirrorResult.failed(exc.reason, message.source_id)

        record_mirror_outcome(
            result.outcome,
            reason=result.reason,
            source_id=result.source_id,
            destination_id=result.destination_id,
            operation=result.operation,
            correlation_id=correlation_id,
        )
        return result

    async def _mirror(
        self,
        message: SlackMessageEvent,
        correlation_id: str | None,
    ) -> MirrorResult:
        group_id = admit_channel(message.channel_id, self._channel_mappings)
        if group_id is None:
            return MirrorResult.skipped("channel_not_mapped", message.source_id)

        if await self._guard("id_map_error", self._dedupe.already_mirrored(message)):
            return MirrorResult.skipped("already_mirrored", message.source_id)

        markdown = self._normalizer(message)
        if self._username_resolver is not None and message.author_id:
            username = await self._guard(
                "username_resolver_error",
                self._username_resolver.resolve(message.author_id),
            )
            markdown = apply_username_prefix(markdown, username)

        target = await self._guard("id_map_error", self._threads.resolve(message, group_id))
        if isinstance(target, MirrorResult):
            return target

        try:
            destination_id = await self._dispatch(target, markdown)
        except DestinationError as exc:
            logger.warning(
                "mirror_destination_failed",
                extra={
                    "correlation_id": correlation_id,
                    "source_id": message.source_id,
                    "operation": target.operation,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            return MirrorResult.failed(
                "destination_error", message.source_id, operation=target.operation
            )

        if self._id_map is not None:
            partial = await self._save_mappings(
                self._id_map, message, target, destination_id, correlation_id
            )
            if partial is not None:
                return partial

        return MirrorResult(
            outcome="mirrored",
            source_id=message.source_id,
            destination_id=destination_id,
            operation=target.operation,
        )

    async def _save_mappings(
        self,
        id_map: IdMapStoreProtocol,
        message: SlackMessageEvent,
        target: ThreadTarget,
        destination_id: str,
        correlation_id: str | None,
    ) -> MirrorResult | None:
        """Grava as chaves do alvo; a de dedupe vai primeiro.

        Falha na primeira chave vira `id_map_error` (nada gravado). Falha
        depois dela retorna `id_map_partial`: o destino existe e o reenvio
        já é barrado pelo dedupe, mas a thread não aponta para o novo ID.
        """
        first_key, *other_keys = target.mapping_keys
        await self._guard("id_map_error", id_map.save(first_key, destination_id))
        for key in other_keys:
            try:
                await id_map.save(key, destination_id)
            except Exception as exc:
                logger.error(
                    "mirror_mapping_partial",
                    extra={
                        "correlation_id": correlation_id,
                        "source_id": message.source_id,
                        "destination_id": destination_id,
                        "operation": target.operation,
                        "error_type": type(exc).__name__,
                    },
                )
                return MirrorResult(
                    outcome="failed",
                    reason="id_map_partial",
                    source_id=message.source_id,
                    destination_id=destination_id,
                    operation=target.operation,
                )
        return None

    async def _dispatch(self, target: ThreadTarget, markdown: str) -> str:
        if target.operation == "create_comment":
            return await self._destination.create_comment(target.parent_id, markdown)
        return await self._destination.create_post(target.parent_id, markdown)

    async def _guard(self, reason: str, awaitable: Awaitable[_T]) -> _T:
        """Aguarda chamada a colaborador convertendo falhas no motivo dado."""
        try:
            return await awaitable
        except Exception as exc:
            logger.error(
                "mirror_collaborator_failed",
                extra={"reason": reason, "error_type": type(exc).__name__},
            )
            raise _CollaboratorError(reason) from exc
