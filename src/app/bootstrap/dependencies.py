"""Factories de dependências — criação de implementações concretas.

Centraliza a escolha de store de mapeamento, cliente de destino e a
montagem do use case de espelhamento a partir das settings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.slashwork import create_slashwork_client
from api.normalizers.slack import normalize_message
from app.bootstrap.clients import create_async_redis_client
from app.infra.stores import MemoryIdMapStore, RedisIdMapStore
from app.use_cases.slack.mirror_message import MirrorSlackMessageUseCase
from config.settings import (
    get_base_settings,
    get_id_map_settings,
    get_slack_settings,
    get_slashwork_settings,
)

if TYPE_CHECKING:
    from app.protocols import (
        DestinationClientProtocol,
        IdMapStoreProtocol,
        UsernameResolverProtocol,
    )
    from config.settings import IdMapSettings

logger = logging.getLogger(__name__)


def create_id_map_store(settings: IdMapSettings | None = None) -> IdMapStoreProtocol | None:
    """Cria o Mapping Store conforme ID_MAP_BACKEND.

    - "none": sem store (dedupe no-op, respostas são ignoradas)
    - "memory": MemoryIdMapStore (dev only)
    - "redis": RedisIdMapStore

    Returns:
        Implementação de IdMapStoreProtocol, ou None
    """
    settings = settings or get_id_map_settings()

    if settings.backend == "none":
        logger.warning("id_map_store_disabled", extra={"backend": "none"})
        return None

    if settings.backend == "redis":
        store = RedisIdMapStore(
            create_async_redis_client(),
            key_prefix=settings.key_prefix,
            ttl_seconds=settings.ttl_seconds,
        )
        logger.info("id_map_store_created", extra={"backend": "redis"})
        return store

    environment = get_base_settings().environment
    if environment != "development":
        logger.warning(
            "memory_store_in_non_dev",
            extra={"backend": "memory", "environment": environment},
        )
    logger.info("id_map_store_created", extra={"backend": "memory"})
    return MemoryIdMapStore()


def create_destination_client() -> DestinationClientProtocol:
    """Cria o cliente GraphQL do Slashwork.

    Raises:
        ValueError: Se endpoint ou token não estiverem configurados
    """
    return create_slashwork_client(get_slashwork_settings())


def create_mirror_use_case(
    *,
    destination: DestinationClientProtocol | None = None,
    id_map: IdMapStoreProtocol | None = None,
    username_resolver: UsernameResolverProtocol | None = None,
) -> MirrorSlackMessageUseCase:
    """Monta MirrorSlackMessageUseCase com as implementações configuradas.

    Dependências omitidas são criadas a partir das settings.
    """
    if destination is None:
        destination = create_destination_client()
    if id_map is None:
        id_map = create_id_map_store()

    return MirrorSlackMessageUseCase(
        destination=destination,
        normalizer=normalize_message,
        channel_mappings=get_slack_settings().channel_group_mappings,
        id_map=id_map,
        username_resolver=username_resolver,
    )
