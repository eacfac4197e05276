"""Redis IdMap Store — mapeamento Slack ts → ID Slashwork no Upstash Redis.

Contrato de Keys:
    Chaves chegam como `<channel_id>:<ts>` (ver mapping_key no use case),
    com namespace configurável.
    Nunca gravar texto de mensagem como chave ou valor.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from app.protocols.id_map import IdMapStoreProtocol
from utils.errors import IdMapStoreError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

# Prefixo padrão para namespace do mapeamento
ID_MAP_PREFIX = "slack_id_map:"


class RedisIdMapStore(IdMapStoreProtocol):
    """Store de mapeamento usando Redis assíncrono (Upstash compatível).

    Args:
        async_redis_client: Cliente Redis assíncrono
        key_prefix: Namespace das chaves
        ttl_seconds: TTL das entradas; 0 = sem expiração
    """

    def __init__(
        self,
        async_redis_client: AsyncRedis[bytes],
        key_prefix: str = ID_MAP_PREFIX,
        ttl_seconds: int = 0,
    ) -> None:
        self._redis = async_redis_client
        self._prefix = key_prefix
        self._ttl = ttl_seconds

    def _key(self, source_id: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{self._prefix}{source_id}"

    async def save(self, source_id: str, destination_id: str) -> None:
        """Grava o mapeamento (SET simples = upsert idempotente)."""
        try:
            if self._ttl > 0:
                await self._redis.set(self._key(source_id), destination_id, ex=self._ttl)
            else:
                await self._redis.set(self._key(source_id), destination_id)
        except (RedisError, OSError) as exc:
            raise IdMapStoreError(
                "Falha ao gravar mapeamento no Redis", backend="redis", operation="save"
            ) from exc
        logger.debug(
            "id_map_saved",
            extra={"source_id": source_id, "destination_id": destination_id},
        )

    async def find(self, source_id: str) -> str | None:
        """Consulta o mapeamento; valores bytes são decodificados."""
        try:
            value = await self._redis.get(self._key(source_id))
        except (RedisError, OSError) as exc:
            raise IdMapStoreError(
                "Falha ao consultar mapeamento no Redis", backend="redis", operation="find"
            ) from exc
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)
