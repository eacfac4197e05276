"""Cliente Redis compartilhado pelo store de mapeamento e pelo /ready."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.asyncio import Redis

from config.settings import get_base_settings

if TYPE_CHECKING:
    from config.settings import BaseSettings

logger = logging.getLogger(__name__)

REDIS_TIMEOUT_SECONDS = 5.0

_client: Redis | None = None


def create_async_redis_client(settings: BaseSettings | None = None) -> Redis:
    """Retorna o cliente Redis do processo, criando-o na primeira chamada.

    A conexão só é aberta no primeiro comando.

    Raises:
        ValueError: REDIS_URL vazio ou com esquema inválido
    """
    global _client
    if _client is not None:
        return _client

    redis_url = (settings or get_base_settings()).redis_url
    if not redis_url:
        raise ValueError("REDIS_URL não configurado")

    _client = Redis.from_url(
        redis_url,
        decode_responses=False,
        socket_timeout=REDIS_TIMEOUT_SECONDS,
        socket_connect_timeout=REDIS_TIMEOUT_SECONDS,
        health_check_interval=30,
    )
    logger.info("redis_client_created", extra={"component": "id_map"})
    return _client


async def close_async_redis_client() -> None:
    """Fecha o pool de conexões no shutdown; chamadas repetidas são no-op."""
    global _client
    client, _client = _client, None
    if client is not None:
        await client.aclose()
        logger.info("redis_client_closed", extra={"component": "id_map"})
