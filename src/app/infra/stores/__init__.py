"""Stores — implementações concretas do mapeamento de IDs.

Módulos disponíveis:
    - redis_id_map_store: mapeamento usando Redis (Upstash)
    - memory_stores: stores em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryIdMapStore
from app.infra.stores.redis_id_map_store import RedisIdMapStore

__all__ = [
    # Memory (dev/test)
    "MemoryIdMapStore",
    # Redis (Upstash)
    "RedisIdMapStore",
]
