"""Stores em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from app.protocols.id_map import IdMapStoreProtocol


class MemoryIdMapStore(IdMapStoreProtocol):
    """Store de mapeamento ts → ID Slashwork em memória — apenas para dev/test."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})

    async def save(self, source_id: str, destination_id: str) -> None:
        """Grava (ou sobrescreve) o mapeamento."""
        self._store[source_id] = destination_id

    async def find(self, source_id: str) -> str | None:
        """Consulta o mapeamento."""
        return self._store.get(source_id)

    def snapshot(self) -> dict[str, str]:
        """Retorna cópia do conteúdo (apenas para testes)."""
        return dict(self._store)
