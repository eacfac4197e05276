"""Protocolo do store de mapeamento Slack ts → ID Slashwork.

Interface leve (ABC) dependida por Application. O store é opcional:
sem ele o pipeline espelha apenas mensagens raiz.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IdMapStoreProtocol(ABC):
    """Contrato assíncrono para o mapeamento de IDs.

    Métodos canônicos:
    - save(source_id, destination_id) -> None
      Upsert idempotente; uma nova gravação sobrescreve a anterior.
    - find(source_id) -> str | None
      Retorna o ID Slashwork associado ou None se ausente.
    """

    @abstractmethod
    async def save(self, source_id: str, destination_id: str) -> None:
        """Associa o ts Slack ao ID criado no Slashwork.

        Args:
            source_id: ts da mensagem (ou thread_ts da thread)
            destination_id: ID do post/comentário no Slashwork
        """

    @abstractmethod
    async def find(self, source_id: str) -> str | None:
        """Consulta o ID Slashwork associado ao ts Slack.

        Args:
            source_id: ts da mensagem (ou thread_ts da thread)

        Returns:
            ID Slashwork ou None se não houver mapeamento.
        """
