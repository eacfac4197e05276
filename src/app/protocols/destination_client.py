"""Protocolo do cliente de destino (mutações Slashwork).

Evita dependência direta da camada api: o use case conhece apenas este
contrato e a exceção base `DestinationError`.
"""

from __future__ import annotations

from typing import Protocol


class DestinationError(Exception):
    """Base para falhas ao escrever no destino (terminal para o evento)."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation


class DestinationClientProtocol(Protocol):
    """Contrato mínimo para criar posts e comentários no destino.

    Cada chamada executa exatamente uma escrita e retorna o ID criado.
    Falhas levantam `DestinationError` (transporte ou erro semântico).
    """

    async def create_post(self, group_id: str, markdown: str) -> str: ...

    async def create_comment(self, post_id: str, markdown: str) -> str: ...
