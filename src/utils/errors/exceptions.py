"""Falhas de infraestrutura compartilhadas entre camadas.

O runtime do webhook usa `InfrastructureError` para distinguir indisponibilidade
transitória (log `webhook_processing_infra_failed`) de bug de aplicação.
"""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Dependência externa indisponível; a operação pode ser repetida."""


class IdMapStoreError(InfrastructureError):
    """Store de mapeamento Slack ts → ID Slashwork inacessível.

    Attributes:
        backend: "redis", "memory"...
        operation: "find" ou "save"
    """

    def __init__(self, message: str, *, backend: str, operation: str) -> None:
        super().__init__(message)
        self.backend = backend
        self.operation = operation
