"""Settings do destino Slashwork (GraphQL).

O bearer token é segredo: fica fora do repr e nunca vai para os logs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any


@dataclass(frozen=True)
class SlashworkSettings:
    """Configurações da API GraphQL do Slashwork.

    Attributes:
        graphql_endpoint: URL do endpoint GraphQL
        bearer_token: Token de acesso (Authorization: Bearer)
        request_timeout_seconds: Timeout para requisições HTTP
    """

    graphql_endpoint: str = ""
    bearer_token: str = field(default="", repr=False)
    request_timeout_seconds: float = 30.0

    def redacted(self) -> dict[str, Any]:
        """Resumo seguro para logs (token mascarado)."""
        return {
            "graphql_endpoint": self.graphql_endpoint,
            "bearer_token": "[REDACTED]" if self.bearer_token else "",
            "request_timeout_seconds": self.request_timeout_seconds,
        }

    def validate(self) -> list[str]:
        """Valida configurações mínimas do destino.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.graphql_endpoint:
            errors.append("SLASHWORK_GRAPHQL_ENDPOINT não configurado")
        elif not self.graphql_endpoint.startswith(("https://", "http://")):
            errors.append("SLASHWORK_GRAPHQL_ENDPOINT deve ser uma URL http(s)")

        if not self.bearer_token:
            errors.append("SLASHWORK_BEARER_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("SLASHWORK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> SlashworkSettings:
    """Carrega SlashworkSettings a partir de variáveis de ambiente."""
    return SlashworkSettings(
        graphql_endpoint=os.getenv("SLASHWORK_GRAPHQL_ENDPOINT", ""),
        bearer_token=os.getenv("SLASHWORK_BEARER_TOKEN", ""),
        request_timeout_seconds=float(
            os.getenv("SLASHWORK_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_slashwork_settings() -> SlashworkSettings:
    """Retorna instância cacheada de SlashworkSettings."""
    return _load_from_env()
