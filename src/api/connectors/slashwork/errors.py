"""Erros e helpers de parsing para a API GraphQL do Slashwork."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.protocols.destination_client import DestinationError


@dataclass(frozen=True)
class GraphQLError:
    """Erro de operação reportado no array `errors` da resposta."""

    message: str
    code: str | None = None
    path: tuple[str, ...] = ()


class DestinationTransportError(DestinationError):
    """Status HTTP não-2xx, timeout ou falha de conexão."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, operation)
        self.status_code = status_code


class DestinationOperationError(DestinationError):
    """Transporte OK, mas a API reportou um ou mais erros de operação."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        errors: tuple[GraphQLError, ...] = (),
    ) -> None:
        super().__init__(message, operation)
        self.errors = errors


class DestinationResponseError(DestinationError):
    """Resposta sem JSON válido ou sem o ID criado."""


def parse_graphql_errors(response_data: dict[str, Any]) -> tuple[GraphQLError, ...]:
    """Extrai os erros de operação do response GraphQL.

    Args:
        response_data: Dict do response JSON

    Returns:
        Tupla de GraphQLError (vazia se sucesso)
    """
    raw_errors = response_data.get("errors")
    if not raw_errors:
        return ()
    if not isinstance(raw_errors, list):
        return (GraphQLError(message=str(raw_errors)),)

    errors: list[GraphQLError] = []
    for item in raw_errors:
        if not isinstance(item, dict):
            errors.append(GraphQLError(message=str(item)))
            continue
        extensions = item.get("extensions")
        code = extensions.get("code") if isinstance(extensions, dict) else None
        path = item.get("path")
        errors.append(
            GraphQLError(
                message=str(item.get("message", "Erro desconhecido")),
                code=str(code) if code is not None else None,
                path=tuple(str(part) for part in path) if isinstance(path, list) else (),
            )
        )
    return tuple(errors)
