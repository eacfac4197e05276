"""Conector Slashwork: cliente GraphQL e erros de destino."""

from app.protocols.destination_client import DestinationError

from .errors import (
    DestinationOperationError,
    DestinationResponseError,
    DestinationTransportError,
    GraphQLError,
    parse_graphql_errors,
)
from .graphql_client import SlashworkGraphQLClient, create_slashwork_client
from .http_base import HttpClient, HttpClientConfig, HttpError

__all__ = [
    "DestinationError",
    "DestinationOperationError",
    "DestinationResponseError",
    "DestinationTransportError",
    "GraphQLError",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "SlashworkGraphQLClient",
    "create_slashwork_client",
    "parse_graphql_errors",
]
