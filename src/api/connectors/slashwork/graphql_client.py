"""Cliente GraphQL do Slashwork — mutações createPost e createComment.

Cada chamada executa exatamente uma escrita autenticada por bearer token
e retorna o ID criado. Sem retry: qualquer falha é terminal para o evento.

Logging estruturado sem token e sem conteúdo da mensagem.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.slashwork.errors import (
    DestinationOperationError,
    DestinationResponseError,
    DestinationTransportError,
    parse_graphql_errors,
)
from api.connectors.slashwork.http_base import HttpClient, HttpClientConfig, HttpError
from app.observability import record_latency

if TYPE_CHECKING:
    import httpx

    from config.settings import SlashworkSettings

logger: logging.Logger = logging.getLogger(__name__)

CREATE_POST_MUTATION = """
mutation ($groupId: ID!, $input: CreatePostMutationInput!) {
  createPost(groupId: $groupId, input: $input) {
    node { id }
  }
}
"""

CREATE_COMMENT_MUTATION = """
mutation ($postId: ID!, $input: CreateCommentMutationInput!) {
  createComment(postId: $postId, input: $input) {
    node { id }
  }
}
"""


class SlashworkGraphQLClient(HttpClient):
    """Cliente HTTP especializado para a API GraphQL do Slashwork.

    Tratamento:
    - Status não-2xx, timeout, conexão: DestinationTransportError
    - `errors` não vazio na resposta: DestinationOperationError
    - JSON inválido ou sem `node.id`: DestinationResponseError
    """

    def __init__(
        self,
        endpoint: str,
        bearer_token: str,
        config: HttpClientConfig | None = None,
    ) -> None:
        """Inicializa cliente Slashwork.

        Args:
            endpoint: URL do endpoint GraphQL
            bearer_token: Token de acesso (nunca logado)
            config: Configuração HTTP base

        Raises:
            ValueError: Se endpoint ou bearer_token estiverem vazios
        """
        if not endpoint or not endpoint.strip():
            raise ValueError("endpoint GraphQL é obrigatório (SLASHWORK_GRAPHQL_ENDPOINT)")
        if not bearer_token or not bearer_token.strip():
            raise ValueError("bearer_token é obrigatório (SLASHWORK_BEARER_TOKEN)")
        super().__init__(config)
        self._endpoint = endpoint
        self._bearer_token = bearer_token

    def __repr__(self) -> str:
        return f"SlashworkGraphQLClient(endpoint={self._endpoint!r})"

    async def create_post(self, group_id: str, markdown: str) -> str:
        """Cria post no grupo e retorna o ID do post."""
        return await self._execute_mutation(
            operation="createPost",
            query=CREATE_POST_MUTATION,
            variables={"groupId": group_id, "input": {"markdown": markdown}},
        )

    async def create_comment(self, post_id: str, markdown: str) -> str:
        """Cria comentário sob o post e retorna o ID do comentário."""
        return await self._execute_mutation(
            operation="createComment",
            query=CREATE_COMMENT_MUTATION,
            variables={"postId": post_id, "input": {"markdown": markdown}},
        )

    def _build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._bearer_token}",
        }

    async def _execute_mutation(
        self,
        *,
        operation: str,
        query: str,
        variables: dict[str, Any],
    ) -> str:
        started_at = time.perf_counter()
        try:
            response = await self.post(
                self._endpoint,
                json={"query": query, "variables": variables},
                headers=self._build_headers(),
            )
        except HttpError as exc:
            raise DestinationTransportError(str(exc), operation=operation) from exc
        finally:
            record_latency("slashwork", operation, (time.perf_counter() - started_at) * 1000)

        return self._process_response(response, operation)

    def _process_response(self, response: httpx.Response, operation: str) -> str:
        """Valida status, erros GraphQL e extrai `data.<operation>.node.id`."""
        if not response.is_success:
            logger.error(
                "slashwork_request_failed",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise DestinationTransportError(
                f"GraphQL request failed: {response.status_code} {response.reason_phrase}",
                operation=operation,
                status_code=response.status_code,
            )

        try:
            response_data = response.json()
        except ValueError as exc:  # JSONDecodeError e UnicodeDecodeError
            logger.error("slashwork_response_invalid_json", extra={"operation": operation})
            raise DestinationResponseError("Response JSON inválido", operation) from exc
        if not isinstance(response_data, dict):
            raise DestinationResponseError("Response JSON não é objeto", operation)

        errors = parse_graphql_errors(response_data)
        if errors:
            logger.error(
                "slashwork_graphql_errors",
                extra={
                    "operation": operation,
                    "error_count": len(errors),
                    "error_codes": [error.code for error in errors if error.code],
                },
            )
            raise DestinationOperationError(
                f"GraphQL errors: {'; '.join(error.message for error in errors)}",
                operation=operation,
                errors=errors,
            )

        node_id = _extract_node_id(response_data, operation)
        if not node_id:
            logger.error("slashwork_response_missing_id", extra={"operation": operation})
            raise DestinationResponseError("Response sem node.id", operation)

        logger.info(
            "slashwork_mutation_succeeded",
            extra={"operation": operation, "destination_id": node_id},
        )
        return node_id


def _extract_node_id(response_data: dict[str, Any], operation: str) -> str | None:
    data = response_data.get("data")
    if not isinstance(data, dict):
        return None
    payload = data.get(operation)
    if not isinstance(payload, dict):
        return None
    node = payload.get("node")
    if not isinstance(node, dict):
        return None
    node_id = node.get("id")
    return str(node_id) if node_id else None


def create_slashwork_client(
    settings: SlashworkSettings | None = None,
) -> SlashworkGraphQLClient:
    """Factory para criar cliente Slashwork com config padrão.

    Args:
        settings: SlashworkSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_slashwork_settings

    slashwork = settings or get_slashwork_settings()
    config = HttpClientConfig(timeout_seconds=slashwork.request_timeout_seconds)
    return SlashworkGraphQLClient(
        endpoint=slashwork.graphql_endpoint,
        bearer_token=slashwork.bearer_token,
        config=config,
    )
