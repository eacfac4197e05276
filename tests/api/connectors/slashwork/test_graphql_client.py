"""Testes do SlashworkGraphQLClient com httpx.MockTransport."""

from __future__ import annotations

import json
from types import SimpleNamespace

import httpx
import pytest

from api.connectors.slashwork import (
    DestinationError,
    DestinationOperationError,
    DestinationResponseError,
    DestinationTransportError,
    HttpClientConfig,
    SlashworkGraphQLClient,
    create_slashwork_client,
)
from api.normalizers.slack import normalize_message
from app.infra.stores import MemoryIdMapStore
from app.protocols.models import RootMessage
from app.use_cases.slack import MirrorSlackMessageUseCase

ENDPOINT = "https://slashwork.test/api/graphql"


def _client(handler: object) -> SlashworkGraphQLClient:
    config = HttpClientConfig(timeout_seconds=5.0, transport=httpx.MockTransport(handler))
    return SlashworkGraphQLClient(endpoint=ENDPOINT, bearer_token="tok-123", config=config)


class TestCreatePost:
    """Fluxo feliz e formato do request."""

    @pytest.mark.asyncio
    async def test_create_post_sends_mutation_and_returns_id(self) -> None:
        captured: dict[str, object] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["auth"] = request.headers.get("authorization")
            captured["content_type"] = request.headers.get("content-type")
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"data": {"createPost": {"node": {"id": "P1"}}}})

        post_id = await _client(handler).create_post("G1", "hello\n\n---")

        assert post_id == "P1"
        assert captured["url"] == ENDPOINT
        assert captured["auth"] == "Bearer tok-123"
        assert captured["content_type"] == "application/json"
        body = captured["body"]
        assert "createPost" in body["query"]
        assert body["variables"] == {"groupId": "G1", "input": {"markdown": "hello\n\n---"}}

    @pytest.mark.asyncio
    async def test_create_comment_returns_id(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            assert body["variables"] == {"postId": "P1", "input": {"markdown": "reply"}}
            return httpx.Response(200, json={"data": {"createComment": {"node": {"id": "C9"}}}})

        assert await _client(handler).create_comment("P1", "reply") == "C9"


class TestFailures:
    """Classificação de falhas do destino."""

    @pytest.mark.asyncio
    async def test_non_success_status(self) -> None:
        client = _client(lambda request: httpx.Response(502, text="bad gateway"))

        with pytest.raises(DestinationTransportError) as exc_info:
            await client.create_post("G1", "x")

        assert exc_info.value.status_code == 502
        assert exc_info.value.operation == "createPost"

    @pytest.mark.asyncio
    async def test_graphql_errors(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "data": None,
                    "errors": [
                        {
                            "message": "group not found",
                            "path": ["createPost"],
                            "extensions": {"code": "NOT_FOUND"},
                        }
                    ],
                },
            )

        with pytest.raises(DestinationOperationError) as exc_info:
            await _client(handler).create_post("G404", "x")

        assert exc_info.value.errors[0].code == "NOT_FOUND"
        assert exc_info.value.errors[0].path == ("createPost",)

    @pytest.mark.asyncio
    async def test_empty_errors_array_is_success(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"data": {"createPost": {"node": {"id": "P2"}}}, "errors": []}
            )

        assert await _client(handler).create_post("G1", "x") == "P2"

    @pytest.mark.asyncio
    async def test_invalid_json(self) -> None:
        client = _client(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(DestinationResponseError):
            await client.create_post("G1", "x")

    @pytest.mark.asyncio
    async def test_undecodable_body_is_response_error(self) -> None:
        client = _client(lambda request: httpx.Response(200, content=b"\xff\xfe\xfa"))

        with pytest.raises(DestinationResponseError):
            await client.create_post("G1", "x")

    @pytest.mark.asyncio
    async def test_undecodable_body_becomes_failed_outcome(self) -> None:
        """Corpo ilegível não escapa do use case: vira destination_error."""
        use_case = MirrorSlackMessageUseCase(
            destination=_client(lambda request: httpx.Response(200, content=b"\xff\xfe\xfa")),
            normalizer=normalize_message,
            channel_mappings={"C1": "G1"},
            id_map=MemoryIdMapStore(),
        )

        result = await use_case.execute(RootMessage(channel_id="C1", source_id="1.1", text="hi"))

        assert result.outcome == "failed"
        assert result.reason == "destination_error"

    @pytest.mark.asyncio
    async def test_missing_node_id(self) -> None:
        client = _client(lambda request: httpx.Response(200, json={"data": {"createPost": None}}))

        with pytest.raises(DestinationResponseError):
            await client.create_post("G1", "x")

    @pytest.mark.asyncio
    async def test_connection_error_is_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(DestinationTransportError, match="http_connection_error"):
            await _client(handler).create_comment("P1", "x")

    @pytest.mark.asyncio
    async def test_timeout_is_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(DestinationTransportError, match="http_timeout"):
            await _client(handler).create_post("G1", "x")

    @pytest.mark.asyncio
    async def test_all_failures_share_destination_error_base(self) -> None:
        client = _client(lambda request: httpx.Response(401, json={}))

        with pytest.raises(DestinationError):
            await client.create_post("G1", "x")


class TestConstruction:
    """Validação de configuração e ocultação do token."""

    @pytest.mark.parametrize(("endpoint", "token"), [("", "tok"), (ENDPOINT, ""), (" ", "tok")])
    def test_requires_endpoint_and_token(self, endpoint: str, token: str) -> None:
        with pytest.raises(ValueError):
            SlashworkGraphQLClient(endpoint=endpoint, bearer_token=token)

    def test_repr_hides_token(self) -> None:
        client = SlashworkGraphQLClient(endpoint=ENDPOINT, bearer_token="super-secret")

        assert "super-secret" not in repr(client)

    def test_factory_uses_settings(self) -> None:
        settings = SimpleNamespace(
            graphql_endpoint=ENDPOINT,
            bearer_token="tok",
            request_timeout_seconds=7.5,
        )

        client = create_slashwork_client(settings)

        assert isinstance(client, SlashworkGraphQLClient)
        assert client._config.timeout_seconds == 7.5
