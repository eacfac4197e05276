"""Fixtures compartilhadas dos testes de espelhamento."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from api.normalizers.slack import normalize_message
from app.infra.stores import MemoryIdMapStore
from app.protocols.destination_client import DestinationError
from app.use_cases.slack import MirrorSlackMessageUseCase


@dataclass
class FakeDestination:
    """Destino fake que registra chamadas e devolve IDs sequenciais."""

    fail_with: Exception | None = None
    calls: list[tuple[str, str, str]] = field(default_factory=list)

    async def create_post(self, group_id: str, markdown: str) -> str:
        return self._record("create_post", group_id, markdown)

    async def create_comment(self, post_id: str, markdown: str) -> str:
        return self._record("create_comment", post_id, markdown)

    def _record(self, operation: str, parent_id: str, markdown: str) -> str:
        if self.fail_with is not None:
            raise self.fail_with
        self.calls.append((operation, parent_id, markdown))
        prefix = "P" if operation == "create_post" else "CM"
        return f"{prefix}{len(self.calls)}"


@pytest.fixture
def destination() -> FakeDestination:
    return FakeDestination()


@pytest.fixture
def failing_destination() -> FakeDestination:
    return FakeDestination(fail_with=DestinationError("boom", operation="createPost"))


@pytest.fixture
def id_map() -> MemoryIdMapStore:
    return MemoryIdMapStore()


@pytest.fixture
def build_use_case():
    def _build(destination, id_map=None, username_resolver=None, mappings=None):
        return MirrorSlackMessageUseCase(
            destination=destination,
            normalizer=normalize_message,
            channel_mappings={"C1": "G1"} if mappings is None else mappings,
            id_map=id_map,
            username_resolver=username_resolver,
        )

    return _build
