"""Testes de admissão de canal, dedupe e resolução de thread."""

from __future__ import annotations

import pytest

from app.infra.stores import MemoryIdMapStore
from app.protocols.models import MirrorResult, ReplyMessage, RootMessage
from app.use_cases.slack import (
    DedupeResolver,
    ThreadResolver,
    ThreadTarget,
    admit_channel,
    dedupe_key,
)

ROOT = RootMessage(channel_id="C1", source_id="100.1")
REPLY = ReplyMessage(channel_id="C1", source_id="100.2", thread_root_id="100.1")


class TestAdmitChannel:
    def test_mapped_channel(self) -> None:
        assert admit_channel("C1", {"C1": "G1"}) == "G1"

    def test_unmapped_channel(self) -> None:
        assert admit_channel("C2", {"C1": "G1"}) is None

    def test_empty_group_is_not_admitted(self) -> None:
        assert admit_channel("C1", {"C1": ""}) is None


class TestDedupeResolver:
    def test_key_is_own_ts_scoped_by_channel(self) -> None:
        assert dedupe_key(ROOT) == "C1:100.1"
        assert dedupe_key(REPLY) == "C1:100.2"

    @pytest.mark.asyncio
    async def test_without_store_is_noop(self) -> None:
        resolver = DedupeResolver(None)

        assert resolver.enabled is False
        assert await resolver.already_mirrored(ROOT) is False

    @pytest.mark.asyncio
    async def test_detects_existing_mapping(self) -> None:
        resolver = DedupeResolver(MemoryIdMapStore({"C1:100.1": "P1"}))

        assert await resolver.already_mirrored(ROOT) is True
        assert await resolver.already_mirrored(REPLY) is False


class TestThreadResolver:
    @pytest.mark.asyncio
    async def test_root_targets_group(self) -> None:
        target = await ThreadResolver(None).resolve(ROOT, "G1")

        assert target == ThreadTarget(
            operation="create_post", parent_id="G1", mapping_keys=("C1:100.1",)
        )

    @pytest.mark.asyncio
    async def test_reply_targets_mapped_parent(self) -> None:
        target = await ThreadResolver(MemoryIdMapStore({"C1:100.1": "P1"})).resolve(REPLY, "G1")

        assert target == ThreadTarget(
            operation="create_comment",
            parent_id="P1",
            mapping_keys=("C1:100.2", "C1:100.1"),
        )

    @pytest.mark.asyncio
    async def test_reply_without_parent(self) -> None:
        result = await ThreadResolver(MemoryIdMapStore()).resolve(REPLY, "G1")

        assert isinstance(result, MirrorResult)
        assert result.reason == "thread_parent_not_found"

    @pytest.mark.asyncio
    async def test_reply_without_store(self) -> None:
        result = await ThreadResolver(None).resolve(REPLY, "G1")

        assert isinstance(result, MirrorResult)
        assert result.reason == "id_map_not_configured"
