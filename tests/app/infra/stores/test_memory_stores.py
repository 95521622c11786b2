"""Testes dos stores em memória."""

from __future__ import annotations

import pytest

from app.infra.stores import MemoryChannelConfigStore, MemoryTextMessageStore
from app.protocols.models import ChannelConfig, TextMessageRecord


def _record(record_id: str, created_at: int, status: str = "pending") -> TextMessageRecord:
    return TextMessageRecord(
        id=record_id,
        sender="",
        recipient="+86139",
        content="oi",
        direction="outgoing",
        status=status,  # type: ignore[arg-type]
        created_at=created_at,
    )


@pytest.mark.asyncio
async def test_update_status_replaces_record() -> None:
    store = MemoryTextMessageStore()
    await store.save(_record("a", 1))

    assert await store.update_status("a", "sent") is True
    assert await store.update_status("missing", "sent") is False
    record = await store.get("a")
    assert record is not None
    assert record.status == "sent"


@pytest.mark.asyncio
async def test_list_recent_orders_by_created_at_desc() -> None:
    store = MemoryTextMessageStore()
    for record_id, created_at in (("a", 1), ("b", 3), ("c", 2)):
        await store.save(_record(record_id, created_at))

    recent = await store.list_recent(limit=2)

    assert [record.id for record in recent] == ["b", "c"]


@pytest.mark.asyncio
async def test_channel_store_replace() -> None:
    store = MemoryChannelConfigStore([ChannelConfig(type="email", enabled=True)])

    await store.replace_channels([ChannelConfig(type="wecom")])

    assert await store.list_channels() == [ChannelConfig(type="wecom")]
