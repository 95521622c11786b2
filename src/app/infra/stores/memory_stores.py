"""Stores em memória, apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from app.protocols.channel_config_store import ChannelConfigStoreProtocol
from app.protocols.message_store import TextMessageStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import ChannelConfig, MessageStatus, TextMessageRecord


class MemoryTextMessageStore(TextMessageStoreProtocol):
    """Registros de SMS em memória (dev/test)."""

    def __init__(self) -> None:
        self._records: dict[str, TextMessageRecord] = {}

    async def save(self, record: TextMessageRecord) -> None:
        self._records[record.id] = record

    async def update_status(self, record_id: str, status: MessageStatus) -> bool:
        record = self._records.get(record_id)
        if record is None:
            return False
        self._records[record_id] = dataclasses.replace(record, status=status)
        return True

    async def get(self, record_id: str) -> TextMessageRecord | None:
        return self._records.get(record_id)

    async def list_recent(self, limit: int = 50) -> list[TextMessageRecord]:
        ordered = sorted(self._records.values(), key=lambda r: r.created_at, reverse=True)
        return ordered[:limit]


class MemoryChannelConfigStore(ChannelConfigStoreProtocol):
    """Canais em memória, semeados por NOTIFICATION_CHANNELS."""

    def __init__(self, channels: Sequence[ChannelConfig] = ()) -> None:
        self._channels: list[ChannelConfig] = list(channels)

    async def list_channels(self) -> list[ChannelConfig]:
        return list(self._channels)

    async def replace_channels(self, channels: Sequence[ChannelConfig]) -> None:
        self._channels = list(channels)
