"""Fakes in-memory do link serial, stores e senders para testes deterministas."""

from __future__ import annotations

from typing import Any

from app.infra.stores import MemoryChannelConfigStore, MemoryTextMessageStore
from app.protocols.models import ChannelConfig, DecodedMessage
from utils.errors import ChannelSendError, SerialLinkError, StoreUnavailableError


def frame(
    message_type: str,
    payload: dict[str, Any] | None = None,
    raw: str = "",
) -> DecodedMessage:
    """Atalho para montar um DecodedMessage."""
    return DecodedMessage(type=message_type, payload=payload or {}, raw=raw or message_type)


class FakeSerialLink:
    """Registra comandos escritos; pode simular link caído."""

    def __init__(self, connected: bool = True, fail: bool = False) -> None:
        self.connected = connected
        self.fail = fail
        self.commands: list[dict[str, Any]] = []

    async def send_command(self, command: dict[str, Any]) -> None:
        if self.fail:
            raise SerialLinkError("porta serial fechada")
        self.commands.append(dict(command))

    def is_connected(self) -> bool:
        return self.connected


class FlakyMessageStore(MemoryTextMessageStore):
    """Store em memória com falhas injetáveis por operação."""

    def __init__(self, fail_save: bool = False, fail_update: bool = False) -> None:
        super().__init__()
        self.fail_save = fail_save
        self.fail_update = fail_update
        self.update_calls: list[tuple[str, str]] = []

    async def save(self, record):  # type: ignore[override]
        if self.fail_save:
            raise StoreUnavailableError("store fora do ar")
        await super().save(record)

    async def update_status(self, record_id, status):  # type: ignore[override]
        self.update_calls.append((record_id, status))
        if self.fail_update:
            raise StoreUnavailableError("store fora do ar")
        return await super().update_status(record_id, status)


class BrokenChannelConfigStore(MemoryChannelConfigStore):
    """Falha ao listar canais."""

    async def list_channels(self) -> list[ChannelConfig]:
        raise StoreUnavailableError("config indisponível")


class RecordingSender:
    """Sender fake: guarda o que recebeu e opcionalmente falha."""

    def __init__(
        self,
        channel_type: str,
        *,
        wants_structured: bool = False,
        fail: bool = False,
    ) -> None:
        self.channel_type = channel_type
        self.wants_structured = wants_structured
        self.fail = fail
        self.sent: list[tuple[dict[str, Any], Any]] = []

    async def send(self, settings: dict[str, Any], message: Any) -> None:
        self.sent.append((settings, message))
        if self.fail:
            raise ChannelSendError(self.channel_type, "provider_down")


class FakeRedisPipeline:
    def __init__(self, redis: FakeRedis) -> None:
        self._redis = redis
        self._ops: list[tuple[str, tuple[Any, ...]]] = []

    def set(self, *args: Any) -> FakeRedisPipeline:
        self._ops.append(("set", args))
        return self

    def zadd(self, *args: Any) -> FakeRedisPipeline:
        self._ops.append(("zadd", args))
        return self

    def zremrangebyrank(self, *args: Any) -> FakeRedisPipeline:
        self._ops.append(("zremrangebyrank", args))
        return self

    async def execute(self) -> list[Any]:
        if self._redis.fail:
            raise ConnectionError("redis down")
        return [await getattr(self._redis, name)(*args) for name, args in self._ops]


class FakeRedis:
    """Subconjunto de redis.asyncio usado pelos stores (valores em bytes)."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.values: dict[str, bytes] = {}
        self.zsets: dict[str, dict[str, float]] = {}

    def _check(self) -> None:
        if self.fail:
            raise ConnectionError("redis down")

    def pipeline(self) -> FakeRedisPipeline:
        return FakeRedisPipeline(self)

    async def get(self, key: str) -> bytes | None:
        self._check()
        return self.values.get(key)

    async def set(self, key: str, value: str | bytes) -> bool:
        self._check()
        self.values[key] = value.encode() if isinstance(value, str) else value
        return True

    async def zadd(self, key: str, mapping: dict[str, float]) -> int:
        self._check()
        zset = self.zsets.setdefault(key, {})
        added = sum(1 for member in mapping if member not in zset)
        zset.update(mapping)
        return added

    def _ordered(self, key: str) -> list[str]:
        zset = self.zsets.get(key, {})
        return sorted(zset, key=lambda member: (zset[member], member))

    async def zremrangebyrank(self, key: str, start: int, stop: int) -> int:
        self._check()
        ordered = self._ordered(key)
        size = len(ordered)
        if stop < 0:
            stop = size + stop
        removed = ordered[max(start, 0) : stop + 1] if stop >= 0 else []
        for member in removed:
            del self.zsets[key][member]
        return len(removed)

    async def zrevrange(self, key: str, start: int, stop: int) -> list[bytes]:
        self._check()
        ordered = list(reversed(self._ordered(key)))
        end = None if stop == -1 else stop + 1
        return [member.encode() for member in ordered[start:end]]

    async def ping(self) -> bool:
        self._check()
        return True
