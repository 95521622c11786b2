"""Configurações de canal persistidas no Redis (lista JSON em uma chave)."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from app.protocols.channel_config_store import ChannelConfigStoreProtocol
from app.protocols.models import load_channel_configs
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from redis.asyncio import Redis as AsyncRedis

    from app.protocols.models import ChannelConfig

logger = logging.getLogger(__name__)


class RedisChannelConfigStore(ChannelConfigStoreProtocol):
    """Lê/escreve `{prefix}notification:channels`."""

    def __init__(self, redis_client: AsyncRedis[bytes], key_prefix: str = "modem_bridge:") -> None:
        self._redis = redis_client
        self._key = f"{key_prefix}notification:channels"

    async def list_channels(self) -> list[ChannelConfig]:
        try:
            raw = await self._redis.get(self._key)
        except Exception as exc:
            raise RedisConnectionError("Falha ao ler canais no Redis") from exc
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("channel_configs_load_error", extra={"error": str(e)})
            return []
        if not isinstance(data, list):
            logger.warning("channel_configs_not_a_list", extra={"key": self._key})
            return []
        return load_channel_configs(data, source="redis")

    async def replace_channels(self, channels: Sequence[ChannelConfig]) -> None:
        data = json.dumps([channel.to_dict() for channel in channels], ensure_ascii=False)
        try:
            await self._redis.set(self._key, data)
        except Exception as exc:
            raise RedisConnectionError("Falha ao gravar canais no Redis") from exc
        logger.info("channel_configs_replaced", extra={"channels": len(channels)})
