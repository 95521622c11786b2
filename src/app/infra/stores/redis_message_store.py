"""Registros de SMS no Redis.

Layout de chaves:
    {prefix}sms:{id}       -> JSON do TextMessageRecord
    {prefix}sms:by_created -> sorted set (score = created_at em ms)

O índice por data é limitado a `index_limit` ids; registros fora do
índice continuam acessíveis por id.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from app.protocols.message_store import TextMessageStoreProtocol
from app.protocols.models import TextMessageRecord
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

    from app.protocols.models import MessageStatus

logger = logging.getLogger(__name__)


class RedisTextMessageStore(TextMessageStoreProtocol):
    """Store de registros de SMS usando redis.asyncio.

    Args:
        redis_client: Cliente Redis assíncrono
        key_prefix: Namespace das chaves
        index_limit: Máximo de ids mantidos no índice por data
    """

    def __init__(
        self,
        redis_client: AsyncRedis[bytes],
        key_prefix: str = "modem_bridge:",
        index_limit: int = 10000,
    ) -> None:
        self._redis = redis_client
        self._prefix = key_prefix
        self._index_limit = index_limit

    def _key(self, record_id: str) -> str:
        return f"{self._prefix}sms:{record_id}"

    @property
    def _index_key(self) -> str:
        return f"{self._prefix}sms:by_created"

    async def save(self, record: TextMessageRecord) -> None:
        data = json.dumps(record.to_dict(), ensure_ascii=False)
        try:
            pipeline = self._redis.pipeline()
            pipeline.set(self._key(record.id), data)
            pipeline.zadd(self._index_key, {record.id: record.created_at})
            pipeline.zremrangebyrank(self._index_key, 0, -(self._index_limit + 1))
            await pipeline.execute()
        except Exception as exc:
            raise RedisConnectionError("Falha ao salvar registro de SMS no Redis") from exc
        logger.debug("sms_record_saved", extra={"record_id": record.id})

    async def update_status(self, record_id: str, status: MessageStatus) -> bool:
        record = await self.get(record_id)
        if record is None:
            return False
        data = record.to_dict()
        data["status"] = status
        try:
            await self._redis.set(self._key(record_id), json.dumps(data, ensure_ascii=False))
        except Exception as exc:
            raise RedisConnectionError("Falha ao atualizar status no Redis") from exc
        return True

    async def get(self, record_id: str) -> TextMessageRecord | None:
        try:
            raw = await self._redis.get(self._key(record_id))
        except Exception as exc:
            raise RedisConnectionError("Falha ao ler registro de SMS no Redis") from exc
        if raw is None:
            return None
        try:
            return TextMessageRecord.from_dict(json.loads(raw))
        except (json.JSONDecodeError, KeyError, ValueError) as e:
            logger.warning("sms_record_load_error", extra={"record_id": record_id, "error": str(e)})
            return None

    async def list_recent(self, limit: int = 50) -> list[TextMessageRecord]:
        try:
            ids = await self._redis.zrevrange(self._index_key, 0, limit - 1)
        except Exception as exc:
            raise RedisConnectionError("Falha ao listar registros no Redis") from exc
        records: list[TextMessageRecord] = []
        for raw_id in ids:
            record_id = raw_id.decode() if isinstance(raw_id, bytes) else str(raw_id)
            record = await self.get(record_id)
            if record is not None:
                records.append(record)
        return records
