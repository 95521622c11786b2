"""Clientes Redis compartilhados pelos stores (um por URL)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

REDIS_SOCKET_TIMEOUT_SECONDS = 5.0

_clients: dict[str, AsyncRedis[bytes]] = {}


def create_async_redis_client(redis_url: str) -> AsyncRedis[bytes]:
    """Retorna o cliente da URL, criando-o na primeira chamada.

    Raises:
        ValueError: Se redis_url vazio
    """
    if not redis_url:
        msg = "REDIS_URL não configurado"
        raise ValueError(msg)

    client = _clients.get(redis_url)
    if client is not None:
        return client

    from redis.asyncio import Redis as AsyncRedis

    client = AsyncRedis.from_url(
        redis_url,
        decode_responses=False,
        socket_timeout=REDIS_SOCKET_TIMEOUT_SECONDS,
        socket_connect_timeout=REDIS_SOCKET_TIMEOUT_SECONDS,
    )
    _clients[redis_url] = client
    logger.info("async_redis_client_created", extra={"redis_clients": len(_clients)})
    return client


async def close_redis_clients() -> None:
    """Fecha todos os clientes criados (shutdown). Falhas são só logadas."""
    while _clients:
        _, client = _clients.popitem()
        try:
            await client.aclose()
        except Exception as exc:
            logger.warning("redis_client_close_failed", extra={"error_type": type(exc).__name__})
