"""Testes do registro de clientes Redis."""

from __future__ import annotations

import pytest

from app.bootstrap import clients
from app.bootstrap.clients import close_redis_clients, create_async_redis_client


@pytest.fixture(autouse=True)
def _empty_registry():
    clients._clients.clear()
    yield
    clients._clients.clear()


def test_empty_url_is_rejected() -> None:
    with pytest.raises(ValueError, match="REDIS_URL"):
        create_async_redis_client("")


def test_same_url_reuses_client() -> None:
    first = create_async_redis_client("redis://localhost:6379/0")
    assert create_async_redis_client("redis://localhost:6379/0") is first
    assert create_async_redis_client("redis://localhost:6379/1") is not first


@pytest.mark.asyncio
async def test_close_redis_clients_empties_registry() -> None:
    create_async_redis_client("redis://localhost:6379/0")

    await close_redis_clients()

    assert clients._clients == {}
