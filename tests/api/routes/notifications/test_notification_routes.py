"""Testes das rotas de configuração de canais."""

from __future__ import annotations

import asyncio

from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import create_api_router
from app.bootstrap.dependencies import create_modem_bridge
from app.infra.stores import MemoryChannelConfigStore, MemoryTextMessageStore
from app.protocols.models import ChannelConfig
from tests.fakes.fake_serial import BrokenChannelConfigStore


def _client(channel_store: MemoryChannelConfigStore):
    bridge = create_modem_bridge(
        message_store=MemoryTextMessageStore(),
        channel_store=channel_store,
        senders={},
    )
    app = FastAPI()
    app.state.bridge = bridge
    app.include_router(create_api_router())
    return TestClient(app)


def test_list_channels() -> None:
    store = MemoryChannelConfigStore(
        [ChannelConfig(type="wecom", enabled=True, settings={"webhook": "https://w"})]
    )

    with _client(store) as client:
        response = client.get("/api/notifications/channels")

    assert response.status_code == 200
    assert response.json() == {
        "channels": [{"type": "wecom", "enabled": True, "settings": {"webhook": "https://w"}}]
    }


def test_replace_channels_updates_store() -> None:
    store = MemoryChannelConfigStore()
    payload = {
        "channels": [
            {"type": "dingtalk", "enabled": True, "settings": {"webhook": "https://d"}},
            {"type": "email"},
        ]
    }

    with _client(store) as client:
        response = client.put("/api/notifications/channels", json=payload)

    assert response.status_code == 200
    channels = asyncio.run(store.list_channels())
    assert channels == [
        ChannelConfig(type="dingtalk", enabled=True, settings={"webhook": "https://d"}),
        ChannelConfig(type="email", enabled=False, settings={}),
    ]


def test_replace_rejects_unknown_channel_type() -> None:
    store = MemoryChannelConfigStore([ChannelConfig(type="email")])

    with _client(store) as client:
        response = client.put(
            "/api/notifications/channels",
            json={"channels": [{"type": "telegram", "enabled": True}]},
        )

    assert response.status_code == 400
    assert response.json()["types"] == ["telegram"]
    assert asyncio.run(store.list_channels()) == [ChannelConfig(type="email")]


def test_store_failure_returns_503() -> None:
    with _client(BrokenChannelConfigStore()) as client:
        response = client.get("/api/notifications/channels")

    assert response.status_code == 503
