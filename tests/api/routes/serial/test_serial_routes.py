"""Testes das rotas de controle serial via TestClient."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import create_api_router
from app.bootstrap.dependencies import create_modem_bridge
from app.infra.stores import MemoryChannelConfigStore, MemoryTextMessageStore
from tests.fakes.fake_serial import FakeSerialLink


def _client(link: FakeSerialLink | None):
    bridge = create_modem_bridge(
        link=link,
        message_store=MemoryTextMessageStore(),
        channel_store=MemoryChannelConfigStore(),
        senders={},
    )
    app = FastAPI()
    app.state.bridge = bridge
    app.include_router(create_api_router())
    return TestClient(app), bridge


def test_send_sms_returns_request_id() -> None:
    link = FakeSerialLink()
    client, _ = _client(link)

    with client:
        response = client.post("/api/serial/sms", json={"to": "+86139", "content": "oi"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "sent"
    assert link.commands[0]["request_id"] == body["request_id"]


@pytest.mark.parametrize(
    "payload",
    [{"to": "", "content": "oi"}, {"to": "+86139", "content": ""}],
)
def test_send_sms_empty_fields_return_400(payload: dict) -> None:
    link = FakeSerialLink()
    client, _ = _client(link)

    with client:
        response = client.post("/api/serial/sms", json=payload)

    assert response.status_code == 400
    assert link.commands == []


def test_send_sms_link_failure_returns_503() -> None:
    client, _ = _client(FakeSerialLink(fail=True))

    with client:
        response = client.post("/api/serial/sms", json={"to": "+86139", "content": "oi"})

    assert response.status_code == 503


def test_commands_without_link_return_503() -> None:
    client, _ = _client(None)

    with client:
        assert client.post("/api/serial/flymode", json={"enabled": True}).status_code == 503
        assert client.post("/api/serial/reboot").status_code == 503


def test_flymode_and_reboot_write_commands() -> None:
    link = FakeSerialLink()
    client, _ = _client(link)

    with client:
        flymode = client.post("/api/serial/flymode", json={"enabled": False})
        reboot = client.post("/api/serial/reboot")

    assert flymode.status_code == 200
    assert flymode.json() == {}
    assert reboot.json() == {}
    written = [command["type"] for command in link.commands]
    assert written[0] == "set_flymode"
    assert "reboot" in written


def test_status_returns_cached_snapshot() -> None:
    client, bridge = _client(FakeSerialLink())
    bridge.status_cache.update_status({"signal": 18})
    bridge.status_cache.set_phone_number("+86135")

    with client:
        response = client.get("/api/serial/status")

    body = response.json()
    assert body["connected"] is True
    assert body["signal"] == 18
    assert body["phone_number"] == "+86135"
