"""Testes do sender de webhook genérico."""

from __future__ import annotations

import json

import httpx
import pytest

from app.infra.notifications import GenericWebhookSender, HttpClient
from app.protocols.models import NotificationMessage
from utils.errors import ChannelSendError

MESSAGE = NotificationMessage(kind="call", sender="+86137", content="", timestamp=1700000000)


@pytest.mark.asyncio
async def test_posts_structured_body_with_custom_headers() -> None:
    seen: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    sender = GenericWebhookSender(HttpClient(transport=httpx.MockTransport(_handler)))

    await sender.send(
        {"url": "https://hooks.example/modem", "headers": {"Authorization": "Bearer t"}},
        MESSAGE,
    )

    body = json.loads(seen[0].content)
    assert body["type"] == "call"
    assert body["from"] == "+86137"
    assert body["content"] == ""
    assert body["timestamp"] == 1700000000
    assert body["text"].startswith("Chamada recebida\n----\n")
    assert seen[0].headers["Authorization"] == "Bearer t"


@pytest.mark.asyncio
async def test_error_status_raises_channel_error() -> None:
    sender = GenericWebhookSender(
        HttpClient(transport=httpx.MockTransport(lambda request: httpx.Response(500)))
    )

    with pytest.raises(ChannelSendError) as exc_info:
        await sender.send({"url": "https://hooks.example/modem"}, MESSAGE)

    assert exc_info.value.channel_type == "webhook"
