"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


def _bridge(*, store_ok: bool = True, connected: bool = True) -> SimpleNamespace:
    store = MagicMock()
    if store_ok:
        store.list_recent = AsyncMock(return_value=[])
    else:
        store.list_recent = AsyncMock(side_effect=ConnectionError("redis down"))
    return SimpleNamespace(message_store=store, control=SimpleNamespace(is_connected=connected))


@pytest.mark.asyncio
async def test_health_is_always_healthy() -> None:
    response = await health_check()
    assert response.status == "healthy"
    assert response.service == "modem-bridge"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_bridge() -> None:
    request = _build_request_with_state(SimpleNamespace(bridge=None))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["message_store"]["error"] == "not_configured"
    assert payload["checks"]["serial_link"]["error"] == "not_configured"


@pytest.mark.asyncio
async def test_readiness_ok_when_store_and_link_are_up() -> None:
    request = _build_request_with_state(SimpleNamespace(bridge=_bridge()))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["message_store"]["status"] == "ok"
    assert payload["checks"]["serial_link"]["status"] == "ok"


@pytest.mark.asyncio
async def test_readiness_fails_when_link_is_down() -> None:
    request = _build_request_with_state(SimpleNamespace(bridge=_bridge(connected=False)))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["serial_link"]["error"] == "not_connected"


@pytest.mark.asyncio
async def test_readiness_fails_when_store_errors() -> None:
    request = _build_request_with_state(SimpleNamespace(bridge=_bridge(store_ok=False)))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["message_store"]["error"] == "ConnectionError"
