"""Liveness e readiness do bridge.

/ready depende de dois componentes: store de registros de SMS (consulta
barata com timeout) e link serial anexado e conectado.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()

STORE_CHECK_TIMEOUT_SECONDS = 2.0


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    service: str = "modem-bridge"
    timestamp: str
    version: str = "1.0.0"


class ComponentCheck(BaseModel):
    status: Literal["ok", "failed"]
    latency_ms: float | None = None
    error: str | None = None


def _failed(error: str) -> ComponentCheck:
    return ComponentCheck(status="failed", error=error)


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Processo vivo; não consulta dependências."""
    return HealthResponse(timestamp=datetime.now(UTC).isoformat())


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    bridge = getattr(request.app.state, "bridge", None)
    checks = {
        "message_store": await _probe_message_store(getattr(bridge, "message_store", None)),
        "serial_link": _probe_serial_link(getattr(bridge, "control", None)),
    }
    ready = all(check.status == "ok" for check in checks.values())
    if not ready:
        logger.info(
            "readiness_not_ready",
            extra={"failed_checks": [name for name, c in checks.items() if c.status != "ok"]},
        )

    body: dict[str, Any] = {
        "status": "ready" if ready else "not_ready",
        "checks": {name: check.model_dump() for name, check in checks.items()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=body, status_code=200 if ready else 503)


async def _probe_message_store(store: Any | None) -> ComponentCheck:
    if store is None:
        return _failed("not_configured")
    started = time.perf_counter()
    try:
        await asyncio.wait_for(store.list_recent(limit=1), timeout=STORE_CHECK_TIMEOUT_SECONDS)
    except TimeoutError:
        return _failed("timeout")
    except Exception as exc:
        logger.warning("readiness_store_check_failed", extra={"error_type": type(exc).__name__})
        return _failed(type(exc).__name__)
    return ComponentCheck(status="ok", latency_ms=round((time.perf_counter() - started) * 1000, 2))


def _probe_serial_link(control: Any | None) -> ComponentCheck:
    if control is None:
        return _failed("not_configured")
    if not control.is_connected:
        return _failed("not_connected")
    return ComponentCheck(status="ok")
