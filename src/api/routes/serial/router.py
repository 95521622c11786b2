"""Endpoints de controle do módulo celular.

Endpoints:
- POST /api/serial/sms: envia SMS, retorna request_id para correlação
- GET /api/serial/status: status em cache do módulo
- POST /api/serial/flymode: liga/desliga modo avião
- POST /api/serial/reboot: reinicia o módulo

Falhas do link serial viram 503; o resultado do envio de SMS chega
depois como `sms_send_result` e é correlacionado pelo request_id.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.observability import correlation_scope
from utils.errors import SerialLinkError

if TYPE_CHECKING:
    from app.services import ModemControlService

logger = logging.getLogger(__name__)

router = APIRouter()


class SendSmsRequest(BaseModel):
    """Corpo de POST /sms."""

    to: str
    content: str


class FlymodeRequest(BaseModel):
    """Corpo de POST /flymode."""

    enabled: bool


def _control(request: Request) -> ModemControlService:
    return request.app.state.bridge.control


def _link_unavailable(exc: SerialLinkError) -> JSONResponse:
    return JSONResponse(
        content={"error": str(exc)},
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


@router.post("/sms", response_model=None)
async def send_sms(body: SendSmsRequest, request: Request) -> JSONResponse | dict[str, Any]:
    """Envia SMS via módulo; 400 para campos vazios, 503 sem link."""
    with correlation_scope(request.headers.get("x-correlation-id")):
        try:
            request_id = await _control(request).send_sms(body.to, body.content)
        except ValueError as exc:
            return JSONResponse(
                content={"error": str(exc)},
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        except SerialLinkError as exc:
            logger.warning("serial_sms_send_failed", extra={"error": str(exc)})
            return _link_unavailable(exc)
        return {"message": "sent", "request_id": request_id}


@router.get("/status")
async def get_status(request: Request) -> dict[str, Any]:
    """Status em cache (sem consultar o módulo)."""
    return _control(request).get_status()


@router.post("/flymode", response_model=None)
async def set_flymode(body: FlymodeRequest, request: Request) -> JSONResponse | dict[str, Any]:
    with correlation_scope(request.headers.get("x-correlation-id")):
        control = _control(request)
        try:
            await control.set_flymode(body.enabled)
        except SerialLinkError as exc:
            logger.warning("serial_flymode_failed", extra={"error": str(exc)})
            return _link_unavailable(exc)
        control.request_status_refresh()
        return {}


@router.post("/reboot", response_model=None)
async def reboot(request: Request) -> JSONResponse | dict[str, Any]:
    with correlation_scope(request.headers.get("x-correlation-id")):
        control = _control(request)
        try:
            await control.reboot()
        except SerialLinkError as exc:
            logger.warning("serial_reboot_failed", extra={"error": str(exc)})
            return _link_unavailable(exc)
        control.request_status_refresh()
        return {}
