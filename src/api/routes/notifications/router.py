"""Leitura e substituição das configurações de canal.

A mudança vale a partir do próximo fan-out (o store é relido a cada
notificação).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.protocols.models import KNOWN_CHANNEL_TYPES, ChannelConfig
from utils.errors import InfrastructureError

if TYPE_CHECKING:
    from app.protocols.channel_config_store import ChannelConfigStoreProtocol

logger = logging.getLogger(__name__)

router = APIRouter()


class ChannelConfigPayload(BaseModel):
    type: str
    enabled: bool = False
    settings: dict[str, Any] = Field(default_factory=dict)


class ChannelsPayload(BaseModel):
    channels: list[ChannelConfigPayload]


def _store(request: Request) -> ChannelConfigStoreProtocol:
    return request.app.state.bridge.channel_store


def _store_unavailable(exc: InfrastructureError) -> JSONResponse:
    logger.error(
        "notification_channels_store_failed",
        extra={"error_type": type(exc).__name__, "error": str(exc)},
    )
    return JSONResponse(
        content={"error": "store_unavailable"},
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


@router.get("/channels", response_model=None)
async def list_channels(request: Request) -> JSONResponse | dict[str, Any]:
    try:
        channels = await _store(request).list_channels()
    except InfrastructureError as exc:
        return _store_unavailable(exc)
    return {"channels": [channel.to_dict() for channel in channels]}


@router.put("/channels", response_model=None)
async def replace_channels(
    body: ChannelsPayload,
    request: Request,
) -> JSONResponse | dict[str, Any]:
    """Substitui todas as configurações; tipos desconhecidos retornam 400."""
    unknown = sorted({item.type for item in body.channels} - KNOWN_CHANNEL_TYPES)
    if unknown:
        return JSONResponse(
            content={"error": "unknown_channel_type", "types": unknown},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    channels = [
        ChannelConfig(type=item.type, enabled=item.enabled, settings=dict(item.settings))
        for item in body.channels
    ]
    try:
        await _store(request).replace_channels(channels)
    except InfrastructureError as exc:
        return _store_unavailable(exc)

    logger.info(
        "notification_channels_replaced",
        extra={
            "channel_count": len(channels),
            "enabled_count": sum(1 for channel in channels if channel.enabled),
        },
    )
    return {"channels": [channel.to_dict() for channel in channels]}
