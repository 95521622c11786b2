"""Protocolo de envio por canal de notificação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import NotificationMessage


class ChannelSenderProtocol(Protocol):
    """Contrato mínimo de um sender de canal.

    `wants_structured` indica se o sender recebe a NotificationMessage
    (webhook, email) em vez do texto renderizado (dingtalk, wecom, feishu).
    Falhas são sinalizadas por exceção.
    """

    channel_type: str
    wants_structured: bool

    async def send(
        self,
        settings: dict[str, Any],
        message: str | NotificationMessage,
    ) -> None: ...
