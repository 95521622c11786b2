"""Sender de webhook genérico: POST com a notificação estruturada."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.notification_text import render_notification_text
from utils.errors import ChannelSendError

from ._settings import require_setting
from .http_base import HttpError

if TYPE_CHECKING:
    from app.protocols.models import NotificationMessage

    from .http_base import HttpClient


class GenericWebhookSender:
    """Settings: `url`, `headers` (dict opcional).

    Corpo: `{"type", "from", "content", "timestamp", "text"}`; `text` é o
    bloco renderizado, útil para receptores que só exibem texto.
    """

    channel_type = "webhook"
    wants_structured = True

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    async def send(self, settings: dict[str, Any], message: str | NotificationMessage) -> None:
        url = require_setting(self.channel_type, settings, "url", "webhook")
        headers = settings.get("headers") or {}
        if isinstance(message, str):
            body: dict[str, Any] = {"text": message}
        else:
            body = {**message.to_dict(), "text": render_notification_text(message)}
        try:
            await self._http.post(
                url,
                json=body,
                headers={str(k): str(v) for k, v in dict(headers).items()},
            )
        except HttpError as exc:
            raise ChannelSendError(self.channel_type, str(exc)) from exc
