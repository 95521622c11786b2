"""Senders de webhooks de chat: DingTalk, WeCom e Feishu.

Os três recebem o texto já renderizado pelo fan-out e enviam uma
mensagem do tipo texto. DingTalk e Feishu aceitam assinatura opcional
(HMAC-SHA256) quando o robô tem `secret` configurado.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import time
from typing import TYPE_CHECKING, Any

from utils.errors import ChannelSendError

from ._settings import optional_setting, require_setting
from .http_base import HttpError

if TYPE_CHECKING:
    import httpx

    from app.protocols.models import NotificationMessage

    from .http_base import HttpClient

logger = logging.getLogger(__name__)


def _hmac_sha256_b64(key: bytes, msg: bytes) -> str:
    digest = hmac.new(key, msg, digestmod=hashlib.sha256).digest()
    return base64.b64encode(digest).decode("utf-8")


def dingtalk_sign(secret: str, timestamp_ms: int) -> str:
    """Assinatura do robô DingTalk: HMAC(secret, "{ts}\\n{secret}")."""
    string_to_sign = f"{timestamp_ms}\n{secret}"
    return _hmac_sha256_b64(secret.encode("utf-8"), string_to_sign.encode("utf-8"))


def feishu_sign(secret: str, timestamp_s: int) -> str:
    """Assinatura do robô Feishu: HMAC("{ts}\\n{secret}", b"")."""
    string_to_sign = f"{timestamp_s}\n{secret}"
    return _hmac_sha256_b64(string_to_sign.encode("utf-8"), b"")


class _ChatWebhookSender:
    """Base comum: POST JSON e validação do código de retorno do provedor."""

    channel_type = ""
    wants_structured = False
    _error_code_fields: tuple[str, ...] = ("errcode",)

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    async def send(self, settings: dict[str, Any], message: str | NotificationMessage) -> None:
        text = message if isinstance(message, str) else message.content
        url, body, params = self._build_request(settings, text)
        try:
            response = await self._http.post(url, json=body, params=params)
        except HttpError as exc:
            raise ChannelSendError(self.channel_type, str(exc)) from exc
        self._check_response(response)

    def _build_request(
        self,
        settings: dict[str, Any],
        text: str,
    ) -> tuple[str, dict[str, Any], dict[str, str] | None]:
        raise NotImplementedError

    def _check_response(self, response: httpx.Response) -> None:
        try:
            data = response.json()
        except ValueError:
            return
        if not isinstance(data, dict):
            return
        for name in self._error_code_fields:
            code = data.get(name)
            if code not in (None, 0):
                detail = data.get("errmsg") or data.get("msg") or ""
                msg = f"provider_error code={code} {detail}".strip()
                raise ChannelSendError(self.channel_type, msg)


class DingTalkSender(_ChatWebhookSender):
    """Robô de grupo DingTalk. Settings: `webhook`, `secret` (opcional)."""

    channel_type = "dingtalk"

    def _build_request(
        self,
        settings: dict[str, Any],
        text: str,
    ) -> tuple[str, dict[str, Any], dict[str, str] | None]:
        url = require_setting(self.channel_type, settings, "webhook", "url")
        body = {"msgtype": "text", "text": {"content": text}}
        secret = optional_setting(settings, "secret")
        if not secret:
            return url, body, None
        timestamp_ms = int(time.time() * 1000)
        params = {"timestamp": str(timestamp_ms), "sign": dingtalk_sign(secret, timestamp_ms)}
        return url, body, params


class WeComSender(_ChatWebhookSender):
    """Robô de grupo WeCom (企业微信). Settings: `webhook`."""

    channel_type = "wecom"

    def _build_request(
        self,
        settings: dict[str, Any],
        text: str,
    ) -> tuple[str, dict[str, Any], dict[str, str] | None]:
        url = require_setting(self.channel_type, settings, "webhook", "url")
        return url, {"msgtype": "text", "text": {"content": text}}, None


class FeishuSender(_ChatWebhookSender):
    """Robô de grupo Feishu/Lark. Settings: `webhook`, `secret` (opcional)."""

    channel_type = "feishu"
    _error_code_fields = ("code", "StatusCode")

    def _build_request(
        self,
        settings: dict[str, Any],
        text: str,
    ) -> tuple[str, dict[str, Any], dict[str, str] | None]:
        url = require_setting(self.channel_type, settings, "webhook", "url")
        body: dict[str, Any] = {"msg_type": "text", "content": {"text": text}}
        secret = optional_setting(settings, "secret")
        if secret:
            timestamp_s = int(time.time())
            body["timestamp"] = str(timestamp_s)
            body["sign"] = feishu_sign(secret, timestamp_s)
        return url, body, None
