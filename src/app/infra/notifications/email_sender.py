"""Sender de email via SMTP.

smtplib é bloqueante; o envio roda em thread (`asyncio.to_thread`) para
não ocupar o event loop.
"""

from __future__ import annotations

import asyncio
import smtplib
import ssl
from email.message import EmailMessage
from typing import TYPE_CHECKING, Any, Literal

from app.domain.notification_text import (
    render_notification_subject,
    render_notification_text,
)
from utils.errors import ChannelConfigError, ChannelSendError

from ._settings import optional_setting, require_setting

if TYPE_CHECKING:
    from app.protocols.models import NotificationMessage

TlsMode = Literal["ssl", "starttls", "plain"]

DEFAULT_SMTP_PORTS: dict[str, int] = {"ssl": 465, "starttls": 587, "plain": 25}


def _recipients(settings: dict[str, Any]) -> list[str]:
    raw = settings.get("to") or settings.get("recipients")
    if isinstance(raw, str):
        recipients = [item.strip() for item in raw.split(",")]
    elif isinstance(raw, (list, tuple)):
        recipients = [str(item).strip() for item in raw]
    else:
        recipients = []
    recipients = [item for item in recipients if item]
    if not recipients:
        raise ChannelConfigError("email: campo obrigatório ausente (to)")
    return recipients


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    return bool(value)


def _tls_mode(settings: dict[str, Any]) -> TlsMode:
    """SMTP_SSL (padrão), SMTP + STARTTLS ou SMTP sem TLS.

    `starttls` implica conexão SMTP simples; pedir também `use_ssl`
    explicitamente é erro de configuração.
    """
    use_ssl = settings.get("use_ssl")
    if _as_bool(settings.get("starttls"), default=False):
        if use_ssl is not None and _as_bool(use_ssl, default=True):
            raise ChannelConfigError("email: use_ssl e starttls são mutuamente exclusivos")
        return "starttls"
    return "ssl" if _as_bool(use_ssl, default=True) else "plain"


class EmailSender:
    """Settings: `smtp_host`, `smtp_port`, `username`, `password`, `from`,
    `to` (str separada por vírgula ou lista), `use_ssl` (padrão True),
    `starttls` (padrão False, exclui `use_ssl`), `timeout_seconds`.
    """

    channel_type = "email"
    wants_structured = True

    def __init__(self, smtp_factory: Any = None, smtp_ssl_factory: Any = None) -> None:
        self._smtp_factory = smtp_factory or smtplib.SMTP
        self._smtp_ssl_factory = smtp_ssl_factory or smtplib.SMTP_SSL

    async def send(self, settings: dict[str, Any], message: str | NotificationMessage) -> None:
        host = require_setting(self.channel_type, settings, "smtp_host", "host")
        mode = _tls_mode(settings)
        email = self._build_email(settings, message)
        try:
            await asyncio.to_thread(self._deliver, host, mode, settings, email)
        except (smtplib.SMTPException, OSError) as exc:
            raise ChannelSendError(self.channel_type, f"smtp_error: {type(exc).__name__}") from exc

    def _build_email(
        self,
        settings: dict[str, Any],
        message: str | NotificationMessage,
    ) -> EmailMessage:
        sender = optional_setting(settings, "from") or optional_setting(settings, "username")
        if not sender:
            raise ChannelConfigError("email: campo obrigatório ausente (from)")

        email = EmailMessage()
        email["From"] = sender
        email["To"] = ", ".join(_recipients(settings))
        if isinstance(message, str):
            email["Subject"] = "Notificação"
            email.set_content(message)
        else:
            email["Subject"] = render_notification_subject(message)
            email.set_content(render_notification_text(message))
        return email

    def _deliver(
        self,
        host: str,
        mode: TlsMode,
        settings: dict[str, Any],
        email: EmailMessage,
    ) -> None:
        port = int(settings.get("smtp_port") or settings.get("port") or DEFAULT_SMTP_PORTS[mode])
        timeout = float(settings.get("timeout_seconds") or 10.0)
        username = optional_setting(settings, "username")
        password = optional_setting(settings, "password")

        if mode == "ssl":
            client = self._smtp_ssl_factory(
                host, port, timeout=timeout, context=ssl.create_default_context()
            )
        else:
            client = self._smtp_factory(host, port, timeout=timeout)
        with client:
            if mode == "starttls":
                client.starttls(context=ssl.create_default_context())
            if username and password:
                client.login(username, password)
            client.send_message(email)
