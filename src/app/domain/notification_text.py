"""Renderização textual de NotificationMessage para canais de chat."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.models import NotificationMessage

SEPARATOR = "----"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_EMPTY_CONTENT_BY_KIND = {
    "call": "Chamada recebida",
}

_TITLE_BY_KIND = {
    "sms": "Novo SMS",
    "call": "Chamada recebida",
    "system": "Aviso do sistema",
}


def format_timestamp(timestamp: int) -> str:
    """Epoch (segundos) para horário local legível."""
    return datetime.fromtimestamp(timestamp).strftime(TIMESTAMP_FORMAT)


def render_notification_text(message: NotificationMessage) -> str:
    """Bloco único de texto: conteúdo, separador, remetente e horário."""
    content = message.content or _EMPTY_CONTENT_BY_KIND.get(message.kind, "")
    return (
        f"{content}\n"
        f"{SEPARATOR}\n"
        f"De: {message.sender}\n"
        f"{format_timestamp(message.timestamp)}\n"
    )


def render_notification_subject(message: NotificationMessage) -> str:
    """Assunto curto (usado pelo canal de email)."""
    title = _TITLE_BY_KIND.get(message.kind, "Notificação")
    return f"{title}: {message.sender}"
