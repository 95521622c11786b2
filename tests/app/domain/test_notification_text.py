"""Testes da renderização textual das notificações."""

from __future__ import annotations

from app.domain.notification_text import (
    SEPARATOR,
    format_timestamp,
    render_notification_subject,
    render_notification_text,
)
from app.protocols.models import NotificationMessage


def test_render_sms_block() -> None:
    message = NotificationMessage(kind="sms", sender="+86138", content="olá", timestamp=1700000000)

    text = render_notification_text(message)

    assert text == f"olá\n{SEPARATOR}\nDe: +86138\n{format_timestamp(1700000000)}\n"


def test_render_call_with_empty_content() -> None:
    message = NotificationMessage(kind="call", sender="+86137", content="", timestamp=0)

    assert render_notification_text(message).startswith("Chamada recebida\n----\n")


def test_subject_by_kind() -> None:
    message = NotificationMessage(kind="system", sender="system", content="x", timestamp=0)

    assert render_notification_subject(message) == "Aviso do sistema: system"
