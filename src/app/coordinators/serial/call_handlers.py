"""Handlers de chamada (`incoming_call`, `call_disconnected`)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from app.domain.modem_events import CallDisconnected, IncomingCall, decode_payload
from app.protocols.models import NotificationMessage

if TYPE_CHECKING:
    from app.protocols.models import DecodedMessage

    from .notifications import NotificationDispatcher

logger = logging.getLogger(__name__)


class CallHandlers:
    """Chamada recebida gera notificação; fim de chamada só é logado."""

    def __init__(self, *, notifier: NotificationDispatcher) -> None:
        self._notifier = notifier

    def handle_incoming_call(self, message: DecodedMessage) -> None:
        try:
            call = decode_payload(IncomingCall, message.payload)
        except ValidationError as exc:
            logger.error(
                "incoming_call_decode_failed",
                extra={"error_count": exc.error_count(), "raw": message.raw},
            )
            return

        logger.info(
            "incoming_call_received",
            extra={"sender": call.sender, "timestamp": call.timestamp},
        )
        self._notifier.notify(
            NotificationMessage(
                kind="call",
                sender=call.sender,
                content="",
                timestamp=call.timestamp,
            )
        )

    def handle_call_disconnected(self, message: DecodedMessage) -> None:
        try:
            event = decode_payload(CallDisconnected, message.payload)
        except ValidationError as exc:
            logger.error(
                "call_disconnected_decode_failed",
                extra={"error_count": exc.error_count(), "raw": message.raw},
            )
            return

        logger.info("call_disconnected", extra={"timestamp": event.timestamp})
