"""Handler de SMS recebido (`incoming_sms`).

Persiste o registro e depois agenda a notificação. A persistência é
tentada antes do agendamento da notificação, mas o envio em si é
destacado e pode terminar antes ou depois de outros frames.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable
from typing import TYPE_CHECKING

from pydantic import ValidationError

from app.domain.modem_events import IncomingSms, decode_payload
from app.protocols.models import NotificationMessage, TextMessageRecord

if TYPE_CHECKING:
    from app.protocols.message_store import TextMessageStoreProtocol
    from app.protocols.models import DecodedMessage
    from app.runtime.background_tasks import BackgroundTaskRunner

    from .notifications import NotificationDispatcher

logger = logging.getLogger(__name__)


class IncomingSmsHandler:
    """Decodifica, persiste (direction=incoming, status=received) e notifica."""

    def __init__(
        self,
        *,
        message_store: TextMessageStoreProtocol,
        notifier: NotificationDispatcher,
        tasks: BackgroundTaskRunner,
        clock: Callable[[], float] = time.time,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ) -> None:
        self._store = message_store
        self._notifier = notifier
        self._tasks = tasks
        self._clock = clock
        self._id_factory = id_factory

    def __call__(self, message: DecodedMessage) -> None:
        try:
            sms = decode_payload(IncomingSms, message.payload)
        except ValidationError as exc:
            logger.error(
                "incoming_sms_decode_failed",
                extra={"error_count": exc.error_count(), "raw": message.raw},
            )
            return

        logger.info(
            "incoming_sms_received",
            extra={
                "sender": sms.sender,
                "content_length": len(sms.content),
                "timestamp": sms.timestamp,
            },
        )

        record = TextMessageRecord(
            id=self._id_factory(),
            sender=sms.sender,
            recipient="",
            content=sms.content,
            direction="incoming",
            status="received",
            created_at=int(self._clock() * 1000),
        )
        notification = NotificationMessage(
            kind="sms",
            sender=sms.sender,
            content=sms.content,
            timestamp=sms.timestamp,
        )
        self._tasks.schedule(
            f"incoming_sms:{record.id}",
            self._persist_then_notify(record, notification),
        )

    async def _persist_then_notify(
        self,
        record: TextMessageRecord,
        notification: NotificationMessage,
    ) -> None:
        try:
            await self._store.save(record)
        except Exception as exc:
            logger.error(
                "incoming_sms_save_failed",
                extra={
                    "record_id": record.id,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
        self._notifier.notify(notification)
