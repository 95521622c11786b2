"""Correlação do resultado assíncrono de envio (`sms_send_result`).

O comando `send_sms` carrega um request_id que também é o id do registro
de saída. Quando o módulo responde, o registro é localizado por esse id
e recebe o status final. Aplicar o mesmo resultado duas vezes deixa o
registro no mesmo estado.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from pydantic import ValidationError

from app.domain.modem_events import SmsSendResult, decode_payload
from app.protocols.models import NotificationMessage

if TYPE_CHECKING:
    from app.protocols.message_store import TextMessageStoreProtocol
    from app.protocols.models import DecodedMessage, MessageStatus, TaskStatus
    from app.protocols.task_status import TaskStatusUpdater
    from app.runtime.background_tasks import BackgroundTaskRunner

    from .notifications import NotificationDispatcher

logger = logging.getLogger(__name__)

SEND_FAILED_TEMPLATE = "send failed: {to}"


def resolve_status(success: bool) -> tuple[MessageStatus, TaskStatus]:
    """Mapeia o resultado do módulo para (status do registro, status da tarefa)."""
    if success:
        return "sent", "success"
    return "failed", "failed"


class SendResultCorrelator:
    """Aplica `sms_send_result` ao registro de saída correspondente.

    Args:
        message_store: Store dos registros de SMS
        notifier: Fan-out usado para avisar falhas de envio
        tasks: Executor das tasks destacadas
        status_updater: Callback opcional (request_id, task_status)
        system_sender: Remetente das notificações geradas pelo sistema
    """

    def __init__(
        self,
        *,
        message_store: TextMessageStoreProtocol,
        notifier: NotificationDispatcher,
        tasks: BackgroundTaskRunner,
        status_updater: TaskStatusUpdater | None = None,
        system_sender: str = "system",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store = message_store
        self._notifier = notifier
        self._tasks = tasks
        self._status_updater = status_updater
        self._system_sender = system_sender
        self._clock = clock

    def set_status_updater(self, status_updater: TaskStatusUpdater | None) -> None:
        """Registra (ou remove) o callback de status do agendador."""
        self._status_updater = status_updater

    def __call__(self, message: DecodedMessage) -> None:
        try:
            result = decode_payload(SmsSendResult, message.payload)
        except ValidationError as exc:
            logger.error(
                "sms_send_result_decode_failed",
                extra={"error_count": exc.error_count(), "raw": message.raw},
            )
            return

        if not result.request_id:
            logger.warning(
                "sms_send_result_missing_request_id",
                extra={"payload": dict(message.payload)},
            )
            return

        status, task_status = resolve_status(result.success)
        if result.success:
            logger.info(
                "sms_send_succeeded",
                extra={"to": result.to, "request_id": result.request_id},
            )
        else:
            logger.warning(
                "sms_send_failed",
                extra={"to": result.to, "request_id": result.request_id},
            )
            self._notifier.notify(
                NotificationMessage(
                    kind="sms",
                    sender=self._system_sender,
                    content=SEND_FAILED_TEMPLATE.format(to=result.to),
                    timestamp=int(self._clock()),
                )
            )

        self._tasks.schedule(
            f"sms_send_result:{result.request_id}",
            self.apply(result.request_id, status, task_status),
        )

    async def apply(
        self,
        request_id: str,
        status: MessageStatus,
        task_status: TaskStatus,
    ) -> None:
        """Atualiza o registro e propaga o status; erros são só logados."""
        try:
            updated = await self._store.update_status(request_id, status)
        except Exception as exc:
            logger.error(
                "sms_status_update_failed",
                extra={
                    "request_id": request_id,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
        else:
            if not updated:
                logger.warning("sms_status_record_not_found", extra={"request_id": request_id})

        await self._update_task_status(request_id, task_status)

    async def _update_task_status(self, request_id: str, task_status: TaskStatus) -> None:
        if self._status_updater is None:
            return
        try:
            await self._status_updater(request_id, task_status)
        except Exception as exc:
            logger.error(
                "scheduled_task_status_update_failed",
                extra={
                    "request_id": request_id,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
