"""Handlers de sistema: prontidão, heartbeat, status, SIM e alertas.

Mantêm o DeviceStatusCache atualizado. Só `sim_event` gera notificação
(kind=system); os demais são informativos.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from pydantic import ValidationError

from app.domain.modem_events import (
    CommandResponse,
    ModuleAlert,
    PhoneNumberResponse,
    SimEvent,
    SystemReady,
    decode_payload,
)
from app.protocols.models import NotificationMessage

if TYPE_CHECKING:
    from pydantic import BaseModel

    from app.protocols.models import DecodedMessage
    from app.runtime.background_tasks import BackgroundTaskRunner

    from .device_status import DeviceStatusCache
    from .notifications import NotificationDispatcher

logger = logging.getLogger(__name__)

StatusRequester = Callable[[], Awaitable[None]]


class SystemHandlers:
    """Handlers dos frames de sistema do módulo.

    Args:
        status_cache: Cache do estado do módulo
        notifier: Fan-out para eventos de SIM
        tasks: Executor das tasks destacadas
        request_status: Coroutine opcional que pede `get_status` ao módulo
        system_sender: Remetente das notificações de sistema
    """

    def __init__(
        self,
        *,
        status_cache: DeviceStatusCache,
        notifier: NotificationDispatcher,
        tasks: BackgroundTaskRunner,
        request_status: StatusRequester | None = None,
        system_sender: str = "system",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._cache = status_cache
        self._notifier = notifier
        self._tasks = tasks
        self._request_status = request_status
        self._system_sender = system_sender
        self._clock = clock

    def _decode(self, model: type[BaseModel], message: DecodedMessage) -> BaseModel | None:
        try:
            return decode_payload(model, message.payload)
        except ValidationError as exc:
            logger.error(
                "system_message_decode_failed",
                extra={
                    "message_type": message.type,
                    "error_count": exc.error_count(),
                    "raw": message.raw,
                },
            )
            return None

    def handle_system_ready(self, message: DecodedMessage) -> None:
        ready = self._decode(SystemReady, message)
        if ready is None:
            return
        self._cache.mark_ready(ready.model_dump())
        logger.info("modem_system_ready", extra={"version": ready.version})
        if self._request_status is not None:
            self._tasks.schedule("request_status:system_ready", self._request_status())

    def handle_heartbeat(self, message: DecodedMessage) -> None:
        self._cache.record_heartbeat()
        logger.debug("modem_heartbeat")

    def handle_status_response(self, message: DecodedMessage) -> None:
        self._cache.update_status(dict(message.payload))
        logger.debug("modem_status_updated", extra={"fields": sorted(message.payload)})

    def handle_cellular_control_response(self, message: DecodedMessage) -> None:
        self._log_command_response("cellular_control_response", message)

    def handle_command_response(self, message: DecodedMessage) -> None:
        self._log_command_response("cmd_response", message)

    def _log_command_response(self, event: str, message: DecodedMessage) -> None:
        response = self._decode(CommandResponse, message)
        if response is None:
            return
        extra = {"action": response.action, "detail": response.message}
        if response.success:
            logger.info(f"{event}_ok", extra=extra)
        else:
            logger.warning(f"{event}_failed", extra=extra)

    def handle_phone_number_response(self, message: DecodedMessage) -> None:
        response = self._decode(PhoneNumberResponse, message)
        if response is None:
            return
        self._cache.set_phone_number(response.phone_number)
        logger.info("modem_phone_number", extra={"phone_number": response.phone_number})

    def handle_sim_event(self, message: DecodedMessage) -> None:
        event = self._decode(SimEvent, message)
        if event is None:
            return
        description = event.state or event.event
        self._cache.set_sim_state(description)
        logger.warning("modem_sim_event", extra={"event": event.event, "state": event.state})
        self._notifier.notify(
            NotificationMessage(
                kind="system",
                sender=self._system_sender,
                content=f"SIM event: {description}",
                timestamp=int(self._clock()),
            )
        )

    def handle_warning(self, message: DecodedMessage) -> None:
        alert = self._decode(ModuleAlert, message)
        if alert is None:
            return
        logger.warning("modem_warning", extra={"alert": alert.message, "code": alert.code})

    def handle_error(self, message: DecodedMessage) -> None:
        alert = self._decode(ModuleAlert, message)
        if alert is None:
            return
        logger.error("modem_error", extra={"alert": alert.message, "code": alert.code})
