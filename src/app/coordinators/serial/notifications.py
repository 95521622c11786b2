"""Fan-out de notificações para os canais habilitados.

As configurações de canal são relidas a cada envio (sem cache). Cada
canal é tentado de forma independente: a falha de um é logada com o tipo
do canal e não impede os demais. Tipos de canal sem sender registrado são
ignorados. Não há retry.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.domain.notification_text import render_notification_text
from app.observability.metrics import record_latency, record_notification_result

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.channel_config_store import ChannelConfigStoreProtocol
    from app.protocols.channel_sender import ChannelSenderProtocol
    from app.protocols.models import NotificationMessage
    from app.runtime.background_tasks import BackgroundTaskRunner

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Entrega uma NotificationMessage a todos os canais habilitados.

    Args:
        channel_store: Fonte das configurações de canal
        senders: Tabela channel_type -> sender
        tasks: Executor das tasks destacadas usadas por `notify`
    """

    def __init__(
        self,
        *,
        channel_store: ChannelConfigStoreProtocol,
        senders: Mapping[str, ChannelSenderProtocol],
        tasks: BackgroundTaskRunner,
    ) -> None:
        self._channel_store = channel_store
        self._senders = senders
        self._tasks = tasks

    def notify(self, message: NotificationMessage) -> None:
        """Agenda `dispatch` como task destacada (fire-and-forget)."""
        self._tasks.schedule(f"notify:{message.kind}", self.dispatch(message))

    async def dispatch(self, message: NotificationMessage) -> None:
        """Envia para cada canal habilitado; nunca levanta exceção."""
        started_at = time.perf_counter()
        try:
            channels = await self._channel_store.list_channels()
        except Exception as exc:
            logger.error(
                "notification_channels_load_failed",
                extra={"error_type": type(exc).__name__, "error": str(exc)},
            )
            return

        text = render_notification_text(message)
        for channel in channels:
            if not channel.enabled:
                continue
            sender = self._senders.get(channel.type)
            if sender is None:
                continue

            payload = message if sender.wants_structured else text
            channel_started_at = time.perf_counter()
            try:
                await sender.send(dict(channel.settings), payload)
            except Exception as exc:
                logger.error(
                    "notification_send_failed",
                    extra={
                        "channel_type": channel.type,
                        "notification_kind": message.kind,
                        "error_type": type(exc).__name__,
                        "error": str(exc),
                    },
                )
                record_notification_result(
                    channel.type,
                    success=False,
                    latency_ms=(time.perf_counter() - channel_started_at) * 1000,
                )
                continue

            logger.info(
                "notification_sent",
                extra={"channel_type": channel.type, "notification_kind": message.kind},
            )
            record_notification_result(
                channel.type,
                success=True,
                latency_ms=(time.perf_counter() - channel_started_at) * 1000,
            )

        record_latency("notifications", "dispatch", (time.perf_counter() - started_at) * 1000)
