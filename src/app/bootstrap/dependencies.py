"""Wiring do core: stores, canais, handlers, router e plano de controle."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_async_redis_client
from app.coordinators.serial import (
    CallHandlers,
    DeviceStatusCache,
    IncomingSmsHandler,
    MessageRouter,
    NotificationDispatcher,
    SendResultCorrelator,
    SystemHandlers,
    build_router,
)
from app.infra.notifications import create_channel_senders
from app.infra.stores import (
    MemoryChannelConfigStore,
    MemoryTextMessageStore,
    RedisChannelConfigStore,
    RedisTextMessageStore,
)
from app.protocols.models import load_channel_configs
from app.runtime import BackgroundTaskRunner
from app.services import ModemControlService
from config.settings import (
    get_base_settings,
    get_notification_settings,
    get_store_settings,
    get_task_settings,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, Mapping

    from app.protocols.channel_config_store import ChannelConfigStoreProtocol
    from app.protocols.channel_sender import ChannelSenderProtocol
    from app.protocols.message_store import TextMessageStoreProtocol
    from app.protocols.models import DecodedMessage
    from app.protocols.serial_link import SerialLinkProtocol
    from app.protocols.task_status import TaskStatusUpdater
    from config.settings import StoreSettings

logger = logging.getLogger(__name__)


@dataclass
class ModemBridge:
    """Componentes montados do core, prontos para receber frames."""

    router: MessageRouter
    control: ModemControlService
    correlator: SendResultCorrelator
    notifier: NotificationDispatcher
    tasks: BackgroundTaskRunner
    message_store: TextMessageStoreProtocol
    channel_store: ChannelConfigStoreProtocol
    status_cache: DeviceStatusCache

    def handle_frame(self, message: DecodedMessage) -> None:
        """Ponto de entrada da camada serial (um frame por chamada)."""
        self.router.route(message)

    async def consume(self, messages: AsyncIterable[DecodedMessage]) -> int:
        return await self.router.consume(messages)

    def set_task_status_updater(self, updater: TaskStatusUpdater | None) -> None:
        self.correlator.set_status_updater(updater)

    async def shutdown(self, timeout_seconds: float | None = None) -> None:
        if timeout_seconds is None:
            timeout_seconds = get_task_settings().drain_timeout_seconds
        await self.tasks.drain(timeout_seconds=timeout_seconds)


def create_message_store(settings: StoreSettings | None = None) -> TextMessageStoreProtocol:
    """Cria store de registros de SMS conforme MESSAGE_STORE_BACKEND."""
    settings = settings or get_store_settings()
    if settings.backend == "redis":
        store = RedisTextMessageStore(
            create_async_redis_client(settings.redis_url),
            key_prefix=settings.key_prefix,
            index_limit=settings.recent_index_limit,
        )
        logger.info("message_store_created", extra={"backend": "redis"})
        return store

    if settings.backend == "memory":
        base_settings = get_base_settings()
        if not base_settings.is_development:
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory"},
            )
        logger.info("message_store_created", extra={"backend": "memory"})
        return MemoryTextMessageStore()

    msg = f"MESSAGE_STORE_BACKEND inválido: {settings.backend}"
    raise ValueError(msg)


def create_channel_config_store(
    settings: StoreSettings | None = None,
) -> ChannelConfigStoreProtocol:
    """Cria store de canais; em memória, semeado por NOTIFICATION_CHANNELS."""
    settings = settings or get_store_settings()
    if settings.backend == "redis":
        return RedisChannelConfigStore(
            create_async_redis_client(settings.redis_url),
            key_prefix=settings.key_prefix,
        )
    if settings.backend == "memory":
        seed = load_channel_configs(
            get_notification_settings().seed_channels, source="NOTIFICATION_CHANNELS"
        )
        return MemoryChannelConfigStore(seed)

    msg = f"MESSAGE_STORE_BACKEND inválido: {settings.backend}"
    raise ValueError(msg)


def create_modem_bridge(
    *,
    link: SerialLinkProtocol | None = None,
    message_store: TextMessageStoreProtocol | None = None,
    channel_store: ChannelConfigStoreProtocol | None = None,
    senders: Mapping[str, ChannelSenderProtocol] | None = None,
    tasks: BackgroundTaskRunner | None = None,
    status_updater: TaskStatusUpdater | None = None,
) -> ModemBridge:
    """Monta o core. Qualquer dependência pode ser injetada (testes)."""
    notification_settings = get_notification_settings()
    tasks = tasks or BackgroundTaskRunner(get_task_settings().max_concurrency)
    message_store = message_store or create_message_store()
    channel_store = channel_store or create_channel_config_store()
    if senders is None:
        senders = create_channel_senders(
            timeout_seconds=notification_settings.http_timeout_seconds,
        )

    status_cache = DeviceStatusCache()
    notifier = NotificationDispatcher(
        channel_store=channel_store,
        senders=senders,
        tasks=tasks,
    )
    control = ModemControlService(
        link=link,
        message_store=message_store,
        status_cache=status_cache,
        tasks=tasks,
    )
    correlator = SendResultCorrelator(
        message_store=message_store,
        notifier=notifier,
        tasks=tasks,
        status_updater=status_updater,
        system_sender=notification_settings.system_sender,
    )
    system = SystemHandlers(
        status_cache=status_cache,
        notifier=notifier,
        tasks=tasks,
        request_status=control.request_status,
        system_sender=notification_settings.system_sender,
    )
    router = build_router(
        incoming_sms=IncomingSmsHandler(
            message_store=message_store,
            notifier=notifier,
            tasks=tasks,
        ),
        correlator=correlator,
        calls=CallHandlers(notifier=notifier),
        system=system,
    )
    logger.info("modem_bridge_created", extra={"message_types": len(router.message_types)})
    return ModemBridge(
        router=router,
        control=control,
        correlator=correlator,
        notifier=notifier,
        tasks=tasks,
        message_store=message_store,
        channel_store=channel_store,
        status_cache=status_cache,
    )
