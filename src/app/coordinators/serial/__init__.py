"""Coordenação dos frames vindos do link serial."""

from .call_handlers import CallHandlers
from .correlator import SendResultCorrelator, resolve_status
from .device_status import DeviceStatusCache
from .handler_table import MESSAGE_TYPES, build_registrations, build_router
from .notifications import NotificationDispatcher
from .router import MessageHandler, MessageRouter
from .sms_handlers import IncomingSmsHandler
from .system_handlers import SystemHandlers

__all__ = [
    "MESSAGE_TYPES",
    "CallHandlers",
    "DeviceStatusCache",
    "IncomingSmsHandler",
    "MessageHandler",
    "MessageRouter",
    "NotificationDispatcher",
    "SendResultCorrelator",
    "SystemHandlers",
    "build_registrations",
    "build_router",
    "resolve_status",
]
