"""Protocolos e contratos do core da aplicação."""

from .channel_config_store import ChannelConfigStoreProtocol
from .channel_sender import ChannelSenderProtocol
from .message_store import TextMessageStoreProtocol
from .models import (
    KNOWN_CHANNEL_TYPES,
    ChannelConfig,
    ChannelType,
    DecodedMessage,
    MessageDirection,
    MessageStatus,
    NotificationKind,
    NotificationMessage,
    TaskStatus,
    TextMessageRecord,
    load_channel_configs,
)
from .serial_link import SerialLinkProtocol
from .task_status import TaskStatusUpdater

__all__ = [
    "KNOWN_CHANNEL_TYPES",
    "ChannelConfig",
    "ChannelConfigStoreProtocol",
    "ChannelSenderProtocol",
    "ChannelType",
    "DecodedMessage",
    "MessageDirection",
    "MessageStatus",
    "NotificationKind",
    "NotificationMessage",
    "SerialLinkProtocol",
    "TaskStatus",
    "TaskStatusUpdater",
    "TextMessageRecord",
    "TextMessageStoreProtocol",
    "load_channel_configs",
]
