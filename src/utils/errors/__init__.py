"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ChannelConfigError,
    ChannelSendError,
    InfrastructureError,
    RedisConnectionError,
    SerialLinkError,
    StoreUnavailableError,
)

__all__ = [
    "ChannelConfigError",
    "ChannelSendError",
    "InfrastructureError",
    "RedisConnectionError",
    "SerialLinkError",
    "StoreUnavailableError",
]
