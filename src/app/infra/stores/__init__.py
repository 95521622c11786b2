"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - memory_stores: Stores em memória para desenvolvimento/testes
    - redis_message_store: Registros de SMS no Redis
    - redis_channel_config_store: Configurações de canal no Redis
"""

from __future__ import annotations

from app.infra.stores.memory_stores import (
    MemoryChannelConfigStore,
    MemoryTextMessageStore,
)
from app.infra.stores.redis_channel_config_store import RedisChannelConfigStore
from app.infra.stores.redis_message_store import RedisTextMessageStore

__all__ = [
    "MemoryChannelConfigStore",
    "MemoryTextMessageStore",
    "RedisChannelConfigStore",
    "RedisTextMessageStore",
]
