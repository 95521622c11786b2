"""Agregador de settings do Modem Bridge.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.infra import (
    StoreBackend,
    StoreSettings,
    TaskSettings,
    get_store_settings,
    get_task_settings,
)
from config.settings.notifications import (
    NotificationSettings,
    get_notification_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "NotificationSettings",
    "StoreBackend",
    "StoreSettings",
    "TaskSettings",
    "get_base_settings",
    "get_notification_settings",
    "get_store_settings",
    "get_task_settings",
]
