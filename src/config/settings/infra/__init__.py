"""Agregador de settings de infraestrutura."""

from __future__ import annotations

from config.settings.infra.stores import (
    StoreBackend,
    StoreSettings,
    get_store_settings,
)
from config.settings.infra.tasks import (
    TaskSettings,
    get_task_settings,
)

__all__ = [
    "StoreBackend",
    "StoreSettings",
    "TaskSettings",
    "get_store_settings",
    "get_task_settings",
]
