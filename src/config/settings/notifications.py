"""Settings dos canais de notificação.

`NOTIFICATION_CHANNELS` aceita uma lista JSON no formato
`[{"type": "dingtalk", "enabled": true, "settings": {...}}]` e serve
como semente do store de canais em memória.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any


@dataclass(frozen=True)
class NotificationSettings:
    """Configurações de notificação.

    Attributes:
        seed_channels: Configurações iniciais de canal (lista de dicts)
        http_timeout_seconds: Timeout das chamadas HTTP dos canais
        system_sender: Remetente usado em notificações geradas pelo sistema
    """

    seed_channels: tuple[dict[str, Any], ...] = field(default_factory=tuple)
    http_timeout_seconds: float = 10.0
    system_sender: str = "system"

    def validate(self) -> list[str]:
        """Valida configurações de notificação."""
        errors: list[str] = []
        if self.http_timeout_seconds <= 0:
            errors.append("NOTIFICATION_HTTP_TIMEOUT_SECONDS deve ser positivo")
        for index, channel in enumerate(self.seed_channels):
            if not channel.get("type"):
                errors.append(f"NOTIFICATION_CHANNELS[{index}] sem campo type")
            if not isinstance(channel.get("enabled", False), bool):
                errors.append(f"NOTIFICATION_CHANNELS[{index}] enabled deve ser bool")
        return errors


def _parse_channels(raw: str) -> tuple[dict[str, Any], ...]:
    if not raw.strip():
        return ()
    data = json.loads(raw)
    if not isinstance(data, list):
        msg = "NOTIFICATION_CHANNELS deve ser uma lista JSON"
        raise ValueError(msg)
    return tuple(item for item in data if isinstance(item, dict))


def _load_notifications_from_env() -> NotificationSettings:
    """Carrega NotificationSettings de variáveis de ambiente."""
    return NotificationSettings(
        seed_channels=_parse_channels(os.getenv("NOTIFICATION_CHANNELS", "")),
        http_timeout_seconds=float(os.getenv("NOTIFICATION_HTTP_TIMEOUT_SECONDS", "10")),
        system_sender=os.getenv("NOTIFICATION_SYSTEM_SENDER", "system"),
    )


@lru_cache(maxsize=1)
def get_notification_settings() -> NotificationSettings:
    """Retorna instância cacheada de NotificationSettings."""
    return _load_notifications_from_env()
