"""Settings do executor de tasks em background."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class TaskSettings:
    """Configurações das tasks destacadas (persistência e notificações).

    Attributes:
        max_concurrency: Limite de tasks executando ao mesmo tempo
        drain_timeout_seconds: Espera máxima por tasks pendentes no shutdown
    """

    max_concurrency: int = 100
    drain_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        """Valida limites do executor."""
        errors: list[str] = []
        if self.max_concurrency <= 0:
            errors.append("BACKGROUND_MAX_CONCURRENCY deve ser positivo")
        if self.drain_timeout_seconds < 0:
            errors.append("BACKGROUND_DRAIN_TIMEOUT_SECONDS não pode ser negativo")
        return errors


def _load_tasks_from_env() -> TaskSettings:
    """Carrega TaskSettings de variáveis de ambiente."""
    return TaskSettings(
        max_concurrency=int(os.getenv("BACKGROUND_MAX_CONCURRENCY", "100")),
        drain_timeout_seconds=float(os.getenv("BACKGROUND_DRAIN_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_task_settings() -> TaskSettings:
    """Retorna instância cacheada de TaskSettings."""
    return _load_tasks_from_env()
