"""Settings dos stores de mensagens e de canais.

Backend `memory` serve para desenvolvimento e testes; `redis` é o padrão
em staging/production.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from config.settings.base import get_base_settings

StoreBackend = Literal["memory", "redis"]

_VALID_BACKENDS = ("memory", "redis")


@dataclass(frozen=True)
class StoreSettings:
    """Configurações de persistência.

    Attributes:
        backend: Backend dos stores (memory|redis)
        redis_url: URL de conexão Redis (obrigatória se backend=redis)
        key_prefix: Prefixo de namespace das chaves Redis
        recent_index_limit: Máximo de ids mantidos no índice por data
    """

    backend: StoreBackend = "memory"
    redis_url: str = ""
    key_prefix: str = "modem_bridge:"
    recent_index_limit: int = 10000

    def validate(self) -> list[str]:
        """Valida configurações de persistência."""
        errors: list[str] = []
        if self.backend not in _VALID_BACKENDS:
            errors.append(f"MESSAGE_STORE_BACKEND inválido: {self.backend}")
        if self.backend == "redis" and not self.redis_url:
            errors.append("REDIS_URL não configurado para backend redis")
        if self.recent_index_limit <= 0:
            errors.append("MESSAGE_STORE_INDEX_LIMIT deve ser positivo")
        return errors


def _default_backend_for_env(environment: str) -> str:
    return "redis" if environment in ("staging", "production") else "memory"


def _load_store_from_env() -> StoreSettings:
    """Carrega StoreSettings de variáveis de ambiente."""
    environment = get_base_settings().environment
    backend = os.getenv("MESSAGE_STORE_BACKEND", _default_backend_for_env(environment)).lower()
    return StoreSettings(
        backend=backend,  # type: ignore[arg-type]
        redis_url=os.getenv("REDIS_URL", ""),
        key_prefix=os.getenv("REDIS_KEY_PREFIX", "modem_bridge:"),
        recent_index_limit=int(os.getenv("MESSAGE_STORE_INDEX_LIMIT", "10000")),
    )


@lru_cache(maxsize=1)
def get_store_settings() -> StoreSettings:
    """Retorna instância cacheada de StoreSettings."""
    return _load_store_from_env()
