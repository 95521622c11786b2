"""Settings base do Modem Bridge: ambiente, identidade e logging."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]
LogFormat = Literal["json", "text"]

_ENVIRONMENT_ALIASES = {
    "prod": "production",
    "production": "production",
    "stage": "staging",
    "staging": "staging",
}
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BaseSettings:
    """Configurações comuns a todos os componentes.

    Attributes:
        environment: development|staging|production
        service_name: Nome do serviço nos logs (campo `service`)
        debug: Modo debug
        log_level: Nível do root logger
        log_format: json (padrão) ou text (depuração local)
    """

    environment: Environment = "development"
    service_name: str = "modem_bridge"
    debug: bool = False
    log_level: str = "INFO"
    log_format: LogFormat = "json"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_level.upper() not in _VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        if self.log_format not in ("json", "text"):
            errors.append(f"LOG_FORMAT inválido: {self.log_format}")
        if self.log_format == "text" and not self.is_development:
            errors.append("LOG_FORMAT=text só é permitido em development")
        return errors


def _load_base_from_env() -> BaseSettings:
    environment = os.getenv("ENVIRONMENT", "development").lower()
    return BaseSettings(
        environment=_ENVIRONMENT_ALIASES.get(environment, "development"),  # type: ignore[arg-type]
        service_name=os.getenv("SERVICE_NAME", "modem_bridge"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_format=os.getenv("LOG_FORMAT", "json").lower(),  # type: ignore[arg-type]
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
