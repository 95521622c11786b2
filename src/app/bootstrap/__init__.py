"""Composition root do Modem Bridge.

Configura logging a partir de BaseSettings, valida as demais settings no
startup e expõe o core montado como singleton:

    from app.bootstrap import initialize_app, get_modem_bridge

    initialize_app()
    bridge = get_modem_bridge()
    bridge.handle_frame(decoded)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_notification_settings,
    get_store_settings,
    get_task_settings,
)

if TYPE_CHECKING:
    from app.bootstrap.dependencies import ModemBridge

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging (nível, formato e identidade vêm de BaseSettings)."""
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
        environment=settings.environment,
        json_format=settings.log_format == "json",
    )



def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em staging/production qualquer erro impede o boot (RuntimeError);
    em development apenas gera um warning.
    """
    environment = get_base_settings().environment
    errors: list[str] = []
    sections = (
        ("base", get_base_settings()),
        ("stores", get_store_settings()),
        ("tasks", get_task_settings()),
        ("notifications", get_notification_settings()),
    )
    for section, settings in sections:
        errors.extend(f"{section}: {error}" for error in settings.validate())

    if not errors:
        logger.info("settings_validated")
        return

    logger.warning(
        "settings_validation_failed",
        extra={"error_count": len(errors), "errors": errors},
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


@lru_cache(maxsize=1)
def get_modem_bridge() -> ModemBridge:
    """Core montado sem link serial; a camada serial anexa o seu via create_modem_bridge."""
    from app.bootstrap.dependencies import create_modem_bridge

    return create_modem_bridge()
