"""Logging estruturado do Modem Bridge (python-json-logger).

Uso:
    from config.logging import configure_logging, get_logger
    configure_logging(level="INFO", service_name="modem_bridge")
    logger = get_logger(__name__)

Eventos são nomes snake_case; dados vão em `extra={...}`.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import ContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "ContextFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
]
