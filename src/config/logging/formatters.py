"""Formatters: JSON (padrão) e texto para depuração local."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Ordem dos campos no JSON; extras de cada chamada vêm depois
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
    "environment",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(correlation_id)s] %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON, ex:

        {"asctime": "...", "level": "INFO",
         "logger": "app.coordinators.serial.sms_handlers",
         "message": "incoming_sms_received", "correlation_id": "3f1c...",
         "service": "modem_bridge", "environment": "production",
         "sender": "+86138..."}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )


def create_text_formatter() -> logging.Formatter:
    """Uma linha por evento, sem os campos `extra`."""
    return logging.Formatter(TEXT_FORMAT)
