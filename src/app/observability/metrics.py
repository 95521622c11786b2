"""Métricas como logs estruturados (evento `metric_*`).

O coletor de logs agrega por `metric_type`; correlation_id e service são
injetados pelo filter de logging, não passam por aqui.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def _emit(event: str, level: int, **fields: Any) -> None:
    logger.log(level, event, extra=fields)


def record_latency(component: str, operation: str, latency_ms: float) -> None:
    """Latência de uma operação, ex: record_latency("notifications", "dispatch", 12.3)."""
    _emit(
        "metric_latency",
        logging.INFO,
        metric_type="latency",
        component=component,
        operation=operation,
        latency_ms=round(latency_ms, 2),
    )


def record_message_routed(message_type: str, *, handled: bool) -> None:
    # DEBUG: um evento por frame, inclusive heartbeats
    _emit(
        "metric_message_routed",
        logging.DEBUG,
        metric_type="counter",
        component="serial_router",
        message_type=message_type,
        handled=handled,
    )


def record_notification_result(channel_type: str, *, success: bool, latency_ms: float) -> None:
    _emit(
        "metric_notification",
        logging.INFO,
        metric_type="notification",
        component="notifications",
        channel_type=channel_type,
        success=success,
        latency_ms=round(latency_ms, 2),
    )
