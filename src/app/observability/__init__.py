"""Observabilidade: correlation_id e métricas emitidas como logs.

Uso:
    from app.observability import correlation_scope, get_correlation_id
    from app.observability import record_latency, record_notification_result
"""

from app.observability.correlation import (
    correlation_scope,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    record_latency,
    record_message_routed,
    record_notification_result,
)

__all__ = [
    "correlation_scope",
    "get_correlation_id",
    "record_latency",
    "record_message_routed",
    "record_notification_result",
    "reset_correlation_id",
    "set_correlation_id",
]
