"""Observabilidade: correlation_id, métricas e sink de eventos.

Uso:
    from app.observability import get_correlation_id, record_latency
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.events import LoggingEventSink
from app.observability.metrics import elapsed_ms, record_latency, record_notification

__all__ = [
    "CORRELATION_HEADER",
    "LoggingEventSink",
    "elapsed_ms",
    "generate_correlation_id",
    "get_correlation_id",
    "record_latency",
    "record_notification",
    "reset_correlation_id",
    "set_correlation_id",
]
