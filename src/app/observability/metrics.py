"""Métricas via structured logging.

As métricas saem como logs estruturados e são agregadas fora do processo.

Uso:
    start = time.perf_counter()
    # ... chamada ao upstream ...
    record_latency("stripe", "POST /checkout/sessions", elapsed_ms(start))
"""

from __future__ import annotations

import logging
import time

logger = logging.getLogger(__name__)


def elapsed_ms(started_at: float) -> float:
    """Milissegundos desde `started_at` (valor de time.perf_counter())."""
    return (time.perf_counter() - started_at) * 1000


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    status_code: int | None = None,
) -> None:
    """Registra latência de chamada a upstream.

    Args:
        component: Nome do componente (ex: "stripe", "gateway:ollama")
        operation: Operação executada (ex: "POST /checkout/sessions")
        latency_ms: Latência em milissegundos
        status_code: Status HTTP do upstream, quando houve resposta
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "status_code": status_code,
        },
    )


def record_notification(event_type: str, handled: bool) -> None:
    """Contador de notificações reconhecidas/ignoradas por tipo."""
    logger.info(
        "metric_notification",
        extra={
            "metric_type": "notification",
            "event_type": event_type,
            "handled": handled,
        },
    )
