"""Filters de logging: contexto de request e mascaramento de credenciais."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Atributos de record que nunca saem em claro
SENSITIVE_FIELDS = frozenset(
    {
        "authorization",
        "x-api-key",
        "stripe-signature",
        "secret",
        "api_key",
        "webhook_secret",
    }
)
REDACTED = "[redacted]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Se correlation_id já foi passado via `extra`, preserva o valor.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class RedactSecretsFilter(logging.Filter):
    """Substitui valores de campos sensíveis passados via `extra`."""

    def filter(self, record: logging.LogRecord) -> bool:
        for name in SENSITIVE_FIELDS:
            if name in record.__dict__ and record.__dict__[name]:
                record.__dict__[name] = REDACTED
        return True
