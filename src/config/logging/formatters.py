"""Formatter JSON dos logs do gateway.

Campos obrigatórios em todo record: asctime, level, logger, message,
correlation_id e service.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável para leitura humana no terminal
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "api.routes.stripe.webhook",
         "message": "webhook_received", "correlation_id": "...", "service": "edge-gateway"}
    """
    format_string = " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
