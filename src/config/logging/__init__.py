"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="edge-gateway")
    logger = get_logger(__name__)
    logger.info("checkout_session_created", extra={"session_id": "cs_123"})

Nunca logar secrets, assinaturas ou corpos brutos de webhook.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, RedactSecretsFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "RedactSecretsFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
