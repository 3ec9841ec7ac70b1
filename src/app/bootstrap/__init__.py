"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging e valida as
settings de cada serviço antes do primeiro request.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings("payments")
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_edge_router_settings,
    get_gateway_settings,
    get_stripe_settings,
)

SERVICES = ("payments", "gateway", "router")

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Nível e nome do serviço vêm de BaseSettings (LOG_LEVEL, SERVICE_NAME).
    Deve ser chamada uma vez no início do processo.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (logging em DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def _collect_errors(service: str) -> tuple[list[str], list[str]]:
    errors = [f"base: {error}" for error in get_base_settings().validate()]
    warnings: list[str] = []

    if service == "payments":
        stripe = get_stripe_settings()
        errors.extend(f"stripe: {error}" for error in stripe.validate())
        warnings.extend(f"stripe: {name} não configurado" for name in stripe.missing_secrets())
    elif service == "gateway":
        gateway = get_gateway_settings()
        errors.extend(f"gateway: {error}" for error in gateway.validate())
        warnings.extend(
            f"gateway: credencial ausente para {provider}"
            for provider in gateway.missing_credentials()
        )
    elif service == "router":
        errors.extend(f"router: {error}" for error in get_edge_router_settings().validate())
    else:
        errors.append(f"serviço desconhecido: {service}")

    return errors, warnings


def validate_runtime_settings(service: str) -> None:
    """Valida settings obrigatórias do serviço no startup.

    Em `staging`/`production` erros estruturais falham rápido. Secrets
    ausentes nunca bloqueiam o boot: o serviço responde 503 (payments)
    ou repassa sem credencial (gateway) até que sejam definidos.
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = base.is_production or base.is_staging
    errors, warnings = _collect_errors(service)

    if warnings:
        logger.warning(
            "settings_incomplete",
            extra={
                "component": "bootstrap",
                "service": service,
                "environment": environment,
                "warnings": warnings,
            },
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "service": service,
                "result": "ok",
                "environment": environment,
            },
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "service": service,
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
