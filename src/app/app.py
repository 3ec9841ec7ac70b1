"""Entrypoints ASGI dos três serviços de borda.

- payments_app: checkout, portal, preços e webhook do Stripe
- gateway_app: proxy reverso para backends de IA
- router_app: roteamento por hostname para serviços internos

Uso (produção):
    uvicorn app.app:payments_app --host 0.0.0.0 --port 8081
    uvicorn app.app:gateway_app --host 0.0.0.0 --port 8082
    uvicorn app.app:router_app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    EDGE_SERVICE=payments python -m app.app
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.middleware import EnvelopePolicy, ServiceEnvelopeMiddleware
from api.routes import create_edge_router, create_gateway_router, create_payments_router
from api.routes.errors import register_exception_handlers
from api.routes.stripe.router import PAYMENT_ROUTES
from app.bootstrap import SERVICES, initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_http_client
from app.observability import LoggingEventSink
from config.logging import get_logger
from config.settings import (
    get_edge_router_settings,
    get_gateway_settings,
    get_stripe_settings,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

STRIPE_UNCONFIGURED_MESSAGE = (
    "Stripe not configured. Set STRIPE_SECRET_KEY in worker environment."
)

DEFAULT_PORTS = {"router": 8080, "payments": 8081, "gateway": 8082}


def _lifespan(service: str, timeout_seconds: Callable[[], float]):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Abre o cliente HTTP compartilhado e fecha no shutdown."""
        logger.info("app_starting", extra={"service": service})
        validate_runtime_settings(service)
        app.state.http_client = create_http_client(timeout_seconds())
        if not hasattr(app.state, "event_sink"):
            app.state.event_sink = LoggingEventSink()

        yield

        logger.info("app_shutting_down", extra={"service": service})
        await app.state.http_client.aclose()

    return lifespan


def _stripe_unconfigured_reason() -> str | None:
    if get_stripe_settings().is_configured:
        return None
    return STRIPE_UNCONFIGURED_MESSAGE


def create_payments_app() -> FastAPI:
    """Serviço de pagamentos (Stripe).

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Edge Payments",
        description="Checkout, portal e webhooks do Stripe",
        version="1.0.0",
        lifespan=_lifespan(
            "payments", lambda: get_stripe_settings().request_timeout_seconds
        ),
    )
    fastapi_app.add_middleware(
        ServiceEnvelopeMiddleware,
        policy=EnvelopePolicy(
            cors_enabled=True,
            allowed_origin=lambda: get_stripe_settings().allowed_origin,
            unconfigured_reason=_stripe_unconfigured_reason,
            cors_exempt=frozenset({("POST", "/webhook")}),
        ),
    )
    register_exception_handlers(fastapi_app, PAYMENT_ROUTES)
    fastapi_app.include_router(create_payments_router())

    logger.info("app_configured", extra={"service": "payments"})
    return fastapi_app


def create_gateway_app() -> FastAPI:
    """Gateway de IA: um único endpoint público para vários backends."""
    fastapi_app = FastAPI(
        title="Edge AI Gateway",
        version="1.0.0",
        lifespan=_lifespan(
            "gateway", lambda: get_gateway_settings().request_timeout_seconds
        ),
        # Todos os paths pertencem aos backends
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.add_middleware(ServiceEnvelopeMiddleware, policy=EnvelopePolicy())
    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_gateway_router())

    logger.info("app_configured", extra={"service": "gateway"})
    return fastapi_app


def create_router_app() -> FastAPI:
    """Roteador por hostname na borda."""
    fastapi_app = FastAPI(
        title="Edge Router",
        version="1.0.0",
        lifespan=_lifespan(
            "router", lambda: get_edge_router_settings().request_timeout_seconds
        ),
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.add_middleware(ServiceEnvelopeMiddleware, policy=EnvelopePolicy())
    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_edge_router())

    logger.info("app_configured", extra={"service": "router"})
    return fastapi_app


# Aplicações ASGI expostas para uvicorn
payments_app = create_payments_app()
gateway_app = create_gateway_app()
router_app = create_router_app()


def main() -> None:
    """Entrypoint para execução direta; EDGE_SERVICE escolhe o serviço."""
    import uvicorn

    service = os.getenv("EDGE_SERVICE", "payments").lower()
    if service not in SERVICES:
        raise SystemExit(f"EDGE_SERVICE inválido: {service} (use {', '.join(SERVICES)})")

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", str(DEFAULT_PORTS[service])))
    logger.info("Starting edge service", extra={"service": service, "port": port})
    uvicorn.run(f"app.app:{service}_app", host=host, port=port)


if __name__ == "__main__":
    main()
