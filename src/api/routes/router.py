"""Agregador de rotas: um router por serviço.

Uso:
    from api.routes import create_payments_router

    app = FastAPI()
    app.include_router(create_payments_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.edge.router import router as edge_router
from api.routes.gateway.router import router as gateway_router
from api.routes.stripe.router import router as stripe_router


def create_payments_router() -> APIRouter:
    """Checkout, portal, preços, webhook e health."""
    api_router = APIRouter()
    api_router.include_router(stripe_router)
    return api_router


def create_gateway_router() -> APIRouter:
    """Proxy catch-all para os backends de IA."""
    api_router = APIRouter()
    api_router.include_router(gateway_router, tags=["gateway"])
    return api_router


def create_edge_router() -> APIRouter:
    """Roteamento por hostname para serviços internos."""
    api_router = APIRouter()
    api_router.include_router(edge_router, tags=["router"])
    return api_router
