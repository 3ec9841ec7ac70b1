"""Router do serviço de pagamentos: agrega checkout, portal, preços e webhook."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.stripe.checkout import router as checkout_router
from api.routes.stripe.portal import router as portal_router
from api.routes.stripe.prices import router as prices_router
from api.routes.stripe.webhook import router as webhook_router

# Paths anunciados no 404
PAYMENT_ROUTES = ["/health", "/checkout", "/portal", "/webhook", "/prices"]

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(checkout_router, tags=["stripe"])
router.include_router(portal_router, tags=["stripe"])
router.include_router(webhook_router, tags=["stripe"])
router.include_router(prices_router, tags=["stripe"])
