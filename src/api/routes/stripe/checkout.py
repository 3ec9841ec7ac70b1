"""POST /checkout: cria sessão de checkout de assinatura."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from api.payload_builders.stripe import build_checkout_params
from api.routes.dependencies import get_stripe_client, read_json_object
from app.domain.billing import CheckoutRequest
from app.protocols import StripeClientProtocol
from config.settings import get_stripe_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/checkout")
async def create_checkout(
    request: Request,
    client: StripeClientProtocol = Depends(get_stripe_client),
) -> dict[str, Any]:
    """Valida o pedido, monta os parâmetros e cria a sessão no Stripe.

    Returns:
        {"url": ..., "session_id": ...}
    """
    settings = get_stripe_settings()
    checkout = CheckoutRequest.from_payload(await read_json_object(request))
    origin = settings.resolve_origin(request.headers.get("origin"))

    params = build_checkout_params(checkout, origin, settings.checkout_source)
    session = await client.request("POST", "/checkout/sessions", params)

    logger.info("checkout_session_created", extra={"session_id": session.get("id")})
    return {"url": session.get("url"), "session_id": session.get("id")}
