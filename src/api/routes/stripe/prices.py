"""GET /prices: preços ativos para a UI de pricing, do menor para o maior."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from api.payload_builders.stripe import build_price_list_params, format_price_list
from api.routes.dependencies import get_stripe_client
from app.protocols import StripeClientProtocol
from config.settings import get_stripe_settings

router = APIRouter()


@router.get("/prices")
async def list_prices(client: StripeClientProtocol = Depends(get_stripe_client)) -> dict[str, Any]:
    params = build_price_list_params(get_stripe_settings().prices_limit)
    result = await client.request("GET", "/prices", params)
    return {"prices": [view.as_dict() for view in format_price_list(result)]}
