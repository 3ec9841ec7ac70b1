"""POST /portal: cria sessão do portal de cobrança."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from api.payload_builders.stripe import build_portal_params
from api.routes.dependencies import get_stripe_client, read_json_object
from app.domain.billing import PortalRequest
from app.protocols import StripeClientProtocol
from config.settings import get_stripe_settings

router = APIRouter()


@router.post("/portal")
async def create_portal(
    request: Request,
    client: StripeClientProtocol = Depends(get_stripe_client),
) -> dict[str, Any]:
    settings = get_stripe_settings()
    portal = PortalRequest.from_payload(await read_json_object(request))
    origin = settings.resolve_origin(request.headers.get("origin"))

    session = await client.request("POST", "/billing_portal/sessions", build_portal_params(portal, origin))
    return {"url": session.get("url")}
