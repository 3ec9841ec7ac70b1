"""AI gateway: qualquer método/path, backend escolhido por `?provider=`."""

from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from api.connectors.upstream import forward_request
from api.routes.dependencies import get_http_client
from app.domain.proxy import InboundRequest
from app.services import route
from config.settings import get_gateway_settings

logger = logging.getLogger(__name__)

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

router = APIRouter()


def _original_path(request: Request) -> str:
    # raw_path mantém escapes como %2F; alguns servidores incluem a query nele
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    return raw_path.split(b"?", 1)[0].decode("latin-1")


async def inbound_from_request(request: Request) -> InboundRequest:
    """Snapshot do request recebido, com path e query verbatim."""
    return InboundRequest(
        method=request.method,
        path=_original_path(request),
        query=request.url.query,
        headers=tuple(request.headers.items()),
        body=await request.body(),
    )


@router.api_route("/{path:path}", methods=PROXY_METHODS)
async def proxy(
    request: Request,
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> Response:
    """Encaminha para o backend do provider, injetando a credencial dele."""
    settings = get_gateway_settings()
    provider = request.query_params.get(settings.provider_param) or settings.default_provider

    proxied = route(
        provider,
        await inbound_from_request(request),
        settings.providers,
        settings.credentials,
    )
    logger.info(
        "gateway_request_routed",
        extra={"provider": provider, "backend": proxied.backend, "method": proxied.method},
    )
    return await forward_request(http_client, proxied, settings.request_timeout_seconds)
