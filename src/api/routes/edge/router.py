"""Roteador de borda: delega o request inteiro ao serviço do prefixo do host."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from api.connectors.upstream import forward_request
from api.routes.dependencies import get_http_client
from api.routes.gateway.router import PROXY_METHODS, inbound_from_request
from app.domain.proxy import ProxiedRequest, carries_body
from app.services import describe_router, forwardable_headers, match_binding
from app.services.backend_router import HOP_BY_HOP_HEADERS, build_target_url
from config.settings import get_edge_router_settings

logger = logging.getLogger(__name__)

# O host original segue para o serviço interno; só o content-length é recalculado
_DELEGATION_DROP = HOP_BY_HOP_HEADERS | {"content-length"}

router = APIRouter()


@router.api_route("/{path:path}", methods=PROXY_METHODS, response_model=None)
async def edge_route(
    request: Request,
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> Response | dict[str, Any]:
    """Delega quando o host casa um prefixo; senão devolve o descritor do roteador."""
    settings = get_edge_router_settings()
    host = request.headers.get("host", "")
    binding = match_binding(host, settings.bindings)

    if binding is None:
        return describe_router(settings.router_name, host, request.url.path, settings.patterns)

    inbound = await inbound_from_request(request)
    delegated = ProxiedRequest(
        provider=binding.pattern,
        backend=binding.service_url,
        method=inbound.method,
        url=build_target_url(binding.service_url, inbound.path, inbound.query),
        headers=tuple(forwardable_headers(inbound.headers, drop=_DELEGATION_DROP)),
        body=inbound.body if carries_body(inbound.method) else None,
    )
    logger.info("edge_request_delegated", extra={"pattern": binding.pattern})
    return await forward_request(http_client, delegated, settings.request_timeout_seconds)
