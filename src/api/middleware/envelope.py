"""Envelope por request: correlation_id, CORS/preflight, guarda de configuração
e conversão de exceções não tratadas em `{"error": message}` (500).

Ordem por request:
1. OPTIONS com CORS habilitado -> 204 imediato, nada mais roda
2. serviço sem secret obrigatório -> 503 antes do roteamento
3. roteamento normal; exceção escapando -> 500
4. headers CORS mesclados, exceto nas rotas isentas (webhooks)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse, Response

from api.middleware.cors import build_cors_headers
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from starlette.requests import Request
    from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnvelopePolicy:
    """Comportamento do envelope por serviço.

    Attributes:
        cors_enabled: Aplica preflight e headers CORS
        allowed_origin: Retorna o origin configurado (lido a cada request)
        unconfigured_reason: Retorna mensagem quando falta secret obrigatório
        cors_exempt: Pares (método, path) cujas respostas não levam CORS
    """

    cors_enabled: bool = False
    allowed_origin: Callable[[], str | None] = lambda: None
    unconfigured_reason: Callable[[], str | None] = lambda: None
    cors_exempt: frozenset[tuple[str, str]] = field(default_factory=frozenset)


class ServiceEnvelopeMiddleware(BaseHTTPMiddleware):
    """Ponto de entrada comum dos três serviços."""

    def __init__(self, app: ASGIApp, policy: EnvelopePolicy) -> None:
        super().__init__(app)
        self._policy = policy

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await self._handle(request, call_next)
            response.headers[CORRELATION_HEADER] = get_correlation_id()
            return response
        finally:
            reset_correlation_id(token)

    async def _handle(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        policy = self._policy
        cors = (
            build_cors_headers(request.headers.get("origin"), policy.allowed_origin())
            if policy.cors_enabled
            else {}
        )

        if policy.cors_enabled and request.method == "OPTIONS":
            return Response(status_code=204, headers=cors)

        reason = policy.unconfigured_reason()
        if reason:
            logger.warning("service_unconfigured", extra={"path": request.url.path})
            return JSONResponse({"error": reason}, status_code=503, headers=cors)

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "request_failed",
                extra={"method": request.method, "path": request.url.path},
            )
            response = JSONResponse({"error": str(exc) or type(exc).__name__}, status_code=500)

        if cors and (request.method, request.url.path) not in policy.cors_exempt:
            response.headers.update(cors)
        return response
