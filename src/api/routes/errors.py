"""Exception handlers que produzem o envelope `{"error": message}`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.errors import GatewayError, NotFoundError

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def error_response(exc: GatewayError) -> JSONResponse:
    return JSONResponse(
        {"error": exc.message, **exc.extra_fields()},
        status_code=exc.status_code,
    )


def register_exception_handlers(app: FastAPI, routes: list[str] | None = None) -> None:
    """Registra handlers de GatewayError e de rotas inexistentes.

    Args:
        app: Aplicação FastAPI
        routes: Paths anunciados no 404; None mantém o 404/405 padrão
    """

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
        log = logger.warning if exc.status_code < 500 else logger.error
        log(
            "request_rejected",
            extra={
                "path": request.url.path,
                "status_code": exc.status_code,
                "error_type": type(exc).__name__,
            },
        )
        return error_response(exc)

    if routes is None:
        return

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # 405 também é "rota inexistente" para a combinação método+path
        if exc.status_code in (404, 405):
            return error_response(NotFoundError(routes))
        return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code)
