"""Headers CORS dos serviços chamados pelo navegador."""

from __future__ import annotations

ALLOWED_METHODS = "GET, POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type, Authorization"
MAX_AGE_SECONDS = 86400


def build_cors_headers(request_origin: str | None, allowed_origin: str | None) -> dict[str, str]:
    """Allow-Origin ecoa o Origin do request; sem ele, usa o configurado ou "*"."""
    return {
        "Access-Control-Allow-Origin": request_origin or allowed_origin or "*",
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Access-Control-Max-Age": str(MAX_AGE_SECONDS),
    }
