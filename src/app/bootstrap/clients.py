"""Factory do cliente HTTP compartilhado pelos serviços."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONNECTIONS = 100
DEFAULT_MAX_KEEPALIVE = 20


def create_http_client(
    timeout_seconds: float,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Cria o httpx.AsyncClient que vive durante o lifespan do app.

    Redirects não são seguidos: respostas 3xx do upstream voltam ao
    chamador sem alteração.
    """
    client = httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        limits=httpx.Limits(
            max_connections=DEFAULT_MAX_CONNECTIONS,
            max_keepalive_connections=DEFAULT_MAX_KEEPALIVE,
        ),
        follow_redirects=False,
        transport=transport,
    )
    logger.info("http_client_created", extra={"timeout_seconds": timeout_seconds})
    return client
