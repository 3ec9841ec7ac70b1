"""Encaminhamento de requests ao upstream com resposta em streaming.

O corpo da resposta é repassado em bytes brutos (sem decodificar gzip), então
os headers de conteúdo do upstream continuam válidos. Se o cliente desconecta,
o streaming para e a resposta do upstream é fechada.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

import httpx
from starlette.background import BackgroundTask
from starlette.responses import Response, StreamingResponse

from app.observability import elapsed_ms, record_latency
from app.services.backend_router import HOP_BY_HOP_HEADERS
from utils.errors import UpstreamUnreachableError

if TYPE_CHECKING:
    from app.domain.proxy import ProxiedRequest

logger = logging.getLogger(__name__)

# `content` já vem descomprimido e com tamanho próprio
_BUFFERED_DROP = frozenset({b"content-length", b"content-encoding"})


def _response_headers(upstream: httpx.Response) -> list[tuple[str, str]]:
    return [
        (name, value)
        for name, value in upstream.headers.multi_items()
        if name.lower() not in HOP_BY_HOP_HEADERS
    ]


async def forward_request(
    client: httpx.AsyncClient,
    proxied: ProxiedRequest,
    timeout_seconds: float | None = None,
) -> Response:
    """Envia o request e devolve a resposta do upstream como está.

    Raises:
        UpstreamUnreachableError: falha de transporte (DNS, conexão, timeout).
    """
    request = client.build_request(
        proxied.method,
        proxied.url,
        headers=list(proxied.headers),
        content=proxied.body,
        timeout=httpx.USE_CLIENT_DEFAULT if timeout_seconds is None else timeout_seconds,
    )
    started_at = time.perf_counter()
    try:
        upstream = await client.send(request, stream=True)
    except httpx.HTTPError as exc:
        logger.warning(
            "upstream_unreachable",
            extra={
                "provider": proxied.provider,
                "backend": proxied.backend,
                "error_type": type(exc).__name__,
            },
        )
        raise UpstreamUnreachableError(
            str(exc) or type(exc).__name__,
            provider=proxied.provider,
            backend=proxied.backend,
        ) from exc

    record_latency(
        f"upstream:{proxied.provider}",
        f"{proxied.method} {request.url.path}",
        elapsed_ms(started_at),
        upstream.status_code,
    )
    headers = [
        (name.encode("latin-1"), value.encode("latin-1"))
        for name, value in _response_headers(upstream)
    ]
    if upstream.is_stream_consumed:
        return _buffered_response(upstream, headers)

    response = StreamingResponse(
        upstream.aiter_raw(),
        status_code=upstream.status_code,
        background=BackgroundTask(upstream.aclose),
    )
    # raw_headers preserva headers repetidos (ex: set-cookie)
    response.raw_headers = headers
    return response


def _buffered_response(upstream: httpx.Response, headers: list[tuple[bytes, bytes]]) -> Response:
    """Resposta cujo corpo o transporte já leu: repassa `content` decodificado."""
    response = Response(upstream.content, status_code=upstream.status_code)
    content_length = [(name, value) for name, value in response.raw_headers if name == b"content-length"]
    response.raw_headers = content_length + [
        (name, value) for name, value in headers if name.lower() not in _BUFFERED_DROP
    ]
    return response
