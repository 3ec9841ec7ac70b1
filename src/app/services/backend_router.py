"""Seleção de backend por provider e injeção de credencial.

O provider é comparado de forma exata (case-sensitive) com a tabela
configurada. Sem correspondência é erro, nunca fallback.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.proxy import InboundRequest, ProxiedRequest, carries_body
from utils.errors import UnknownProviderError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from config.settings import ProxyTarget

logger = logging.getLogger(__name__)

# Headers recalculados pelo transporte HTTP a cada hop
TRANSPORT_HEADERS = frozenset({"host", "content-length"})

HOP_BY_HOP_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailer",
        "trailers",
        "transfer-encoding",
        "upgrade",
    }
)


def forwardable_headers(
    headers: Iterable[tuple[str, str]],
    drop: frozenset[str] = TRANSPORT_HEADERS | HOP_BY_HOP_HEADERS,
) -> list[tuple[str, str]]:
    """Copia os headers na ordem original, sem os nomes em `drop`."""
    return [(name, value) for name, value in headers if name.lower() not in drop]


def build_target_url(origin: str, path: str, query: str) -> str:
    """origin + path + query, verbatim."""
    return f"{origin}{path}?{query}" if query else f"{origin}{path}"


def route(
    provider_id: str,
    inbound: InboundRequest,
    targets: Mapping[str, ProxyTarget],
    credentials: Mapping[str, str],
) -> ProxiedRequest:
    """Resolve o backend e monta o request de saída.

    Args:
        provider_id: Provider pedido pelo chamador
        inbound: Request recebido
        targets: Tabela provider -> ProxyTarget
        credentials: Valores de credencial por nome de origem

    Raises:
        UnknownProviderError: provider fora da tabela.
    """
    target = targets.get(provider_id)
    if target is None:
        raise UnknownProviderError(provider_id)

    headers = forwardable_headers(inbound.headers)
    credential = target.credential_value(credentials)
    if credential is not None and target.credential_header:
        header_name = target.credential_header.lower()
        headers = [(name, value) for name, value in headers if name.lower() != header_name]
        headers.append((target.credential_header, credential))
    elif target.credential_header:
        # Sem credencial: o próprio upstream rejeita a autenticação
        logger.info(
            "proxy_credential_missing",
            extra={"provider": provider_id, "credential_source": target.credential_source},
        )

    return ProxiedRequest(
        provider=provider_id,
        backend=target.origin,
        method=inbound.method,
        url=build_target_url(target.origin, inbound.path, inbound.query),
        headers=tuple(headers),
        body=inbound.body if carries_body(inbound.method) else None,
    )
