"""Roteamento por prefixo literal do header Host."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from config.settings import ServiceBinding


def match_binding(host: str, bindings: Iterable[ServiceBinding]) -> ServiceBinding | None:
    """Primeiro binding cujo prefixo inicia o host (comparação literal)."""
    for binding in bindings:
        if host.startswith(binding.host_prefix):
            return binding
    return None


def describe_router(router_name: str, host: str, path: str, patterns: list[str]) -> dict[str, Any]:
    """Descritor devolvido quando nenhum prefixo casa (resposta 200, não erro)."""
    return {
        "status": router_name,
        "host": host,
        "path": path,
        "routes": patterns,
    }
