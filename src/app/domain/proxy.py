"""Requests de entrada e saída do proxy de backends."""

from __future__ import annotations

from dataclasses import dataclass, field

# Métodos que não levam corpo ao upstream
BODYLESS_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "TRACE"})


@dataclass(frozen=True, slots=True)
class InboundRequest:
    """Request recebido, desacoplado do framework HTTP.

    Attributes:
        method: Método HTTP em maiúsculas
        path: Path original (sem query)
        query: Query string original sem o "?" (bytes decodificados, verbatim)
        headers: Pares de header na ordem recebida
        body: Corpo bruto
    """

    method: str
    path: str
    query: str = ""
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes = b""


@dataclass(frozen=True, slots=True)
class ProxiedRequest:
    """Request pronto para o transporte HTTP."""

    provider: str
    backend: str
    method: str
    url: str
    headers: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    body: bytes | None = None


def carries_body(method: str) -> bool:
    return method.upper() not in BODYLESS_METHODS
