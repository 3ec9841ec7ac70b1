"""Protocolo do cliente da API do processador de pagamentos.

Rotas dependem do contrato; testes trocam a implementação.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class StripeClientProtocol(Protocol):
    """Contrato mínimo para chamadas à API Stripe."""

    async def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]: ...
