"""Builder da sessão do portal de cobrança."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.billing import PortalRequest


def build_portal_params(request: PortalRequest, origin: str) -> dict[str, Any]:
    """Parâmetros de POST /billing_portal/sessions; return_url padrão é {origin}/account."""
    return {
        "customer": request.customer_id,
        "return_url": request.return_url or f"{origin}/account",
    }
