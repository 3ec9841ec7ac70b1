"""Builder da sessão de checkout (modo assinatura)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.billing import CheckoutRequest

# Placeholder substituído pelo Stripe no redirect de sucesso
CHECKOUT_SESSION_PLACEHOLDER = "{CHECKOUT_SESSION_ID}"


def build_checkout_params(
    request: CheckoutRequest,
    origin: str,
    source_tag: str,
) -> dict[str, Any]:
    """Monta a árvore de parâmetros de POST /checkout/sessions.

    Args:
        request: Pedido validado (price_id garantido)
        origin: Origin usado para as URLs padrão de sucesso/cancelamento
        source_tag: Tag de proveniência gravada na assinatura

    Returns:
        Árvore pronta para encode_params()
    """
    params: dict[str, Any] = {
        "mode": "subscription",
        "line_items": [{"price": request.price_id, "quantity": 1}],
        "success_url": request.success_url
        or f"{origin}/success?session_id={CHECKOUT_SESSION_PLACEHOLDER}",
        "cancel_url": request.cancel_url or f"{origin}/pricing",
        "automatic_tax": {"enabled": True},
        "subscription_data": {"metadata": {"source": source_tag}},
        "customer_email": request.customer_email,
    }
    if request.metadata:
        params["metadata"] = dict(request.metadata)
    return params
