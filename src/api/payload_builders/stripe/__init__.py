"""Builders de parâmetros para a API Stripe."""

from .checkout import CHECKOUT_SESSION_PLACEHOLDER, build_checkout_params
from .portal import build_portal_params
from .prices import build_price_list_params, format_price_list

__all__ = [
    "CHECKOUT_SESSION_PLACEHOLDER",
    "build_checkout_params",
    "build_portal_params",
    "build_price_list_params",
    "format_price_list",
]
