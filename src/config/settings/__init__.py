"""Agregador de settings do edge gateway.

Re-exporta todas as settings e funções de cada módulo.
Organização por serviço para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Router settings
from config.settings.edge_router import (
    EdgeRouterSettings,
    ServiceBinding,
    get_edge_router_settings,
    parse_bindings,
)

# AI gateway settings
from config.settings.gateway import (
    DEFAULT_PROVIDER,
    GatewaySettings,
    ProxyTarget,
    default_proxy_targets,
    get_gateway_settings,
)

# Payments settings
from config.settings.stripe import (
    STRIPE_API_BASE_URL,
    StripeSettings,
    get_stripe_settings,
)

__all__ = [
    # Constants
    "DEFAULT_PROVIDER",
    "STRIPE_API_BASE_URL",
    # Base
    "BaseSettings",
    # Router
    "EdgeRouterSettings",
    "Environment",
    # Gateway
    "GatewaySettings",
    "ProxyTarget",
    "ServiceBinding",
    # Payments
    "StripeSettings",
    "default_proxy_targets",
    "get_base_settings",
    "get_edge_router_settings",
    "get_gateway_settings",
    "get_stripe_settings",
    "parse_bindings",
]
