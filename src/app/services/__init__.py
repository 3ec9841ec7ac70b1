"""Serviços de aplicação.

Unidades puras de decisão (sem IO direto); o IO fica nos connectors.
"""

from app.services.backend_router import forwardable_headers, route
from app.services.host_router import describe_router, match_binding

__all__ = [
    "describe_router",
    "forwardable_headers",
    "match_binding",
    "route",
]
