"""Rotas HTTP dos serviços: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (checkout, portal, preços, webhook, proxy)
- Validação inicial de request (headers, corpo)
- Delegação para connectors/coordinators
- Respostas HTTP e envelope de erro

Estrutura:
- routes/stripe/: serviço de pagamentos
- routes/gateway/: AI gateway
- routes/edge/: roteador por hostname
- routes/health/: health check
"""

from __future__ import annotations

from api.routes.router import create_edge_router, create_gateway_router, create_payments_router

__all__ = ["create_edge_router", "create_gateway_router", "create_payments_router"]
