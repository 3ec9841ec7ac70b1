"""Connectors: adapters de borda para APIs externas.

Estrutura:
- stripe/: API do processador de pagamentos + verificação de webhook
- upstream/: encaminhamento de requests para backends e serviços internos
"""

__all__: list[str] = []
