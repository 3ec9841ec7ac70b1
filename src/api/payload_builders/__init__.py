"""Payload builders: construção de parâmetros para APIs externas.

Estrutura:
- stripe/: checkout, portal de cobrança e listagem de preços

Builders são transformações puras; a chamada de rede fica nos connectors.
"""

__all__: list[str] = []
