"""API: camada de borda HTTP dos serviços.

Responsabilidades:
- Receber requests (checkout, webhooks, proxy)
- Validar assinaturas e payloads
- Construir payloads para APIs externas (Stripe)
- Repassar requests para upstreams

Subpastas:
- connectors/: clientes HTTP externos (Stripe, upstream genérico)
- middleware/: envelope por request (correlation_id, CORS, 503)
- payload_builders/: construção de parâmetros para APIs externas
- routes/: endpoints HTTP por serviço

NÃO PODE conter: decisão de roteamento, despacho de eventos de negócio.
"""
