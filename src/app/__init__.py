"""App: orquestração, regras de roteamento e infraestrutura.

Subpastas:
- bootstrap/: composition root (logging, validação, cliente HTTP)
- coordinators/: fluxos end-to-end (notificação Stripe → handlers)
- domain/: tipos de domínio (billing, eventos, proxy)
- services/: decisões puras de roteamento (backend, hostname)
- infra/: implementações concretas de IO
- protocols/: contratos/interfaces
- observability/: correlation_id, latência, eventos

Padrão: app decide; api adapta; config parametriza; utils apoia.
"""
