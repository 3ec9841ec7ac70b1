"""Settings específicas do serviço de pagamentos (Stripe).

Credenciais e URLs chegam do ambiente de hospedagem e são somente leitura.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API Stripe
STRIPE_API_BASE_URL: str = "https://api.stripe.com/v1"
DEFAULT_WEBHOOK_TOLERANCE_SECONDS: int = 300


@dataclass(frozen=True)
class StripeSettings:
    """Configurações do serviço de pagamentos.

    Attributes:
        secret_key: Chave secreta da API (sk_test_... / sk_live_...)
        webhook_secret: Secret de assinatura dos webhooks (whsec_...)
        allowed_origin: Origin do navegador autorizado (CORS e URLs de retorno)
        default_origin: Origin usado quando request e allowed_origin estão vazios
        api_base_url: URL base da API Stripe
        checkout_source: Tag de proveniência gravada nas assinaturas
        webhook_tolerance_seconds: Janela de replay aceita para webhooks
        request_timeout_seconds: Timeout das chamadas à API
        prices_limit: Máximo de preços retornados por GET /prices
        worker_name: Nome reportado pelo health check
    """

    secret_key: str = ""
    webhook_secret: str = ""
    allowed_origin: str = ""
    default_origin: str = "https://brand-kit.pages.dev"
    api_base_url: str = STRIPE_API_BASE_URL
    checkout_source: str = "brand-kit"
    webhook_tolerance_seconds: int = DEFAULT_WEBHOOK_TOLERANCE_SECONDS
    request_timeout_seconds: float = 30.0
    prices_limit: int = 20
    worker_name: str = "stripe-checkout"

    @property
    def is_configured(self) -> bool:
        """True quando a chave secreta está presente."""
        return bool(self.secret_key)

    def resolve_origin(self, request_origin: str | None) -> str:
        """Origin para URLs de retorno: header Origin, allowed_origin ou default."""
        return request_origin or self.allowed_origin or self.default_origin

    def validate(self) -> list[str]:
        """Valida configurações do Stripe.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append(f"STRIPE_API_BASE_URL inválida: {self.api_base_url}")
        if self.webhook_tolerance_seconds <= 0:
            errors.append("STRIPE_WEBHOOK_TOLERANCE_SECONDS deve ser positivo")
        return errors

    def missing_secrets(self) -> list[str]:
        """Secrets ausentes; o serviço sobe e responde 503 até serem definidos."""
        missing: list[str] = []
        if not self.secret_key:
            missing.append("STRIPE_SECRET_KEY")
        if not self.webhook_secret:
            missing.append("STRIPE_WEBHOOK_SECRET")
        return missing


def _load_stripe_from_env() -> StripeSettings:
    """Carrega StripeSettings de variáveis de ambiente."""
    return StripeSettings(
        secret_key=os.getenv("STRIPE_SECRET_KEY", ""),
        webhook_secret=os.getenv("STRIPE_WEBHOOK_SECRET", ""),
        allowed_origin=os.getenv("ALLOWED_ORIGIN", ""),
        default_origin=os.getenv("STRIPE_DEFAULT_ORIGIN", "https://brand-kit.pages.dev"),
        api_base_url=os.getenv("STRIPE_API_BASE_URL", STRIPE_API_BASE_URL).rstrip("/"),
        checkout_source=os.getenv("STRIPE_CHECKOUT_SOURCE", "brand-kit"),
        webhook_tolerance_seconds=int(
            os.getenv(
                "STRIPE_WEBHOOK_TOLERANCE_SECONDS",
                str(DEFAULT_WEBHOOK_TOLERANCE_SECONDS),
            )
        ),
        request_timeout_seconds=float(os.getenv("STRIPE_REQUEST_TIMEOUT_SECONDS", "30")),
        prices_limit=int(os.getenv("STRIPE_PRICES_LIMIT", "20")),
    )


@lru_cache(maxsize=1)
def get_stripe_settings() -> StripeSettings:
    """Retorna instância cacheada de StripeSettings."""
    return _load_stripe_from_env()
