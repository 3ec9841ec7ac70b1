"""Settings do AI gateway.

Tabela de backends por provider, resolvida uma vez na inicialização.
Os valores de credencial são lidos do ambiente no load e nunca mudam por request.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType

DEFAULT_PROVIDER: str = "ollama"
PROVIDER_QUERY_PARAM: str = "provider"


@dataclass(frozen=True, slots=True)
class ProxyTarget:
    """Backend de um provider.

    Attributes:
        provider: Identificador do provider (comparação exata)
        origin: Origin do backend (esquema + host + porta, sem barra final)
        credential_header: Header onde a credencial é injetada (None = sem injeção)
        credential_source: Nome da variável de ambiente com a credencial
        credential_prefix: Prefixo aplicado ao valor (ex: "Bearer ")
    """

    provider: str
    origin: str
    credential_header: str | None = None
    credential_source: str | None = None
    credential_prefix: str = ""

    def credential_value(self, credentials: Mapping[str, str]) -> str | None:
        """Valor do header de credencial ou None se não houver o que injetar."""
        if not self.credential_header or not self.credential_source:
            return None
        raw = credentials.get(self.credential_source, "")
        if not raw:
            return None
        return f"{self.credential_prefix}{raw}"


def default_proxy_targets(ollama_origin: str = "http://127.0.0.1:11434") -> tuple[ProxyTarget, ...]:
    """Tabela padrão de providers."""
    return (
        ProxyTarget(provider="ollama", origin=ollama_origin),
        ProxyTarget(
            provider="claude",
            origin="https://api.anthropic.com",
            credential_header="x-api-key",
            credential_source="ANTHROPIC_API_KEY",
        ),
        ProxyTarget(
            provider="openai",
            origin="https://api.openai.com",
            credential_header="Authorization",
            credential_source="OPENAI_API_KEY",
            credential_prefix="Bearer ",
        ),
    )


@dataclass(frozen=True)
class GatewaySettings:
    """Configurações do AI gateway.

    Attributes:
        targets: Tabela imutável de providers
        credentials: Valores de credencial por nome de variável (somente leitura)
        default_provider: Provider usado quando a query não informa
        provider_param: Nome do query param que seleciona o provider
        request_timeout_seconds: Timeout das chamadas ao backend
    """

    targets: tuple[ProxyTarget, ...] = field(default_factory=default_proxy_targets)
    credentials: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    default_provider: str = DEFAULT_PROVIDER
    provider_param: str = PROVIDER_QUERY_PARAM
    request_timeout_seconds: float = 120.0

    @property
    def providers(self) -> dict[str, ProxyTarget]:
        """Tabela indexada por provider."""
        return {target.provider: target for target in self.targets}

    def validate(self) -> list[str]:
        """Valida configurações do gateway.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if self.default_provider not in self.providers:
            errors.append(f"GATEWAY_DEFAULT_PROVIDER desconhecido: {self.default_provider}")
        for target in self.targets:
            if not target.origin.startswith(("http://", "https://")):
                errors.append(f"Origin inválido para {target.provider}: {target.origin}")
        return errors

    def missing_credentials(self) -> list[str]:
        """Providers com credencial prevista mas sem valor no ambiente."""
        return [
            target.provider
            for target in self.targets
            if target.credential_header and target.credential_value(self.credentials) is None
        ]


def _load_gateway_from_env() -> GatewaySettings:
    """Carrega GatewaySettings de variáveis de ambiente."""
    targets = default_proxy_targets(
        os.getenv("OLLAMA_BASE_URL", "http://127.0.0.1:11434").rstrip("/"),
    )
    credentials = {
        target.credential_source: os.getenv(target.credential_source, "")
        for target in targets
        if target.credential_source
    }
    return GatewaySettings(
        targets=targets,
        credentials=MappingProxyType(credentials),
        default_provider=os.getenv("GATEWAY_DEFAULT_PROVIDER", DEFAULT_PROVIDER),
        request_timeout_seconds=float(os.getenv("GATEWAY_REQUEST_TIMEOUT_SECONDS", "120")),
    )


@lru_cache(maxsize=1)
def get_gateway_settings() -> GatewaySettings:
    """Retorna instância cacheada de GatewaySettings."""
    return _load_gateway_from_env()
