"""Settings do roteador por hostname."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_STRIPE_SERVICE_URL: str = "http://127.0.0.1:8081"


@dataclass(frozen=True, slots=True)
class ServiceBinding:
    """Serviço interno associado a um prefixo literal do host.

    Attributes:
        host_prefix: Prefixo do header Host (ex: "stripe.")
        service_url: URL base do serviço interno
    """

    host_prefix: str
    service_url: str

    @property
    def pattern(self) -> str:
        """Padrão anunciado no descritor (ex: "stripe.*")."""
        return f"{self.host_prefix}*"


def _default_bindings() -> tuple[ServiceBinding, ...]:
    return (ServiceBinding(host_prefix="stripe.", service_url=DEFAULT_STRIPE_SERVICE_URL),)


@dataclass(frozen=True)
class EdgeRouterSettings:
    """Configurações do roteador.

    Attributes:
        router_name: Nome reportado no descritor padrão
        bindings: Bindings avaliados em ordem; o primeiro prefixo que casa vence
        request_timeout_seconds: Timeout da delegação
    """

    router_name: str = "Edge Router"
    bindings: tuple[ServiceBinding, ...] = field(default_factory=_default_bindings)
    request_timeout_seconds: float = 30.0

    @property
    def patterns(self) -> list[str]:
        return [binding.pattern for binding in self.bindings]

    def validate(self) -> list[str]:
        """Valida configurações do roteador.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        for binding in self.bindings:
            if not binding.host_prefix:
                errors.append("ROUTER_BINDINGS contém prefixo vazio")
            if not binding.service_url.startswith(("http://", "https://")):
                errors.append(f"URL inválida para {binding.pattern}: {binding.service_url}")
        return errors


def parse_bindings(raw: str) -> tuple[ServiceBinding, ...]:
    """Converte "prefixo=url,prefixo=url" em bindings (ordem preservada)."""
    bindings: list[ServiceBinding] = []
    for item in raw.split(","):
        prefix, sep, url = item.strip().partition("=")
        if not sep:
            continue
        bindings.append(ServiceBinding(host_prefix=prefix.strip(), service_url=url.strip().rstrip("/")))
    return tuple(bindings)


def _load_edge_router_from_env() -> EdgeRouterSettings:
    """Carrega EdgeRouterSettings de variáveis de ambiente."""
    raw_bindings = os.getenv("ROUTER_BINDINGS", "")
    if raw_bindings:
        bindings = parse_bindings(raw_bindings)
    else:
        stripe_url = os.getenv("STRIPE_SERVICE_URL", DEFAULT_STRIPE_SERVICE_URL).rstrip("/")
        bindings = (ServiceBinding(host_prefix="stripe.", service_url=stripe_url),)
    return EdgeRouterSettings(
        router_name=os.getenv("ROUTER_NAME", "Edge Router"),
        bindings=bindings,
        request_timeout_seconds=float(os.getenv("ROUTER_REQUEST_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_edge_router_settings() -> EdgeRouterSettings:
    """Retorna instância cacheada de EdgeRouterSettings."""
    return _load_edge_router_from_env()
