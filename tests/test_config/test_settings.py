"""Testes para config/settings (pagamentos, gateway, roteador e base)."""

from __future__ import annotations

import pytest

from config.settings import (
    EdgeRouterSettings,
    GatewaySettings,
    ProxyTarget,
    ServiceBinding,
    StripeSettings,
    default_proxy_targets,
    parse_bindings,
)
from config.settings.base.core import _load_base_from_env
from config.settings.edge_router import _load_edge_router_from_env
from config.settings.gateway import _load_gateway_from_env
from config.settings.stripe import _load_stripe_from_env


class TestStripeSettings:
    """Testes para StripeSettings."""

    def test_default_values(self) -> None:
        """Valida valores padrão."""
        settings = StripeSettings()

        assert settings.api_base_url == "https://api.stripe.com/v1"
        assert settings.webhook_tolerance_seconds == 300
        assert settings.checkout_source == "brand-kit"
        assert settings.is_configured is False

    def test_immutable(self) -> None:
        """Valida que dataclass é imutável (frozen=True)."""
        settings = StripeSettings()

        with pytest.raises(AttributeError):
            settings.secret_key = "sk"  # type: ignore[misc]

    def test_resolve_origin_chain(self) -> None:
        """Origin do request > allowed_origin > default_origin."""
        settings = StripeSettings(allowed_origin="https://allowed.test")

        assert settings.resolve_origin("https://req.test") == "https://req.test"
        assert settings.resolve_origin(None) == "https://allowed.test"
        assert StripeSettings().resolve_origin("") == "https://brand-kit.pages.dev"

    def test_missing_secrets_do_not_count_as_errors(self) -> None:
        """Secrets ausentes aparecem em missing_secrets, não em validate."""
        settings = StripeSettings()

        assert settings.validate() == []
        assert settings.missing_secrets() == ["STRIPE_SECRET_KEY", "STRIPE_WEBHOOK_SECRET"]

    def test_validate_rejects_non_positive_tolerance(self) -> None:
        """Tolerância deve ser positiva."""
        errors = StripeSettings(webhook_tolerance_seconds=0).validate()

        assert any("TOLERANCE" in error for error in errors)

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Carrega valores das variáveis de ambiente."""
        monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_1")
        monkeypatch.setenv("STRIPE_WEBHOOK_SECRET", "whsec_1")
        monkeypatch.setenv("ALLOWED_ORIGIN", "https://brand.test")
        monkeypatch.setenv("STRIPE_API_BASE_URL", "http://stripe-mock:12111/v1/")

        settings = _load_stripe_from_env()

        assert settings.is_configured is True
        assert settings.webhook_secret == "whsec_1"
        assert settings.allowed_origin == "https://brand.test"
        assert settings.api_base_url == "http://stripe-mock:12111/v1"


class TestGatewaySettings:
    """Testes para GatewaySettings e ProxyTarget."""

    def test_default_targets(self) -> None:
        """Tabela padrão tem ollama, claude e openai."""
        providers = GatewaySettings().providers

        assert set(providers) == {"ollama", "claude", "openai"}
        assert providers["ollama"].credential_header is None
        assert providers["claude"].origin == "https://api.anthropic.com"

    def test_credential_value_applies_prefix(self) -> None:
        """Prefixo é aplicado ao valor da credencial."""
        target = ProxyTarget(
            provider="openai",
            origin="https://api.openai.com",
            credential_header="Authorization",
            credential_source="OPENAI_API_KEY",
            credential_prefix="Bearer ",
        )

        assert target.credential_value({"OPENAI_API_KEY": "sk-1"}) == "Bearer sk-1"
        assert target.credential_value({"OPENAI_API_KEY": ""}) is None
        assert target.credential_value({}) is None

    def test_validate_unknown_default_provider(self) -> None:
        """Provider padrão precisa existir na tabela."""
        errors = GatewaySettings(default_provider="sentinel").validate()

        assert errors == ["GATEWAY_DEFAULT_PROVIDER desconhecido: sentinel"]

    def test_missing_credentials_lists_providers(self) -> None:
        """Providers com credencial prevista e sem valor."""
        settings = GatewaySettings(credentials={"ANTHROPIC_API_KEY": "sk-ant"})

        assert settings.missing_credentials() == ["openai"]

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """OLLAMA_BASE_URL e credenciais vêm do ambiente."""
        monkeypatch.setenv("OLLAMA_BASE_URL", "http://gpu-box:11434/")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant")
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        settings = _load_gateway_from_env()

        assert settings.providers["ollama"].origin == "http://gpu-box:11434"
        assert settings.credentials["ANTHROPIC_API_KEY"] == "sk-ant"
        assert settings.credentials["OPENAI_API_KEY"] == ""

    def test_credentials_are_read_only(self) -> None:
        """Tabela de credenciais não aceita escrita."""
        settings = _load_gateway_from_env()

        with pytest.raises(TypeError):
            settings.credentials["ANTHROPIC_API_KEY"] = "x"  # type: ignore[index]

    def test_default_proxy_targets_custom_ollama(self) -> None:
        """Origin do ollama é parametrizável."""
        (ollama, *_rest) = default_proxy_targets("http://local:1")

        assert ollama == ProxyTarget(provider="ollama", origin="http://local:1")


class TestEdgeRouterSettings:
    """Testes para EdgeRouterSettings."""

    def test_default_binding(self) -> None:
        """Binding padrão encaminha stripe.* para o serviço local."""
        settings = EdgeRouterSettings()

        assert settings.patterns == ["stripe.*"]
        assert settings.bindings[0].service_url == "http://127.0.0.1:8081"

    def test_parse_bindings_preserves_order(self) -> None:
        """Ordem do env é a ordem de avaliação."""
        bindings = parse_bindings("ai.=http://gw:8082/, stripe.=http://pay:8081,invalid")

        assert bindings == (
            ServiceBinding(host_prefix="ai.", service_url="http://gw:8082"),
            ServiceBinding(host_prefix="stripe.", service_url="http://pay:8081"),
        )

    def test_validate_rejects_bad_url(self) -> None:
        """URL de serviço precisa de esquema http(s)."""
        settings = EdgeRouterSettings(bindings=(ServiceBinding("stripe.", "pay:8081"),))

        assert settings.validate() == ["URL inválida para stripe.*: pay:8081"]

    def test_load_from_env_uses_stripe_service_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Sem ROUTER_BINDINGS, STRIPE_SERVICE_URL define o binding."""
        monkeypatch.delenv("ROUTER_BINDINGS", raising=False)
        monkeypatch.setenv("STRIPE_SERVICE_URL", "http://payments:8081/")

        settings = _load_edge_router_from_env()

        assert settings.bindings == (ServiceBinding("stripe.", "http://payments:8081"),)


class TestBaseSettings:
    """Testes para BaseSettings."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGING", "staging"), ("anything", "development")],
    )
    def test_environment_parsing(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        """Aliases de ambiente são normalizados."""
        monkeypatch.setenv("ENVIRONMENT", raw)

        assert _load_base_from_env().environment == expected
