"""Fixtures das rotas: ambiente isolado e transportes simulados."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from config.settings import (
    get_base_settings,
    get_edge_router_settings,
    get_gateway_settings,
    get_stripe_settings,
)

SETTINGS_ENV_VARS = (
    "ENVIRONMENT",
    "STRIPE_SECRET_KEY",
    "STRIPE_WEBHOOK_SECRET",
    "ALLOWED_ORIGIN",
    "STRIPE_API_BASE_URL",
    "OLLAMA_BASE_URL",
    "ANTHROPIC_API_KEY",
    "OPENAI_API_KEY",
    "GATEWAY_DEFAULT_PROVIDER",
    "ROUTER_BINDINGS",
    "STRIPE_SERVICE_URL",
    "ROUTER_NAME",
)


def _clear_settings_cache() -> None:
    for getter in (
        get_base_settings,
        get_stripe_settings,
        get_gateway_settings,
        get_edge_router_settings,
    ):
        getter.cache_clear()


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[..., None]]:
    """Define variáveis de ambiente e invalida as settings cacheadas."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    _clear_settings_cache()

    def _apply(**values: str) -> None:
        for name, value in values.items():
            monkeypatch.setenv(name, value)
        _clear_settings_cache()

    yield _apply
    _clear_settings_cache()

