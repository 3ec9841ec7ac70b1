"""Testes do roteamento por hostname."""

from __future__ import annotations

from app.services import describe_router, match_binding
from config.settings import ServiceBinding

BINDINGS = (
    ServiceBinding(host_prefix="stripe.", service_url="http://127.0.0.1:8081"),
    ServiceBinding(host_prefix="ai.", service_url="http://127.0.0.1:8082"),
)


def test_match_binding_by_literal_prefix() -> None:
    binding = match_binding("stripe.example.com", BINDINGS)

    assert binding is BINDINGS[0]


def test_match_binding_first_match_wins() -> None:
    overlapping = (
        ServiceBinding(host_prefix="stripe.", service_url="http://first"),
        ServiceBinding(host_prefix="stripe.eu.", service_url="http://second"),
    )

    assert match_binding("stripe.eu.example.com", overlapping).service_url == "http://first"


def test_match_binding_is_not_a_pattern() -> None:
    assert match_binding("www.stripe.example.com", BINDINGS) is None
    assert match_binding("stripeXexample.com", BINDINGS) is None


def test_match_binding_empty_host() -> None:
    assert match_binding("", BINDINGS) is None


def test_describe_router_lists_patterns() -> None:
    descriptor = describe_router(
        "Edge Router", "www.example.com", "/about", [b.pattern for b in BINDINGS]
    )

    assert descriptor == {
        "status": "Edge Router",
        "host": "www.example.com",
        "path": "/about",
        "routes": ["stripe.*", "ai.*"],
    }
