"""Testes end-to-end do roteador por hostname."""

from __future__ import annotations

import httpx
import pytest

from app.app import create_router_app
from tests.fakes.fake_upstream import RecordingUpstream, asgi_client

PAYMENTS = "http://payments.internal:8081"


def _build_app(upstream: RecordingUpstream):
    app = create_router_app()
    app.state.http_client = upstream.client()
    return app


@pytest.fixture
def router_env(settings_env) -> None:
    settings_env(STRIPE_SERVICE_URL=PAYMENTS)


@pytest.mark.asyncio
async def test_unmatched_host_returns_descriptor(router_env) -> None:
    upstream = RecordingUpstream(lambda request: httpx.Response(200))
    app = _build_app(upstream)

    async with asgi_client(app, host="www.example.com") as client:
        response = await client.get("/about")

    assert response.status_code == 200
    assert response.json() == {
        "status": "Edge Router",
        "host": "www.example.com",
        "path": "/about",
        "routes": ["stripe.*"],
    }
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_matched_host_is_delegated_with_original_host(router_env) -> None:
    upstream = RecordingUpstream(lambda request: httpx.Response(201, json={"url": "https://pay"}))
    app = _build_app(upstream)

    async with asgi_client(app, host="stripe.example.com") as client:
        response = await client.post(
            "/checkout?ref=1",
            content=b'{"price_id":"price_1"}',
            headers={"content-type": "application/json"},
        )

    assert response.status_code == 201
    assert response.json() == {"url": "https://pay"}
    (outbound,) = upstream.requests
    assert str(outbound.url) == f"{PAYMENTS}/checkout?ref=1"
    assert outbound.headers["host"] == "stripe.example.com"
    assert outbound.content == b'{"price_id":"price_1"}'


@pytest.mark.asyncio
async def test_host_prefix_must_be_at_start(router_env) -> None:
    upstream = RecordingUpstream(lambda request: httpx.Response(200))
    app = _build_app(upstream)

    async with asgi_client(app, host="pay.stripe.example.com") as client:
        response = await client.get("/")

    assert response.json()["routes"] == ["stripe.*"]
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_custom_bindings_from_env(settings_env) -> None:
    settings_env(ROUTER_BINDINGS="ai.=http://gateway.internal,stripe.=http://payments.internal")
    upstream = RecordingUpstream(lambda request: httpx.Response(200, text="ok"))
    app = _build_app(upstream)

    async with asgi_client(app, host="ai.example.com") as client:
        response = await client.get("/api/tags")

    assert response.text == "ok"
    assert str(upstream.requests[0].url) == "http://gateway.internal/api/tags"


@pytest.mark.asyncio
async def test_unreachable_service_is_502(router_env) -> None:
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    app = _build_app(RecordingUpstream(_refuse))

    async with asgi_client(app, host="stripe.example.com") as client:
        response = await client.get("/health")

    assert response.status_code == 502
    assert response.json()["backend"] == PAYMENTS


@pytest.mark.asyncio
async def test_delegated_path_keeps_percent_escapes(router_env) -> None:
    upstream = RecordingUpstream(lambda request: httpx.Response(204))
    app = _build_app(upstream)

    async with asgi_client(app, host="stripe.example.com") as client:
        response = await client.get("/files/a%2Fb?name=x%26y")

    assert response.status_code == 204
    assert upstream.requests[0].url.raw_path == b"/files/a%2Fb?name=x%26y"
