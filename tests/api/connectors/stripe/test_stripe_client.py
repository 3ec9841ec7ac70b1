"""Testes do cliente Stripe com transporte simulado."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.stripe.client import StripeClient, parse_stripe_error
from utils.errors import UpstreamError, UpstreamUnreachableError

BASE_URL = "https://api.stripe.test/v1"


def _client(handler) -> tuple[StripeClient, httpx.AsyncClient]:
    transport = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return StripeClient(transport, secret_key="sk_test_123", base_url=BASE_URL), transport


@pytest.mark.asyncio
async def test_post_sends_form_body_with_bearer_auth() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"id": "cs_1", "url": "https://checkout.stripe.test/cs_1"})

    client, transport = _client(handler)
    async with transport:
        data = await client.request(
            "POST",
            "/checkout/sessions",
            {"mode": "subscription", "line_items": [{"price": "price_1", "quantity": 1}]},
        )

    assert data["id"] == "cs_1"
    request = captured[0]
    assert request.method == "POST"
    assert str(request.url) == f"{BASE_URL}/checkout/sessions"
    assert request.headers["authorization"] == "Bearer sk_test_123"
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"
    assert request.content == (
        b"mode=subscription&line_items[0][price]=price_1&line_items[0][quantity]=1"
    )


@pytest.mark.asyncio
async def test_get_sends_params_in_query() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"data": []})

    client, transport = _client(handler)
    async with transport:
        await client.request("GET", "/prices", {"active": True, "limit": 20})

    request = captured[0]
    assert request.url.path == "/v1/prices"
    assert request.url.params["active"] == "true"
    assert request.url.params["limit"] == "20"
    assert request.content == b""


@pytest.mark.asyncio
async def test_error_response_raises_with_stripe_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": {"message": "No such price: 'price_x'"}})

    client, transport = _client(handler)
    async with transport:
        with pytest.raises(UpstreamError) as exc_info:
            await client.request("POST", "/checkout/sessions", {"mode": "subscription"})

    assert exc_info.value.message == "No such price: 'price_x'"
    assert exc_info.value.status_code == 500
    assert exc_info.value.upstream_status == 400


@pytest.mark.asyncio
async def test_invalid_json_response_raises_upstream_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, content=b"<html>bad gateway</html>")

    client, transport = _client(handler)
    async with transport:
        with pytest.raises(UpstreamError) as exc_info:
            await client.request("GET", "/prices")

    assert exc_info.value.message == "Stripe error: 502"


@pytest.mark.asyncio
async def test_transport_failure_raises_unreachable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client, transport = _client(handler)
    async with transport:
        with pytest.raises(UpstreamUnreachableError) as exc_info:
            await client.request("GET", "/prices")

    assert exc_info.value.status_code == 502
    assert exc_info.value.provider == "stripe"


def test_empty_secret_key_is_rejected() -> None:
    with pytest.raises(ValueError):
        StripeClient(httpx.AsyncClient(), secret_key="  ", base_url=BASE_URL)


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ({"error": {"message": "Card declined"}}, "Card declined"),
        ({"error": {}}, "Stripe error: 402"),
        ("not-a-dict", "Stripe error: 402"),
    ],
)
def test_parse_stripe_error(data: object, expected: str) -> None:
    assert parse_stripe_error(data, 402) == expected
