"""Dependências FastAPI compartilhadas pelas rotas.

Objetos de processo (httpx.AsyncClient, sink de eventos) vivem em app.state,
criados no lifespan; testes substituem via app.state ou dependency_overrides.
"""

from __future__ import annotations

import json
import time
from typing import Any

import httpx
from fastapi import Depends, Request

from api.connectors.stripe import create_stripe_client
from app.observability import LoggingEventSink
from app.protocols import EventSinkProtocol, StripeClientProtocol
from config.settings import get_stripe_settings
from utils.errors import ValidationError


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_stripe_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> StripeClientProtocol:
    return create_stripe_client(http_client, get_stripe_settings())


def get_event_sink(request: Request) -> EventSinkProtocol:
    return getattr(request.app.state, "event_sink", None) or LoggingEventSink()


def get_clock() -> int:
    """Instante atual em segundos Unix."""
    return int(time.time())


async def read_json_object(request: Request) -> dict[str, Any]:
    """Lê o corpo como objeto JSON.

    Raises:
        ValidationError: corpo não é JSON ou não é objeto.
    """
    raw = await request.body()
    try:
        payload = json.loads(raw or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError("Invalid JSON body") from exc
    if not isinstance(payload, dict):
        raise ValidationError("JSON body must be an object")
    return payload
