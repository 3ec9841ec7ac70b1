"""POST /webhook: notificações assíncronas do Stripe.

Fluxo:
1. Lê o corpo bruto (nunca re-serializado antes da verificação)
2. Verifica assinatura + janela de replay -> 400 se rejeitada
3. Parseia o JSON -> 400 se inválido
4. Despacha por tipo de evento e responde {"received": true}

O chamador é o Stripe, não um navegador: a resposta não leva CORS.
O Stripe retenta em qualquer resposta não-2xx.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from api.connectors.stripe.webhook import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)
from api.routes.dependencies import get_clock, get_event_sink
from app.coordinators.stripe import NotificationDispatcher, NotificationStage
from app.protocols import EventSinkProtocol
from config.settings import get_base_settings, get_stripe_settings
from utils.errors import InvalidBodyError, NotificationRejectedError, UnconfiguredError

logger = logging.getLogger(__name__)

router = APIRouter()


def _webhook_secret() -> str | None:
    """Secret do endpoint; sem secret só é aceito em development."""
    secret = get_stripe_settings().webhook_secret
    if secret:
        return secret
    if get_base_settings().is_development:
        return None
    raise UnconfiguredError("Webhook secret not configured. Set STRIPE_WEBHOOK_SECRET.")


@router.post("/webhook")
async def receive_webhook(
    request: Request,
    now: int = Depends(get_clock),
    sink: EventSinkProtocol = Depends(get_event_sink),
) -> dict[str, Any]:
    """Recebe, verifica e despacha uma notificação.

    Returns:
        {"received": True} quando verificação e parse passaram.
    """
    settings = get_stripe_settings()
    secret = _webhook_secret()
    raw_body = await request.body()
    logger.info(
        "notification_stage",
        extra={"stage": NotificationStage.RECEIVED, "payload_size": len(raw_body)},
    )

    try:
        payload, signature_result = parse_webhook_request(
            raw_body=raw_body,
            headers=request.headers,
            secret=secret,
            now=now,
            tolerance=settings.webhook_tolerance_seconds,
        )
    except InvalidSignatureError as exc:
        logger.warning(
            "notification_stage",
            extra={
                "stage": NotificationStage.REJECTED,
                "error": str(exc),
            },
        )
        raise NotificationRejectedError(str(exc)) from exc
    except InvalidJsonError as exc:
        logger.warning(
            "notification_stage",
            extra={"stage": NotificationStage.INVALID_BODY, "error": str(exc)},
        )
        raise InvalidBodyError("Invalid JSON") from exc

    if signature_result.skipped:
        logger.warning("signature_skipped", extra={"reason": "webhook_secret_unset"})

    logger.info(
        "webhook_received",
        extra={
            "stage": NotificationStage.VERIFIED,
            "signature_skipped": signature_result.skipped,
            "payload_size": len(raw_body),
        },
    )
    return NotificationDispatcher(sink).process(payload)
