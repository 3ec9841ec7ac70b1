"""Verificação de assinatura e parse do webhook Stripe (sem PII nos erros)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..signature import (
    DEFAULT_TOLERANCE_SECONDS,
    SIGNATURE_HEADER,
    SignatureResult,
    verify_stripe_signature,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida, ausente ou fora da janela de tolerância."""


class InvalidJsonError(WebhookRequestError):
    """Corpo verificado mas não é um objeto JSON."""


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    now: int,
    tolerance: int = DEFAULT_TOLERANCE_SECONDS,
) -> tuple[dict[str, object], SignatureResult]:
    """Valida assinatura e só então parseia o JSON.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (chaves em minúsculas)
        secret: Secret do endpoint; None pula a verificação
        now: Instante atual em segundos Unix
        tolerance: Janela de replay em segundos

    Raises:
        InvalidSignatureError: Se a assinatura for rejeitada
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto

    Returns:
        (payload dict, SignatureResult)
    """
    if secret:
        signature_result = verify_stripe_signature(
            headers.get(SIGNATURE_HEADER),
            raw_body,
            secret,
            now=now,
            tolerance=tolerance,
        )
    else:
        signature_result = SignatureResult(valid=True, skipped=True)

    if not signature_result.valid:
        reason = signature_result.error or "invalid_signature"
        raise InvalidSignatureError(str(reason))

    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload, signature_result
