"""Webhook Stripe: assinatura e parsing seguro."""

from ..signature import SignatureFailure, SignatureResult, verify_stripe_signature
from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)

__all__ = [
    "InvalidJsonError",
    "InvalidSignatureError",
    "SignatureFailure",
    "SignatureResult",
    "WebhookRequestError",
    "parse_webhook_request",
    "verify_stripe_signature",
]
