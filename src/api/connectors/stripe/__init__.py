"""Conector Stripe: cliente da API, codec de parâmetros e webhook."""

from .client import StripeClient, create_stripe_client, parse_stripe_error
from .params import CyclicInputError, encode_params, flatten_params, unflatten_params
from .signature import (
    SIGNATURE_HEADER,
    SignatureFailure,
    SignatureResult,
    build_signature_header,
    verify_stripe_signature,
)

__all__ = [
    "SIGNATURE_HEADER",
    "CyclicInputError",
    "SignatureFailure",
    "SignatureResult",
    "StripeClient",
    "build_signature_header",
    "create_stripe_client",
    "encode_params",
    "flatten_params",
    "parse_stripe_error",
    "unflatten_params",
    "verify_stripe_signature",
]
