"""Verificação de assinatura dos webhooks Stripe (HMAC-SHA256 + janela de replay).

Formato do header `stripe-signature`:
    t=<unix seconds>,v1=<hex>,v1=<hex>,v0=<ignorado>

Vários `v1` podem vir juntos durante rotação de secret; basta um casar.
A assinatura cobre `"{t}." + corpo bruto`, então o corpo nunca pode ser
re-serializado antes desta etapa.
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass, field
from enum import StrEnum

SIGNATURE_HEADER = "stripe-signature"
SIGNATURE_SCHEME = "v1"
TIMESTAMP_KEY = "t"
DEFAULT_TOLERANCE_SECONDS = 300


class SignatureFailure(StrEnum):
    """Motivo de rejeição da assinatura."""

    MALFORMED_HEADER = "malformed_header"
    STALE_SIGNATURE = "stale_signature"
    SIGNATURE_MISMATCH = "signature_mismatch"


@dataclass(frozen=True, slots=True)
class ParsedSignatureHeader:
    """Header decomposto: um timestamp e os candidatos v1."""

    timestamp: int
    signatures: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da verificação.

    Attributes:
        valid: True se a assinatura foi aceita (ou a verificação foi pulada)
        skipped: True se não havia secret e a verificação não rodou
        error: Motivo da falha quando valid=False
    """

    valid: bool
    skipped: bool = False
    error: SignatureFailure | None = None


class MalformedSignatureHeader(ValueError):
    """Header sem timestamp inteiro ou sem nenhum valor v1."""


def parse_signature_header(header: str | None) -> ParsedSignatureHeader:
    """Decompõe o header em timestamp + candidatos v1.

    Chaves duplicadas são permitidas; todos os `v1` são coletados e, para `t`,
    vale a última ocorrência.

    Raises:
        MalformedSignatureHeader: sem timestamp válido ou sem v1.
    """
    if not header:
        raise MalformedSignatureHeader("Missing stripe-signature header")

    timestamp_raw: str | None = None
    signatures: list[str] = []
    for part in header.split(","):
        key, sep, value = part.strip().partition("=")
        if not sep:
            continue
        if key == TIMESTAMP_KEY:
            timestamp_raw = value.strip()
        elif key == SIGNATURE_SCHEME and value.strip():
            signatures.append(value.strip())

    if not timestamp_raw or not signatures:
        raise MalformedSignatureHeader("Invalid stripe-signature format")
    try:
        timestamp = int(timestamp_raw)
    except ValueError as exc:
        raise MalformedSignatureHeader("Invalid stripe-signature timestamp") from exc

    return ParsedSignatureHeader(timestamp=timestamp, signatures=tuple(signatures))


def compute_signature(timestamp: int, payload: bytes, secret: str) -> str:
    """HMAC-SHA256 hex de `"{timestamp}." + payload` com o secret do endpoint."""
    signed_payload = f"{timestamp}.".encode() + payload
    return hmac.new(secret.encode("utf-8"), signed_payload, hashlib.sha256).hexdigest()


def build_signature_header(timestamp: int, payload: bytes, secret: str) -> str:
    """Monta um header válido para o payload (uso em testes e ferramentas locais)."""
    return f"{TIMESTAMP_KEY}={timestamp},{SIGNATURE_SCHEME}={compute_signature(timestamp, payload, secret)}"


def verify_stripe_signature(
    header: str | None,
    payload: bytes,
    secret: str,
    now: int,
    tolerance: int = DEFAULT_TOLERANCE_SECONDS,
) -> SignatureResult:
    """Valida autenticidade e frescor de um webhook.

    Função pura: `now` vem do chamador.

    Args:
        header: Valor do header stripe-signature
        payload: Corpo bruto, exatamente como recebido
        secret: Secret do endpoint (whsec_...)
        now: Instante atual em segundos Unix
        tolerance: Diferença máxima aceita entre `now` e o timestamp

    Returns:
        SignatureResult com valid=True ou o motivo da falha
    """
    try:
        parsed = parse_signature_header(header)
    except MalformedSignatureHeader:
        return SignatureResult(valid=False, error=SignatureFailure.MALFORMED_HEADER)

    if abs(now - parsed.timestamp) > tolerance:
        return SignatureResult(valid=False, error=SignatureFailure.STALE_SIGNATURE)

    expected = compute_signature(parsed.timestamp, payload, secret)
    # compare_digest em todos os candidatos, sem curto-circuito
    expected_bytes = expected.encode("ascii")
    matches = [
        hmac.compare_digest(expected_bytes, candidate.encode("utf-8"))
        for candidate in parsed.signatures
    ]
    if not any(matches):
        return SignatureResult(valid=False, error=SignatureFailure.SIGNATURE_MISMATCH)

    return SignatureResult(valid=True)
