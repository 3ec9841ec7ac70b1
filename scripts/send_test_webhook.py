#!/usr/bin/env python3
"""Assina um evento Stripe de exemplo e envia ao serviço de pagamentos local.

Uso:
    python scripts/send_test_webhook.py --type invoice.payment_failed --send

Padrao: dry-run (so imprime header e corpo). O secret vem de
--secret ou STRIPE_WEBHOOK_SECRET.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path

import httpx

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from api.connectors.stripe.signature import SIGNATURE_HEADER, build_signature_header  # noqa: E402
from app.domain.billing_events import EventKind  # noqa: E402

SAMPLE_OBJECTS: dict[str, dict[str, str]] = {
    EventKind.CHECKOUT_COMPLETED: {"id": "cs_test_1", "customer": "cus_test_1"},
    EventKind.SUBSCRIPTION_CREATED: {"id": "sub_test_1", "status": "active"},
    EventKind.SUBSCRIPTION_UPDATED: {"id": "sub_test_1", "status": "past_due"},
    EventKind.SUBSCRIPTION_DELETED: {"id": "sub_test_1"},
    EventKind.INVOICE_PAYMENT_FAILED: {"id": "in_test_1", "customer": "cus_test_1"},
    EventKind.INVOICE_PAYMENT_SUCCEEDED: {"id": "in_test_1"},
}


@dataclass(frozen=True)
class SignedEvent:
    body: bytes
    signature: str


def build_event(event_type: str, secret: str, timestamp: int) -> SignedEvent:
    payload = {
        "id": f"evt_local_{timestamp}",
        "type": event_type,
        "data": {"object": SAMPLE_OBJECTS.get(event_type, {"id": "obj_local"})},
    }
    body = json.dumps(payload, separators=(",", ":")).encode("utf-8")
    return SignedEvent(body=body, signature=build_signature_header(timestamp, body, secret))


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--type", default=EventKind.CHECKOUT_COMPLETED.value)
    parser.add_argument("--secret", default=os.getenv("STRIPE_WEBHOOK_SECRET", ""))
    parser.add_argument("--url", default="http://127.0.0.1:8081/webhook")
    parser.add_argument("--send", action="store_true", help="envia de fato (padrao: dry-run)")
    args = parser.parse_args()

    if not args.secret:
        parser.error("informe --secret ou defina STRIPE_WEBHOOK_SECRET")

    event = build_event(args.type, args.secret, int(time.time()))
    print(f"{SIGNATURE_HEADER}: {event.signature}")
    print(event.body.decode("utf-8"))

    if not args.send:
        return 0

    response = httpx.post(
        args.url,
        content=event.body,
        headers={SIGNATURE_HEADER: event.signature, "content-type": "application/json"},
        timeout=10.0,
    )
    print(f"-> {response.status_code} {response.text}")
    return 0 if response.is_success else 1


if __name__ == "__main__":
    raise SystemExit(main())
