"""Testes dos value objects de checkout e portal."""

from __future__ import annotations

import pytest

from app.domain.billing import CheckoutRequest, PortalRequest
from utils.errors import ValidationError


def test_checkout_request_requires_price_id() -> None:
    with pytest.raises(ValidationError) as exc_info:
        CheckoutRequest.from_payload({})

    assert exc_info.value.message == "price_id is required"
    assert exc_info.value.status_code == 400


def test_checkout_request_empty_price_id_is_missing() -> None:
    with pytest.raises(ValidationError):
        CheckoutRequest.from_payload({"price_id": ""})


def test_checkout_request_rejects_non_string_price_id() -> None:
    with pytest.raises(ValidationError):
        CheckoutRequest.from_payload({"price_id": 123})


def test_checkout_request_keeps_scalar_metadata() -> None:
    request = CheckoutRequest.from_payload(
        {"price_id": "price_1", "metadata": {"plan": "pro", "trial": True, "skip": None}}
    )

    assert request.metadata == {"plan": "pro", "trial": True}
    assert request.customer_email is None


@pytest.mark.parametrize("metadata", [["a"], {"nested": {"a": 1}}, "text"])
def test_checkout_request_rejects_structured_metadata(metadata: object) -> None:
    with pytest.raises(ValidationError):
        CheckoutRequest.from_payload({"price_id": "price_1", "metadata": metadata})


def test_portal_request_requires_customer_id() -> None:
    with pytest.raises(ValidationError) as exc_info:
        PortalRequest.from_payload({"return_url": "https://x"})

    assert exc_info.value.message == "customer_id is required"


def test_portal_request_success() -> None:
    request = PortalRequest.from_payload({"customer_id": "cus_1"})

    assert request.customer_id == "cus_1"
    assert request.return_url is None
