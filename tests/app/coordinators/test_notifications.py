"""Testes do despacho de notificações Stripe."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from app.coordinators.stripe import DEFAULT_HANDLERS, NotificationDispatcher, NotificationStage
from app.domain.billing_events import (
    CheckoutCompleted,
    EventKind,
    InvoicePaymentSucceeded,
    SubscriptionChanged,
    UnrecognizedEvent,
    parse_notification_event,
)
from tests.fakes.fake_event_sink import FakeEventSink
from utils.errors import InvalidBodyError


def _payload(event_type: str, obj: dict[str, Any] | None = None) -> dict[str, Any]:
    return {"id": "evt_1", "type": event_type, "data": {"object": obj or {}}}


def test_parse_checkout_completed() -> None:
    event = parse_notification_event(
        _payload("checkout.session.completed", {"id": "cs_1", "customer": "cus_1"})
    )

    assert event == CheckoutCompleted("checkout.session.completed", "cs_1", "cus_1")


@pytest.mark.parametrize(
    "event_type", ["customer.subscription.created", "customer.subscription.updated"]
)
def test_parse_subscription_created_and_updated(event_type: str) -> None:
    event = parse_notification_event(_payload(event_type, {"id": "sub_1", "status": "active"}))

    assert event == SubscriptionChanged(event_type, "sub_1", "active")


def test_parse_unknown_type_is_unrecognized_not_error() -> None:
    event = parse_notification_event(_payload("charge.refunded", {"id": "ch_1"}))

    assert isinstance(event, UnrecognizedEvent)
    assert event.data == {"id": "ch_1"}


def test_parse_tolerates_missing_data_object() -> None:
    event = parse_notification_event({"type": "invoice.payment_succeeded"})

    assert event == InvoicePaymentSucceeded("invoice.payment_succeeded", None)


@pytest.mark.parametrize("payload", [{}, {"type": 42}, {"type": ""}])
def test_parse_without_type_is_invalid_body(payload: dict[str, Any]) -> None:
    with pytest.raises(InvalidBodyError) as exc_info:
        parse_notification_event(payload)

    assert exc_info.value.status_code == 400


def test_every_event_kind_has_a_handler() -> None:
    assert set(DEFAULT_HANDLERS) == set(EventKind)


@pytest.mark.parametrize(
    ("event_type", "obj", "expected"),
    [
        (
            "checkout.session.completed",
            {"id": "cs_1", "customer": "cus_1"},
            ("checkout_completed", {"session_id": "cs_1", "customer": "cus_1"}),
        ),
        (
            "customer.subscription.updated",
            {"id": "sub_1", "status": "past_due"},
            (
                "subscription_changed",
                {
                    "event_type": "customer.subscription.updated",
                    "subscription_id": "sub_1",
                    "status": "past_due",
                },
            ),
        ),
        (
            "customer.subscription.deleted",
            {"id": "sub_1"},
            ("subscription_cancelled", {"subscription_id": "sub_1"}),
        ),
        (
            "invoice.payment_failed",
            {"id": "in_1", "customer": "cus_1"},
            ("payment_failed", {"invoice_id": "in_1", "customer": "cus_1"}),
        ),
        (
            "invoice.payment_succeeded",
            {"id": "in_1"},
            ("payment_succeeded", {"invoice_id": "in_1"}),
        ),
    ],
)
def test_process_emits_one_event_per_kind(
    event_type: str, obj: dict[str, Any], expected: tuple[str, dict[str, Any]]
) -> None:
    sink = FakeEventSink()

    ack = NotificationDispatcher(sink).process(_payload(event_type, obj))

    assert ack == {"received": True}
    assert sink.events == [expected]


def test_unrecognized_kind_is_acknowledged_without_sink_effects() -> None:
    sink = FakeEventSink()

    ack = NotificationDispatcher(sink).process(_payload("charge.refunded"))

    assert ack == {"received": True}
    assert sink.events == []


def test_failing_handler_does_not_block_acknowledgement(caplog: pytest.LogCaptureFixture) -> None:
    def _boom(event: Any, sink: Any) -> None:
        raise RuntimeError("downstream unavailable")

    sink = FakeEventSink()
    dispatcher = NotificationDispatcher(sink, handlers={EventKind.INVOICE_PAYMENT_FAILED: _boom})

    with caplog.at_level(logging.ERROR):
        ack = dispatcher.process(_payload("invoice.payment_failed", {"id": "in_1"}))

    assert ack == {"received": True}
    assert any(record.getMessage() == "notification_handler_failed" for record in caplog.records)


def test_dispatch_reports_whether_kind_was_recognized() -> None:
    dispatcher = NotificationDispatcher(FakeEventSink())

    assert dispatcher.dispatch(InvoicePaymentSucceeded("invoice.payment_succeeded", "in_1")) is True
    assert dispatcher.dispatch(UnrecognizedEvent("charge.refunded")) is False
    assert EventKind.CHECKOUT_COMPLETED in dispatcher.recognized_kinds


def test_process_invalid_body_reaches_no_handler() -> None:
    sink = FakeEventSink()

    with pytest.raises(InvalidBodyError):
        NotificationDispatcher(sink).process({"data": {}})

    assert sink.events == []


def test_process_logs_parsed_dispatched_and_acknowledged_stages(
    caplog: pytest.LogCaptureFixture,
) -> None:
    dispatcher = NotificationDispatcher(FakeEventSink())

    with caplog.at_level(logging.INFO, logger="app.coordinators.stripe.notifications"):
        dispatcher.process(_payload("charge.refunded"))

    stages = [
        (record.stage, getattr(record, "handled", None))
        for record in caplog.records
        if record.getMessage() == "notification_stage"
    ]
    assert stages == [
        (NotificationStage.PARSED, None),
        (NotificationStage.DISPATCHED, False),
        (NotificationStage.ACKNOWLEDGED, None),
    ]
