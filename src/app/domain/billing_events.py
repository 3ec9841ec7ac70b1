"""Eventos de notificação do processador de pagamentos.

União discriminada pelo `type` do evento. Tipos não reconhecidos viram
`UnrecognizedEvent`, que é uma variante válida e nunca um erro.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from utils.errors import InvalidBodyError


class EventKind(StrEnum):
    """Tipos de evento com handler dedicado."""

    CHECKOUT_COMPLETED = "checkout.session.completed"
    SUBSCRIPTION_CREATED = "customer.subscription.created"
    SUBSCRIPTION_UPDATED = "customer.subscription.updated"
    SUBSCRIPTION_DELETED = "customer.subscription.deleted"
    INVOICE_PAYMENT_FAILED = "invoice.payment_failed"
    INVOICE_PAYMENT_SUCCEEDED = "invoice.payment_succeeded"


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return str(value) if value is not None else None


@dataclass(frozen=True, slots=True)
class CheckoutCompleted:
    event_type: str
    session_id: str | None
    customer: str | None


@dataclass(frozen=True, slots=True)
class SubscriptionChanged:
    """Assinatura criada ou atualizada."""

    event_type: str
    subscription_id: str | None
    status: str | None


@dataclass(frozen=True, slots=True)
class SubscriptionDeleted:
    event_type: str
    subscription_id: str | None


@dataclass(frozen=True, slots=True)
class InvoicePaymentFailed:
    event_type: str
    invoice_id: str | None
    customer: str | None


@dataclass(frozen=True, slots=True)
class InvoicePaymentSucceeded:
    event_type: str
    invoice_id: str | None


@dataclass(frozen=True, slots=True)
class UnrecognizedEvent:
    """Evento sem handler: mantém o objeto aninhado bruto."""

    event_type: str
    data: dict[str, Any] = field(default_factory=dict)


NotificationEvent = (
    CheckoutCompleted
    | SubscriptionChanged
    | SubscriptionDeleted
    | InvoicePaymentFailed
    | InvoicePaymentSucceeded
    | UnrecognizedEvent
)


def _data_object(payload: dict[str, Any]) -> dict[str, Any]:
    data = payload.get("data")
    obj = data.get("object") if isinstance(data, dict) else None
    return obj if isinstance(obj, dict) else {}


def parse_notification_event(payload: dict[str, Any]) -> NotificationEvent:
    """Converte o payload JSON do webhook na variante correspondente.

    Raises:
        InvalidBodyError: se `type` estiver ausente ou não for string.
    """
    event_type = payload.get("type")
    if not isinstance(event_type, str) or not event_type:
        raise InvalidBodyError("Invalid event: missing type")

    obj = _data_object(payload)
    try:
        kind = EventKind(event_type)
    except ValueError:
        return UnrecognizedEvent(event_type=event_type, data=obj)

    if kind is EventKind.CHECKOUT_COMPLETED:
        return CheckoutCompleted(event_type, _optional_str(obj, "id"), _optional_str(obj, "customer"))
    if kind in (EventKind.SUBSCRIPTION_CREATED, EventKind.SUBSCRIPTION_UPDATED):
        return SubscriptionChanged(event_type, _optional_str(obj, "id"), _optional_str(obj, "status"))
    if kind is EventKind.SUBSCRIPTION_DELETED:
        return SubscriptionDeleted(event_type, _optional_str(obj, "id"))
    if kind is EventKind.INVOICE_PAYMENT_FAILED:
        return InvoicePaymentFailed(event_type, _optional_str(obj, "id"), _optional_str(obj, "customer"))
    return InvoicePaymentSucceeded(event_type, _optional_str(obj, "id"))
