"""Despacho de notificações Stripe já verificadas.

Ciclo de vida de uma notificação:
    Received -> Verified -> Parsed -> Dispatched -> Acknowledged
com saídas terminais Rejected (assinatura) e InvalidBody (parse), ambas 400.
A verificação acontece antes de chegar aqui; este módulo cobre Parsed em diante.

Handlers só produzem efeitos observáveis via EventSinkProtocol. Falha de um
handler é logada e não impede o acknowledgement.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from app.domain.billing_events import (
    CheckoutCompleted,
    EventKind,
    InvoicePaymentFailed,
    InvoicePaymentSucceeded,
    NotificationEvent,
    SubscriptionChanged,
    SubscriptionDeleted,
    UnrecognizedEvent,
    parse_notification_event,
)
from app.observability import record_notification

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols import EventSinkProtocol

logger = logging.getLogger(__name__)

NotificationHandler = Callable[[Any, "EventSinkProtocol"], None]

ACKNOWLEDGEMENT: Mapping[str, bool] = MappingProxyType({"received": True})


class NotificationStage(StrEnum):
    """Estágios observáveis do processamento."""

    RECEIVED = "received"
    VERIFIED = "verified"
    PARSED = "parsed"
    DISPATCHED = "dispatched"
    ACKNOWLEDGED = "acknowledged"
    REJECTED = "rejected"
    INVALID_BODY = "invalid_body"


def _on_checkout_completed(event: CheckoutCompleted, sink: EventSinkProtocol) -> None:
    sink.emit(
        "checkout_completed",
        session_id=event.session_id,
        customer=event.customer,
    )


def _on_subscription_changed(event: SubscriptionChanged, sink: EventSinkProtocol) -> None:
    sink.emit(
        "subscription_changed",
        event_type=event.event_type,
        subscription_id=event.subscription_id,
        status=event.status,
    )


def _on_subscription_deleted(event: SubscriptionDeleted, sink: EventSinkProtocol) -> None:
    sink.emit("subscription_cancelled", subscription_id=event.subscription_id)


def _on_payment_failed(event: InvoicePaymentFailed, sink: EventSinkProtocol) -> None:
    sink.emit("payment_failed", invoice_id=event.invoice_id, customer=event.customer)


def _on_payment_succeeded(event: InvoicePaymentSucceeded, sink: EventSinkProtocol) -> None:
    sink.emit("payment_succeeded", invoice_id=event.invoice_id)


def _on_unhandled(event: UnrecognizedEvent, sink: EventSinkProtocol) -> None:
    # no-op: só registra o tipo, nada vai para o sink
    logger.info("notification_unhandled", extra={"event_type": event.event_type})


DEFAULT_HANDLERS: Mapping[str, NotificationHandler] = MappingProxyType(
    {
        EventKind.CHECKOUT_COMPLETED: _on_checkout_completed,
        EventKind.SUBSCRIPTION_CREATED: _on_subscription_changed,
        EventKind.SUBSCRIPTION_UPDATED: _on_subscription_changed,
        EventKind.SUBSCRIPTION_DELETED: _on_subscription_deleted,
        EventKind.INVOICE_PAYMENT_FAILED: _on_payment_failed,
        EventKind.INVOICE_PAYMENT_SUCCEEDED: _on_payment_succeeded,
    }
)


class NotificationDispatcher:
    """Roteia eventos por tipo para uma tabela fixa de handlers.

    Tipos fora da tabela caem no handler no-op (`fallback`).
    """

    def __init__(
        self,
        sink: EventSinkProtocol,
        handlers: Mapping[str, NotificationHandler] | None = None,
        fallback: NotificationHandler = _on_unhandled,
    ) -> None:
        self._sink = sink
        self._handlers = MappingProxyType(dict(handlers if handlers is not None else DEFAULT_HANDLERS))
        self._fallback = fallback

    @property
    def recognized_kinds(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def dispatch(self, event: NotificationEvent) -> bool:
        """Executa o handler do evento.

        Returns:
            True se o tipo tinha handler dedicado.
        """
        handler = self._handlers.get(event.event_type)
        handled = handler is not None
        try:
            (handler or self._fallback)(event, self._sink)
        except Exception:
            logger.exception(
                "notification_handler_failed",
                extra={"event_type": event.event_type},
            )
        record_notification(event.event_type, handled)
        return handled

    def process(self, payload: dict[str, Any]) -> dict[str, bool]:
        """Parseia um payload verificado, despacha e devolve o acknowledgement.

        Raises:
            InvalidBodyError: payload sem `type` válido (estágio InvalidBody).
        """
        event = parse_notification_event(payload)
        logger.info(
            "notification_stage",
            extra={"stage": NotificationStage.PARSED, "event_type": event.event_type},
        )
        handled = self.dispatch(event)
        logger.info(
            "notification_stage",
            extra={
                "stage": NotificationStage.DISPATCHED,
                "event_type": event.event_type,
                "handled": handled,
            },
        )
        logger.info(
            "notification_stage",
            extra={"stage": NotificationStage.ACKNOWLEDGED, "event_type": event.event_type},
        )
        return dict(ACKNOWLEDGEMENT)
