"""Protocolos e contratos do core da aplicação."""

from .event_sink import EventSinkProtocol
from .stripe_client import StripeClientProtocol

__all__ = [
    "EventSinkProtocol",
    "StripeClientProtocol",
]
