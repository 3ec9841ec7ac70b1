"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    GatewayError,
    InvalidBodyError,
    NotFoundError,
    NotificationRejectedError,
    UnconfiguredError,
    UnknownProviderError,
    UpstreamError,
    UpstreamUnreachableError,
    ValidationError,
)

__all__ = [
    "GatewayError",
    "InvalidBodyError",
    "NotFoundError",
    "NotificationRejectedError",
    "UnconfiguredError",
    "UnknownProviderError",
    "UpstreamError",
    "UpstreamUnreachableError",
    "ValidationError",
]
