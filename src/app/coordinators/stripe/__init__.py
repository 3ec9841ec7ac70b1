"""Coordenadores de notificações do processador de pagamentos."""

from .notifications import (
    ACKNOWLEDGEMENT,
    DEFAULT_HANDLERS,
    NotificationDispatcher,
    NotificationStage,
)

__all__ = [
    "ACKNOWLEDGEMENT",
    "DEFAULT_HANDLERS",
    "NotificationDispatcher",
    "NotificationStage",
]
