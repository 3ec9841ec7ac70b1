"""Protocolo do coletor de eventos de notificações de pagamento."""

from __future__ import annotations

from typing import Any, Protocol


class EventSinkProtocol(Protocol):
    """Destino dos efeitos observáveis dos handlers de notificação."""

    def emit(self, name: str, **fields: Any) -> None: ...
