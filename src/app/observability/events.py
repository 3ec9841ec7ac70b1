"""Sink de eventos de negócio baseado em logging estruturado."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class LoggingEventSink:
    """Implementação padrão de EventSinkProtocol: um log por evento."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def emit(self, name: str, **fields: Any) -> None:
        self._logger.info("billing_event", extra={"event_name": name, **fields})
