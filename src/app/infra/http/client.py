"""Cliente HTTP base sobre um httpx.AsyncClient compartilhado."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)


class HttpError(Exception):
    """Falha de transporte sem dados sensíveis (sem URL com query, sem headers)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP para chamadas externas.

    Não faz retry: retentativas ficam a cargo de quem chamou o gateway.
    O httpx.AsyncClient é do processo (lifespan); este wrapper não o fecha.
    """

    def __init__(self, transport: httpx.AsyncClient, config: HttpClientConfig | None = None) -> None:
        self._transport = transport
        self._config = config or HttpClientConfig()

    async def send_request(
        self,
        method: str,
        url: str,
        *,
        content: bytes | str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            return await self._transport.request(
                method,
                url,
                content=content,
                headers=merged_headers,
                timeout=self._config.timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"method": method, "error_type": type(exc).__name__})
            raise HttpError("Upstream request timed out") from exc
        except httpx.HTTPError as exc:
            logger.warning("http_transport_error", extra={"method": method, "error_type": type(exc).__name__})
            raise HttpError(str(exc) or type(exc).__name__) from exc
