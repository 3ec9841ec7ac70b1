"""Cliente da API Stripe.

Estende HttpClient com o que é específico do Stripe:
- Authorization Bearer com a chave secreta
- corpo e query em form-urlencoded aninhado (ver params.py)
- erro `{"error": {"message": ...}}` convertido em UpstreamError
- falha de transporte convertida em UpstreamUnreachableError (502)
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api.connectors.stripe.params import encode_params
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.observability import elapsed_ms, record_latency
from utils.errors import UpstreamError, UpstreamUnreachableError

if TYPE_CHECKING:
    import httpx

    from config.settings import StripeSettings

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def parse_stripe_error(response_data: Any, status_code: int) -> str:
    """Mensagem de erro do Stripe, com fallback para o status."""
    if isinstance(response_data, dict):
        error_obj = response_data.get("error")
        if isinstance(error_obj, dict) and error_obj.get("message"):
            return str(error_obj["message"])
    return f"Stripe error: {status_code}"


class StripeClient(HttpClient):
    """Cliente HTTP especializado para a API Stripe."""

    def __init__(
        self,
        transport: httpx.AsyncClient,
        secret_key: str,
        base_url: str,
        config: HttpClientConfig | None = None,
    ) -> None:
        if not secret_key or not secret_key.strip():
            raise ValueError("secret_key é obrigatório para chamadas ao Stripe")
        super().__init__(transport, config)
        self._secret_key = secret_key
        self._base_url = base_url.rstrip("/")

    async def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Executa chamada e devolve o JSON de sucesso.

        Em GET os parâmetros vão na query; nos demais métodos, no corpo.

        Raises:
            UpstreamError: resposta não-2xx ou JSON inválido
            UpstreamUnreachableError: falha de transporte
        """
        method = method.upper()
        encoded = encode_params(params) if params else ""
        url = f"{self._base_url}{path}"
        content: str | None = None
        if encoded and method == "GET":
            url = f"{url}{'&' if '?' in url else '?'}{encoded}"
        elif encoded:
            content = encoded

        headers = {
            "Authorization": f"Bearer {self._secret_key}",
            "Content-Type": FORM_CONTENT_TYPE,
        }
        operation = f"{method} {path}"
        started_at = time.perf_counter()
        try:
            response = await self.send_request(method, url, content=content, headers=headers)
        except HttpError as exc:
            raise UpstreamUnreachableError(str(exc), provider="stripe") from exc

        record_latency("stripe", operation, elapsed_ms(started_at), response.status_code)
        return self._process_response(response, operation)

    def _process_response(self, response: httpx.Response, operation: str) -> dict[str, Any]:
        try:
            data = response.json()
        except json.JSONDecodeError as exc:
            logger.error(
                "stripe_response_invalid_json",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise UpstreamError(
                f"Stripe error: {response.status_code}",
                upstream_status=response.status_code,
            ) from exc

        if not response.is_success:
            message = parse_stripe_error(data, response.status_code)
            logger.warning(
                "stripe_request_failed",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise UpstreamError(message, upstream_status=response.status_code)

        if not isinstance(data, dict):
            raise UpstreamError("Stripe error: unexpected response", upstream_status=response.status_code)
        return data


def create_stripe_client(transport: httpx.AsyncClient, settings: StripeSettings) -> StripeClient:
    """Factory com timeout e URL base vindos das settings."""
    return StripeClient(
        transport,
        secret_key=settings.secret_key,
        base_url=settings.api_base_url,
        config=HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
    )
