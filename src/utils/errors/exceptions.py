"""Exceções de domínio do gateway, convertidas em envelope JSON na borda HTTP."""

from __future__ import annotations

from typing import Any


class GatewayError(Exception):
    """Base para erros que viram resposta `{"error": message}`.

    Attributes:
        message: Texto exposto ao chamador
        status_code: Status HTTP correspondente
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def extra_fields(self) -> dict[str, Any]:
        """Campos adicionais incluídos no envelope de erro."""
        return {}


class ValidationError(GatewayError):
    """Entrada do chamador ausente ou inválida."""

    status_code = 400


class UnconfiguredError(GatewayError):
    """Secret obrigatório do serviço não configurado."""

    status_code = 503


class NotFoundError(GatewayError):
    """Combinação método/path sem rota."""

    status_code = 404

    def __init__(self, routes: list[str], message: str = "Not found") -> None:
        super().__init__(message)
        self.routes = list(routes)

    def extra_fields(self) -> dict[str, Any]:
        return {"routes": self.routes}


class InvalidBodyError(GatewayError):
    """Corpo de notificação verificado mas não parseável."""

    status_code = 400


class NotificationRejectedError(GatewayError):
    """Notificação rejeitada na verificação de assinatura."""

    status_code = 400

    def __init__(self, reason: str) -> None:
        super().__init__(f"Webhook signature verification failed: {reason}")
        self.reason = reason


class UnknownProviderError(GatewayError):
    """Provider do AI gateway fora da tabela configurada."""

    status_code = 400

    def __init__(self, provider: str) -> None:
        super().__init__(f"Unknown provider: {provider}")
        self.provider = provider


class UpstreamError(GatewayError):
    """Resposta de erro do processador de pagamentos."""

    status_code = 500

    def __init__(self, message: str, upstream_status: int | None = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status


class UpstreamUnreachableError(GatewayError):
    """Falha de transporte ao falar com um upstream."""

    status_code = 502

    def __init__(self, message: str, provider: str, backend: str | None = None) -> None:
        super().__init__(message)
        self.provider = provider
        self.backend = backend

    def extra_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {"provider": self.provider}
        if self.backend:
            fields["backend"] = self.backend
        return fields
