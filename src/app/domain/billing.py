"""Value objects das rotas de checkout, portal e preços."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from utils.errors import ValidationError

Scalar = str | int | float | bool


def _optional_text(payload: dict[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value


@dataclass(frozen=True, slots=True)
class CheckoutRequest:
    """Pedido de sessão de checkout vindo do navegador."""

    price_id: str
    success_url: str | None = None
    cancel_url: str | None = None
    customer_email: str | None = None
    metadata: dict[str, Scalar] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> CheckoutRequest:
        """Valida o corpo JSON.

        Raises:
            ValidationError: price_id ausente ou campos com tipo errado.
        """
        price_id = _optional_text(payload, "price_id")
        if not price_id:
            raise ValidationError("price_id is required")

        metadata = payload.get("metadata") or {}
        if not isinstance(metadata, dict):
            raise ValidationError("metadata must be an object")
        flat_metadata: dict[str, Scalar] = {}
        for key, value in metadata.items():
            if isinstance(value, (dict, list)):
                raise ValidationError("metadata values must be scalars")
            if value is not None:
                flat_metadata[str(key)] = value

        return cls(
            price_id=price_id,
            success_url=_optional_text(payload, "success_url"),
            cancel_url=_optional_text(payload, "cancel_url"),
            customer_email=_optional_text(payload, "customer_email"),
            metadata=flat_metadata,
        )


@dataclass(frozen=True, slots=True)
class PortalRequest:
    """Pedido de sessão do portal de cobrança."""

    customer_id: str
    return_url: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> PortalRequest:
        customer_id = _optional_text(payload, "customer_id")
        if not customer_id:
            raise ValidationError("customer_id is required")
        return cls(customer_id=customer_id, return_url=_optional_text(payload, "return_url"))


@dataclass(frozen=True, slots=True)
class ProductView:
    id: str | None
    name: str | None
    description: str | None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class PriceView:
    """Visão reduzida de um preço ativo para a UI de pricing."""

    id: str | None
    amount: int | None
    currency: str | None
    interval: str | None
    interval_count: int | None
    product: ProductView

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "amount": self.amount,
            "currency": self.currency,
            "interval": self.interval,
            "interval_count": self.interval_count,
            "product": {
                "id": self.product.id,
                "name": self.product.name,
                "description": self.product.description,
                "metadata": self.product.metadata,
            },
        }
