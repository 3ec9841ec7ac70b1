"""Listagem de preços: parâmetros da consulta e visão reduzida do resultado."""

from __future__ import annotations

from typing import Any

from app.domain.billing import PriceView, ProductView


def build_price_list_params(limit: int = 20) -> dict[str, Any]:
    """Preços ativos com o produto expandido."""
    return {"active": True, "expand": ["data.product"], "limit": limit}


def _price_view(price: dict[str, Any]) -> PriceView:
    product = price["product"]
    recurring = price.get("recurring") or {}
    return PriceView(
        id=price.get("id"),
        amount=price.get("unit_amount"),
        currency=price.get("currency"),
        interval=recurring.get("interval"),
        interval_count=recurring.get("interval_count"),
        product=ProductView(
            id=product.get("id"),
            name=product.get("name"),
            description=product.get("description"),
            metadata=product.get("metadata") or {},
        ),
    )


def format_price_list(raw_result: dict[str, Any]) -> list[PriceView]:
    """Filtra preços de produtos ausentes/deletados e ordena por valor.

    Produto não expandido (string) conta como ausente. Valor ausente ordena
    como 0; a ordenação é estável.
    """
    views = [
        _price_view(price)
        for price in raw_result.get("data") or []
        if isinstance(price, dict)
        and isinstance(price.get("product"), dict)
        and not price["product"].get("deleted")
    ]
    return sorted(views, key=lambda view: view.amount or 0)
