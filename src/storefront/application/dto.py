"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.ui.elements import Element


@dataclass(frozen=True)
class OrderTotalsDTO:
    """Output: every derived figure of an order, formatted for display."""

    id: str
    count: Decimal
    sub_total: str
    shipping: str
    taxes: str
    discounts: str
    total: str
    sub_total_by_shop: dict[str, str]
    shipping_by_shop: dict[str, str]
    taxes_by_shop: dict[str, str]


@dataclass(frozen=True)
class ShopLineItemDTO:
    title: str
    quantity: str


@dataclass(frozen=True)
class ShopSummaryDTO:
    """Output: one shop's share of a marketplace order."""

    shop_id: str
    name: str
    sub_total: str
    taxes: str  # "-" until the shop has been billed
    shipping: str
    quantity_total: Decimal
    items: list[ShopLineItemDTO]


@dataclass(frozen=True)
class PaymentMethodDTO:
    processor: str
    method: str
    mode: str
    transaction_id: str
    stored_card: str
    amount: str


@dataclass(frozen=True)
class ProductGridRowDTO:
    """Output: one product of the grid and its rendered controls.

    ``controls`` is None when the user may not edit products.
    """

    product_id: str
    title: str
    controls: Element | None
