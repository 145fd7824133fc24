"""Order aggregate — a read-only view over a stored order document.

Orders are written by checkout and by the payment and tax plugins; this
module only reads them back and derives the figures shown to shoppers
and shop owners (counts, subtotals, shipping, taxes, totals).  Any
sub-document may be missing on an order that never finished checkout,
so every derived figure degrades to zero instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from storefront.domain.exceptions import IncompleteRecordError
from storefront.domain.model.summation import sum_field, sum_product
from storefront.domain.model.value_objects import ZERO, Money, to_decimal, to_fixed

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Document helpers
# ---------------------------------------------------------------------------


def _mapping(raw: Any, key: str) -> dict | None:
    value = raw.get(key) if isinstance(raw, dict) else None
    return value if isinstance(value, dict) else None


def _sequence(raw: Any, key: str) -> list[dict]:
    value = raw.get(key) if isinstance(raw, dict) else None
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, dict)]


def _amount_or_zero(value: Any) -> Decimal:
    if value is None:
        return ZERO
    try:
        return to_decimal(value)
    except IncompleteRecordError:
        logger.debug("Treating malformed amount %r as zero", value)
        return ZERO


# ---------------------------------------------------------------------------
# Sub-documents
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Variant:
    price: Any = None
    title: str | None = None

    @staticmethod
    def from_document(raw: dict) -> Variant:
        return Variant(price=raw.get("price"), title=raw.get("title"))


@dataclass(frozen=True)
class LineItem:
    """One product variant on the order, with its quantity."""

    id: str | None
    shop_id: str | None
    product_id: str | None = None
    quantity: Any = None
    variant: Variant | None = None
    title: str | None = None

    @staticmethod
    def from_document(raw: dict) -> LineItem:
        variant = _mapping(raw, "variants")
        return LineItem(
            id=raw.get("_id"),
            shop_id=raw.get("shopId"),
            product_id=raw.get("productId"),
            quantity=raw.get("quantity"),
            variant=Variant.from_document(variant) if variant is not None else None,
            title=raw.get("title"),
        )


@dataclass(frozen=True)
class ShipmentMethod:
    rate: Any = None
    handling: Any = None
    name: str | None = None

    @staticmethod
    def from_document(raw: dict) -> ShipmentMethod:
        return ShipmentMethod(
            rate=raw.get("rate"),
            handling=raw.get("handling"),
            name=raw.get("name"),
        )


@dataclass(frozen=True)
class ShippingEntry:
    """One shipment of the order and the method chosen for it."""

    shop_id: str | None
    shipment_method: ShipmentMethod | None = None

    @staticmethod
    def from_document(raw: dict) -> ShippingEntry:
        method = _mapping(raw, "shipmentMethod")
        return ShippingEntry(
            shop_id=raw.get("shopId"),
            shipment_method=(
                ShipmentMethod.from_document(method) if method is not None else None
            ),
        )


@dataclass(frozen=True)
class Invoice:
    shipping: Any = None
    taxes: Any = None
    subtotal: Any = None
    discounts: Any = None
    total: Any = None

    @staticmethod
    def from_document(raw: dict) -> Invoice:
        return Invoice(
            shipping=raw.get("shipping"),
            taxes=raw.get("taxes"),
            subtotal=raw.get("subtotal"),
            discounts=raw.get("discounts"),
            total=raw.get("total"),
        )


@dataclass(frozen=True)
class PaymentMethod:
    stored_card: str | None = None
    processor: str | None = None
    mode: str | None = None
    transaction_id: str | None = None
    amount: Any = None
    method: str | None = None

    @staticmethod
    def from_document(raw: dict) -> PaymentMethod:
        return PaymentMethod(
            stored_card=raw.get("storedCard"),
            processor=raw.get("processor"),
            mode=raw.get("mode"),
            transaction_id=raw.get("transactionId"),
            amount=raw.get("amount"),
            method=raw.get("method"),
        )


@dataclass(frozen=True)
class BillingEntry:
    """Invoice and payment for the part of the order sold by one shop."""

    shop_id: str | None
    invoice: Invoice | None = None
    payment_method: PaymentMethod | None = None

    @staticmethod
    def from_document(raw: dict) -> BillingEntry:
        invoice = _mapping(raw, "invoice")
        payment = _mapping(raw, "paymentMethod")
        return BillingEntry(
            shop_id=raw.get("shopId"),
            invoice=Invoice.from_document(invoice) if invoice is not None else None,
            payment_method=(
                PaymentMethod.from_document(payment) if payment is not None else None
            ),
        )


@dataclass(frozen=True)
class PaymentMethodSummary:
    """Normalised payment method as listed on an order."""

    stored_card: str | None
    processor: str | None
    mode: str | None
    transaction_id: str | None
    amount: Any
    method: str | None


# ---------------------------------------------------------------------------
# Field accessors used by the summations
# ---------------------------------------------------------------------------


def _required(value: Any, what: str) -> Decimal:
    if value is None:
        raise IncompleteRecordError(f"{what} is missing")
    return to_decimal(value)


def line_quantity(item: LineItem) -> Decimal:
    return _required(item.quantity, "Line item quantity")


def variant_price(item: LineItem) -> Decimal:
    if item.variant is None:
        raise IncompleteRecordError(f"Line item {item.id!r} has no variant")
    return _required(item.variant.price, "Variant price")


def shipment_rate(entry: ShippingEntry) -> Decimal:
    if entry.shipment_method is None:
        raise IncompleteRecordError("Shipping entry has no shipment method")
    return _required(entry.shipment_method.rate, "Shipment rate")


def shipment_handling(entry: ShippingEntry) -> Decimal:
    if entry.shipment_method is None:
        raise IncompleteRecordError("Shipping entry has no shipment method")
    return _required(entry.shipment_method.handling, "Shipment handling")


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Order:
    """Aggregate root for a placed (or in-checkout) order.

    Build instances with ``Order.from_document()``; the derived figures
    are all methods so they are recomputed from the current document on
    every call, just as templates expect.

    Monetary results are strings formatted to two decimals (half-up).
    """

    id: str | None
    shop_id: str | None = None
    items: list[LineItem] = field(default_factory=list)
    shipping: list[ShippingEntry] = field(default_factory=list)
    billing: list[BillingEntry] = field(default_factory=list)
    tax: Any = None
    discount: Any = None

    @staticmethod
    def from_document(raw: dict) -> Order:
        """Project a stored order document, tolerating absent fields."""
        return Order(
            id=raw.get("_id"),
            shop_id=raw.get("shopId"),
            items=[LineItem.from_document(i) for i in _sequence(raw, "items")],
            shipping=[ShippingEntry.from_document(s) for s in _sequence(raw, "shipping")],
            billing=[BillingEntry.from_document(b) for b in _sequence(raw, "billing")],
            tax=raw.get("tax"),
            discount=raw.get("discount"),
        )

    # --- Quantities -----------------------------------------------------------

    def order_count(self) -> Decimal:
        """Total quantity of items on the order, exactly as summed."""
        return sum_field(self.items, line_quantity).or_zero()

    def items_by_shop(self) -> dict[str, list[LineItem]]:
        """Line items grouped by shop, shops in first-seen order."""
        grouped: dict[str, list[LineItem]] = {}
        for item in self.items:
            grouped.setdefault(item.shop_id, []).append(item)  # type: ignore[arg-type]
        return grouped

    # --- Shipping -------------------------------------------------------------

    def order_shipping(self) -> str:
        """Total shipping rate plus handling across all shipments."""
        rate = sum_field(self.shipping, shipment_rate).or_zero()
        handling = sum_field(self.shipping, shipment_handling).or_zero()
        return to_fixed(rate + handling)

    def order_shipping_by_shop(self) -> dict[str, Decimal]:
        """Invoiced shipping per shop, as stored on the billing entries."""
        return {
            entry.shop_id: _amount_or_zero(entry.invoice.shipping if entry.invoice else None)
            for entry in self.billing
        }

    # --- Subtotals ------------------------------------------------------------

    def order_sub_total(self) -> str:
        """Total price of goods on the order."""
        return to_fixed(self._sub_total(None))

    def order_sub_total_by_shop(self) -> dict[str, str]:
        """Price of goods per shop, one entry per distinct shop."""
        sub_totals: dict[str, str] = {}
        for item in self.items:
            if item.shop_id not in sub_totals:
                sub_totals[item.shop_id] = to_fixed(self._sub_total(item.shop_id))  # type: ignore[index]
        return sub_totals

    # --- Taxes and discounts --------------------------------------------------

    def order_taxes(self) -> str:
        """Taxes on the rounded subtotal.

        ``tax`` holds the effective rate computed by the taxes plugin
        from the individual line items.
        """
        rate = _amount_or_zero(self.tax)
        sub_total = Decimal(self.order_sub_total())
        return to_fixed(sub_total * rate)

    def order_taxes_by_shop(self) -> dict[str, str]:
        return {
            entry.shop_id: to_fixed(
                _amount_or_zero(entry.invoice.taxes if entry.invoice else None)
            )
            for entry in self.billing
        }

    def order_discounts(self) -> str:
        return to_fixed(_amount_or_zero(self.discount))

    # --- Total ----------------------------------------------------------------

    def order_total(self) -> str:
        """Discounted subtotal (never below zero) plus shipping and taxes."""
        sub_total = Money.of(self.order_sub_total())
        shipping = Money.of(self.order_shipping())
        taxes = Money.of(self.order_taxes())
        discount = Money.of(self.order_discounts())
        total = (sub_total - discount).floor_at_zero() + shipping + taxes
        return total.to_fixed()

    # --- Payments -------------------------------------------------------------

    def get_payment_methods(self) -> list[PaymentMethodSummary]:
        """One normalised payment method per billing entry."""
        summaries = []
        for entry in self.billing:
            method = entry.payment_method or PaymentMethod()
            summaries.append(
                PaymentMethodSummary(
                    stored_card=method.stored_card,
                    processor=method.processor,
                    mode=method.mode,
                    transaction_id=method.transaction_id,
                    amount=method.amount,
                    method=method.method,
                )
            )
        return summaries

    # --- Internal helpers -----------------------------------------------------

    def _sub_total(self, shop_id: str | None) -> Decimal:
        return sum_product(self.items, line_quantity, variant_price, shop_id).or_zero()
