"""Unit tests for the Order aggregate's derived figures."""

from decimal import Decimal

import json

import pytest

from storefront.domain.model.order import Order, PaymentMethodSummary
from tests.fakes import billing_entry, line_item


def _order(**fields) -> Order:
    raw = {"_id": "o1", "items": [], "shipping": [], "billing": []}
    raw.update(fields)
    return Order.from_document(raw)


def _two_shop_order(**fields) -> Order:
    return _order(
        items=[line_item("A", 2, 5, "Widget"), line_item("B", 1, 3, "Gadget")],
        **fields,
    )


class TestFromDocument:

    def test_empty_document(self):
        order = Order.from_document({})
        assert order.items == []
        assert order.shipping == []
        assert order.billing == []
        assert order.order_total() == "0.00"

    def test_non_list_sections_become_empty(self):
        order = Order.from_document({"items": None, "billing": "oops"})
        assert order.items == []
        assert order.billing == []

    def test_nested_fields_parsed(self):
        order = _two_shop_order()
        first = order.items[0]
        assert first.shop_id == "A"
        assert first.quantity == 2
        assert first.variant.price == 5


class TestOrderCount:

    def test_sum_of_quantities(self):
        assert _two_shop_order().order_count() == 3

    def test_empty_order(self):
        assert _order().order_count() == 0

    def test_missing_quantity_degrades_to_zero(self):
        order = _order(items=[{"shopId": "A"}, line_item("A", 2, 5)])
        assert order.order_count() == 0

    def test_fractional_quantities_are_not_truncated(self):
        order = _order(items=[line_item("A", 1.5, 2), line_item("A", 1, 2)])
        assert order.order_count() == Decimal("2.5")


class TestSubTotal:

    def test_example_order(self):
        order = _two_shop_order(discount=0, tax=0)
        assert order.order_sub_total() == "13.00"
        assert order.order_total() == "13.00"
        assert order.order_sub_total_by_shop() == {"A": "10.00", "B": "3.00"}

    def test_missing_variants_degrade_to_zero(self):
        order = _order(items=[{"shopId": "A", "quantity": 2}])
        assert order.order_sub_total() == "0.00"

    def test_half_up_rounding(self):
        order = _order(items=[line_item("A", 1, 10.005)])
        assert order.order_sub_total() == "10.01"

    def test_float_prices_sum_exactly(self):
        order = _order(items=[line_item("A", 1, 0.1), line_item("A", 1, 0.2)])
        assert order.order_sub_total() == "0.30"


class TestSubTotalByShop:

    def test_one_entry_per_shop(self):
        order = _order(items=[
            line_item("A", 1, 2, "a1"),
            line_item("B", 1, 3, "b1"),
            line_item("A", 2, 4, "a2"),
        ])
        by_shop = order.order_sub_total_by_shop()
        assert list(by_shop) == ["A", "B"]

    def test_non_contiguous_items_are_merged(self):
        order = _order(items=[
            line_item("A", 1, 2, "a1"),
            line_item("B", 1, 3, "b1"),
            line_item("A", 2, 4, "a2"),
        ])
        assert order.order_sub_total_by_shop()["A"] == "10.00"

    def test_each_shop_independent_of_order_total(self):
        order = _order(items=[
            line_item("A", 1, 2, "a1"),
            line_item("B", 1, None, "b1"),
        ])
        # B's missing price spoils the whole-order sum but not A's own
        assert order.order_sub_total() == "0.00"
        assert order.order_sub_total_by_shop() == {"A": "2.00", "B": "0.00"}


class TestShipping:

    def test_rate_plus_handling(self):
        order = _order(shipping=[
            {"shopId": "A", "shipmentMethod": {"rate": 4.5, "handling": 1}},
            {"shopId": "B", "shipmentMethod": {"rate": 2, "handling": 0.5}},
        ])
        assert order.order_shipping() == "8.00"

    def test_missing_handling_keeps_rate(self):
        order = _order(shipping=[{"shopId": "A", "shipmentMethod": {"rate": 4.5}}])
        assert order.order_shipping() == "4.50"

    def test_no_shipping_is_zero(self):
        assert _order().order_shipping() == "0.00"
        assert Order.from_document({"_id": "x"}).order_shipping() == "0.00"

    def test_shipping_by_shop_from_billing(self):
        order = _order(billing=[billing_entry("A", shipping=5), billing_entry("B", shipping=2.5)])
        assert order.order_shipping_by_shop() == {"A": Decimal("5"), "B": Decimal("2.5")}

    def test_shipping_by_shop_without_invoice(self):
        order = _order(billing=[{"shopId": "A"}])
        assert order.order_shipping_by_shop() == {"A": Decimal("0")}


class TestTaxes:

    def test_rate_applied_to_subtotal(self):
        order = _two_shop_order(tax=0.1)
        assert order.order_taxes() == "1.30"

    def test_rate_applied_to_rounded_subtotal(self):
        order = _order(items=[line_item("A", 1, 10.005)], tax=0.5)
        # 10.01 * 0.5 = 5.005
        assert order.order_taxes() == "5.01"

    def test_missing_rate_is_zero(self):
        assert _two_shop_order().order_taxes() == "0.00"

    def test_taxes_by_shop_rounded(self):
        order = _order(billing=[billing_entry("A", taxes=1.234), billing_entry("B", taxes=2)])
        assert order.order_taxes_by_shop() == {"A": "1.23", "B": "2.00"}


class TestDiscountsAndTotal:

    def test_discount_formatting(self):
        assert _order(discount=2.5).order_discounts() == "2.50"
        assert _order().order_discounts() == "0.00"

    def test_total_formula(self):
        order = _two_shop_order(
            tax=0.1,
            discount=3,
            shipping=[{"shopId": "A", "shipmentMethod": {"rate": 4, "handling": 1}}],
        )
        # max(0, 13 - 3) + 5 + 1.30
        assert order.order_total() == "16.30"

    @pytest.mark.parametrize("discount", [13, 20, 1000])
    def test_discount_never_drives_goods_below_zero(self, discount):
        order = _two_shop_order(
            discount=discount,
            shipping=[{"shopId": "A", "shipmentMethod": {"rate": 4, "handling": 1}}],
        )
        assert order.order_total() == "5.00"


class TestPaymentMethods:

    def test_projects_each_billing_entry(self):
        payment = {
            "storedCard": "Visa 4242",
            "processor": "Example",
            "mode": "authorize",
            "transactionId": "tx-1",
            "amount": 13,
            "method": "credit",
            "status": "approved",
        }
        order = _order(billing=[billing_entry("A", payment=payment)])
        assert order.get_payment_methods() == [
            PaymentMethodSummary(
                stored_card="Visa 4242",
                processor="Example",
                mode="authorize",
                transaction_id="tx-1",
                amount=13,
                method="credit",
            )
        ]

    def test_entry_without_payment_method(self):
        order = _order(billing=[billing_entry("A")])
        [summary] = order.get_payment_methods()
        assert summary.processor is None


class TestItemsByShop:

    def test_groups_in_first_seen_order(self):
        order = _order(items=[
            line_item("B", 1, 1, "b1"),
            line_item("A", 1, 1, "a1"),
            line_item("B", 1, 1, "b2"),
        ])
        grouped = order.items_by_shop()
        assert list(grouped) == ["B", "A"]
        assert [i.title for i in grouped["B"]] == ["b1", "b2"]


class TestOutOfRangeAmounts:

    def test_amounts_beyond_default_precision(self):
        order = _order(items=[line_item("A", 1, 1e27)])
        assert order.order_sub_total() == "1000000000000000000000000000.00"
        assert order.order_total() == "1000000000000000000000000000.00"

    def test_non_finite_price_degrades_to_zero(self):
        order = Order.from_document(json.loads(
            '{"_id": "o", "items": [{"shopId": "A", "quantity": 1,'
            ' "variants": {"price": Infinity}}]}'
        ))
        assert order.order_sub_total() == "0.00"
        assert order.order_sub_total_by_shop() == {"A": "0.00"}

    def test_nan_discount_degrades_to_zero(self):
        order = Order.from_document(json.loads(
            '{"_id": "o", "items": [{"shopId": "A", "quantity": 2,'
            ' "variants": {"price": 5}}], "discount": NaN}'
        ))
        assert order.order_discounts() == "0.00"
        assert order.order_total() == "10.00"

    def test_infinite_tax_rate_degrades_to_zero(self):
        order = Order.from_document(json.loads(
            '{"_id": "o", "items": [{"shopId": "A", "quantity": 2,'
            ' "variants": {"price": 5}}], "tax": Infinity}'
        ))
        assert order.order_taxes() == "0.00"
        assert order.order_total() == "10.00"

    def test_non_finite_shipping_and_invoice_amounts(self):
        order = Order.from_document(json.loads(
            '{"_id": "o",'
            ' "shipping": [{"shopId": "A", "shipmentMethod": {"rate": NaN, "handling": 2}}],'
            ' "billing": [{"shopId": "A", "invoice": {"shipping": Infinity, "taxes": NaN}}]}'
        ))
        assert order.order_shipping() == "2.00"
        assert order.order_shipping_by_shop() == {"A": Decimal("0")}
        assert order.order_taxes_by_shop() == {"A": "0.00"}
