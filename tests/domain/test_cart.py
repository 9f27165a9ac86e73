"""Unit tests for cart aggregation."""

from dataclasses import replace

from storefront.domain.model.cart import (
    CartLineItem,
    aggregate_cart,
    clamp_quantity,
    count_items,
)
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import make_product


def _line(product_id: int, qty: int) -> CartLineItem:
    return CartLineItem(product_id=product_id, quantity=Quantity(qty))


class TestAggregateCart:

    def test_single_line(self):
        summary = aggregate_cart([_line(1, 2)], [make_product(1, price=500)])
        assert summary.subtotal == Money(1000)
        assert summary.total == Money(1000)
        assert summary.subtotal.format_amount() == "10.00"

    def test_line_subtotals(self):
        summary = aggregate_cart(
            [_line(1, 3), _line(2, 1)],
            [make_product(1, price=1500), make_product(2, "Gadget", price=2500)],
        )
        assert [line.subtotal for line in summary.lines] == [Money(4500), Money(2500)]
        assert summary.subtotal == Money(7000)

    def test_mixed_currency_products_still_sum(self):
        dollar_item = replace(make_product(2, "Gadget"), price=Money(300, "$"))
        summary = aggregate_cart(
            [_line(1, 2), _line(2, 1)],
            [make_product(1, price=500), dollar_item],
        )
        assert summary.subtotal == Money(1300, "₹")
        assert summary.lines[1].subtotal == Money(300, "$")

    def test_missing_product_is_dropped(self):
        summary = aggregate_cart(
            [_line(1, 2), _line(99, 5)],
            [make_product(1, price=500)],
        )
        assert [line.product.id for line in summary.lines] == [1]
        assert summary.subtotal == Money(1000)

    def test_empty_cart(self):
        summary = aggregate_cart([], [make_product(1)])
        assert summary.is_empty
        assert summary.subtotal == Money(0)

    def test_shipping_is_free(self):
        summary = aggregate_cart([_line(1, 1)], [make_product(1, price=700)])
        assert summary.shipping == Money(0)
        assert summary.total == summary.subtotal

    def test_inputs_not_mutated(self):
        items = [_line(1, 2)]
        catalog = [make_product(1)]
        aggregate_cart(items, catalog)
        aggregate_cart(items, catalog)
        assert items == [_line(1, 2)]
        assert len(catalog) == 1

    def test_accepts_generators(self):
        summary = aggregate_cart(
            (item for item in [_line(1, 4)]),
            (p for p in [make_product(1, price=250)]),
        )
        assert summary.subtotal == Money(1000)
        assert summary.item_count == 4

    def test_item_count_includes_stale_lines(self):
        summary = aggregate_cart([_line(1, 2), _line(99, 3)], [make_product(1)])
        assert summary.item_count == 5


class TestCountItems:

    def test_sums_quantities(self):
        assert count_items([_line(1, 2), _line(2, 3)]) == 5

    def test_empty(self):
        assert count_items([]) == 0


class TestClampQuantity:

    def test_within_range(self):
        assert clamp_quantity(3, 10) == 3

    def test_above_stock(self):
        assert clamp_quantity(15, 10) == 10

    def test_below_one(self):
        assert clamp_quantity(0, 10) == 1
        assert clamp_quantity(-4, 10) == 1

    def test_not_a_number(self):
        assert clamp_quantity("abc", 10) == 1

    def test_string_number(self):
        assert clamp_quantity("4", 10) == 4
