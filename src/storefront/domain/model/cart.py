"""Cart line items and the cart aggregation.

The cart itself lives on the backend, keyed by product id. The client
only ever holds a snapshot of ``(product_id, quantity)`` pairs, and joins
them against the catalog to preview prices.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity


@dataclass(frozen=True)
class CartLineItem:
    product_id: int
    quantity: Quantity


@dataclass(frozen=True)
class PricedLineItem:
    """A cart line joined with its product."""

    product: Product
    quantity: Quantity

    @property
    def unit_price(self) -> Money:
        return self.product.price

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass(frozen=True)
class CartSummary:
    """Result of aggregating a cart against a catalog snapshot.

    Shipping is free, so ``total`` always equals ``subtotal``.
    """

    lines: tuple[PricedLineItem, ...]
    subtotal: Money
    item_count: int

    @property
    def shipping(self) -> Money:
        return Money.zero(self.subtotal.currency)

    @property
    def total(self) -> Money:
        return self.subtotal

    @property
    def is_empty(self) -> bool:
        return not self.lines


def aggregate_cart(
    items: Iterable[CartLineItem],
    catalog: Iterable[Product],
) -> CartSummary:
    """Price every cart line against the catalog.

    Lines whose product is missing from the catalog (deleted or stale)
    are dropped and contribute nothing to the subtotal. The subtotal is
    always shown in the store currency, whatever each product carries.
    Neither input is mutated.
    """
    items = list(items)
    by_id = {product.id: product for product in catalog}

    lines = tuple(
        PricedLineItem(product=by_id[item.product_id], quantity=item.quantity)
        for item in items
        if item.product_id in by_id
    )
    subtotal = sum(
        (Money(line.subtotal.amount, DEFAULT_CURRENCY) for line in lines),
        Money.zero(DEFAULT_CURRENCY),
    )

    return CartSummary(
        lines=lines,
        subtotal=subtotal,
        item_count=count_items(items),
    )


def count_items(items: Iterable[CartLineItem]) -> int:
    """Total number of units across cart lines (the cart badge count)."""
    return sum(item.quantity.value for item in items)


def clamp_quantity(requested: str | int, stock: int) -> int:
    """Clamp a requested quantity into ``[1, stock]``.

    Unparseable input falls back to 1, as does a product with no stock.
    """
    try:
        value = int(requested)
    except (TypeError, ValueError):
        value = 1
    return max(1, min(stock, value))
