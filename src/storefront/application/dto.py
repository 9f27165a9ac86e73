"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry display-ready data from the application layer to the CLI
without exposing domain internals. Amounts are preformatted strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Some


@dataclass(frozen=True)
class ProductDTO:
    id: int
    title: str
    description: str
    category: str
    price: str  # formatted, e.g. "₹19.99"
    stock: int
    in_stock: bool
    image_url: str
    rating: int | None

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            title=product.title,
            description=product.description,
            category=product.category,
            price=str(product.price),
            stock=product.stock,
            in_stock=product.in_stock,
            image_url=product.image_url,
            rating=product.rating.value if isinstance(product.rating, Some) else None,
        )


@dataclass(frozen=True)
class CartLineDTO:
    product_id: int
    title: str
    quantity: int
    stock: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    item_count: int
    subtotal: str
    shipping: str
    total: str
    subtotal_minor_units: int

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class OrderLineDTO:
    """A line of a placed order.

    Title and prices come from the current catalog; they are None when the
    product has since been removed.
    """

    product_id: int
    title: str
    quantity: int
    unit_price: str | None
    line_total: str | None


@dataclass(frozen=True)
class OrderDTO:
    id: int
    placed_at: str
    payment_method: str
    shipping_address: str
    items: list[OrderLineDTO]
    item_count: int
    total: str


@dataclass(frozen=True)
class OrderPlacementDTO:
    order_id: int
    confirmation_path: str


@dataclass(frozen=True)
class AccountDTO:
    role: str
    is_admin: bool
    display_name: str | None
