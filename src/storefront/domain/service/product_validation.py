"""Domain service: admin catalog form validation.

The admin editor works on a form-shaped record where every field is the
string the admin typed. Validation produces a mapping of field name to
message; an empty mapping means the record can be parsed into a
``ProductDraft`` and sent to the backend.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from storefront.domain.model.product import MAX_RATING, MIN_RATING, Product
from storefront.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    NOTHING,
    Money,
    Option,
    Some,
)

_INTEGER_RE = re.compile(r"[+-]?\d+")
_DECIMAL_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


@dataclass(frozen=True)
class ProductFormData:
    """Raw admin form input, every field as displayed."""

    title: str = ""
    description: str = ""
    price: str = ""
    currency: str = DEFAULT_CURRENCY
    category: str = ""
    image_url: str = ""
    rating: str = ""
    stock: str = ""

    @staticmethod
    def from_product(product: Product) -> ProductFormData:
        """Pre-fill the editor from an existing product."""
        return ProductFormData(
            title=product.title,
            description=product.description,
            price=product.price.format_amount(),
            currency=product.currency,
            category=product.category,
            image_url=product.image_url,
            rating=str(product.rating.value) if isinstance(product.rating, Some) else "",
            stock=str(product.stock),
        )


@dataclass(frozen=True)
class ProductDraft:
    """Validated product fields, ready for ``addProduct``/``updateProduct``."""

    title: str
    description: str
    price: Money
    category: str
    image_url: str
    stock: int
    rating: Option[int] = field(default=NOTHING)

    @property
    def currency(self) -> str:
        return self.price.currency


@dataclass(frozen=True)
class StockValidation:
    valid: bool
    error: str | None = None


def validate_product_form(data: ProductFormData) -> dict[str, str]:
    """Return ``{field: message}`` for every invalid field."""
    errors: dict[str, str] = {}

    if not data.title.strip():
        errors["title"] = "Title is required"

    if not data.description.strip():
        errors["description"] = "Description is required"

    if not data.category.strip():
        errors["category"] = "Category is required"

    if not data.price.strip():
        errors["price"] = "Price is required"
    else:
        price = _parse_decimal(data.price)
        if price is None:
            errors["price"] = "Price must be a valid number"
        elif price < 0:
            errors["price"] = "Price cannot be negative"

    if not data.stock.strip():
        errors["stock"] = "Stock is required"
    else:
        stock_error = validate_stock_input(data.stock).error
        if stock_error is not None:
            errors["stock"] = stock_error

    # Rating is optional
    if data.rating.strip():
        rating = _parse_int(data.rating)
        if rating is None:
            errors["rating"] = "Rating must be a valid number"
        elif not MIN_RATING <= rating <= MAX_RATING:
            errors["rating"] = f"Rating must be between {MIN_RATING} and {MAX_RATING}"

    if not data.image_url.strip():
        errors["image_url"] = "Image URL is required"

    return errors


def parse_product_form_data(data: ProductFormData) -> ProductDraft:
    """Convert a validated form into backend units.

    Call ``validate_product_form`` first; invalid input raises ValueError.
    """
    price = _parse_decimal(data.price)
    stock = _parse_int(data.stock)
    if price is None or stock is None:
        raise ValueError("Product form must be validated before parsing")

    rating = _parse_int(data.rating) if data.rating.strip() else None

    return ProductDraft(
        title=data.title.strip(),
        description=data.description.strip(),
        price=Money(to_minor_units(price), data.currency),
        category=data.category.strip(),
        image_url=data.image_url.strip(),
        stock=stock,
        rating=NOTHING if rating is None else Some(rating),
    )


def validate_stock_input(value: str) -> StockValidation:
    """Narrow validator for the inline stock edit."""
    if not value.strip():
        return StockValidation(False, "Stock value is required")

    stock = _parse_int(value)
    if stock is None:
        return StockValidation(False, "Stock must be a valid number")
    if stock < 0:
        return StockValidation(False, "Stock cannot be negative")

    return StockValidation(True)


def to_minor_units(amount: Decimal) -> int:
    """19.99 -> 1999, rounding half up to the nearest minor unit."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


# --- Internal helpers ---------------------------------------------------------


def _parse_decimal(text: str) -> Decimal | None:
    text = text.strip()
    if not _DECIMAL_RE.fullmatch(text):
        return None
    return Decimal(text)


def _parse_int(text: str) -> int | None:
    text = text.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)
