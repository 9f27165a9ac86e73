"""Product aggregate.

Products are owned by the backend. The client reads them freely and
changes them only through the admin catalog operations.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import NOTHING, Money, Option, Some

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class Product:
    """A product in the catalog, as last returned by the backend."""

    id: int
    title: str
    description: str
    price: Money
    stock: int
    image_url: str
    category: str
    rating: Option[int] = field(default=NOTHING)

    def __post_init__(self) -> None:
        if self.stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {self.stock}")
        if isinstance(self.rating, Some) and not MIN_RATING <= self.rating.value <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {self.rating.value}"
            )

    @property
    def currency(self) -> str:
        return self.price.currency

    @property
    def in_stock(self) -> bool:
        return self.stock > 0
