"""Abstract repository for the Product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete implementation talks to the backend over
RPC; tests use an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product
from storefront.domain.service.product_validation import ProductDraft


class ProductRepository(ABC):

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    async def list_by_category(self, category: str) -> list[Product]:
        """Return the products filed under *category*."""

    @abstractmethod
    async def search(self, keyword: str) -> list[Product]:
        """Return products matching *keyword*."""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product:
        """Return a product by its ID.

        Raises EntityNotFoundError if the backend has no such product.
        """

    @abstractmethod
    async def list_categories(self) -> list[str]:
        """Return the category names the backend supports."""

    # --- Admin mutations ------------------------------------------------------

    @abstractmethod
    async def add(self, draft: ProductDraft) -> int:
        """Create a product and return its new ID."""

    @abstractmethod
    async def update(self, product_id: int, draft: ProductDraft) -> None:
        """Replace every field of an existing product."""

    @abstractmethod
    async def update_stock(self, product_id: int, stock: int) -> None:
        """Set the stock count of an existing product."""
