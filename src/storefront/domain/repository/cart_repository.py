"""Abstract repository for the caller's server-side cart."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import CartLineItem


class CartRepository(ABC):

    @abstractmethod
    async def get(self) -> list[CartLineItem]:
        """Return the caller's cart lines."""

    @abstractmethod
    async def add_item(self, product_id: int, quantity: int) -> None:
        """Add *quantity* units of a product to the cart."""

    @abstractmethod
    async def update_item(self, product_id: int, quantity: int) -> None:
        """Set the quantity of an existing cart line."""

    @abstractmethod
    async def remove_item(self, product_id: int) -> None:
        """Drop one cart line."""

    @abstractmethod
    async def clear(self) -> None:
        """Drop every cart line."""
