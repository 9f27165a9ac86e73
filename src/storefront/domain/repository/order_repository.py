"""Abstract repository for orders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, PaymentMethod


class OrderRepository(ABC):

    @abstractmethod
    async def place(
        self,
        shipping_address: str,
        payment_method: PaymentMethod,
        country: str,
    ) -> int:
        """Turn the caller's cart into an order and return the order ID."""

    @abstractmethod
    async def list_mine(self) -> list[Order]:
        """Return the caller's orders."""

    @abstractmethod
    async def get_by_id(self, order_id: int) -> Order:
        """Return an order by its ID.

        Raises EntityNotFoundError if the backend has no such order.
        """
