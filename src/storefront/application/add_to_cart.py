"""Application service: Add To Cart use case."""

from __future__ import annotations

from storefront.application import query_cache
from storefront.application.query_cache import QueryCache
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository


class AddToCartHandler:

    def __init__(self, cart_repo: CartRepository, cache: QueryCache) -> None:
        self._cart_repo = cart_repo
        self._cache = cache

    async def handle(self, product_id: int, quantity: int) -> None:
        """Add units of a product to the cart.

        Stock is not checked here; the backend decides whether the
        quantity can be honoured.
        """
        qty = Quantity(quantity)
        await self._cart_repo.add_item(product_id, qty.value)
        self._cache.invalidate(query_cache.CART_CHANGED)
