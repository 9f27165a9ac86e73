"""Application service: Update Cart Item use case."""

from __future__ import annotations

from storefront.application import query_cache
from storefront.application.query_cache import QueryCache
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository


class UpdateCartItemHandler:

    def __init__(self, cart_repo: CartRepository, cache: QueryCache) -> None:
        self._cart_repo = cart_repo
        self._cache = cache

    async def handle(self, product_id: int, quantity: int) -> None:
        qty = Quantity(quantity)
        await self._cart_repo.update_item(product_id, qty.value)
        self._cache.invalidate(query_cache.CART_CHANGED)
