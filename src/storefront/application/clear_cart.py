"""Application service: Clear Cart use case."""

from __future__ import annotations

from storefront.application import query_cache
from storefront.application.query_cache import QueryCache
from storefront.domain.repository.cart_repository import CartRepository


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository, cache: QueryCache) -> None:
        self._cart_repo = cart_repo
        self._cache = cache

    async def handle(self) -> None:
        await self._cart_repo.clear()
        self._cache.invalidate(query_cache.CART_CHANGED)
