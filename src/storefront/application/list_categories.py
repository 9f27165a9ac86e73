"""Application service: List Categories use case (query)."""

from __future__ import annotations

from storefront.application import query_cache
from storefront.application.query_cache import QueryCache
from storefront.domain.repository.product_repository import ProductRepository


class ListCategoriesHandler:

    def __init__(self, product_repo: ProductRepository, cache: QueryCache) -> None:
        self._product_repo = product_repo
        self._cache = cache

    async def handle(self) -> list[str]:
        return await self._cache.fetch(
            query_cache.CATEGORIES,
            self._product_repo.list_categories,
        )
