"""Application service: List Products use case (query).

Covers the three catalog listings: everything, one category, or a
keyword search.
"""

from __future__ import annotations

from storefront.application import query_cache
from storefront.application.dto import ProductDTO
from storefront.application.query_cache import QueryCache
from storefront.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository, cache: QueryCache) -> None:
        self._product_repo = product_repo
        self._cache = cache

    async def handle(
        self,
        category: str | None = None,
        keyword: str | None = None,
    ) -> list[ProductDTO]:
        """List the catalog, optionally narrowed by category or keyword.

        A blank keyword or category yields no products without calling
        the backend.
        """
        if keyword is not None:
            if not keyword.strip():
                return []
            products = await self._cache.fetch(
                query_cache.search_key(keyword),
                lambda: self._product_repo.search(keyword),
            )
        elif category is not None:
            if not category.strip():
                return []
            products = await self._cache.fetch(
                query_cache.category_key(category),
                lambda: self._product_repo.list_by_category(category),
            )
        else:
            products = await self._cache.fetch(
                query_cache.all_products_key(),
                self._product_repo.list_all,
            )
        return [ProductDTO.from_domain(p) for p in products]
