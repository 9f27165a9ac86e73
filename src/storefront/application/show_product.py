"""Application service: Show Product use case (query)."""

from __future__ import annotations

import logging

from storefront.application import query_cache
from storefront.application.dto import ProductDTO
from storefront.application.query_cache import QueryCache
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository, cache: QueryCache) -> None:
        self._product_repo = product_repo
        self._cache = cache

    async def handle(self, product_id: int) -> ProductDTO | None:
        """Return the product, or None when the backend has no such product."""
        try:
            product = await self._cache.fetch(
                query_cache.product_key(product_id),
                lambda: self._product_repo.get_by_id(product_id),
            )
        except EntityNotFoundError:
            logger.info(f"Product #{product_id} not found")
            return None
        return ProductDTO.from_domain(product)
