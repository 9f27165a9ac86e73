"""Application service: Update Stock use case (admin inline edit)."""

from __future__ import annotations

import logging

from storefront.application import query_cache
from storefront.application.query_cache import QueryCache
from storefront.domain.exceptions import FormValidationError
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.product_validation import validate_stock_input

logger = logging.getLogger(__name__)


class UpdateStockHandler:

    def __init__(self, product_repo: ProductRepository, cache: QueryCache) -> None:
        self._product_repo = product_repo
        self._cache = cache

    async def handle(self, product_id: int, stock: str) -> int:
        """Set a product's stock from the raw input string."""
        result = validate_stock_input(stock)
        if not result.valid:
            raise FormValidationError({"stock": result.error or "Invalid stock value"})

        value = int(stock.strip())
        await self._product_repo.update_stock(product_id, value)
        self._cache.invalidate(query_cache.PRODUCT_CHANGED)
        logger.info(f"Product #{product_id} stock set to {value}")
        return value
