"""Application service: List My Orders use case (query)."""

from __future__ import annotations

import asyncio

from storefront.application import query_cache
from storefront.application.dto import OrderDTO
from storefront.application.query_cache import QueryCache
from storefront.application.show_order import order_to_dto
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class ListMyOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        cache: QueryCache,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._cache = cache

    async def handle(self) -> list[OrderDTO]:
        """The caller's orders, newest first."""
        orders, catalog = await asyncio.gather(
            self._cache.fetch(query_cache.ORDERS, self._order_repo.list_mine),
            self._cache.fetch(query_cache.all_products_key(), self._product_repo.list_all),
        )
        ordered = sorted(orders, key=lambda o: o.placed_at, reverse=True)
        return [order_to_dto(order, catalog) for order in ordered]
