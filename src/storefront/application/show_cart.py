"""Application service: Show Cart use case (query).

Fetches the raw cart and the full catalog, then prices the cart with the
pure ``aggregate_cart`` function. Both reads go through the query cache,
so re-rendering the cart is cheap.
"""

from __future__ import annotations

import asyncio

from storefront.application import query_cache
from storefront.application.dto import CartDTO, CartLineDTO
from storefront.application.query_cache import QueryCache
from storefront.domain.model.cart import CartLineItem, CartSummary, aggregate_cart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        cache: QueryCache,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._cache = cache

    async def handle(self) -> CartDTO:
        items, catalog = await asyncio.gather(
            self.cart_items(),
            self._cache.fetch(query_cache.all_products_key(), self._product_repo.list_all),
        )
        return self._to_dto(aggregate_cart(items, catalog))

    async def cart_items(self) -> list[CartLineItem]:
        """The raw cart lines, as cached."""
        return await self._cache.fetch(query_cache.CART, self._cart_repo.get)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(summary: CartSummary) -> CartDTO:
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_id=line.product.id,
                    title=line.product.title,
                    quantity=line.quantity.value,
                    stock=line.product.stock,
                    unit_price=str(line.unit_price),
                    line_total=str(line.subtotal),
                )
                for line in summary.lines
            ],
            item_count=summary.item_count,
            subtotal=str(summary.subtotal),
            shipping=str(summary.shipping),
            total=str(summary.total),
            subtotal_minor_units=summary.subtotal.amount,
        )
