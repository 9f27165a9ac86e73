"""Application service: Show Order use case (query).

Order lines only carry product IDs and quantities; titles and unit
prices are looked up in the current catalog for display.
"""

from __future__ import annotations

import asyncio
import logging

from storefront.application import query_cache
from storefront.application.dto import OrderDTO, OrderLineDTO
from storefront.application.query_cache import QueryCache
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        cache: QueryCache,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._cache = cache

    async def handle(self, order_id: int) -> OrderDTO | None:
        """Return the order, or None when it does not exist."""
        try:
            order, catalog = await asyncio.gather(
                self._cache.fetch(
                    query_cache.order_key(order_id),
                    lambda: self._order_repo.get_by_id(order_id),
                ),
                self._cache.fetch(query_cache.all_products_key(), self._product_repo.list_all),
            )
        except EntityNotFoundError:
            logger.info(f"Order #{order_id} not found")
            return None
        return order_to_dto(order, catalog)


def order_to_dto(order: Order, catalog: list[Product]) -> OrderDTO:
    by_id = {p.id: p for p in catalog}
    lines: list[OrderLineDTO] = []
    for item in order.items:
        product = by_id.get(item.product_id)
        if product is None:
            lines.append(
                OrderLineDTO(
                    product_id=item.product_id,
                    title=f"Product #{item.product_id}",
                    quantity=item.quantity.value,
                    unit_price=None,
                    line_total=None,
                )
            )
            continue
        lines.append(
            OrderLineDTO(
                product_id=item.product_id,
                title=product.title,
                quantity=item.quantity.value,
                unit_price=str(product.price),
                line_total=str(product.price * item.quantity.value),
            )
        )

    return OrderDTO(
        id=order.id,
        placed_at=order.placed_at.strftime("%Y-%m-%d %H:%M UTC"),
        payment_method=order.payment_method.label,
        shipping_address=order.shipping_address,
        items=lines,
        item_count=order.item_count,
        total=str(order.total),
    )
