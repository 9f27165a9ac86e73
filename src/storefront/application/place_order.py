"""Application service: Place Order use case.

Orchestrates the checkout session (local preconditions and stage
transitions), the cart read and the remote ``placeOrder`` call.

Failure modes:
- ValidationError: a precondition failed. Only the empty-cart check
  needs the cart read; nothing else is sent.
- GatewayError or EntityNotFoundError: the backend rejected the order;
  the session is back in READY and ``handle`` can be called again with
  the same session.
"""

from __future__ import annotations

import logging

from storefront.application import query_cache
from storefront.application.dto import OrderPlacementDTO
from storefront.application.query_cache import QueryCache
from storefront.domain.exceptions import DomainException
from storefront.domain.model.checkout import CheckoutSession
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

CONFIRMATION_PATH = "/order-confirmation/{order_id}"


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
        cache: QueryCache,
    ) -> None:
        self._order_repo = order_repo
        self._cart_repo = cart_repo
        self._cache = cache

    async def handle(self, session: CheckoutSession) -> OrderPlacementDTO:
        # Local preconditions first; a ValidationError here costs no call
        session.ensure_submittable()

        cart_items = await self._cache.fetch(query_cache.CART, self._cart_repo.get)
        session.begin_submission(cart_items)

        try:
            order_id = await self._order_repo.place(
                shipping_address=session.shipping_address,
                payment_method=session.payment_method,  # type: ignore[arg-type]
                country=session.country,
            )
        except DomainException:
            logger.warning("Order placement rejected by backend", exc_info=True)
            session.mark_rejected()
            raise

        session.mark_placed(order_id)
        self._cache.invalidate(query_cache.ORDER_PLACED)
        logger.info(f"Order #{order_id} placed")

        return OrderPlacementDTO(
            order_id=order_id,
            confirmation_path=CONFIRMATION_PATH.format(order_id=order_id),
        )
