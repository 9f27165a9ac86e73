"""RPC-backed implementation of OrderRepository."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order, PaymentMethod, timestamp_from_nanos
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.rpc.client import RpcClient, decoding
from storefront.infrastructure.rpc.rpc_cart_repository import line_item_from_raw


class RpcOrderRepository(OrderRepository):

    def __init__(self, rpc: RpcClient) -> None:
        self._rpc = rpc

    # --- OrderRepository interface --------------------------------------------

    async def place(
        self,
        shipping_address: str,
        payment_method: PaymentMethod,
        country: str,
    ) -> int:
        order_id = await self._rpc.call(
            "placeOrder", shipping_address, payment_method.value, country
        )
        with decoding("placeOrder"):
            return int(order_id)

    async def list_mine(self) -> list[Order]:
        raw_orders = await self._rpc.call("listMyOrders")
        with decoding("listMyOrders"):
            return [self._to_domain(raw) for raw in raw_orders]

    async def get_by_id(self, order_id: int) -> Order:
        raw = await self._rpc.call("getOrder", order_id)
        if raw is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        with decoding("getOrder"):
            return self._to_domain(raw)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=int(raw["id"]),
            items=tuple(line_item_from_raw(item) for item in raw["items"]),
            total=Money(int(raw["total"])),
            payment_method=PaymentMethod(raw["paymentMethod"]),
            shipping_address=raw["shippingAddress"],
            placed_at=timestamp_from_nanos(int(raw["timestamp"])),
            user=str(raw["user"]),
        )
