"""RPC-backed implementation of CartRepository."""

from __future__ import annotations

from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.rpc.client import RpcClient, decoding


class RpcCartRepository(CartRepository):

    def __init__(self, rpc: RpcClient) -> None:
        self._rpc = rpc

    # --- CartRepository interface ---------------------------------------------

    async def get(self) -> list[CartLineItem]:
        raw_items = await self._rpc.call("getCart")
        with decoding("getCart"):
            return [line_item_from_raw(raw) for raw in raw_items]

    async def add_item(self, product_id: int, quantity: int) -> None:
        await self._rpc.call("addItemToCart", product_id, quantity)

    async def update_item(self, product_id: int, quantity: int) -> None:
        await self._rpc.call("updateCartItem", product_id, quantity)

    async def remove_item(self, product_id: int) -> None:
        await self._rpc.call("removeCartItem", product_id)

    async def clear(self) -> None:
        await self._rpc.call("clearCart")


def line_item_from_raw(raw: dict) -> CartLineItem:
    return CartLineItem(
        product_id=int(raw["productId"]),
        quantity=Quantity(int(raw["quantity"])),
    )
