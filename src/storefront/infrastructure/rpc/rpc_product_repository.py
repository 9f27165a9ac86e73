"""RPC-backed implementation of ProductRepository."""

from __future__ import annotations

from typing import Any

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import (
    Money,
    option_from_nullable,
    option_to_nullable,
)
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.product_validation import ProductDraft
from storefront.infrastructure.rpc.client import RpcClient, decoding


class RpcProductRepository(ProductRepository):

    def __init__(self, rpc: RpcClient) -> None:
        self._rpc = rpc

    # --- ProductRepository interface ------------------------------------------

    async def list_all(self) -> list[Product]:
        return await self._list("listAllProducts")

    async def list_by_category(self, category: str) -> list[Product]:
        return await self._list("listProductsByCategory", category)

    async def search(self, keyword: str) -> list[Product]:
        return await self._list("searchProducts", keyword)

    async def get_by_id(self, product_id: int) -> Product:
        raw = await self._rpc.call("getProductById", product_id)
        if raw is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        with decoding("getProductById"):
            return self._to_domain(raw)

    async def list_categories(self) -> list[str]:
        raw_categories = await self._rpc.call("getSupportedCategories")
        with decoding("getSupportedCategories"):
            return [str(c) for c in raw_categories]

    async def add(self, draft: ProductDraft) -> int:
        product_id = await self._rpc.call("addProduct", *self._draft_args(draft))
        with decoding("addProduct"):
            return int(product_id)

    async def update(self, product_id: int, draft: ProductDraft) -> None:
        await self._rpc.call("updateProduct", product_id, *self._draft_args(draft))

    async def update_stock(self, product_id: int, stock: int) -> None:
        await self._rpc.call("updateStock", product_id, stock)

    async def _list(self, method: str, *args: Any) -> list[Product]:
        raw_products = await self._rpc.call(method, *args)
        with decoding(method):
            return [self._to_domain(raw) for raw in raw_products]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _draft_args(draft: ProductDraft) -> list[Any]:
        """Positional arguments in the order the backend expects."""
        return [
            draft.title,
            draft.description,
            draft.price.amount,
            draft.currency,
            draft.category,
            draft.image_url,
            option_to_nullable(draft.rating),
            draft.stock,
        ]

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=int(raw["id"]),
            title=raw["title"],
            description=raw["description"],
            price=Money(int(raw["price"]), raw["currency"]),
            stock=int(raw["stock"]),
            image_url=raw["imageUrl"],
            category=raw["category"],
            rating=option_from_nullable(
                int(raw["rating"]) if raw.get("rating") is not None else None
            ),
        )
