"""Keyed cache of remote reads.

Every read handler stores its result under a tuple key such as
``("products", "all")`` or ``("product", 7)``. Mutations never patch
cached values; they invalidate a fixed set of key prefixes and the next
read fetches fresh data from the backend.

Concurrent reads of the same key are not deduplicated and whichever
response lands last overwrites the entry.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

QueryKey = tuple[Any, ...]
T = TypeVar("T")


# --- Keys ---------------------------------------------------------------------

CART: QueryKey = ("cart",)
ORDERS: QueryKey = ("orders",)
PRODUCTS: QueryKey = ("products",)
PRODUCT: QueryKey = ("product",)
ORDER: QueryKey = ("order",)
CATEGORIES: QueryKey = ("categories",)
ROLE: QueryKey = ("role",)
PROFILE: QueryKey = ("profile",)


def all_products_key() -> QueryKey:
    return PRODUCTS + ("all",)


def category_key(category: str) -> QueryKey:
    return PRODUCTS + ("category", category)


def search_key(keyword: str) -> QueryKey:
    return PRODUCTS + ("search", keyword)


def product_key(product_id: int) -> QueryKey:
    return PRODUCT + (product_id,)


def order_key(order_id: int) -> QueryKey:
    return ORDER + (order_id,)


# --- Invalidation sets, one per mutation --------------------------------------

CART_CHANGED: tuple[QueryKey, ...] = (CART,)
ORDER_PLACED: tuple[QueryKey, ...] = (CART, ORDERS, PRODUCTS)
PRODUCT_ADDED: tuple[QueryKey, ...] = (PRODUCTS,)
PRODUCT_CHANGED: tuple[QueryKey, ...] = (PRODUCTS, PRODUCT)
PROFILE_CHANGED: tuple[QueryKey, ...] = (PROFILE,)


class QueryCache:

    def __init__(self) -> None:
        self._entries: dict[QueryKey, Any] = {}

    async def fetch(self, key: QueryKey, loader: Callable[[], Awaitable[T]]) -> T:
        """Return the cached value for *key*, loading it on a miss."""
        if key in self._entries:
            logger.debug(f"Cache hit: {key}")
            return self._entries[key]

        logger.debug(f"Cache miss: {key}")
        value = await loader()
        self._entries[key] = value
        return value

    def get(self, key: QueryKey, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def set(self, key: QueryKey, value: Any) -> None:
        self._entries[key] = value

    def invalidate(self, prefixes: Iterable[QueryKey]) -> None:
        """Drop every entry whose key starts with one of *prefixes*."""
        prefixes = tuple(prefixes)
        stale = [
            key
            for key in self._entries
            if any(key[: len(prefix)] == prefix for prefix in prefixes)
        ]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug(f"Invalidated {len(stale)} cache entries for {prefixes}")

    def __contains__(self, key: QueryKey) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
