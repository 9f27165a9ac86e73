"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

from storefront.application.query_cache import QueryCache
from storefront.domain.repository.account_repository import AccountRepository
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.config import Settings
from storefront.infrastructure.rpc.client import RpcClient
from storefront.infrastructure.rpc.rpc_account_repository import RpcAccountRepository
from storefront.infrastructure.rpc.rpc_cart_repository import RpcCartRepository
from storefront.infrastructure.rpc.rpc_order_repository import RpcOrderRepository
from storefront.infrastructure.rpc.rpc_product_repository import RpcProductRepository

logger = logging.getLogger(__name__)


@dataclass
class Storefront:
    """Repositories plus the query cache they share for one session."""

    products: ProductRepository
    cart: CartRepository
    orders: OrderRepository
    account: AccountRepository
    cache: QueryCache = field(default_factory=QueryCache)


@asynccontextmanager
async def open_storefront(settings: Settings) -> AsyncIterator[Storefront]:
    logger.debug(f"Connecting to backend at {settings.backend_url}")
    async with RpcClient(settings) as rpc:
        yield Storefront(
            products=RpcProductRepository(rpc),
            cart=RpcCartRepository(rpc),
            orders=RpcOrderRepository(rpc),
            account=RpcAccountRepository(rpc),
        )
