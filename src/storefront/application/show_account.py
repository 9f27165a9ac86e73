"""Application service: Show Account use case (query) and the admin gate."""

from __future__ import annotations

import asyncio

from storefront.application import query_cache
from storefront.application.dto import AccountDTO
from storefront.application.query_cache import QueryCache
from storefront.domain.exceptions import AccessDeniedError
from storefront.domain.repository.account_repository import AccountRepository

ADMIN_KEY = query_cache.ROLE + ("admin",)


class ShowAccountHandler:

    def __init__(self, account_repo: AccountRepository, cache: QueryCache) -> None:
        self._account_repo = account_repo
        self._cache = cache

    async def handle(self) -> AccountDTO:
        role, is_admin, profile = await asyncio.gather(
            self._cache.fetch(query_cache.ROLE, self._account_repo.get_role),
            self._cache.fetch(ADMIN_KEY, self._account_repo.is_admin),
            self._cache.fetch(query_cache.PROFILE, self._account_repo.get_profile),
        )
        return AccountDTO(
            role=role.value,
            is_admin=is_admin,
            display_name=profile.name if profile is not None else None,
        )

    async def ensure_admin(self) -> None:
        """Raise AccessDeniedError unless the caller is an admin."""
        is_admin = await self._cache.fetch(ADMIN_KEY, self._account_repo.is_admin)
        if not is_admin:
            raise AccessDeniedError(
                "You don't have permission to access the admin panel."
            )
