"""Application service: Save Profile use case."""

from __future__ import annotations

from storefront.application import query_cache
from storefront.application.query_cache import QueryCache
from storefront.domain.model.account import UserProfile
from storefront.domain.repository.account_repository import AccountRepository


class SaveProfileHandler:

    def __init__(self, account_repo: AccountRepository, cache: QueryCache) -> None:
        self._account_repo = account_repo
        self._cache = cache

    async def handle(self, name: str) -> UserProfile:
        profile = UserProfile.create(name)
        await self._account_repo.save_profile(profile)
        self._cache.invalidate(query_cache.PROFILE_CHANGED)
        return profile
