"""RPC-backed implementation of AccountRepository."""

from __future__ import annotations

from storefront.domain.model.account import UserProfile, UserRole
from storefront.domain.repository.account_repository import AccountRepository
from storefront.infrastructure.rpc.client import RpcClient, decoding


class RpcAccountRepository(AccountRepository):

    def __init__(self, rpc: RpcClient) -> None:
        self._rpc = rpc

    async def get_role(self) -> UserRole:
        raw_role = await self._rpc.call("getCallerUserRole")
        with decoding("getCallerUserRole"):
            return UserRole(raw_role)

    async def is_admin(self) -> bool:
        return bool(await self._rpc.call("isCallerAdmin"))

    async def get_profile(self) -> UserProfile | None:
        raw = await self._rpc.call("getCallerUserProfile")
        if raw is None:
            return None
        with decoding("getCallerUserProfile"):
            return UserProfile(name=raw["name"])

    async def save_profile(self, profile: UserProfile) -> None:
        await self._rpc.call("saveCallerUserProfile", {"name": profile.name})
