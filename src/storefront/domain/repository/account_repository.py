"""Abstract repository for the caller's role and profile."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.account import UserProfile, UserRole


class AccountRepository(ABC):

    @abstractmethod
    async def get_role(self) -> UserRole:
        """Return the caller's role."""

    @abstractmethod
    async def is_admin(self) -> bool:
        """Return True if the caller may edit the catalog."""

    @abstractmethod
    async def get_profile(self) -> UserProfile | None:
        """Return the caller's profile, or None if none was saved."""

    @abstractmethod
    async def save_profile(self, profile: UserProfile) -> None:
        """Persist the caller's profile."""
