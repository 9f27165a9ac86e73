"""Caller identity as seen by the backend: role and profile."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError


class UserRole(Enum):
    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


@dataclass(frozen=True)
class UserProfile:
    name: str

    @staticmethod
    def create(name: str) -> UserProfile:
        if not name or not name.strip():
            raise ValidationError("Display name is required")
        return UserProfile(name=name.strip())
