"""Integration tests for the account use cases and admin gate."""

import asyncio

import pytest

from storefront.application.query_cache import QueryCache
from storefront.application.save_profile import SaveProfileHandler
from storefront.application.show_account import ShowAccountHandler
from storefront.domain.exceptions import AccessDeniedError, ValidationError
from storefront.domain.model.account import UserProfile, UserRole
from tests.fakes import FakeAccountRepository


class TestShowAccount:

    def test_admin(self):
        repo = FakeAccountRepository(UserRole.ADMIN, UserProfile("Asha"))
        dto = asyncio.run(ShowAccountHandler(repo, QueryCache()).handle())
        assert dto.role == "admin"
        assert dto.is_admin
        assert dto.display_name == "Asha"

    def test_guest_without_profile(self):
        dto = asyncio.run(ShowAccountHandler(FakeAccountRepository(UserRole.GUEST), QueryCache()).handle())
        assert dto.role == "guest"
        assert not dto.is_admin
        assert dto.display_name is None


class TestAdminGate:

    def test_admin_passes(self):
        repo = FakeAccountRepository(UserRole.ADMIN)
        asyncio.run(ShowAccountHandler(repo, QueryCache()).ensure_admin())

    def test_user_denied(self):
        repo = FakeAccountRepository(UserRole.USER)
        with pytest.raises(AccessDeniedError, match="permission"):
            asyncio.run(ShowAccountHandler(repo, QueryCache()).ensure_admin())


class TestSaveProfile:

    def test_saves_trimmed_name(self):
        repo = FakeAccountRepository()
        asyncio.run(SaveProfileHandler(repo, QueryCache()).handle("  Asha  "))
        assert repo.profile == UserProfile("Asha")

    def test_blank_name_rejected(self):
        repo = FakeAccountRepository()
        with pytest.raises(ValidationError, match="Display name"):
            asyncio.run(SaveProfileHandler(repo, QueryCache()).handle("  "))
        assert repo.calls == []

    def test_new_name_visible_after_save(self):
        repo = FakeAccountRepository(profile=UserProfile("Old"))
        cache = QueryCache()
        show = ShowAccountHandler(repo, cache)
        asyncio.run(show.handle())
        asyncio.run(SaveProfileHandler(repo, cache).handle("New"))
        assert asyncio.run(show.handle()).display_name == "New"
