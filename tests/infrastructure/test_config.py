"""Tests for environment-driven settings."""

import pytest

from storefront.infrastructure.config import DEFAULT_BACKEND_URL, Settings


class TestSettings:

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.backend_url == DEFAULT_BACKEND_URL
        assert settings.token is None
        assert settings.timeout == 30.0
        assert settings.log_level == "WARNING"

    def test_from_environment(self):
        settings = Settings.from_env({
            "STOREFRONT_BACKEND_URL": "https://shop.example/",
            "STOREFRONT_TOKEN": "abc",
            "STOREFRONT_TIMEOUT": "5",
            "STOREFRONT_LOG_LEVEL": "debug",
        })
        assert settings.backend_url == "https://shop.example"
        assert settings.token == "abc"
        assert settings.timeout == 5.0
        assert settings.log_level == "DEBUG"

    def test_empty_token_is_none(self):
        assert Settings.from_env({"STOREFRONT_TOKEN": ""}).token is None

    def test_bad_timeout(self):
        with pytest.raises(ValueError, match="STOREFRONT_TIMEOUT"):
            Settings.from_env({"STOREFRONT_TIMEOUT": "soon"})
