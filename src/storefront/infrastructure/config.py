"""Runtime configuration, read from the environment.

Every value can be overridden by the root CLI command's options.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_BACKEND_URL = "http://127.0.0.1:8000"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    backend_url: str = DEFAULT_BACKEND_URL
    token: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "WARNING"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        raw_timeout = env.get("STOREFRONT_TIMEOUT", "")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"STOREFRONT_TIMEOUT must be a number, got {raw_timeout!r}") from None

        return Settings(
            backend_url=env.get("STOREFRONT_BACKEND_URL", DEFAULT_BACKEND_URL).rstrip("/"),
            token=env.get("STOREFRONT_TOKEN") or None,
            timeout=timeout,
            log_level=env.get("STOREFRONT_LOG_LEVEL", "WARNING").upper(),
        )
