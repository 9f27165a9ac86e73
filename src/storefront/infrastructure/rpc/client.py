"""JSON-RPC-over-HTTP transport to the storefront backend.

Every backend operation is a ``POST /rpc`` carrying
``{"method": <name>, "args": [...]}``. The backend answers with
``{"ok": <result>}`` or ``{"err": <message>}``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import httpx

from storefront.domain.exceptions import (
    EntityNotFoundError,
    GatewayError,
    ValidationError,
)
from storefront.infrastructure.config import Settings

logger = logging.getLogger(__name__)

RPC_PATH = "/rpc"


class RpcClient:
    """Async client for the backend's RPC endpoint."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if settings.token:
            headers["Authorization"] = f"Bearer {settings.token}"

        self.client = httpx.AsyncClient(
            base_url=settings.backend_url,
            timeout=settings.timeout,
            headers=headers,
            transport=transport,
        )

    async def call(self, method: str, *args: Any) -> Any:
        """Invoke *method* and return its result.

        Raises EntityNotFoundError when the backend reports a missing
        entity and GatewayError for any other rejection or transport
        failure.
        """
        logger.debug(f"RPC {method} args={list(args)}")

        try:
            response = await self.client.post(
                RPC_PATH,
                json={"method": method, "args": list(args)},
            )
        except httpx.HTTPError as exc:
            logger.warning(f"RPC {method} transport error: {exc}")
            raise GatewayError(f"Could not reach backend for {method}: {exc}") from exc

        payload = self._decode(method, response)

        if "err" in payload:
            message = str(payload["err"])
            logger.warning(f"RPC {method} rejected: {message}")
            if "not found" in message.lower():
                raise EntityNotFoundError(message)
            raise GatewayError(message)

        if response.is_error:
            logger.warning(f"RPC {method} failed with HTTP {response.status_code}")
            raise GatewayError(f"{method} failed with HTTP {response.status_code}")

        if "ok" not in payload:
            raise GatewayError(f"Malformed response to {method}: missing 'ok'")

        return payload["ok"]

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> RpcClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _decode(method: str, response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            if response.is_error:
                raise GatewayError(
                    f"{method} failed with HTTP {response.status_code}"
                ) from None
            raise GatewayError(f"Backend returned invalid JSON for {method}") from None

        if not isinstance(payload, dict):
            raise GatewayError(f"Malformed response to {method}: expected an object")
        return payload


@contextmanager
def decoding(method: str) -> Iterator[None]:
    """Map a reply that does not fit the domain model onto GatewayError.

    Repositories wrap their ``_to_domain`` calls in this so a missing
    field or an out-of-range value never escapes as a bare KeyError.
    """
    try:
        yield
    except (KeyError, TypeError, ValueError, ValidationError) as exc:
        logger.warning(f"RPC {method} returned an unexpected shape: {exc!r}")
        raise GatewayError(f"Malformed response to {method}") from exc
