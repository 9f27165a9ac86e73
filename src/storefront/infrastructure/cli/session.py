"""Glue between synchronous click commands and the async handlers."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import click

from storefront.domain.exceptions import DomainException, FormValidationError
from storefront.infrastructure import bootstrap
from storefront.infrastructure.bootstrap import Storefront
from storefront.infrastructure.config import Settings

T = TypeVar("T")


def run_session(settings: Settings, action: Callable[[Storefront], Awaitable[T]]) -> T:
    """Open a backend session, run *action* in it and close the session.

    Domain errors become ClickException so they print as a one-line
    notification and a non-zero exit status.
    """

    async def _main() -> T:
        async with bootstrap.open_storefront(settings) as storefront:
            return await action(storefront)

    try:
        return asyncio.run(_main())
    except FormValidationError as exc:
        for name, message in exc.errors.items():
            click.echo(f"  {name}: {message}", err=True)
        raise click.ClickException("Please correct the highlighted fields.")
    except DomainException as exc:
        raise click.ClickException(str(exc))
