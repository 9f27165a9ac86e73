"""CLI commands for the caller's account."""

from __future__ import annotations

import click

from storefront.application.save_profile import SaveProfileHandler
from storefront.application.show_account import ShowAccountHandler
from storefront.infrastructure.cli.session import run_session


@click.command("show")
@click.pass_obj
def account_show(settings) -> None:
    """Show your role and display name."""
    account = run_session(
        settings, lambda sf: ShowAccountHandler(sf.account, sf.cache).handle()
    )
    click.echo(f"Name:  {account.display_name or '(not set)'}")
    click.echo(f"Role:  {account.role}")
    if account.is_admin:
        click.echo("Admin: yes")


@click.command("set-name")
@click.option("--name", required=True, help="Display name.")
@click.pass_obj
def account_set_name(settings, name: str) -> None:
    """Save your display name."""
    profile = run_session(
        settings, lambda sf: SaveProfileHandler(sf.account, sf.cache).handle(name)
    )
    click.echo(f"Profile saved: {profile.name}")
