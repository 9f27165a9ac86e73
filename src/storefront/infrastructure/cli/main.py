from __future__ import annotations

import logging
from dataclasses import replace

import click

from storefront.infrastructure.cli.account_commands import account_set_name, account_show
from storefront.infrastructure.cli.admin_commands import (
    admin_add,
    admin_products,
    admin_stock,
    admin_update,
)
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.order_commands import checkout, order_list, order_show
from storefront.infrastructure.cli.product_commands import (
    product_categories,
    product_list,
    product_show,
)
from storefront.infrastructure.config import Settings


@click.group()
@click.option("--backend-url", default=None, help="Backend base URL (env STOREFRONT_BACKEND_URL).")
@click.option("--token", default=None, help="Bearer token (env STOREFRONT_TOKEN).")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log gateway traffic.")
@click.pass_context
def cli(ctx: click.Context, backend_url: str | None, token: str | None, verbose: bool) -> None:
    """Storefront: browse, shop and manage the catalog"""
    settings = Settings.from_env()
    overrides = {}
    if backend_url:
        overrides["backend_url"] = backend_url.rstrip("/")
    if token:
        overrides["token"] = token
    if verbose:
        overrides["log_level"] = "DEBUG"
    if overrides:
        settings = replace(settings, **overrides)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Manage your cart."""


@cli.group()
def order() -> None:
    """View your orders."""


@cli.group()
def admin() -> None:
    """Edit the catalog (admins only)."""


@cli.group()
def account() -> None:
    """Manage your account."""


# Register subcommands
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_categories)
cart.add_command(cart_show)
cart.add_command(cart_add)
cart.add_command(cart_update)
cart.add_command(cart_remove)
cart.add_command(cart_clear)
cli.add_command(checkout)
order.add_command(order_list)
order.add_command(order_show)
admin.add_command(admin_products)
admin.add_command(admin_add)
admin.add_command(admin_update)
admin.add_command(admin_stock)
account.add_command(account_show)
account.add_command(account_set_name)
