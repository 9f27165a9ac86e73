"""CLI commands for the admin catalog editor.

Every command checks the caller's role before doing anything else.
"""

from __future__ import annotations

from dataclasses import replace

import click

from storefront.application.list_products import ListProductsHandler
from storefront.application.save_product import SaveProductHandler
from storefront.application.show_account import ShowAccountHandler
from storefront.application.update_stock import UpdateStockHandler
from storefront.domain.model.value_objects import DEFAULT_CURRENCY
from storefront.domain.service.product_validation import ProductFormData
from storefront.infrastructure.bootstrap import Storefront
from storefront.infrastructure.cli.session import run_session


async def _require_admin(sf: Storefront) -> None:
    await ShowAccountHandler(sf.account, sf.cache).ensure_admin()


@click.command("products")
@click.pass_obj
def admin_products(settings) -> None:
    """List products with their stock levels."""

    async def _list(sf: Storefront):
        await _require_admin(sf)
        return await ListProductsHandler(sf.products, sf.cache).handle()

    products = run_session(settings, _list)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<30} {'Price':>12} {'Stock':>6}")
    click.echo("-" * 57)
    for p in products:
        click.echo(f"{p.id:<6} {p.title:<30} {p.price:>12} {p.stock:>6}")


@click.command("add")
@click.option("--title", default="", help="Product title.")
@click.option("--description", default="", help="Product description.")
@click.option("--price", default="", help="Price in major units (e.g. 19.99).")
@click.option("--currency", default=DEFAULT_CURRENCY, show_default=True, help="Currency symbol.")
@click.option("--category", default="", help="Category.")
@click.option("--image-url", default="", help="Image URL.")
@click.option("--rating", default="", help="Optional rating, 1-5.")
@click.option("--stock", default="", help="Units in stock.")
@click.pass_obj
def admin_add(settings, **fields: str) -> None:
    """Add a new product to the catalog."""
    form = ProductFormData(**fields)

    async def _add(sf: Storefront) -> int:
        await _require_admin(sf)
        return await SaveProductHandler(sf.products, sf.cache).handle(form)

    product_id = run_session(settings, _add)
    click.echo(f"Product #{product_id} added successfully.")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--title", default=None, help="Product title.")
@click.option("--description", default=None, help="Product description.")
@click.option("--price", default=None, help="Price in major units (e.g. 19.99).")
@click.option("--currency", default=None, help="Currency symbol.")
@click.option("--category", default=None, help="Category.")
@click.option("--image-url", default=None, help="Image URL.")
@click.option("--rating", default=None, help="Rating 1-5, or an empty string to clear it.")
@click.option("--stock", default=None, help="Units in stock.")
@click.pass_obj
def admin_update(settings, product_id: int, **fields: str | None) -> None:
    """Update an existing product; omitted fields keep their value."""
    changes = {name: value for name, value in fields.items() if value is not None}

    async def _update(sf: Storefront) -> int:
        await _require_admin(sf)
        handler = SaveProductHandler(sf.products, sf.cache)
        form = replace(await handler.load_form(product_id), **changes)
        return await handler.handle(form, product_id=product_id)

    run_session(settings, _update)
    click.echo(f"Product #{product_id} updated successfully.")


@click.command("stock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--stock", required=True, help="New stock count.")
@click.pass_obj
def admin_stock(settings, product_id: int, stock: str) -> None:
    """Set a product's stock count."""

    async def _stock(sf: Storefront) -> int:
        await _require_admin(sf)
        return await UpdateStockHandler(sf.products, sf.cache).handle(product_id, stock)

    value = run_session(settings, _stock)
    click.echo(f"Product #{product_id} stock updated to {value}.")
