"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.application.list_categories import ListCategoriesHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.show_product import ShowProductHandler
from storefront.infrastructure.cli.session import run_session


@click.command("list")
@click.option("--category", default=None, help="Only products in this category.")
@click.option("--search", "keyword", default=None, help="Search by keyword.")
@click.pass_obj
def product_list(settings, category: str | None, keyword: str | None) -> None:
    """List products in the catalog."""
    products = run_session(
        settings,
        lambda sf: ListProductsHandler(sf.products, sf.cache).handle(
            category=category, keyword=keyword
        ),
    )

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<30} {'Category':<15} {'Price':>12} {'Stock':>6}")
    click.echo("-" * 73)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.title:<30} {p.category:<15} {p.price:>12} {p.stock:>6}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(settings, product_id: int) -> None:
    """Show one product."""
    product = run_session(
        settings, lambda sf: ShowProductHandler(sf.products, sf.cache).handle(product_id)
    )

    if product is None:
        raise click.ClickException(f"Product #{product_id} not found.")

    click.echo(f"#{product.id}  {product.title}")
    click.echo(f"Category: {product.category}")
    click.echo(f"Price:    {product.price}")
    if product.rating is not None:
        click.echo(f"Rating:   {product.rating}/5")
    if product.in_stock:
        click.echo(f"In Stock ({product.stock} available)")
    else:
        click.echo("Out of Stock")
    click.echo()
    click.echo(product.description)


@click.command("categories")
@click.pass_obj
def product_categories(settings) -> None:
    """List the supported categories."""
    categories = run_session(
        settings, lambda sf: ListCategoriesHandler(sf.products, sf.cache).handle()
    )
    for category in categories:
        click.echo(category)
