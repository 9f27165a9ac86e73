"""CLI commands for the caller's cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.remove_cart_item import RemoveCartItemHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import clamp_quantity
from storefront.infrastructure.bootstrap import Storefront
from storefront.infrastructure.cli.session import run_session


def display_cart(cart: CartDTO) -> None:
    """Shared formatting for the cart and the checkout summary."""
    click.echo(f"  {'Product':<30} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*62}")
    for line in cart.lines:
        click.echo(
            f"  {line.title:<30} {line.quantity:>5} {line.unit_price:>12} {line.line_total:>12}"
        )
    click.echo(f"  {'-'*62}")
    click.echo(f"  {'Subtotal':<36} {cart.subtotal:>26}")
    click.echo(f"  {'Shipping':<36} {'Free':>26}")
    click.echo(f"  {'Total':<36} {cart.total:>26}")


@click.command("show")
@click.pass_obj
def cart_show(settings) -> None:
    """Show the cart with current prices."""
    cart = run_session(
        settings, lambda sf: ShowCartHandler(sf.cart, sf.products, sf.cache).handle()
    )

    if cart.is_empty:
        click.echo("Your cart is empty.")
        return

    click.echo(f"Cart ({cart.item_count} items)")
    display_cart(cart)


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", "quantity", default="1", show_default=True, help="Quantity to add.")
@click.pass_obj
def cart_add(settings, product_id: int, quantity: str) -> None:
    """Add a product to the cart."""

    async def _add(sf: Storefront) -> int:
        product = await ShowProductHandler(sf.products, sf.cache).handle(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        if not product.in_stock:
            raise ValidationError(f"{product.title} is out of stock")
        qty = clamp_quantity(quantity, product.stock)
        await AddToCartHandler(sf.cart, sf.cache).handle(product_id, qty)
        return qty

    qty = run_session(settings, _add)
    click.echo(f"Added to cart ({qty} x product #{product_id}).")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", "quantity", required=True, help="New quantity.")
@click.pass_obj
def cart_update(settings, product_id: int, quantity: str) -> None:
    """Change the quantity of a cart line."""

    async def _update(sf: Storefront) -> int:
        cart = await ShowCartHandler(sf.cart, sf.products, sf.cache).handle()
        line = next((entry for entry in cart.lines if entry.product_id == product_id), None)
        if line is None:
            raise EntityNotFoundError(f"Product #{product_id} is not in your cart")
        qty = clamp_quantity(quantity, line.stock)
        await UpdateCartItemHandler(sf.cart, sf.cache).handle(product_id, qty)
        return qty

    qty = run_session(settings, _update)
    click.echo(f"Product #{product_id} quantity set to {qty}.")


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def cart_remove(settings, product_id: int) -> None:
    """Remove a product from the cart."""
    run_session(
        settings, lambda sf: RemoveCartItemHandler(sf.cart, sf.cache).handle(product_id)
    )
    click.echo("Item removed from cart.")


@click.command("clear")
@click.pass_obj
def cart_clear(settings) -> None:
    """Remove everything from the cart."""
    run_session(settings, lambda sf: ClearCartHandler(sf.cart, sf.cache).handle())
    click.echo("Cart cleared.")
