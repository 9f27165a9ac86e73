"""CLI commands for checkout and order history."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO, OrderPlacementDTO
from storefront.application.list_orders import ListMyOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.model.address import ShippingAddress
from storefront.domain.model.checkout import CheckoutSession
from storefront.domain.model.order import PaymentMethod
from storefront.infrastructure.bootstrap import Storefront
from storefront.infrastructure.cli.cart_commands import display_cart
from storefront.infrastructure.cli.session import run_session


@click.command("checkout")
@click.option("--name", "full_name", required=True, help="Full name.")
@click.option("--phone", required=True, help="Phone number.")
@click.option("--address", "address_line", required=True, help="House no., building, street.")
@click.option("--city", required=True, help="City.")
@click.option("--state", required=True, help="State.")
@click.option("--pincode", required=True, help="Pincode.")
@click.option("--country", required=True, help="Country (orders ship to India only).")
@click.option(
    "--payment",
    type=click.Choice([m.value for m in PaymentMethod]),
    default=None,
    help="Payment method.",
)
@click.pass_obj
def checkout(
    settings,
    full_name: str,
    phone: str,
    address_line: str,
    city: str,
    state: str,
    pincode: str,
    country: str,
    payment: str | None,
) -> None:
    """Place an order for everything in the cart."""
    address = ShippingAddress(
        full_name=full_name,
        phone=phone,
        address_line=address_line,
        city=city,
        state=state,
        pincode=pincode,
        country=country,
    )
    session = CheckoutSession()
    session.update_address(address)
    if payment is not None:
        session.select_payment(PaymentMethod.parse(payment))

    if session.country_error:
        click.echo(session.country_error, err=True)

    async def _place(sf: Storefront) -> OrderPlacementDTO:
        session.ensure_submittable()
        cart = await ShowCartHandler(sf.cart, sf.products, sf.cache).handle()
        if not cart.is_empty:
            click.echo("Order Summary")
            display_cart(cart)
            click.echo()
        return await PlaceOrderHandler(sf.orders, sf.cart, sf.cache).handle(session)

    placement = run_session(settings, _place)

    click.echo(f"Order #{placement.order_id} placed.")
    click.echo(f"Confirmation: {placement.confirmation_path}")


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  ({dto.item_count} items)")
    click.echo(f"Placed:   {dto.placed_at}")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo()

    click.echo(f"  {'Product':<30} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*62}")
    for item in dto.items:
        click.echo(
            f"  {item.title:<30} {item.quantity:>5} "
            f"{item.unit_price or '-':>12} {item.line_total or '-':>12}"
        )
    click.echo(f"  {'-'*62}")
    click.echo(f"  {'Order Total':<36} {dto.total:>26}")
    click.echo()
    click.echo("Ship to:")
    for line in dto.shipping_address.splitlines():
        click.echo(f"  {line}")


@click.command("list")
@click.pass_obj
def order_list(settings) -> None:
    """List your orders, newest first."""
    orders = run_session(
        settings,
        lambda sf: ListMyOrdersHandler(sf.orders, sf.products, sf.cache).handle(),
    )

    if not orders:
        click.echo("You have not placed any orders yet.")
        return

    click.echo(f"{'ID':<6} {'Placed':<22} {'Items':>6} {'Total':>14}")
    click.echo("-" * 51)
    for o in orders:
        click.echo(f"{o.id:<6} {o.placed_at:<22} {o.item_count:>6} {o.total:>14}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings, order_id: int) -> None:
    """Show details of an existing order."""
    dto = run_session(
        settings,
        lambda sf: ShowOrderHandler(sf.orders, sf.products, sf.cache).handle(order_id),
    )

    if dto is None:
        raise click.ClickException(f"Order #{order_id} not found.")

    _display_order(dto)
