"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from recordshop.domain.exceptions import DomainException
from recordshop.domain.model.order import Order
from recordshop.infrastructure.bootstrap import Services


def _display_order(order: Order) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{order.id}  ({order.created_at.strftime('%Y-%m-%d %H:%M UTC')})")
    click.echo(f"  {order.artist} - {order.album}  [{order.record_id}]")
    click.echo(f"  {order.quantity} x {order.unit_price} = {order.total}")


@click.command("place")
@click.option("--record", "record_id", required=True, help="Record ID.")
@click.option("--quantity", required=True, type=int, help="Copies to sell.")
@click.pass_obj
def order_place(services: Services, record_id: str, quantity: int) -> None:
    """Sell copies of a record."""
    try:
        response = services.orders.place_order(record_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(response.message)
    _display_order(response.data)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(services: Services, order_id: int) -> None:
    """Show details of an existing order."""
    try:
        response = services.orders.get_order(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(response.data)


@click.command("list")
@click.pass_obj
def order_list(services: Services) -> None:
    """List every order."""
    try:
        response = services.orders.list_orders()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not response.data:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Record':<34} {'Qty':>5} {'Total':>10}")
    click.echo("-" * 58)
    for o in response.data:
        click.echo(f"{o.id:<6} {o.record_id:<34} {o.quantity.value:>5} {str(o.total):>10}")
