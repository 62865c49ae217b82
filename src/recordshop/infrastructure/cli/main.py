import logging

import click

from recordshop.infrastructure.bootstrap import build_services
from recordshop.infrastructure.cli.order_commands import order_list, order_place, order_show
from recordshop.infrastructure.cli.record_commands import (
    record_add,
    record_list,
    record_show,
    record_stock,
    record_update,
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Record Shop — catalog and stock management"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx.obj is None:
        ctx.obj = build_services()


@cli.group()
def record() -> None:
    """Manage catalog records."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
record.add_command(record_add)
record.add_command(record_list)
record.add_command(record_show)
record.add_command(record_stock)
record.add_command(record_update)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
