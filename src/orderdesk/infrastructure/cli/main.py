import logging
from pathlib import Path

import click

from orderdesk.infrastructure.bootstrap import (
    BACKGROUND_NOTIFY_ENV,
    DATA_DIR_ENV,
    build_config,
)
from orderdesk.infrastructure.cli.cart_commands import cart_add, cart_show
from orderdesk.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_status,
)
from orderdesk.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_stock,
    product_update,
)
from orderdesk.infrastructure.cli.user_commands import user_add, user_list


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=None,
    help=f"Directory holding the JSON stores (env: {DATA_DIR_ENV}).",
)
@click.option(
    "--background-notify/--no-background-notify",
    envvar=BACKGROUND_NOTIFY_ENV,
    default=True,
    show_default=True,
    help="Send notifications from a worker thread.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, background_notify: bool, verbose: bool) -> None:
    """orderdesk — carts, orders and stock"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = build_config(data_dir=data_dir, background_notify=background_notify)
    ctx.obj = config
    ctx.call_on_close(config.close)


@cli.group()
def order() -> None:
    """Place and manage orders."""


@cli.group()
def product() -> None:
    """Manage the catalog and stock levels."""


@cli.group()
def cart() -> None:
    """Manage shopping carts."""


@cli.group()
def user() -> None:
    """Manage users."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_stock)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_show)
user.add_command(user_add)
user.add_command(user_list)
