"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from orderdesk.application.change_order_status import ChangeOrderStatusHandler
from orderdesk.application.create_order import CreateOrderHandler
from orderdesk.application.delete_order import DeleteOrderHandler
from orderdesk.application.dto import OrderDTO
from orderdesk.application.list_orders import ListOrdersHandler
from orderdesk.application.show_order import ShowOrderHandler
from orderdesk.domain.exceptions import DomainException
from orderdesk.infrastructure.bootstrap import AppConfig, unit_of_work


def _parse_ids(raw: str) -> list[int]:
    """Parse '3,4,7' into a list of cart item IDs."""
    ids: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        try:
            ids.append(int(part))
        except ValueError:
            raise click.BadParameter(f"Invalid cart item ID '{part}'.")
    return ids


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    if dto.phone_number:
        click.echo(f"Phone:    {dto.phone_number}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*48}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} {line.unit_price:>10} {line.subtotal:>10}"
        )
    click.echo(f"  {'-'*48}")
    click.echo(f"  {'Order Total':<27} {dto.total:>21}")


@click.command("create")
@click.option("--user", "user_id", required=True, help="ID of the ordering user.")
@click.option("--cart-items", required=True, help="Cart item IDs as '1,2,3'.")
@click.pass_obj
def order_create(config: AppConfig, user_id: str, cart_items: str) -> None:
    """Check out cart items into a new order (debits stock)."""
    ids = _parse_ids(cart_items)
    handler = CreateOrderHandler(uow=unit_of_work(config), notifier=config.notifier)

    try:
        dto = handler.handle(user_id=user_id, cart_item_ids=ids)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(config: AppConfig, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(uow=unit_of_work(config))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", default=None, help="Only orders placed by this user.")
@click.pass_obj
def order_list(config: AppConfig, user_id: str | None) -> None:
    """List orders."""
    orders = ListOrdersHandler(uow=unit_of_work(config)).handle(user_id=user_id)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'User':<12} {'Status':<10} {'Total':>10}  Created")
    click.echo("-" * 60)
    for dto in orders:
        click.echo(
            f"{dto.id:<6} {dto.user_id:<12} {dto.status:<10} {dto.total:>10}  {dto.created_at}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option(
    "--status",
    "new_status",
    required=True,
    help="Pending, Canceled, Completed or Delivered (case-insensitive).",
)
@click.pass_obj
def order_status(config: AppConfig, order_id: int, new_status: str) -> None:
    """Change an order's status (canceling restores stock)."""
    handler = ChangeOrderStatusHandler(uow=unit_of_work(config), notifier=config.notifier)

    try:
        dto = handler.handle(order_id, new_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} status is now {dto.status}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@click.confirmation_option(prompt="Delete this order? Stock will not be restored.")
@click.pass_obj
def order_delete(config: AppConfig, order_id: int) -> None:
    """Delete an order permanently."""
    handler = DeleteOrderHandler(uow=unit_of_work(config))

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")
