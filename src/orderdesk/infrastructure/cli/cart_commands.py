"""CLI commands for shopping carts."""

from __future__ import annotations

import click

from orderdesk.application.add_to_cart import AddToCartHandler
from orderdesk.application.show_cart import ShowCartHandler
from orderdesk.domain.exceptions import DomainException
from orderdesk.infrastructure.bootstrap import AppConfig, unit_of_work


@click.command("add")
@click.option("--user", "user_id", required=True, help="Owner of the cart.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units wanted.")
@click.pass_obj
def cart_add(config: AppConfig, user_id: str, product_id: str, quantity: int) -> None:
    """Put a product in a user's cart."""
    handler = AddToCartHandler(uow=unit_of_work(config))

    try:
        item = handler.handle(user_id=user_id, product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart item #{item.id}: {item.quantity} x {item.product_name}")


@click.command("show")
@click.option("--user", "user_id", required=True, help="Owner of the cart.")
@click.pass_obj
def cart_show(config: AppConfig, user_id: str) -> None:
    """Show a user's cart."""
    items = ShowCartHandler(uow=unit_of_work(config)).handle(user_id)

    if not items:
        click.echo("Cart is empty.")
        return

    click.echo(f"{'ID':<6} {'Product':<20} {'Qty':>5}")
    click.echo("-" * 33)
    for item in items:
        click.echo(f"{item.id:<6} {item.product_name:<20} {item.quantity:>5}")
