"""CLI commands for the Product aggregate and its stock."""

from __future__ import annotations

import click

from orderdesk.application.add_product import AddProductHandler
from orderdesk.application.set_stock import SetStockHandler
from orderdesk.application.show_stock import ShowStockHandler
from orderdesk.application.update_product import UpdateProductHandler
from orderdesk.domain.exceptions import DomainException
from orderdesk.infrastructure.bootstrap import AppConfig, unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, show_default=True, type=click.IntRange(min=0), help="Units on hand.")
@click.pass_obj
def product_add(config: AppConfig, name: str, price: str, stock: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(uow=unit_of_work(config))

    try:
        product = handler.handle(name=name, price=price, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"({product.stock} in stock)"
    )


@click.command("list")
@click.pass_obj
def product_list(config: AppConfig) -> None:
    """List all products with their stock levels."""
    lines = ShowStockHandler(uow=unit_of_work(config)).handle()

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>8}")
    click.echo("-" * 47)
    for line in lines:
        click.echo(
            f"{line.product_id:<6} {line.product_name:<20} {line.price:>10} {line.stock:>8}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(config: AppConfig, product_id: str, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(uow=unit_of_work(config))

    try:
        handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} price updated to ${price}")


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units on hand.")
@click.pass_obj
def product_stock(config: AppConfig, product_id: str, quantity: int) -> None:
    """Set the stock level for a product."""
    handler = SetStockHandler(uow=unit_of_work(config))

    try:
        handler.handle(product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for product #{product_id} set to {quantity}")
