"""CLI commands for users."""

from __future__ import annotations

import click

from orderdesk.application.list_users import ListUsersHandler
from orderdesk.application.register_user import RegisterUserHandler
from orderdesk.domain.exceptions import DomainException
from orderdesk.infrastructure.bootstrap import AppConfig, unit_of_work


@click.command("add")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.option("--name", required=True, help="Display name.")
@click.option("--phone", default=None, help="Contact phone number.")
@click.pass_obj
def user_add(config: AppConfig, user_id: str, name: str, phone: str | None) -> None:
    """Register a user."""
    handler = RegisterUserHandler(uow=unit_of_work(config))

    try:
        registered = handler.handle(user_id=user_id, name=name, phone_number=phone)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User '{registered.id}' ({registered.name}) registered")


@click.command("list")
@click.pass_obj
def user_list(config: AppConfig) -> None:
    """List registered users."""
    users = ListUsersHandler(uow=unit_of_work(config)).handle()

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<10} {'Name':<20} {'Phone':<16}")
    click.echo("-" * 48)
    for u in users:
        click.echo(f"{u.id:<10} {u.name:<20} {u.phone_number or '-':<16}")
