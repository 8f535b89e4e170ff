"""CLI commands for users."""

from __future__ import annotations

import click

from storefront.application.delete_user import DeleteUserHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.application.show_user import ListUsersHandler, ShowUserHandler
from storefront.application.update_user import UpdateUserHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import user_repository


@click.command("add")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Email address.")
@click.password_option(help="Password.")
def user_add(name: str, email: str, password: str) -> None:
    """Register a user."""
    try:
        dto = RegisterUserHandler(user_repo=user_repository()).handle(
            name=name, email=email, password=password
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{dto.id} '{dto.name}' <{dto.email}> registered")


@click.command("list")
def user_list() -> None:
    """List users."""
    users = ListUsersHandler(user_repo=user_repository()).handle()

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} Email")
    click.echo("-" * 40)
    for u in users:
        click.echo(f"{u.id:<6} {u.name:<20} {u.email}")


@click.command("show")
@click.option("--id", "user_id", required=True, type=int, help="User ID.")
def user_show(user_id: int) -> None:
    """Show a user."""
    try:
        dto = ShowUserHandler(user_repo=user_repository()).handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{dto.id}")
    click.echo(f"  Name:  {dto.name}")
    click.echo(f"  Email: {dto.email}")


@click.command("update")
@click.option("--id", "user_id", required=True, type=int, help="User ID.")
@click.option("--name", default=None, help="New display name.")
@click.option("--email", default=None, help="New email address.")
def user_update(user_id: int, name: str | None, email: str | None) -> None:
    """Change a user's name and/or email."""
    try:
        dto = UpdateUserHandler(user_repo=user_repository()).handle(
            user_id, name=name, email=email
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{dto.id} is now '{dto.name}' <{dto.email}>")


@click.command("delete")
@click.option("--id", "user_id", required=True, type=int, help="User ID.")
def user_delete(user_id: int) -> None:
    """Delete a user. Their orders are kept."""
    try:
        DeleteUserHandler(user_repo=user_repository()).handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user_id} deleted.")
