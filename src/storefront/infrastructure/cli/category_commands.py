"""CLI commands for categories."""

from __future__ import annotations

import click

from storefront.application.add_category import AddCategoryHandler
from storefront.application.delete_category import DeleteCategoryHandler
from storefront.application.show_category import ListCategoriesHandler, ShowCategoryHandler
from storefront.application.update_category import UpdateCategoryHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import category_repository


@click.command("add")
@click.option("--name", required=True, help="Category name.")
def category_add(name: str) -> None:
    """Add a category."""
    try:
        dto = AddCategoryHandler(category_repo=category_repository()).handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{dto.id} '{dto.name}' added")


@click.command("list")
def category_list() -> None:
    """List categories."""
    categories = ListCategoriesHandler(category_repo=category_repository()).handle()

    if not categories:
        click.echo("No categories found.")
        return

    for c in categories:
        click.echo(f"{c.id:<6} {c.name}")


@click.command("show")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
def category_show(category_id: int) -> None:
    """Show a category."""
    try:
        dto = ShowCategoryHandler(category_repo=category_repository()).handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{dto.id} '{dto.name}'")


@click.command("update")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
@click.option("--name", required=True, help="New name.")
def category_update(category_id: int, name: str) -> None:
    """Rename a category."""
    try:
        dto = UpdateCategoryHandler(category_repo=category_repository()).handle(
            category_id, name=name
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{dto.id} renamed to '{dto.name}'")


@click.command("delete")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
def category_delete(category_id: int) -> None:
    """Delete a category. Its products are left in place."""
    try:
        DeleteCategoryHandler(category_repo=category_repository()).handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category_id} deleted.")
