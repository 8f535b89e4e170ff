"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.create_order import CreateOrderHandler
from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.dto import LineItemSpec, OrderDTO
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.application.update_order import UpdateOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    user_repository,
)


def _parse_items(raw: str) -> list[LineItemSpec]:
    """Parse '1:3,2:5' (productId:quantity) into a LineItemSpec list."""
    specs: list[LineItemSpec] = []
    if not raw.strip():
        return specs
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        id_str, qty_str = pair.rsplit(":", 1)
        try:
            product_id = int(id_str)
        except ValueError:
            raise click.BadParameter(f"Invalid product id '{id_str}'.")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product {product_id}."
            )
        specs.append(LineItemSpec(product_id=product_id, quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (user={dto.user_id})")
    click.echo()
    click.echo(f"  {'Product':<10} {'Qty':>5}")
    click.echo(f"  {'-'*16}")
    for item in dto.products:
        click.echo(f"  {item.product_id:<10} {item.quantity:>5}")
    click.echo(f"  {'-'*16}")
    click.echo(f"  {'Total':<10} ${dto.total:.2f}")


@click.command("list")
def order_list() -> None:
    """List all orders."""
    dtos = ListOrdersHandler(order_repo=order_repository()).handle()

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'User':<6} {'Lines':>5} {'Total':>12}")
    click.echo("-" * 32)
    for dto in dtos:
        click.echo(f"{dto.id:<6} {dto.user_id:<6} {len(dto.products):>5} {dto.total:>12.2f}")


@click.command("create")
@click.option("--user", "user_id", required=True, type=int, help="Ordering user's ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_create(user_id: int, items: str) -> None:
    """Create a new order priced from the current catalog."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        user_repo=user_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(user_id=user_id, products=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--user", "user_id", default=None, type=int, help="New user ID.")
@click.option("--items", default=None, help="Replacement items as 'ProductId:Qty,...'.")
def order_update(order_id: int, user_id: int | None, items: str | None) -> None:
    """Change an order's user and/or replace its items (reprices the order)."""
    if user_id is None and items is None:
        raise click.UsageError("Nothing to update: pass --user and/or --items")

    handler = UpdateOrderHandler(
        order_repo=order_repository(),
        user_repo=user_repository(),
        product_repo=product_repository(),
    )
    specs = _parse_items(items) if items is not None else None

    try:
        dto = handler.handle(order_id, user_id=user_id, products=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} updated")
    _display_order(dto)


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
def order_delete(order_id: int) -> None:
    """Delete an order."""
    try:
        DeleteOrderHandler(order_repo=order_repository()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")
