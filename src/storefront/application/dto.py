"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the outer surfaces (CLI, HTTP) and the
application layer without exposing domain internals to the outside world.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.exceptions import MissingFieldError
from storefront.domain.model.category import Category
from storefront.domain.model.order import LineItem, Order
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Quantity

# --- Input --------------------------------------------------------------------


@dataclass(frozen=True)
class LineItemSpec:
    """Input: what the caller asked for (product id + quantity)."""

    product_id: int | None
    quantity: int | None

    def to_line_item(self) -> LineItem:
        if self.product_id is None:
            raise MissingFieldError("productId")
        if self.quantity is None:
            raise MissingFieldError("quantity")
        return LineItem(product_id=self.product_id, quantity=Quantity(self.quantity))


def to_line_items(specs: Sequence[LineItemSpec] | None) -> list[LineItem] | None:
    """Convert specs to line items, passing ``None`` (not supplied) through."""
    if specs is None:
        return None
    return [spec.to_line_item() for spec in specs]


def supplied(value: str | None) -> str | None:
    """Treat empty and whitespace-only strings as "not supplied"."""
    if value is None or not value.strip():
        return None
    return value


# --- Output -------------------------------------------------------------------


@dataclass(frozen=True)
class LineItemDTO:
    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order in its persisted shape."""

    id: int
    user_id: int
    products: list[LineItemDTO]
    total: Decimal

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            user_id=order.user_id,
            products=[
                LineItemDTO(product_id=item.product_id, quantity=item.quantity.value)
                for item in order.products
            ],
            total=order.total.amount,
        )


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    description: str
    price: Decimal
    category_id: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            description=product.description,
            price=product.price.amount,
            category_id=product.category_id,
        )


@dataclass(frozen=True)
class CategoryDTO:
    id: int
    name: str

    @staticmethod
    def from_category(category: Category) -> CategoryDTO:
        return CategoryDTO(id=category.id, name=category.name)  # type: ignore[arg-type]


@dataclass(frozen=True)
class UserDTO:
    """Output: a user without its credential."""

    id: int
    name: str
    email: str

    @staticmethod
    def from_user(user: User) -> UserDTO:
        return UserDTO(id=user.id, name=user.name, email=user.email)  # type: ignore[arg-type]
