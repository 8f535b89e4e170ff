"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Prices are held in whole cents; anything finer is rounded on the way
    in, so ``5.005`` is stored as ``5.01``.
    """

    id: int | None
    name: str
    description: str
    price: Money
    category_id: int

    def __post_init__(self) -> None:
        self.price = self.price.rounded()

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name cannot be blank")
        self.name = name.strip()

    def describe(self, description: str) -> None:
        self.description = description

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because an order's total
        is computed once, when its products are written.
        """
        self.price = new_price.rounded()

    def move_to(self, category_id: int) -> None:
        """Reassign the product to another category.

        The caller is responsible for checking the category exists.
        """
        self.category_id = category_id
