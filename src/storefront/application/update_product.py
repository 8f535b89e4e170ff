"""Application service: Update Product use case."""

from __future__ import annotations

from decimal import Decimal

import structlog

from storefront.application.dto import ProductDTO, supplied
from storefront.domain.exceptions import EntityNotFoundError, InvalidReferenceError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(
        self,
        product_id: int,
        name: str | None = None,
        description: str | None = None,
        price: str | float | int | Decimal | None = None,
        category_id: int | None = None,
    ) -> ProductDTO:
        """Apply a partial update to a product.

        This does NOT affect any existing orders — their totals were
        computed from the prices current when they were written.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        if category_id is not None and self._category_repo.get_by_id(category_id) is None:
            raise InvalidReferenceError("category")

        # Parse before mutating so a bad price leaves the product untouched.
        new_price = Money.of(price) if price is not None else None

        if category_id is not None:
            product.move_to(category_id)
        if supplied(name):
            product.rename(name)
        if supplied(description):
            product.describe(description)
        if new_price is not None:
            product.update_price(new_price)

        self._product_repo.save(product)

        logger.info("Product updated", product_id=product.id)
        return ProductDTO.from_product(product)
