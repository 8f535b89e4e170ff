"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

import structlog

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import InvalidReferenceError, MissingFieldError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(
        self,
        name: str | None,
        description: str | None,
        price: str | float | int | Decimal | None,
        category_id: int | None,
    ) -> ProductDTO:
        """Add a new product to the catalog under an existing category."""
        if not name or not name.strip():
            raise MissingFieldError("name")
        if not description:
            raise MissingFieldError("description")
        if price is None:
            raise MissingFieldError("price")
        if category_id is None:
            raise MissingFieldError("categoryId")

        if self._category_repo.get_by_id(category_id) is None:
            raise InvalidReferenceError("category")

        product = Product(
            id=None,
            name=name.strip(),
            description=description,
            price=Money.of(price),
            category_id=category_id,
        )
        self._product_repo.save(product)

        logger.info("Product added", product_id=product.id, price=str(product.price.amount))
        return ProductDTO.from_product(product)
