"""Application service: Show Product / List Products use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return ProductDTO.from_product(product)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, category_id: int | None = None) -> list[ProductDTO]:
        """List the catalog, optionally narrowed to one category."""
        if category_id is None:
            products = self._product_repo.list_all()
        else:
            products = self._product_repo.list_by_category(category_id)
        return [ProductDTO.from_product(p) for p in products]
