"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_records import JsonRepository


class JsonProductRepository(JsonRepository[Product], ProductRepository):

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._get(product_id)

    def list_all(self) -> list[Product]:
        return self._list()

    def list_by_category(self, category_id: int) -> list[Product]:
        return [p for p in self._list() if p.category_id == category_id]

    def save(self, product: Product) -> None:
        self._save(product)

    def delete(self, product_id: int) -> bool:
        return self._delete(product_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "category_id": product.category_id,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            category_id=raw["category_id"],
        )
