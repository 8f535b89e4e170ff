"""JSON-file-backed implementation of CategoryRepository."""

from __future__ import annotations

from storefront.domain.model.category import Category
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.infrastructure.persistence.json_records import JsonRepository


class JsonCategoryRepository(JsonRepository[Category], CategoryRepository):

    def get_by_id(self, category_id: int) -> Category | None:
        return self._get(category_id)

    def list_all(self) -> list[Category]:
        return self._list()

    def save(self, category: Category) -> None:
        self._save(category)

    def delete(self, category_id: int) -> bool:
        return self._delete(category_id)

    @staticmethod
    def _to_raw(category: Category) -> dict:
        return {"id": category.id, "name": category.name}

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        return Category(id=raw["id"], name=raw["name"])
