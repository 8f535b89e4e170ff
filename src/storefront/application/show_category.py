"""Application service: Show Category / List Categories use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import CategoryDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.category_repository import CategoryRepository


class ShowCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: int) -> CategoryDTO:
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError(f"Category #{category_id} not found")
        return CategoryDTO.from_category(category)


class ListCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self) -> list[CategoryDTO]:
        return [CategoryDTO.from_category(c) for c in self._category_repo.list_all()]
