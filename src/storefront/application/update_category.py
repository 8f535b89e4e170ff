"""Application service: Rename Category use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import CategoryDTO, supplied
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.category_repository import CategoryRepository

logger = structlog.get_logger(__name__)


class UpdateCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: int, name: str | None = None) -> CategoryDTO:
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError(f"Category #{category_id} not found")
        new_name = supplied(name)
        if new_name is not None:
            category.rename(new_name)
        self._category_repo.save(category)

        logger.info("Category updated", category_id=category.id)
        return CategoryDTO.from_category(category)
