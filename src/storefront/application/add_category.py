"""Application service: Add Category use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import CategoryDTO
from storefront.domain.exceptions import MissingFieldError
from storefront.domain.model.category import Category
from storefront.domain.repository.category_repository import CategoryRepository

logger = structlog.get_logger(__name__)


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str | None) -> CategoryDTO:
        if not name or not name.strip():
            raise MissingFieldError("name")
        category = Category(id=None, name=name.strip())
        self._category_repo.save(category)

        logger.info("Category added", category_id=category.id)
        return CategoryDTO.from_category(category)
