"""Application service: Delete Category use case.

Products filed under the category are not touched.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.category_repository import CategoryRepository

logger = structlog.get_logger(__name__)


class DeleteCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: int) -> None:
        if not self._category_repo.delete(category_id):
            raise EntityNotFoundError(f"Category #{category_id} not found")
        logger.info("Category deleted", category_id=category_id)
