"""Application service: Delete Product use case.

Orders that reference the product keep their line items and totals.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError(f"Product #{product_id} not found")
        logger.info("Product deleted", product_id=product_id)
