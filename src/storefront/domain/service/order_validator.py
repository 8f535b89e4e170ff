"""Domain service: Order Validator.

Checks that an order mutation only references users and products that
exist *before* anything is persisted. Orders with dangling references
can therefore never be written, even though later deletions of users or
products do not cascade.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import InvalidReferenceError, MissingFieldError
from storefront.domain.model.order import OrderChanges
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class OrderValidator:

    def __init__(
        self,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._user_repo = user_repo
        self._product_repo = product_repo

    def validate_new(self, changes: OrderChanges) -> None:
        """Validate the inputs of a new order: both fields are required."""
        if changes.user_id is None:
            raise MissingFieldError("userId")
        if changes.products is None:
            raise MissingFieldError("products")
        self.validate(changes)

    def validate(self, changes: OrderChanges) -> None:
        """Check every supplied reference; unsupplied fields are skipped.

        The user is checked first, then products in order. The first
        unresolved product id is reported.
        """
        if changes.user_id is not None:
            if self._user_repo.get_by_id(changes.user_id) is None:
                logger.warning("Order references unknown user", user_id=changes.user_id)
                raise InvalidReferenceError("user")

        if changes.products is not None:
            seen: set[int] = set()
            for item in changes.products:
                if item.product_id in seen:
                    continue
                if self._product_repo.get_by_id(item.product_id) is None:
                    logger.warning(
                        "Order references unknown product",
                        product_id=item.product_id,
                    )
                    raise InvalidReferenceError("product", item.product_id)
                seen.add(item.product_id)
