"""Application service: Update Order use case.

Applies a partial update. Only supplied fields are validated and merged;
the total is recomputed exactly when new products are supplied.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from storefront.application.dto import LineItemSpec, OrderDTO, to_line_items
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import OrderChanges
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.order_pricing_service import OrderPricingService
from storefront.domain.service.order_validator import OrderValidator

logger = structlog.get_logger(__name__)


class UpdateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._validator = OrderValidator(user_repo, product_repo)
        self._pricing = OrderPricingService(product_repo)

    def handle(
        self,
        order_id: int,
        user_id: int | None = None,
        products: Sequence[LineItemSpec] | None = None,
    ) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        changes = OrderChanges(user_id=user_id, products=to_line_items(products))
        self._validator.validate(changes)

        order.apply(changes, self._pricing)
        self._order_repo.save(order)

        logger.info(
            "Order updated",
            order_id=order.id,
            repriced=changes.products is not None,
            total=str(order.total.amount),
        )
        return OrderDTO.from_order(order)
