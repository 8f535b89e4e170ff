"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
Validation, pricing and persistence happen strictly in that order, so a
rejected order never reaches storage.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from storefront.application.dto import LineItemSpec, OrderDTO, to_line_items
from storefront.domain.model.order import Order, OrderChanges
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.order_pricing_service import OrderPricingService
from storefront.domain.service.order_validator import OrderValidator

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

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
        user_id: int | None,
        products: Sequence[LineItemSpec] | None,
    ) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Parse line items and check the user and every product exist.
        2. Price the line items against the *current* catalog.
        3. Persist products and total together and return a DTO.
        """
        changes = OrderChanges(user_id=user_id, products=to_line_items(products))
        self._validator.validate_new(changes)

        order = Order.create(
            user_id=changes.user_id,  # type: ignore[arg-type]
            products=changes.products,  # type: ignore[arg-type]
            pricing=self._pricing,
        )
        self._order_repo.save(order)

        logger.info(
            "Order created",
            order_id=order.id,
            user_id=order.user_id,
            total=str(order.total.amount),
        )
        return OrderDTO.from_order(order)
