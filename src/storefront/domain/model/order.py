"""Order aggregate — the core of the domain.

The Order owns an ordered snapshot of line items and the total derived
from them. The total is only ever assigned together with the line items,
and always by the pricing service; nothing outside this module sets it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from storefront.domain.model.value_objects import Money, Quantity

if TYPE_CHECKING:
    from storefront.domain.service.order_pricing_service import OrderPricingService


@dataclass(frozen=True)
class LineItem:
    """A ``(product, quantity)`` pair within an order."""

    product_id: int
    quantity: Quantity


@dataclass(frozen=True)
class OrderChanges:
    """A proposed create or partial update of an order.

    ``None`` means "not supplied". An empty ``products`` list is supplied
    (and prices to zero); it is not the same as ``None``.
    """

    user_id: int | None = None
    products: list[LineItem] | None = None


@dataclass
class Order:
    """Aggregate root for orders.

    Use ``Order.create()`` for new orders and ``apply()`` for updates.
    The ``__init__`` is kept plain so the repository can reconstitute
    persisted orders without repricing them.
    """

    id: int | None
    user_id: int
    products: list[LineItem]
    total: Money

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        user_id: int,
        products: list[LineItem],
        pricing: OrderPricingService,
    ) -> Order:
        """Build an unpersisted order, priced against the current catalog."""
        items = list(products)
        return Order(
            id=None,
            user_id=user_id,
            products=items,
            total=pricing.compute_total(items),
        )

    # --- Mutation -------------------------------------------------------------

    def apply(self, changes: OrderChanges, pricing: OrderPricingService) -> None:
        """Merge a partial update into this order.

        The total is recomputed if and only if new products are supplied.
        Pricing runs before anything is assigned, so a failure leaves the
        order untouched.
        """
        if changes.products is not None:
            items = list(changes.products)
            total = pricing.compute_total(items)
            self.products = items
            self.total = total
        if changes.user_id is not None:
            self.user_id = changes.user_id
