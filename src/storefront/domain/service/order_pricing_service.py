"""Domain service: Order Pricing.

Computes an order total from the catalog's *current* prices. Read-only:
the service never writes to the catalog or to the order.
"""

from __future__ import annotations

from collections.abc import Sequence

from storefront.domain.exceptions import InvalidReferenceError
from storefront.domain.model.order import LineItem
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class OrderPricingService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def compute_total(self, line_items: Sequence[LineItem]) -> Money:
        """Return ``sum(price * quantity)`` rounded once, to whole cents.

        Each distinct product is looked up once. An unknown product fails
        the whole computation; no partial total is ever returned.
        """
        prices: dict[int, Money] = {}
        total = Money.zero()

        for item in line_items:
            if item.product_id not in prices:
                product = self._product_repo.get_by_id(item.product_id)
                if product is None:
                    raise InvalidReferenceError("product", item.product_id)
                prices[item.product_id] = product.price
            total = total + prices[item.product_id] * item.quantity.value

        return total.rounded()
