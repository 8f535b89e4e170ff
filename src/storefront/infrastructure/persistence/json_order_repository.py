"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.order import LineItem, Order
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_records import JsonRepository


class JsonOrderRepository(JsonRepository[Order], OrderRepository):

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        return self._get(order_id)

    def list_all(self) -> list[Order]:
        return self._list()

    def save(self, order: Order) -> None:
        self._save(order)

    def delete(self, order_id: int) -> bool:
        return self._delete(order_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "products": [
                {"product_id": item.product_id, "quantity": item.quantity.value}
                for item in order.products
            ],
            "total": str(order.total.amount),
            "currency": order.total.currency,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            products=[
                LineItem(product_id=i["product_id"], quantity=Quantity(i["quantity"]))
                for i in raw["products"]
            ],
            total=Money(Decimal(raw["total"]), raw.get("currency", "USD")),
        )
