"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.

Entities are copied on the way in and out, like a real store: mutating
a loaded object changes nothing until it is saved.
"""

from __future__ import annotations

import copy

from storefront.domain.model.category import Category
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class _FakeStore:

    def __init__(self, entities: list | None = None) -> None:
        self._store: dict[int, object] = {}
        self._next_id = 1
        self.save_calls = 0
        for entity in entities or []:
            self._put(entity)

    def _put(self, entity) -> None:
        if entity.id is None:
            entity.id = self._next_id
        self._next_id = max(self._next_id, entity.id + 1)
        self._store[entity.id] = copy.deepcopy(entity)

    def get_by_id(self, entity_id: int):
        entity = self._store.get(entity_id)
        return copy.deepcopy(entity) if entity is not None else None

    def list_all(self) -> list:
        return [copy.deepcopy(e) for e in self._store.values()]

    def save(self, entity) -> None:
        self.save_calls += 1
        self._put(entity)

    def delete(self, entity_id: int) -> bool:
        return self._store.pop(entity_id, None) is not None

    def __len__(self) -> int:
        return len(self._store)


class FakeUserRepository(_FakeStore, UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        super().__init__(users)


class FakeCategoryRepository(_FakeStore, CategoryRepository):

    def __init__(self, categories: list[Category] | None = None) -> None:
        super().__init__(categories)


class FakeProductRepository(_FakeStore, ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        super().__init__(products)
        self.lookups = 0

    def get_by_id(self, product_id: int) -> Product | None:
        self.lookups += 1
        return super().get_by_id(product_id)

    def list_by_category(self, category_id: int) -> list[Product]:
        return [p for p in self.list_all() if p.category_id == category_id]


class FakeOrderRepository(_FakeStore, OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        super().__init__(orders)
