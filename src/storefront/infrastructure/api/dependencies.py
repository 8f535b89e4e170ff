"""FastAPI dependencies providing repositories.

Routes never call ``bootstrap`` directly; tests swap these out through
``app.dependency_overrides`` to run against in-memory fakes.
"""

from __future__ import annotations

from storefront.domain.repository.category_repository import CategoryRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure import bootstrap


def get_user_repo() -> UserRepository:
    return bootstrap.user_repository()


def get_category_repo() -> CategoryRepository:
    return bootstrap.category_repository()


def get_product_repo() -> ProductRepository:
    return bootstrap.product_repository()


def get_order_repo() -> OrderRepository:
    return bootstrap.order_repository()
