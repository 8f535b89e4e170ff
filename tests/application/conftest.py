"""Shared fixtures: a small catalog, two users and fake repositories."""

import pytest

from storefront.domain.model.category import Category
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money
from tests.fakes import (
    FakeCategoryRepository,
    FakeOrderRepository,
    FakeProductRepository,
    FakeUserRepository,
)


@pytest.fixture
def users() -> FakeUserRepository:
    return FakeUserRepository([
        User(id=1, name="Ada", email="ada@example.com", password="pw"),
        User(id=2, name="Grace", email="grace@example.com", password="pw"),
    ])


@pytest.fixture
def categories() -> FakeCategoryRepository:
    return FakeCategoryRepository([Category(id=1, name="Kitchen")])


@pytest.fixture
def products() -> FakeProductRepository:
    return FakeProductRepository([
        Product(id=1, name="P1", description="Mug", price=Money.of("9.99"), category_id=1),
        Product(id=2, name="P2", description="Spoon", price=Money.of("5.005"), category_id=1),
    ])


@pytest.fixture
def orders() -> FakeOrderRepository:
    return FakeOrderRepository()
