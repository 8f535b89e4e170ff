"""Unit tests for the Product aggregate."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


def _product(price: str = "9.99") -> Product:
    return Product(id=1, name="Mug", description="Stoneware", price=Money.of(price), category_id=1)


class TestProductPrice:

    def test_price_is_stored_in_whole_cents(self):
        assert _product("5.005").price.amount == Decimal("5.01")

    def test_update_price_rounds(self):
        product = _product()
        product.update_price(Money.of("1.234"))
        assert product.price == Money.of("1.23")

    def test_free_product_allowed(self):
        assert _product("0").price.amount == Decimal("0.00")


class TestProductEdits:

    def test_rename_strips_whitespace(self):
        product = _product()
        product.rename("  Big Mug ")
        assert product.name == "Big Mug"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="cannot be blank"):
            _product().rename("   ")

    def test_move_to_changes_category(self):
        product = _product()
        product.move_to(4)
        assert product.category_id == 4
