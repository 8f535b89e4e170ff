"""Integration tests for the user and category use cases."""

import pytest
from structlog.testing import capture_logs

from storefront.application.add_category import AddCategoryHandler
from storefront.application.delete_category import DeleteCategoryHandler
from storefront.application.delete_user import DeleteUserHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.application.show_category import ListCategoriesHandler, ShowCategoryHandler
from storefront.application.show_user import ListUsersHandler, ShowUserHandler
from storefront.application.update_category import UpdateCategoryHandler
from storefront.application.update_user import UpdateUserHandler
from storefront.domain.exceptions import EntityNotFoundError, MissingFieldError


class TestUsers:

    def test_register_user(self, users):
        dto = RegisterUserHandler(users).handle("Linus", "linus@example.com", "pw")
        assert dto.id == 3
        assert users.get_by_id(3).password == "pw"

    def test_register_requires_password(self, users):
        with pytest.raises(MissingFieldError, match="password"):
            RegisterUserHandler(users).handle("Linus", "linus@example.com", "")

    def test_dto_has_no_password(self, users):
        dto = ShowUserHandler(users).handle(1)
        assert not hasattr(dto, "password")

    def test_update_ignores_blank_fields(self, users):
        dto = UpdateUserHandler(users).handle(1, name="", email="ada@new.org")
        assert dto.name == "Ada"
        assert dto.email == "ada@new.org"

    def test_update_ignores_whitespace_only_fields(self, users):
        dto = UpdateUserHandler(users).handle(1, name="   ", email="\t")
        assert (dto.name, dto.email) == ("Ada", "ada@example.com")

    def test_update_is_logged(self, users):
        with capture_logs() as logs:
            UpdateUserHandler(users).handle(1, name="Augusta")
        assert {"event": "User updated", "user_id": 1, "log_level": "info"} in logs

    def test_update_unknown_user(self, users):
        with pytest.raises(EntityNotFoundError):
            UpdateUserHandler(users).handle(9, name="X")

    def test_delete_and_list(self, users):
        DeleteUserHandler(users).handle(1)
        assert [u.id for u in ListUsersHandler(users).handle()] == [2]

    def test_delete_unknown_user(self, users):
        with pytest.raises(EntityNotFoundError):
            DeleteUserHandler(users).handle(9)


class TestCategories:

    def test_add_category(self, categories):
        dto = AddCategoryHandler(categories).handle(" Garden ")
        assert dto.name == "Garden"
        assert ShowCategoryHandler(categories).handle(dto.id) == dto

    def test_add_requires_name(self, categories):
        with pytest.raises(MissingFieldError, match="name"):
            AddCategoryHandler(categories).handle(None)

    def test_rename(self, categories):
        assert UpdateCategoryHandler(categories).handle(1, name="Home").name == "Home"

    def test_rename_ignores_whitespace_only_name(self, categories):
        assert UpdateCategoryHandler(categories).handle(1, name="  ").name == "Kitchen"

    def test_delete_leaves_products(self, categories, products):
        DeleteCategoryHandler(categories).handle(1)
        assert ListCategoriesHandler(categories).handle() == []
        assert products.get_by_id(1).category_id == 1

    def test_delete_unknown_category(self, categories):
        with pytest.raises(EntityNotFoundError):
            DeleteCategoryHandler(categories).handle(5)
