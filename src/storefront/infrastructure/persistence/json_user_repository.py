"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_records import JsonRepository


class JsonUserRepository(JsonRepository[User], UserRepository):

    def get_by_id(self, user_id: int) -> User | None:
        return self._get(user_id)

    def list_all(self) -> list[User]:
        return self._list()

    def save(self, user: User) -> None:
        self._save(user)

    def delete(self, user_id: int) -> bool:
        return self._delete(user_id)

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "password": user.password,
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            password=raw["password"],
        )
