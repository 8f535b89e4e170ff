"""Application service: Show User / List Users use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import UserDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.user_repository import UserRepository


class ShowUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: int) -> UserDTO:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User #{user_id} not found")
        return UserDTO.from_user(user)


class ListUsersHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self) -> list[UserDTO]:
        return [UserDTO.from_user(u) for u in self._user_repo.list_all()]
