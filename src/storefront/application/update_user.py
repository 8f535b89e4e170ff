"""Application service: Update User use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import UserDTO, supplied
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class UpdateUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        user_id: int,
        name: str | None = None,
        email: str | None = None,
    ) -> UserDTO:
        """Change a user's name and/or email. Blank values are ignored."""
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User #{user_id} not found")

        user.update_profile(name=supplied(name), email=supplied(email))
        self._user_repo.save(user)

        logger.info("User updated", user_id=user.id)
        return UserDTO.from_user(user)
