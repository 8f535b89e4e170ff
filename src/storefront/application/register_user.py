"""Application service: Register User use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import UserDTO
from storefront.domain.exceptions import MissingFieldError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, name: str | None, email: str | None, password: str | None) -> UserDTO:
        for field, value in (("name", name), ("email", email), ("password", password)):
            if not value or not value.strip():
                raise MissingFieldError(field)

        user = User(
            id=None,
            name=name.strip(),  # type: ignore[union-attr]
            email=email.strip(),  # type: ignore[union-attr]
            password=password,  # type: ignore[arg-type]
        )
        self._user_repo.save(user)

        logger.info("User registered", user_id=user.id)
        return UserDTO.from_user(user)
