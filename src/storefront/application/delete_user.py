"""Application service: Delete User use case.

Orders placed by the user are left in place; their ``user_id`` simply
stops resolving.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class DeleteUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: int) -> None:
        if not self._user_repo.delete(user_id):
            raise EntityNotFoundError(f"User #{user_id} not found")
        logger.info("User deleted", user_id=user_id)
