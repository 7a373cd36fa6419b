"""
User service.

Business logic for user management: passwords are hashed before they reach
the repository, everything else is passed through.
"""

import logging
import uuid
from typing import Optional

from app.core.errors import UserStoreError
from app.core.logging import get_users_logger
from app.core.security import hash_password
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate


class UserService:
    """Service for user-related business logic."""

    def __init__(self, repository: UserRepository, logger: Optional[logging.Logger] = None):
        """
        Initialize service with a user repository.

        Args:
            repository: User repository
            logger: Logger; defaults to the users service logger
        """
        self.repository = repository
        self.logger = logger or get_users_logger("service")

    def get_user_by_id(self, user_id: uuid.UUID) -> User:
        return self.repository.get_one(user_id)

    def get_all_users(self, limit: int, offset: int) -> list[User]:
        return self.repository.get_all(limit, offset)

    def create_user(self, user_data: UserCreate) -> User:
        """
        Create a user, storing only the hash of the password.

        Raises:
            UserConflictError: If username or email is taken
            UserStoreError: If hashing or the insert fails
        """
        hashed = self._hash(user_data.password)
        user = self.repository.create(user_data.model_copy(update={"password": hashed}))
        self.logger.info("User created: user_id=%s username=%s", user.id, user.username)
        return user

    def update_user(self, user_id: uuid.UUID, user_data: UserUpdate) -> User:
        """
        Apply a partial update. The password is hashed only when one is given.

        Raises:
            UserNotFoundError: If no user has this id
            UserConflictError: If the new username or email is taken
            UserStoreError: If hashing or the update fails
        """
        if user_data.password is not None:
            user_data = user_data.model_copy(update={"password": self._hash(user_data.password)})
        user = self.repository.update(user_id, user_data)
        self.logger.info("User updated: user_id=%s", user_id)
        return user

    def delete_user(self, user_id: uuid.UUID) -> None:
        self.repository.delete(user_id)
        self.logger.info("User deleted: user_id=%s", user_id)

    def _hash(self, password: str) -> str:
        try:
            return hash_password(password)
        except (ValueError, TypeError) as exc:
            self.logger.error("Failed to hash password: %s", exc)
            raise UserStoreError("failed to hash password") from exc
