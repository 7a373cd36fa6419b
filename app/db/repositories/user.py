"""
User repository.

Handles database operations for the User model and translates database
errors into the repository error vocabulary.
"""

import logging
import re
import uuid
from datetime import datetime
from typing import Any, Optional, Union

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from app.core.config import settings
from app.core.errors import UserConflictError, UserNotFoundError, UserStoreError
from app.core.logging import get_users_logger
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate

PG_UNIQUE_VIOLATION = "23505"

_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: (\w+)\.(\w+)")


def unique_violation(exc: IntegrityError) -> Optional[UserConflictError]:
    """
    Build a conflict error from an IntegrityError caused by a unique constraint.

    Args:
        exc: Error raised by the driver

    Returns:
        UserConflictError naming the constraint, or None for other integrity errors
    """
    orig = exc.orig
    if getattr(orig, "pgcode", None) == PG_UNIQUE_VIOLATION:
        diag = getattr(orig, "diag", None)
        return UserConflictError(getattr(diag, "constraint_name", None))

    # SQLite reports "table.column" instead of the constraint name
    match = _SQLITE_UNIQUE.search(str(orig))
    if match:
        table, column = match.groups()
        return UserConflictError(f"{table}_{column}_key")
    return None


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session, logger: Optional[logging.Logger] = None):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
            logger: Logger for failures; defaults to the users repository logger
        """
        self.session = session
        self.logger = logger or get_users_logger("repository")

    def get_one(self, user_id: uuid.UUID) -> User:
        """
        Get user by ID.

        Raises:
            UserNotFoundError: If no user has this id
            UserStoreError: On any other database failure
        """
        try:
            user = self.session.get(User, user_id)
        except SQLAlchemyError as exc:
            self.logger.error("Failed to get user by ID: user_id=%s error=%s", user_id, exc)
            raise UserStoreError("failed to get user") from exc

        if user is None:
            self.logger.warning("User not found: user_id=%s", user_id)
            raise UserNotFoundError(user_id)
        return user

    def get_all(self, limit: int = 0, offset: int = 0) -> list[User]:
        """
        Get users ordered by id.

        Args:
            limit: Maximum number of records; <= 0 means no limit
            offset: Number of records to skip; <= 0 means none

        Returns:
            List of users, possibly empty
        """
        if limit <= 0:
            limit = settings.DEFAULT_LIST_LIMIT
        if offset <= 0:
            offset = 0

        statement = select(User).order_by(User.id).offset(offset).limit(limit)
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as exc:
            self.logger.error("Failed to get users: limit=%s offset=%s error=%s", limit, offset, exc)
            raise UserStoreError("failed to get users") from exc

    def create(self, user_data: UserCreate) -> User:
        """
        Insert a new user.

        Args:
            user_data: Validated input whose password is already hashed

        Returns:
            Created user with generated id and timestamps

        Raises:
            UserConflictError: If username or email is taken
            UserStoreError: On any other database failure
        """
        now = datetime.utcnow()
        user = User(
            username=user_data.username,
            email=user_data.email,
            password_hash=user_data.password,
            created_at=now,
            updated_at=now,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            raise self._write_failed(exc, "Failed to create new user", username=user_data.username)

        self.session.refresh(user)
        return user

    def update(self, user_id: uuid.UUID, user_data: UserUpdate) -> User:
        """
        Apply a partial update.

        Only columns whose input field is set are written; ``updated_at`` is
        always refreshed.

        Args:
            user_id: Id of the user to change
            user_data: Validated input whose password, if any, is already hashed

        Returns:
            The updated user

        Raises:
            UserNotFoundError: If no user has this id
            UserConflictError: If the new username or email is taken
            UserStoreError: On any other database failure
        """
        changes: list[tuple[str, Any]] = []
        if user_data.username is not None:
            changes.append(("username", user_data.username))
        if user_data.email is not None:
            changes.append(("email", user_data.email))
        if user_data.password is not None:
            changes.append(("password_hash", user_data.password))
        changes.append(("updated_at", datetime.utcnow()))

        statement = (
            update(User)
            .where(User.id == user_id)
            .values(dict(changes))
            .returning(User)
            .execution_options(synchronize_session=False)
        )
        try:
            user = self.session.execute(statement).scalar_one_or_none()
            self.session.commit()
        except SQLAlchemyError as exc:
            raise self._write_failed(exc, "Failed to update user", user_id=user_id)

        if user is None:
            self.logger.warning("User not found for update: user_id=%s", user_id)
            raise UserNotFoundError(user_id)

        self.session.refresh(user)
        return user

    def delete(self, user_id: uuid.UUID) -> None:
        """
        Delete a user by ID.

        Raises:
            UserNotFoundError: If no user has this id
            UserStoreError: On any other database failure
        """
        statement = delete(User).where(User.id == user_id).execution_options(synchronize_session=False)
        try:
            result = self.session.execute(statement)
            self.session.commit()
        except SQLAlchemyError as exc:
            raise self._write_failed(exc, "Failed to execute delete query", user_id=user_id)

        if result.rowcount == 0:
            self.logger.warning("No user found to delete: user_id=%s", user_id)
            raise UserNotFoundError(user_id)

    def _write_failed(self, exc: SQLAlchemyError, message: str,
                      **context: Union[str, uuid.UUID]) -> Union[UserConflictError, UserStoreError]:
        """Roll back, log and translate a failed write."""
        self.session.rollback()
        details = " ".join(f"{key}={value}" for key, value in context.items())

        if isinstance(exc, IntegrityError):
            conflict = unique_violation(exc)
            if conflict is not None:
                self.logger.warning("%s: unique constraint violation: %s constraint=%s",
                                    message, details, conflict.constraint)
                conflict.__cause__ = exc
                return conflict

        self.logger.error("%s: %s error=%s", message, details, exc)
        error = UserStoreError(message)
        error.__cause__ = exc
        return error
