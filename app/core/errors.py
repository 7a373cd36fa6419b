"""
Error types shared across layers.

Repository errors are the vocabulary the store speaks to the service and the
API. ``ApiError`` is the only thing that turns into an HTTP response.
"""

from typing import Optional

# Unique constraint name -> user field it guards
UNIQUE_CONSTRAINT_FIELDS = {
    "users_username_key": "username",
    "users_email_key": "email",
}


class UserRepositoryError(Exception):
    """Base class for errors raised by the user store."""


class UserNotFoundError(UserRepositoryError):
    """No row matched the requested user id."""

    def __init__(self, user_id):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class UserConflictError(UserRepositoryError):
    """A write collided with a unique constraint."""

    def __init__(self, constraint: Optional[str]):
        super().__init__(f"Unique constraint violation: {constraint}")
        self.constraint = constraint

    @property
    def field(self) -> Optional[str]:
        """Name of the user field the violated constraint guards, if known."""
        return UNIQUE_CONSTRAINT_FIELDS.get(self.constraint or "")


class UserStoreError(UserRepositoryError):
    """Any other storage failure. The message is never shown to clients."""


class ApiError(Exception):
    """An error response: status code plus the client-facing message."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
