"""Pydantic schemas for request/response validation."""

from app.schemas.user import MessageResponse, UserCreate, UserResponse, UserUpdate

__all__ = [
    "MessageResponse",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
]
