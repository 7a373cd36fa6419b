"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.core.validation import AT_LEAST_ONE_FIELD, AT_LEAST_ONE_FIELD_MESSAGE

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 32
PASSWORD_MIN_LENGTH = 8


# Request schemas
class UserCreate(BaseModel):
    """Schema for creating a user."""
    username: str = Field(..., min_length=USERNAME_MIN_LENGTH, max_length=USERNAME_MAX_LENGTH)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, description="Password (min 8 characters)")


class UserUpdate(BaseModel):
    """
    Schema for a partial user update.

    Omitted fields and empty strings both mean "leave unchanged". At least
    one field has to be present.
    """
    username: Optional[str] = Field(None, min_length=USERNAME_MIN_LENGTH, max_length=USERNAME_MAX_LENGTH)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=PASSWORD_MIN_LENGTH)

    @field_validator("username", "email", "password", mode="before")
    @classmethod
    def empty_as_absent(cls, value):
        if value == "":
            return None
        return value

    @model_validator(mode="after")
    def require_one_field(self) -> "UserUpdate":
        if self.username is None and self.email is None and self.password is None:
            raise PydanticCustomError(AT_LEAST_ONE_FIELD, AT_LEAST_ONE_FIELD_MESSAGE)
        return self


# Response schemas
class UserResponse(BaseModel):
    """
    Schema for user data in API responses.

    Note: the password hash is part of the payload. Real deployments should
    drop it from this schema.
    """
    id: uuid.UUID
    username: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    """Plain acknowledgement / error body."""
    message: str
