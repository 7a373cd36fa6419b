"""
Shared API dependencies.

Reusable FastAPI dependencies for database access, path/query parsing and
wiring of the user service.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Query, status
from sqlmodel import Session

from app.api import messages
from app.core.errors import ApiError
from app.core.logging import get_users_logger
from app.core.validation import parse_query_param, parse_uuid
from app.db.repositories.user import UserRepository
from app.db.session import get_db
from app.services.user_service import UserService


@dataclass
class Pagination:
    limit: int
    offset: int


def get_logger() -> logging.Logger:
    """Logger handed to the users request handlers."""
    return get_users_logger("api")


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Build the service for this request's session."""
    repository = UserRepository(db, get_users_logger("repository"))
    return UserService(repository, get_users_logger("service"))


def valid_user_id(user_id: str, logger: logging.Logger = Depends(get_logger)) -> uuid.UUID:
    """Parse the ``user_id`` path parameter, rejecting anything that is not a UUID."""
    try:
        return parse_uuid(user_id)
    except ValueError:
        logger.warning("Invalid UUID format: user_id=%r", user_id)
        raise ApiError(status.HTTP_400_BAD_REQUEST, messages.INVALID_ID_PARAM)


def pagination(
    limit: Optional[str] = Query(None, description="Maximum number of users; 0 or absent means no limit"),
    offset: Optional[str] = Query(None, description="Number of users to skip"),
    logger: logging.Logger = Depends(get_logger),
) -> Pagination:
    """Parse ``limit``/``offset`` query parameters."""
    try:
        parsed_limit = parse_query_param(limit, 0)
    except ValueError:
        logger.warning("Invalid limit parameter: limit=%r", limit)
        raise ApiError(status.HTTP_400_BAD_REQUEST, messages.INVALID_LIMIT_PARAM)

    try:
        parsed_offset = parse_query_param(offset, 0)
    except ValueError:
        logger.warning("Invalid offset parameter: offset=%r", offset)
        raise ApiError(status.HTTP_400_BAD_REQUEST, messages.INVALID_OFFSET_PARAM)

    return Pagination(limit=parsed_limit, offset=parsed_offset)
