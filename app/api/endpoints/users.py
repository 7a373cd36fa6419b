"""
User endpoints.

CRUD over the users resource. Domain and repository errors are mapped to
status codes and messages here and nowhere else.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, status

from app.api import messages
from app.api.dependencies import Pagination, get_logger, get_user_service, pagination, valid_user_id
from app.core.errors import ApiError, UserConflictError, UserNotFoundError, UserStoreError
from app.schemas.user import MessageResponse, UserCreate, UserResponse, UserUpdate
from app.services.user_service import UserService

router = APIRouter()


def _conflict_error(exc: UserConflictError) -> ApiError:
    message = messages.CONFLICT_MESSAGES.get(exc.field or "", messages.UNIQUE_CONSTRAINT_VIOLATION)
    return ApiError(status.HTTP_400_BAD_REQUEST, message)


def _not_found() -> ApiError:
    return ApiError(status.HTTP_404_NOT_FOUND, messages.USER_NOT_FOUND)


@router.get("",
            summary="List users.",
            response_model=list[UserResponse])
def list_users(page: Pagination = Depends(pagination), service: UserService = Depends(get_user_service)):
    """
    List users ordered by id.

    Args:
        page: Parsed limit/offset window
        service: User service

    Returns:
        Users in the window, possibly empty
    """
    try:
        return service.get_all_users(page.limit, page.offset)
    except UserStoreError:
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.ERROR_RETRIEVING_USERS)


@router.get("/{user_id}",
            summary="Get a user by id.",
            response_model=UserResponse)
def get_user(user_id: uuid.UUID = Depends(valid_user_id), service: UserService = Depends(get_user_service)):
    try:
        return service.get_user_by_id(user_id)
    except UserNotFoundError:
        raise _not_found()
    except UserStoreError:
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.INTERNAL_SERVER_ERROR)


@router.post("",
             summary="Create a user.",
             response_model=UserResponse,
             status_code=status.HTTP_201_CREATED)
def create_user(user_data: UserCreate, service: UserService = Depends(get_user_service),
                logger: logging.Logger = Depends(get_logger)):
    """
    Create a user.

    Raises:
        ApiError 400: If username/email is taken or the insert fails
    """
    try:
        return service.create_user(user_data)
    except UserConflictError as exc:
        logger.warning("User creation failed due to unique constraint violation: constraint=%s", exc.constraint)
        raise _conflict_error(exc)
    except UserStoreError:
        raise ApiError(status.HTTP_400_BAD_REQUEST, messages.USER_CREATION_ERROR)


@router.put("/{user_id}",
            summary="Update a user.",
            response_model=UserResponse)
def update_user(user_data: UserUpdate, user_id: uuid.UUID = Depends(valid_user_id),
                service: UserService = Depends(get_user_service), logger: logging.Logger = Depends(get_logger)):
    """
    Partially update a user. Only the fields present in the body change.

    Raises:
        ApiError 404: If the user does not exist
        ApiError 400: If username/email is taken or the update fails
    """
    try:
        return service.update_user(user_id, user_data)
    except UserNotFoundError:
        raise _not_found()
    # Same field-specific conflict messages as create, not the generic update failure
    except UserConflictError as exc:
        logger.warning("User update failed due to unique constraint violation: user_id=%s constraint=%s",
                       user_id, exc.constraint)
        raise _conflict_error(exc)
    except UserStoreError:
        raise ApiError(status.HTTP_400_BAD_REQUEST, messages.USER_UPDATE_ERROR)


@router.delete("/{user_id}",
               summary="Delete a user.",
               response_model=MessageResponse)
def delete_user(user_id: uuid.UUID = Depends(valid_user_id), service: UserService = Depends(get_user_service)):
    try:
        service.delete_user(user_id)
    except UserNotFoundError:
        raise _not_found()
    except UserStoreError:
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.USER_DELETE_ERROR)
    return MessageResponse(message=messages.USER_DELETION_SUCCESS)
