"""
Exception handlers.

Every error response has the shape ``{"message": ...}``. Raw exception text
is never sent to clients.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api import messages
from app.core.errors import ApiError
from app.core.logging import get_users_logger
from app.core.validation import is_malformed_body, validation_message

logger = get_users_logger("api")


def _message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def register_error_handlers(app: FastAPI) -> None:
    """
    Register the error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance
    """

    @app.exception_handler(ApiError)
    async def handle_api_error(_request: Request, exc: ApiError) -> JSONResponse:
        return _message_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        if is_malformed_body(errors):
            logger.warning("Failed to parse request body: %s %s errors=%s",
                           request.method, request.url.path, [error.get("type") for error in errors])
            return _message_response(status.HTTP_400_BAD_REQUEST, messages.ERROR_PARSING_JSON)

        message = validation_message(errors)
        logger.warning("User validation failed: %s %s validation_errors=%r",
                       request.method, request.url.path, message)
        return _message_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error: %s %s %s", request.method, request.url.path, type(exc).__name__)
        return _message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.INTERNAL_SERVER_ERROR)
