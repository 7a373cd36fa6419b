"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from fastapi import FastAPI

from app.api.errors import register_error_handlers
from app.api.router import api_router
from app.core.config import settings
from app.core.logging import configure_logging


def create_app() -> FastAPI:
    """Build the application with logging, error handlers and routes wired in."""
    configure_logging(settings.LOG_LEVEL)

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="CRUD service for user records.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json")

    register_error_handlers(application)

    # Include API router
    application.include_router(api_router, prefix=settings.API_PREFIX)

    @application.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "message": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "status": "healthy"
        }

    @application.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "service": "users-api",
            "version": settings.VERSION
        }

    return application


app = create_app()
