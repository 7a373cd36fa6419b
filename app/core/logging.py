"""
Logging configuration.

Sets up the root logger once at startup and hands out the named loggers
that components receive at construction time.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

USERS_LOGGER = "app.users"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # The API logs rejected requests itself
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_users_logger(component: str | None = None) -> logging.Logger:
    """Return the logger for the users feature, optionally for one layer of it."""
    if component:
        return logging.getLogger(f"{USERS_LOGGER}.{component}")
    return logging.getLogger(USERS_LOGGER)
