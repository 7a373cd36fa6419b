"""
Database initialization.

Creates all tables from the SQLModel metadata.
"""

import logging

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from app.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Engine = default_engine) -> None:
    """
    Initialize database schema.

    Creates every table registered on the SQLModel metadata. Existing
    tables are left untouched.
    """
    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
