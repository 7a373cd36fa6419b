"""
Engine and per-request sessions for the users database.
"""

from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from app.core.config import settings


def build_engine(url: str = settings.DATABASE_URL) -> Engine:
    """Create the pooled engine; SQL is echoed only when DEBUG is on."""
    return create_engine(url, echo=settings.DEBUG, pool_pre_ping=True, pool_size=5, max_overflow=10)


engine = build_engine()


def get_db() -> Generator[Session, None, None]:
    """Yield one session per request; it is closed when the request ends."""
    with Session(engine) as session:
        yield session
