"""Pytest configuration and fixtures.

Tests run against an in-memory SQLite database shared by every connection
of the engine, so the API and the fixtures see the same rows.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.db.session import get_db
from app.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create the schema once for the whole run."""
    SQLModel.metadata.create_all(engine)
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def db():
    """Fresh session per test; every table is emptied afterwards."""
    session = Session(engine)

    yield session

    session.rollback()
    for table in reversed(SQLModel.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def client(db):
    """Test client whose requests use the test session."""

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def create_user(client):
    """Create a user through the API and return its JSON."""

    def _create(username: str = "alice", email: str = "alice@example.com", password: str = "s3cretpass"):
        response = client.post(
            "/api/users",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
