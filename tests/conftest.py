# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets up environment variables before the application is imported and
# provides fixtures for the repository, the service and the HTTP client.
# =============================================================================

import asyncio
import os

# Settings are read once at import time, so this must run first.
os.environ.setdefault("DATABASE_URL", ":memory:")
os.environ.setdefault("LOG_LEVEL", "INFO")

import pytest
from fastapi.testclient import TestClient

from user_records_api.app.core.db import get_connection, init_db
from user_records_api.app.main import create_app
from user_records_api.app.repositories.user_repository import UserRepository
from user_records_api.app.schemas.user import User
from user_records_api.app.services.user_service import UserService


def run(coro):
    """Run a service coroutine to completion."""
    return asyncio.run(coro)


@pytest.fixture
def repository():
    """Repository over a fresh in-memory database."""
    conn = get_connection(":memory:")
    init_db(conn)
    yield UserRepository(conn)
    conn.close()


@pytest.fixture
def service(repository):
    return UserService(repository)


@pytest.fixture
def john():
    return User(email="john.doe@example.com", first_name="John", last_name="Doe")


@pytest.fixture
def seeded_repository(repository, john):
    repository.insert(john)
    return repository


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "test.db")


@pytest.fixture
def client(db_path):
    """HTTP client for an app backed by a temporary database file.

    Used as a context manager so the startup and shutdown hooks run.
    """
    app = create_app(db_path)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(client, john):
    client.app.state.user_repository.insert(john)
    return client
