# =============================================================================
# tests/test_user_repository.py - UserRepository Tests
# =============================================================================

import sqlite3

import pytest

from user_records_api.app.core.db import get_connection, get_database_path, init_db
from user_records_api.app.core.exceptions import ConflictError, StoreError
from user_records_api.app.repositories.user_repository import UserRepository
from user_records_api.app.schemas.user import User


def test_get_missing_returns_none(repository):
    assert repository.get("nobody@example.com") is None


def test_insert_then_get(repository, john):
    repository.insert(john)
    assert repository.get(john.email) == john


def test_duplicate_insert_raises_conflict(seeded_repository, john):
    with pytest.raises(ConflictError) as exc_info:
        seeded_repository.insert(User(email=john.email, first_name="X", last_name="Y"))
    assert isinstance(exc_info.value.__cause__, sqlite3.IntegrityError)
    assert len(seeded_repository.list_all()) == 1


def test_update_existing(seeded_repository, john):
    assert seeded_repository.update(User(email=john.email, first_name="Johnny", last_name="Doe")) is True
    assert seeded_repository.get(john.email).first_name == "Johnny"


def test_update_missing_returns_false(repository):
    assert repository.update(User(email="nobody@example.com", first_name="A", last_name="B")) is False


def test_closed_connection_raises_store_error(repository):
    repository.conn.close()

    with pytest.raises(StoreError) as exc_info:
        repository.list_all()
    assert isinstance(exc_info.value.__cause__, sqlite3.Error)


def test_init_db_is_idempotent(tmp_path):
    db_file = str(tmp_path / "users.db")
    conn = get_connection(db_file)
    init_db(conn)
    UserRepository(conn).insert(User(email="a@x.com", first_name="A", last_name="B"))
    init_db(conn)
    conn.close()

    conn = get_connection(db_file)
    try:
        assert UserRepository(conn).get("a@x.com") is not None
    finally:
        conn.close()


def test_database_path_resolution(tmp_path):
    assert get_database_path(":memory:") == ":memory:"
    absolute = str(tmp_path / "x.db")
    assert get_database_path(absolute) == absolute
    assert get_database_path("users.db").endswith("users.db")


@pytest.mark.parametrize("operation", ["insert", "update"])
def test_write_on_closed_connection_raises_store_error(repository, john, operation):
    repository.conn.close()

    with pytest.raises(StoreError) as exc_info:
        getattr(repository, operation)(john)
    assert isinstance(exc_info.value.__cause__, sqlite3.ProgrammingError)
