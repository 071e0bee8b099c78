"""
Repository for the ``users`` table.

All queries use parameterized statements.  Each public method runs
under a lock on the shared connection and commits before returning, so
every insert or update is a single atomic statement.  SQLite errors are
translated into ``core.exceptions`` types: a primary-key violation on
insert becomes ``ConflictError``; anything else becomes ``StoreError``
with the original exception chained as its cause.
"""

import sqlite3
import threading
from contextlib import suppress
from typing import List, Optional

from ..core.exceptions import ConflictError, StoreError
from ..schemas.user import User


class UserRepository:
    """Keyed store of user records backed by a SQLite connection."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self._lock = threading.Lock()

    def _rollback(self) -> None:
        # A closed or broken connection cannot roll back; the original
        # error is what gets reported.
        with suppress(sqlite3.Error):
            self.conn.rollback()

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(
            email=row["email"],
            first_name=row["first_name"],
            last_name=row["last_name"],
        )

    def list_all(self) -> List[User]:
        """Return every stored user.  No particular order is promised."""
        try:
            with self._lock:
                rows = self.conn.execute(
                    "SELECT email, first_name, last_name FROM users"
                ).fetchall()
        except sqlite3.Error as exc:
            raise StoreError("Failed to list users") from exc
        return [self._row_to_user(row) for row in rows]

    def get(self, email: str) -> Optional[User]:
        """Return the user stored under ``email`` or ``None``."""
        try:
            with self._lock:
                row = self.conn.execute(
                    "SELECT email, first_name, last_name FROM users WHERE email = ?",
                    (email,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(f"Failed to fetch user {email}") from exc
        if row is None:
            return None
        return self._row_to_user(row)

    def insert(self, user: User) -> None:
        """Insert a new user.

        Raises ``ConflictError`` if a user with the same email exists.
        """
        with self._lock:
            try:
                self.conn.execute(
                    "INSERT INTO users (email, first_name, last_name) VALUES (?, ?, ?)",
                    (user.email, user.first_name, user.last_name),
                )
                self.conn.commit()
            except sqlite3.IntegrityError as exc:
                self._rollback()
                raise ConflictError(user.email) from exc
            except sqlite3.Error as exc:
                self._rollback()
                raise StoreError(f"Failed to insert user {user.email}") from exc

    def update(self, user: User) -> bool:
        """Overwrite the names of the user keyed by ``user.email``.

        Returns ``False`` if no row matched.
        """
        with self._lock:
            try:
                cursor = self.conn.execute(
                    "UPDATE users SET first_name = ?, last_name = ? WHERE email = ?",
                    (user.first_name, user.last_name, user.email),
                )
                self.conn.commit()
            except sqlite3.Error as exc:
                self._rollback()
                raise StoreError(f"Failed to update user {user.email}") from exc
        return cursor.rowcount > 0
