"""User registration and login with SHA-256 hashed passwords."""

from __future__ import annotations

import hashlib
import sqlite3


class RegistrationError(Exception):
    """Raised when a user cannot be registered, e.g. the name is taken."""


def hash_password(password: str) -> str:
    """Return the lower-case hex SHA-256 digest of *password*."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


class AccountStore:
    """Registers and authenticates users in the ``users`` table."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection

    def register(self, username: str, password: str) -> None:
        """Store a new user; raise RegistrationError if it cannot be stored."""
        try:
            with self._conn:
                self._conn.execute(
                    "INSERT INTO users (username, password) VALUES (?, ?);",
                    (username, hash_password(password)),
                )
        except sqlite3.Error as exc:
            raise RegistrationError(f"cannot register {username!r}: {exc}") from exc

    def login(self, username: str, password: str) -> bool:
        """Return whether *username* exists with *password*."""
        row = self._conn.execute(
            "SELECT 1 FROM users WHERE username = ? AND password = ?;",
            (username, hash_password(password)),
        ).fetchone()
        return row is not None