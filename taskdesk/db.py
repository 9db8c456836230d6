"""Opening the SQLite database that holds users and tasks."""

from __future__ import annotations

import os
import sqlite3

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS users ("
    "id INTEGER PRIMARY KEY, "
    "username TEXT UNIQUE, "
    "password TEXT);",
    "CREATE TABLE IF NOT EXISTS tasks ("
    "id INTEGER PRIMARY KEY, "
    "username TEXT, "
    "title TEXT, "
    "completed INTEGER);",
)


def open_database(path: str | os.PathLike[str] = "users.db") -> sqlite3.Connection:
    """Open the database at *path*, creating the users and tasks tables if needed.

    Raises sqlite3.Error if the file cannot be opened or the schema cannot be created.
    """
    connection = sqlite3.connect(os.fspath(path))
    try:
        with connection:
            for statement in _SCHEMA:
                connection.execute(statement)
    except sqlite3.Error:
        connection.close()
        raise
    return connection