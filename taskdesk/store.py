"""Per-user task list stored in SQLite."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

MAX_TASKS = 100


@dataclass(frozen=True)
class Task:
    """One task row."""

    id: int
    title: str
    completed: bool = False


class TaskStore:
    """Adds, lists, completes and deletes tasks in the ``tasks`` table."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection

    def add(self, username: str, title: str) -> int:
        """Add an open task for *username* and return its id."""
        with self._conn:
            cursor = self._conn.execute(
                "INSERT INTO tasks (username, title, completed) VALUES (?, ?, 0);",
                (username, title),
            )
        return cursor.lastrowid

    def fetch(self, username: str) -> list[Task]:
        """Return up to MAX_TASKS tasks belonging to *username*, oldest first."""
        cursor = self._conn.execute(
            "SELECT id, title, completed FROM tasks WHERE username = ? ORDER BY id LIMIT ?;",
            (username, MAX_TASKS),
        )
        return [Task(task_id, title, bool(done)) for task_id, title, done in cursor]

    def mark_complete(self, task_id: int) -> bool:
        """Mark a task completed; return whether a task with that id existed."""
        with self._conn:
            cursor = self._conn.execute(
                "UPDATE tasks SET completed = 1 WHERE id = ?;", (task_id,)
            )
        return cursor.rowcount > 0

    def delete(self, task_id: int) -> bool:
        """Delete a task; return whether a task with that id existed."""
        with self._conn:
            cursor = self._conn.execute("DELETE FROM tasks WHERE id = ?;", (task_id,))
        return cursor.rowcount > 0