"""A desktop task manager with SQLite-backed accounts and task lists."""

__version__ = "0.1.0"