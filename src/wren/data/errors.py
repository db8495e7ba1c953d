"""Errors raised by the lazily connecting SQLite proxy."""

from wren.errors import WrenError


class DataError(WrenError):
    """Anything that went wrong talking to the database."""


class DriverNotInstalledError(DataError):
    """The URL scheme is not ``sqlite:///``; no other driver ships with wren."""


class ConnectionError(DataError):  # noqa: A001 — intentional shadow of builtin
    """The lazy connect on first use failed (bad path, unwritable directory)."""


class QueryError(DataError):
    """sqlite3 rejected a statement; the driver error is chained as the cause."""
