"""Lazily connecting SQLite access.

    from wren.data import Database

    db = Database("sqlite:///app.db")
    rows = await db.fetch_all("SELECT * FROM users")  # connects here
"""

from wren.data.database import ConnectionState, Database
from wren.data.errors import ConnectionError, DataError, DriverNotInstalledError, QueryError

__all__ = [
    "ConnectionError",
    "ConnectionState",
    "DataError",
    "Database",
    "DriverNotInstalledError",
    "QueryError",
]
