"""Lazily connecting database proxy.

``Database`` does not open a connection until a method that needs one
is called. Connection state is explicit::

    DISCONNECTED --(first call needing a connection)--> CONNECTED
    CONNECTED    --(close())--------------------------> DISCONNECTED

Connection URL format::

    sqlite:///path/to/db.sqlite    # SQLite file
    sqlite:///:memory:             # In-memory SQLite

One connection per ``Database``; calls are serialized with an
``anyio.Lock`` so concurrent tasks never share a cursor.
"""

import logging
import sqlite3
from collections.abc import Sequence
from enum import Enum
from typing import Any

import anyio

from wren.data import _sqlite
from wren.data.errors import ConnectionError, DriverNotInstalledError, QueryError

logger = logging.getLogger("wren.data")

_SQLITE_PREFIX = "sqlite:///"


class ConnectionState(Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


def _sqlite_path(url: str) -> str:
    if not url.startswith(_SQLITE_PREFIX):
        msg = f"Unsupported database URL {url!r}. Only sqlite:/// URLs are supported."
        raise DriverNotInstalledError(msg)
    return url[len(_SQLITE_PREFIX) :]


class Database:
    """SQLite access that connects on first use.

    Usage::

        db = Database("sqlite:///app.db")
        db.state                 # ConnectionState.DISCONNECTED
        db.client_info()         # no connection needed

        await db.execute("INSERT INTO users (name) VALUES (?)", "Alice")
        db.state                 # ConnectionState.CONNECTED
        await db.insert_id()     # 1

        await db.close()
    """

    __slots__ = ("_conn", "_lock", "_path", "_url")

    def __init__(self, url: str, /) -> None:
        self._url = url
        self._path = _sqlite_path(url)
        self._conn: _sqlite.AsyncConnection | None = None
        self._lock: anyio.Lock | None = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def state(self) -> ConnectionState:
        if self._conn is None:
            return ConnectionState.DISCONNECTED
        return ConnectionState.CONNECTED

    # -- Connection management --

    async def _connection(self) -> _sqlite.AsyncConnection:
        """Return the open connection, connecting first if needed."""
        if self._conn is not None:
            return self._conn
        try:
            self._conn = await _sqlite.connect(self._path)
        except sqlite3.Error as exc:
            raise ConnectionError(str(exc)) from exc
        logger.debug("Connected to %s", self._url)
        return self._conn

    def _get_lock(self) -> anyio.Lock:
        # Created lazily: an anyio.Lock needs a running event loop.
        if self._lock is None:
            self._lock = anyio.Lock()
        return self._lock

    async def close(self) -> None:
        """Close the connection. A no-op when not connected."""
        if self._conn is None:
            return
        async with self._get_lock():
            await self._conn.close()
            self._conn = None
        logger.debug("Closed %s", self._url)

    # -- Calls that need a connection --

    async def execute(self, sql: str, /, *params: Any) -> int:
        """Execute a statement and return the number of rows affected."""
        async with self._get_lock():
            conn = await self._connection()
            return await _query(conn.execute, sql, params)

    async def fetch_all(self, sql: str, /, *params: Any) -> list[dict[str, Any]]:
        """Execute a query and return every row as a dict."""
        async with self._get_lock():
            conn = await self._connection()
            rows = await _query(conn.fetch_all, sql, params)
        return [dict(row) for row in rows]

    async def fetch_one(self, sql: str, /, *params: Any) -> dict[str, Any] | None:
        """Execute a query and return the first row as a dict, or ``None``."""
        async with self._get_lock():
            conn = await self._connection()
            row = await _query(conn.fetch_one, sql, params)
        return dict(row) if row is not None else None

    async def fetch_val(self, sql: str, /, *params: Any) -> Any:
        """Execute a query and return the first column of the first row."""
        async with self._get_lock():
            conn = await self._connection()
            row = await _query(conn.fetch_one, sql, params)
        return row[0] if row is not None else None

    async def insert_id(self) -> int | None:
        """Row id of the last inserted row on this connection."""
        async with self._get_lock():
            conn = await self._connection()
            return conn.last_rowid

    async def affected_rows(self) -> int:
        """Rows changed by the last statement on this connection."""
        async with self._get_lock():
            conn = await self._connection()
            return conn.last_rowcount

    async def ping(self) -> bool:
        """Check that the connection answers a trivial query."""
        return await self.fetch_val("SELECT 1") == 1

    async def select_db(self, name: str, path: str) -> None:
        """Attach another database file under *name*."""
        await self.execute("ATTACH DATABASE ? AS " + _quote_identifier(name), path)

    # -- Calls that don't --

    def client_info(self) -> str:
        """Version of the SQLite library in use."""
        return sqlite3.sqlite_version


async def _query(call: Any, sql: str, params: Sequence[Any]) -> Any:
    try:
        return await call(sql, params)
    except sqlite3.Error as exc:
        raise QueryError(str(exc)) from exc


def _quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'
