"""Async SQLite wrapper using stdlib sqlite3 + anyio.

Runs every blocking sqlite3 call in a worker thread via ``anyio.to_thread``.
``check_same_thread=False`` is required because consecutive calls may
land on different pool threads; ``Database`` serializes access with a lock.
"""

import sqlite3
from collections.abc import Callable, Sequence
from typing import Any

from anyio import to_thread


def _run_sync(func: Callable[..., Any], *args: Any) -> Any:
    """Run blocking call in anyio worker thread."""
    return to_thread.run_sync(func, *args)


class AsyncConnection:
    """Async wrapper around ``sqlite3.Connection``.

    Remembers the row count and last row id of the latest statement, so
    callers can ask for them after the cursor is gone.
    """

    __slots__ = ("_conn", "last_rowcount", "last_rowid")

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self.last_rowcount = -1
        self.last_rowid: int | None = None

    def _execute(self, sql: str, params: Sequence[Any]) -> sqlite3.Cursor:
        cursor = self._conn.execute(sql, params)
        self.last_rowcount = cursor.rowcount
        self.last_rowid = cursor.lastrowid
        return cursor

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        cursor = await _run_sync(self._execute, sql, params)
        return cursor.rowcount

    async def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> list[sqlite3.Row]:
        return await _run_sync(lambda: self._execute(sql, params).fetchall())

    async def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Row | None:
        return await _run_sync(lambda: self._execute(sql, params).fetchone())

    async def close(self) -> None:
        await _run_sync(self._conn.close)


async def connect(path: str) -> AsyncConnection:
    """Open an async SQLite connection with dict-like rows."""

    def _open() -> sqlite3.Connection:
        conn = sqlite3.connect(path, autocommit=True, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    return AsyncConnection(await _run_sync(_open))
