"""Shared session storage.

A ``SessionStore`` is the one place session data lives. The request
holder and whatever persists sessions both hold a reference to the same
store, so a write through either side is visible to the other, and
clearing it from one side clears it for both.
"""

from typing import Any


class SessionStore:
    """Mutable holder for a single session's data.

    ``data`` is ``None`` until ``start()`` is called.
    """

    __slots__ = ("_data",)

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data

    @property
    def data(self) -> dict[str, Any] | None:
        return self._data

    @property
    def is_started(self) -> bool:
        return self._data is not None

    def start(self) -> dict[str, Any]:
        """Start the session if needed and return its data dict."""
        if self._data is None:
            self._data = {}
        return self._data

    def clear(self) -> None:
        """Discard the session entirely."""
        self._data = None
