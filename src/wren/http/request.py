"""Request data holder.

Copies of the incoming request fields, taken once at construction, plus
a handle on the shared ``SessionStore``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from wren.errors import SessionNotStarted
from wren.http.cookies import parse_cookies
from wren.http.session import SessionStore


class Request:
    """Incoming request data.

    Every mapping is copied on construction: changing the source
    afterwards does not change the request, and changing the request's
    dicts does not write back to the source.

    The session is different. It is *shared*, not copied: ``session``
    returns the store's own dict, so both sides see every write::

        store = SessionStore()
        request = Request(session_store=store)
        store.start()["user_id"] = 42
        request.session["user_id"]  # 42
        request.clear_session()
        store.is_started  # False

    Attributes:
        cookies: Request cookies.
        env: Process environment at request time.
        files: Uploaded files.
        query: Query-string parameters.
        form: Form body parameters.
        params: Combined request parameters.
        server: CGI-style server and header variables.
        path: URL path component.
        method: HTTP method.

    """

    __slots__ = (
        "_session_store",
        "cookies",
        "env",
        "files",
        "form",
        "method",
        "params",
        "path",
        "query",
        "server",
    )

    def __init__(
        self,
        *,
        cookies: Mapping[str, str] | None = None,
        env: Mapping[str, str] | None = None,
        files: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
        form: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        server: Mapping[str, Any] | None = None,
        path: str = "/",
        method: str = "GET",
        session_store: SessionStore | None = None,
    ) -> None:
        self.cookies: dict[str, str] = dict(cookies or {})
        self.env: dict[str, str] = dict(env or {})
        self.files: dict[str, Any] = dict(files or {})
        self.query: dict[str, Any] = dict(query or {})
        self.form: dict[str, Any] = dict(form or {})
        self.params: dict[str, Any] = dict(params or {})
        self.server: dict[str, Any] = dict(server or {})
        self.path = path
        self.method = method
        self._session_store = session_store

    # -- Session --

    @property
    def session(self) -> dict[str, Any]:
        """The live session dict shared with the session store.

        Raises:
            SessionNotStarted: There is no store, or it was not started.
        """
        store = self._session_store
        if store is None or store.data is None:
            msg = "Session has not been started."
            raise SessionNotStarted(msg)
        return store.data

    def has_session(self) -> bool:
        store = self._session_store
        return store is not None and store.is_started

    def clear_session(self) -> None:
        """Clear the session here and in the shared store."""
        if self._session_store is not None:
            self._session_store.clear()

    # -- Factory --

    @classmethod
    def from_asgi(
        cls,
        scope: Mapping[str, Any],
        *,
        session_store: SessionStore | None = None,
        env: Mapping[str, str] | None = None,
    ) -> Request:
        """Build a Request from an ASGI HTTP scope.

        ``server`` gets CGI-style keys (``REQUEST_METHOD``, ``PATH_INFO``,
        ``HTTP_*`` ...). The query string is passed through raw in
        ``server["QUERY_STRING"]``; it is not parsed.
        """
        method = scope.get("method", "GET")
        path = scope.get("path", "/")
        query_string = scope.get("query_string", b"").decode("latin-1")
        server: dict[str, Any] = {
            "REQUEST_METHOD": method,
            "REQUEST_URI": f"{path}?{query_string}" if query_string else path,
            "PATH_INFO": path,
            "QUERY_STRING": query_string,
            "SERVER_PROTOCOL": f"HTTP/{scope.get('http_version', '1.1')}",
        }
        if scope.get("server"):
            host, port = scope["server"]
            server["SERVER_NAME"] = host
            server["SERVER_PORT"] = port
        if scope.get("client"):
            server["REMOTE_ADDR"] = scope["client"][0]

        for raw_name, raw_value in scope.get("headers", ()):
            name = raw_name.decode("latin-1").upper().replace("-", "_")
            server[f"HTTP_{name}"] = raw_value.decode("latin-1")

        return cls(
            cookies=parse_cookies(server.get("HTTP_COOKIE", "")),
            env=os.environ if env is None else env,
            server=server,
            path=path,
            method=method,
            session_store=session_store,
        )
