"""Buffered response.

Header and cookie calls are recorded, not sent. ``send()`` renders the
view first, so a template error never leaves half-sent headers behind,
then replays the recorded calls on a ``ResponseSink``, writes the body,
and finally runs the optional last call.

View files are kida templates rendered with the response's vars.
"""

import html
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import quote

from kida import Environment, FileSystemLoader

from wren.http.cookies import SetCookie


@dataclass(frozen=True, slots=True)
class BufferedCall:
    """One recorded header or cookie call.

    ``name`` is ``"header"``, ``"set_cookie"`` or ``"set_raw_cookie"``.
    """

    name: str
    args: tuple[Any, ...] = ()


class ResponseSink(Protocol):
    """Where a response's headers and body end up."""

    def header(self, line: str, replace: bool = True, status: int | None = None) -> None: ...

    def set_cookie(self, cookie: SetCookie) -> None: ...

    def write(self, body: str) -> None: ...


class CollectingSink:
    """A ``ResponseSink`` that collects status, headers and body in memory.

    Header lines follow the usual rules: ``"HTTP/1.1 404 Not Found"`` sets
    the status, ``"Name: value"`` adds a header (replacing same-named
    headers unless ``replace=False``), and a ``Location`` header on a
    200 response turns it into a 302.
    """

    __slots__ = ("_chunks", "headers", "status")

    def __init__(self) -> None:
        self.status = 200
        self.headers: list[tuple[str, str]] = []
        self._chunks: list[str] = []

    def header(self, line: str, replace: bool = True, status: int | None = None) -> None:
        if line[:5].upper() == "HTTP/":
            parts = line.split()
            if len(parts) > 1 and parts[1].isdigit():
                self.status = int(parts[1])
        else:
            name, _, value = line.partition(":")
            name = name.strip()
            if replace:
                self.headers = [h for h in self.headers if h[0].lower() != name.lower()]
            self.headers.append((name, value.strip()))
            if name.lower() == "location" and self.status == 200 and not status:
                self.status = 302
        if status:
            self.status = status

    def set_cookie(self, cookie: SetCookie) -> None:
        self.headers.append(("Set-Cookie", cookie.to_header_value()))

    def write(self, body: str) -> None:
        self._chunks.append(body)

    @property
    def body(self) -> str:
        return "".join(self._chunks)


def render_view(path: str, variables: Mapping[str, Any]) -> str:
    """Render the kida template at *path* with *variables*.

    Includes and extends resolve relative to the view's directory.
    """
    directory, name = os.path.split(path)
    env = Environment(loader=FileSystemLoader(directory or "."), autoescape=True)
    return env.get_template(name).render(dict(variables))


class Response:
    """Collects everything needed to answer a request, then sends it.

    Usage::

        response = Response("/app/views")
        response.set_view("article.html")
        response.set_vars({"article": article})
        response.header("Cache-Control: no-cache")
        response.set_cookie("seen", "1")
        response.send(sink)
    """

    __slots__ = ("_base", "_headers", "_last_call", "_vars", "_view")

    def __init__(self, base: str | None = None) -> None:
        self._base = base
        self._headers: list[BufferedCall] = []
        self._last_call: tuple[Any, ...] | None = None
        self._vars: dict[str, Any] = {}
        self._view: str | None = None

    # -- View --

    def set_base(self, base: str | None) -> None:
        self._base = base

    def get_base(self) -> str | None:
        return self._base

    def set_view(self, view: str | None) -> None:
        self._view = view

    def get_view(self) -> str | None:
        return self._view

    def get_view_path(self) -> str | None:
        """The view joined to the base directory, if there is one."""
        if not self._base:
            return self._view
        view = self._view or ""
        return self._base.rstrip(os.sep) + os.sep + view.lstrip(os.sep)

    def set_vars(self, variables: Mapping[str, Any]) -> None:
        """Replace the view variables. A ``self`` key is dropped."""
        self._vars = {k: v for k, v in variables.items() if k != "self"}

    def get_vars(self) -> dict[str, Any]:
        return self._vars

    def esc(self, value: str) -> str:
        """HTML-escape *value*, quotes included."""
        return html.escape(value, quote=True)

    # -- Buffered calls --

    def header(self, line: str, replace: bool = True, status: int | None = None) -> None:
        """Buffer a raw header line such as ``"Location: /login"``."""
        self._headers.append(BufferedCall("header", (line, replace, status)))

    def set_cookie(
        self,
        name: str,
        value: str = "",
        *,
        max_age: int | None = None,
        path: str = "/",
        domain: str | None = None,
        secure: bool = False,
        httponly: bool = False,
        samesite: str | None = None,
    ) -> None:
        """Buffer a cookie. The value is percent-encoded."""
        cookie = SetCookie(
            name=name,
            value=quote(value, safe=""),
            max_age=max_age,
            path=path,
            domain=domain,
            secure=secure,
            httponly=httponly,
            samesite=samesite,
        )
        self._headers.append(BufferedCall("set_cookie", (cookie,)))

    def set_raw_cookie(
        self,
        name: str,
        value: str = "",
        *,
        max_age: int | None = None,
        path: str = "/",
        domain: str | None = None,
        secure: bool = False,
        httponly: bool = False,
        samesite: str | None = None,
    ) -> None:
        """Buffer a cookie whose value is sent exactly as given."""
        cookie = SetCookie(
            name=name,
            value=value,
            max_age=max_age,
            path=path,
            domain=domain,
            secure=secure,
            httponly=httponly,
            samesite=samesite,
        )
        self._headers.append(BufferedCall("set_raw_cookie", (cookie,)))

    def get_headers(self) -> list[BufferedCall]:
        return self._headers

    def set_last_call(self, func: Callable[..., Any], *args: Any) -> None:
        """Run ``func(*args)`` after the body has been written."""
        self._last_call = (func, *args)

    def get_last_call(self) -> tuple[Any, ...] | None:
        return self._last_call

    # -- Sending --

    def send(self, sink: ResponseSink) -> None:
        """Render, send headers, write the body, then run the last call."""
        output = self.require_view()
        self.send_headers(sink)
        sink.write(output)
        self.invoke_last_call()

    def require_view(self) -> str:
        """Render the view, or return ``""`` when there is none."""
        if not self._view:
            return ""
        return render_view(self.get_view_path() or self._view, self._vars)

    def send_headers(self, sink: ResponseSink) -> None:
        for call in self._headers:
            match call.name:
                case "header":
                    sink.header(*call.args)
                case "set_cookie" | "set_raw_cookie":
                    sink.set_cookie(*call.args)

    def invoke_last_call(self) -> None:
        if not self._last_call:
            return
        func, *args = self._last_call
        func(*args)
