"""ASGI front controller.

Every request goes through one entry point: the router picks a page file
or a handler name, the page is rendered or the handler is built by the
container and called, and the resulting ``Response`` is sent.

Usage::

    router = Router("/app/pages")
    router.set_routes({"/login": "LoginController"})

    container = Container()
    container.set("LoginController", lambda c: LoginController(c.get("db")))

    app = FrontController(router, container)
    # serve `app` with any ASGI server

Handlers are callables taking the ``Request`` and returning a ``Response``.
Page files are kida templates rendered with ``request`` in scope.
"""

import logging
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any

from anyio import to_thread

from wren.container import Container
from wren.errors import ConfigurationError
from wren.http.request import Request
from wren.http.response import CollectingSink, Response
from wren.http.session import SessionStore
from wren.routing.router import Router
from wren.routing.verify import is_file_route

logger = logging.getLogger("wren.server")

type Scope = MutableMapping[str, Any]
type Receive = Callable[[], Awaitable[MutableMapping[str, Any]]]
type Send = Callable[[MutableMapping[str, Any]], Awaitable[None]]


class FrontController:
    """Single entry point dispatching every request through a ``Router``.

    The router is frozen on construction; configure it first.
    *session_factory*, when given, supplies the ``SessionStore`` handed
    to each request.
    """

    __slots__ = ("_container", "_router", "_session_factory")

    def __init__(
        self,
        router: Router,
        container: Container | None = None,
        *,
        session_factory: Callable[[], SessionStore] | None = None,
    ) -> None:
        router.freeze()
        self._router = router
        self._container = container if container is not None else Container()
        self._session_factory = session_factory

    @property
    def router(self) -> Router:
        return self._router

    @property
    def container(self) -> Container:
        return self._container

    # -- Dispatch --

    def dispatch(self, request: Request) -> Response:
        """Route *request* and produce its response."""
        route = self._router.match(request.path)

        if is_file_route(route):
            response = Response()
            response.set_view(route)
            response.set_vars({"request": request})
            return response

        handler = self._container.new_instance(route)
        response = handler(request)
        if not isinstance(response, Response):
            msg = f"Handler {route!r} returned {type(response).__name__}, expected Response."
            raise ConfigurationError(msg)
        return response

    def handle(self, request: Request) -> CollectingSink:
        """Dispatch and send the response into a fresh sink."""
        sink = CollectingSink()
        self.dispatch(request).send(sink)
        return sink

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
            return
        if scope["type"] != "http":
            msg = f"Unsupported ASGI scope type {scope['type']!r}."
            raise ConfigurationError(msg)

        store = self._session_factory() if self._session_factory is not None else None
        request = Request.from_asgi(scope, session_store=store)

        try:
            sink = await to_thread.run_sync(self.handle, request)
        except Exception:
            logger.exception("Error handling %s %s", request.method, request.path)
            raise

        body = sink.body.encode("utf-8")
        headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in sink.headers
        ]
        if not any(name == b"content-type" for name, _ in headers):
            headers.insert(0, (b"content-type", b"text/html; charset=utf-8"))
        headers.append((b"content-length", str(len(body)).encode("latin-1")))
        await send({"type": "http.response.start", "status": sink.status, "headers": headers})
        await send({"type": "http.response.body", "body": body})

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
