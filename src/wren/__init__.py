"""Wren — front-controller routing for page-script applications.

Maps every incoming URL path to one target: a page file under a pages
directory, or a handler name built by a dependency container.

Basic usage::

    from wren import Router

    router = Router("/app/pages")
    router.set_routes({"/login": "LoginController"})
    router.freeze()

    router.match("/")            # "/app/pages/index.php"
    router.match("/about.php")   # "/app/pages/about.php"
    router.match("/login")       # "LoginController"
    router.match("/../secret")   # "/app/pages/not-found.php"

Serving (any ASGI server)::

    from wren import Container, FrontController

    app = FrontController(router, Container())
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "Container",
    "FrontController",
    "Request",
    "Response",
    "Router",
    "RouterConfig",
    "ServiceNotFound",
    "SessionNotStarted",
    "SessionStore",
    "WrenError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from wren.routing.router import Router

        return Router

    if name == "RouterConfig":
        from wren.config import RouterConfig

        return RouterConfig

    if name == "Container":
        from wren.container import Container

        return Container

    if name == "FrontController":
        from wren.app import FrontController

        return FrontController

    if name == "Request":
        from wren.http.request import Request

        return Request

    if name == "Response":
        from wren.http.response import Response

        return Response

    if name == "SessionStore":
        from wren.http.session import SessionStore

        return SessionStore

    if name in ("ConfigurationError", "ServiceNotFound", "SessionNotStarted", "WrenError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
