"""Front-controller router.

Holds a frozen ``RouterConfig`` and maps incoming URL paths to a single
route value: an absolute page file path or a logical handler name.
"""

import logging
from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path

from wren.config import RouterConfig
from wren.errors import ConfigurationError
from wren.routing.path import normalize_path
from wren.routing.resolve import resolve_route
from wren.routing.verify import verify_route

logger = logging.getLogger("wren.routing")


class Router:
    """Resolve URL paths against a flat route table.

    Usage::

        router = Router("/app/pages")
        router.set_front("/front-controller.php")
        router.set_routes({"/login": "LoginController"})
        router.freeze()

        router.match("/")       # "/app/pages/index.php"
        router.match("/login")  # "LoginController"

    Setters only run during setup. Each one swaps in a new
    ``RouterConfig``; after ``freeze()`` they raise ``ConfigurationError``.
    ``match()`` never changes state, so a frozen router is safe to share
    between concurrent requests.
    """

    __slots__ = ("_config", "_frozen")

    def __init__(
        self,
        pages_dir: str | Path | None = None,
        *,
        config: RouterConfig | None = None,
    ) -> None:
        if config is None:
            config = RouterConfig(pages_dir=pages_dir)
        elif pages_dir:
            config = replace(config, pages_dir=pages_dir)
        self._config = config
        self._frozen = False

    @property
    def config(self) -> RouterConfig:
        """The current configuration."""
        return self._config

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -- Setup --

    def _configure(self, **changes: object) -> None:
        if self._frozen:
            msg = "Cannot change router configuration after freeze()."
            raise ConfigurationError(msg)
        self._config = replace(self._config, **changes)

    def set_front(self, front: str) -> None:
        """Set the front-controller script path (leading ``/`` is added)."""
        self._configure(front=front)

    def set_home_route(self, home_route: str) -> None:
        self._configure(home_route=home_route)

    def set_not_found_route(self, not_found_route: str) -> None:
        self._configure(not_found_route=not_found_route)

    def set_pages_dir(self, pages_dir: str | Path | None) -> None:
        self._configure(pages_dir=pages_dir)

    def set_routes(self, routes: Mapping[str, str]) -> None:
        """Replace the explicit route table."""
        self._configure(routes=routes)

    def freeze(self) -> None:
        """Lock the configuration. Call before serving requests."""
        self._frozen = True

    # -- Matching --

    def match(self, path: str) -> str:
        """Return the route value for an incoming URL path.

        Raises ``ConfigurationError`` if the path resolves to a file
        route and no pages directory is configured.
        """
        config = self._config
        normalized = normalize_path(path, config.front)
        route = verify_route(resolve_route(normalized, config), config)
        logger.debug("Matched %r -> %r", path, route)
        return route
