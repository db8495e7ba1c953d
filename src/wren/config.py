"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, normalized
on construction, replaced wholesale (never mutated) during setup.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType


def _absolute_dir(path: str | Path) -> str | None:
    """Absolute form of *path* without trailing slashes; ``None`` for the root."""
    return os.path.abspath(str(path)).rstrip("/") or None


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Route table and page location for a front controller.

    All fields have working defaults except ``pages_dir``. Override what
    you need::

        config = RouterConfig(
            pages_dir="/app/pages",
            routes={"/login": "LoginController"},
        )

    Attributes:
        front: Path of the front-controller script, stripped from incoming
            paths before matching. Always starts with exactly one ``/``.
        home_route: Route value used for ``/`` when no explicit mapping exists.
        not_found_route: Route value substituted when a file route fails
            verification.
        pages_dir: Root directory for file routes. ``None`` is legal as long
            as no file route is ever resolved. Made absolute on construction
            (relative to the working directory); never has a trailing ``/``.
        routes: Explicit path-to-route mapping. Read-only.

    """

    front: str = "/front.php"
    home_route: str = "/index.php"
    not_found_route: str = "/not-found.php"
    pages_dir: str | Path | None = None
    routes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "front", "/" + self.front.lstrip("/"))
        if self.pages_dir:
            object.__setattr__(self, "pages_dir", _absolute_dir(self.pages_dir))
        else:
            object.__setattr__(self, "pages_dir", None)
        # Private copy so callers mutating their dict can't change the table.
        object.__setattr__(self, "routes", MappingProxyType(dict(self.routes)))
