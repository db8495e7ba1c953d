"""Dependency container.

Two explicit stores:

- **variables** — plain values (settings, paths, credentials) read by
  factories through ``get_var`` / ``set_var`` / ``has_var`` / ``delete_var``.
- **factories** — named callables that build objects. ``get()`` returns a
  shared instance created at most once; ``new_instance()`` always builds
  a fresh one.

Usage::

    container = Container({"db_url": "sqlite:///app.db"})
    container.set("db", lambda c: Database(c.get_var("db_url")))
    container.set("LoginController", lambda c: LoginController(c.get("db")))

    db = container.get("db")                      # created once, then shared
    controller = container.new_instance("LoginController")

Names may be written with leading backslashes (``"\\\\Foo"``); those are
ignored, so ``"\\\\Foo"`` and ``"Foo"`` refer to the same factory.
"""

from collections.abc import Callable, Mapping
from typing import Any

from wren.errors import ServiceNotFound

type Factory = Callable[["Container"], Any]


def _normalize_name(name: str) -> str:
    return name.lstrip("\\")


class Container:
    """Named factories plus a lazily populated shared-instance cache."""

    __slots__ = ("_factories", "_instances", "_variables")

    def __init__(self, variables: Mapping[str, Any] | None = None) -> None:
        self._variables: dict[str, Any] = dict(variables or {})
        self._factories: dict[str, Factory] = {}
        self._instances: dict[str, Any] = {}

    # -- Variables --

    def get_var(self, key: str) -> Any:
        """Return a variable. Raises ``KeyError`` if it is not set."""
        return self._variables[key]

    def set_var(self, key: str, value: Any) -> None:
        self._variables[key] = value

    def has_var(self, key: str) -> bool:
        """True if *key* is set to something other than ``None``."""
        return self._variables.get(key) is not None

    def delete_var(self, key: str) -> None:
        self._variables.pop(key, None)

    # -- Factories --

    def set(self, name: str, factory: Factory) -> None:
        """Register *factory* under *name*.

        Any shared instance already built for *name* is discarded, so the
        next ``get()`` uses the new factory.
        """
        name = _normalize_name(name)
        self._factories[name] = factory
        self._instances.pop(name, None)

    def has(self, name: str) -> bool:
        """True if a factory is registered under *name*."""
        return _normalize_name(name) in self._factories

    def get(self, name: str) -> Any:
        """Return the shared instance for *name*, creating it on first use."""
        name = _normalize_name(name)
        if name not in self._instances:
            self._instances[name] = self.new_instance(name)
        return self._instances[name]

    def new_instance(self, name: str) -> Any:
        """Build a new, unshared instance.

        Raises:
            ServiceNotFound: No factory is registered under *name*.
        """
        name = _normalize_name(name)
        factory = self._factories.get(name)
        if factory is None:
            raise ServiceNotFound(name)
        return factory(self)
