"""Wren exception hierarchy.

Shared across Router, Container, Request, and the front controller so
every module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when router or application configuration is invalid.

    A configuration defect, not a request-time condition: callers
    should let it propagate and stop processing.
    """


class ServiceNotFound(WrenError, LookupError):  # noqa: N818 — mirrors LookupError naming
    """No factory is registered in the container under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name


class SessionNotStarted(WrenError, LookupError):  # noqa: N818
    """The shared session store was accessed before it was started."""
