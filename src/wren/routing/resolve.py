"""Route lookup precedence."""

from wren.config import RouterConfig


def resolve_route(path: str, config: RouterConfig) -> str:
    """Return the raw route value for a normalized path.

    First match wins:

    1. an explicit entry in ``config.routes`` (including ``/``)
    2. ``config.home_route`` for ``/``
    3. the path itself
    """
    route = config.routes.get(path)
    if route is not None:
        return route

    if path == "/":
        return config.home_route

    return path
