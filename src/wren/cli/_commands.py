"""``wren match`` and ``wren routes``."""

import argparse
import sys

from wren.config import RouterConfig
from wren.errors import ConfigurationError
from wren.routing.router import Router


def parse_routes(items: list[str]) -> dict[str, str]:
    """Parse ``PATH=ROUTE`` pairs.

    Raises ``SystemExit(2)`` on a pair without ``=``.
    """
    routes: dict[str, str] = {}
    for item in items:
        path, sep, route = item.partition("=")
        if not sep or not path:
            print(f"Error: invalid route {item!r}, expected PATH=ROUTE", file=sys.stderr)
            raise SystemExit(2)
        routes[path] = route
    return routes


def build_router(args: argparse.Namespace) -> Router:
    config = RouterConfig(
        front=args.front,
        home_route=args.home,
        not_found_route=args.not_found,
        pages_dir=args.pages_dir,
        routes=parse_routes(args.route),
    )
    router = Router(config=config)
    router.freeze()
    return router


def run_match(args: argparse.Namespace) -> None:
    """Print the route value *args.path* resolves to."""
    router = build_router(args)
    try:
        route = router.match(args.path)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(route)


def run_routes(args: argparse.Namespace) -> None:
    """Print the explicit route table, one ``PATH  ROUTE`` row per entry."""
    config = build_router(args).config
    routes = config.routes
    if not routes:
        print("No routes registered.")
        return

    width = max(4, *(len(path) for path in routes))
    fmt = f"{{:<{width}}}  {{}}"
    print(fmt.format("PATH", "ROUTE"))
    print("-" * min(width + 2 + max(len(r) for r in routes.values()), 80))
    for path in sorted(routes):
        print(fmt.format(path, routes[path]))
