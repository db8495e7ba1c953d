"""Wren CLI — inspect how a route table resolves paths.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--pages-dir", default=None, help="Root directory for page files")
    parser.add_argument("--front", default="/front.php", help="Front-controller script path")
    parser.add_argument("--home", default="/index.php", help="Route value for /")
    parser.add_argument(
        "--not-found",
        default="/not-found.php",
        help="Route value used when a page file is missing",
    )
    parser.add_argument(
        "--route",
        action="append",
        default=[],
        metavar="PATH=ROUTE",
        help="Explicit route (repeatable)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — front-controller routing for page-script applications.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren match -------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a URL path")
    match_parser.add_argument("path", help="URL path to resolve")
    _add_config_arguments(match_parser)

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List explicit routes")
    _add_config_arguments(routes_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from wren.cli._commands import run_match, run_routes

    if args.command == "match":
        run_match(args)
    elif args.command == "routes":
        run_routes(args)
