"""File route classification and verification.

A route value starting with ``/`` names a page file under the pages
directory. Anything else is a logical name and is returned untouched,
without touching the filesystem.

Security: file routes are canonicalized (symlinks, ``.`` and ``..``
resolved) and must stay under the pages directory. Missing, unreadable,
and escaping paths all produce the same not-found fallback so the
caller can't tell them apart.
"""

import logging
import os

from wren.config import RouterConfig
from wren.errors import ConfigurationError

logger = logging.getLogger("wren.routing")


def is_file_route(route: str) -> bool:
    """True if *route* names a page file rather than a handler."""
    return route[:1] == "/"


def page_exists(page: str, pages_dir: str) -> bool:
    """Whether a canonical *page* path is a readable file inside *pages_dir*."""
    return (
        page != ""
        and (page == pages_dir or page.startswith(pages_dir + os.sep))
        and os.path.exists(page)
        and os.access(page, os.R_OK)
    )


def not_found(config: RouterConfig) -> str:
    """The fallback route value.

    A file-shaped not-found route is joined to the pages directory as-is;
    it is not canonicalized or checked.
    """
    if is_file_route(config.not_found_route):
        return f"{config.pages_dir}{config.not_found_route}"
    return config.not_found_route


def verify_route(route: str, config: RouterConfig) -> str:
    """Turn a raw route value into the final route value.

    Raises:
        ConfigurationError: *route* is a file route and no pages directory
            is configured.
    """
    if not is_file_route(route):
        return route

    pages_dir = config.pages_dir
    if not pages_dir:
        msg = "No pages directory specified."
        raise ConfigurationError(msg)

    page = os.path.realpath(pages_dir + route)
    if page_exists(page, pages_dir):
        return page

    logger.debug("No readable page for %r under %s", route, pages_dir)
    return not_found(config)
