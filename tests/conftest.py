"""Shared test fixtures for wren."""

from pathlib import Path

import pytest


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    """A pages directory with a few readable page files.

    Resolved so canonical page paths share its prefix even when the
    temp directory sits behind a symlink.
    """
    pages = tmp_path.resolve() / "pages"
    pages.mkdir()
    (pages / "index.php").write_text("<h1>Home</h1>")
    (pages / "hello.php").write_text("<h1>Hello</h1>")
    (pages / "other.php").write_text("<h1>Other</h1>")
    (pages / "page-not-found.php").write_text("<h1>Not Found</h1>")

    sub = pages / "docs"
    sub.mkdir()
    (sub / "intro.php").write_text("<h1>Intro</h1>")

    (tmp_path.resolve() / "secret.txt").write_text("top secret")
    return pages
