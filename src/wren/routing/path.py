"""Incoming path normalization."""


def normalize_path(path: str, front: str) -> str:
    """Strip the front-controller prefix and force a single leading ``/``.

    Examples::

        normalize_path("/front.php/foo", "/front.php")  -> "/foo"
        normalize_path("/front.php/", "/front.php")     -> "/"
        normalize_path("/front.php", "/front.php")      -> "/"
        normalize_path("//foo/", "/front.php")          -> "/foo/"

    Nothing else is touched: no case folding, no percent-decoding,
    trailing slashes are kept.
    """
    if path.startswith(front):
        path = path[len(front) :]
    return "/" + path.lstrip("/")
