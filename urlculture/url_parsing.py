"""Culture prefix parsing for URLs like ``/en-us/some-path``.

The culture is recognized only as the first path segment: two ASCII letters,
a hyphen and two ASCII letters, followed by the end of the path, ``/`` or ``?``.
Matching is case-insensitive and results are lowercased.
"""

import re
from urllib.parse import SplitResult, urlsplit

from loguru import logger

from urlculture.errors import InvalidArgumentError

_FLAGS = re.IGNORECASE | re.ASCII

# Anchored at the start of a path (or path and query).
_CULTURE_PREFIX_RE = re.compile(r"^/(?P<language>[a-z]{2})-(?P<region>[a-z]{2})(?=[/?]|\Z)", _FLAGS)
_CULTURE_RE = re.compile(r"^[a-z]{2}-[a-z]{2}\Z", _FLAGS)


def is_culture(value: str | None) -> bool:
    """Return True if *value* is shaped like a culture code (``en-us``)."""
    return isinstance(value, str) and _CULTURE_RE.match(value) is not None


def _split(url: str | None) -> SplitResult | None:
    if not url:
        return None
    try:
        return urlsplit(url)
    except ValueError:
        logger.debug("Unparseable URL {!r}", url)
        return None


def get_path(url: str | None) -> str:
    """Return the path of *url*, ignoring scheme, host, query and fragment."""
    parts = _split(url)
    if parts is None:
        return ""
    if parts.path:
        return parts.path
    return "/" if parts.netloc else ""


def get_path_and_query(url: str | None) -> str:
    """Return the path of *url* followed by its query string, if any."""
    parts = _split(url)
    if parts is None:
        return ""
    path = get_path(url)
    query = parts.query
    if query:
        return f"{path}?{query}"
    return path


def extract_culture(url: str | None) -> str | None:
    """Extract the culture (e.g. ``en-us``) from the start of the URL path."""
    m = _CULTURE_PREFIX_RE.match(get_path(url))
    if m is None:
        return None
    return f"{m['language']}-{m['region']}".lower()


def extract_region(url: str | None) -> str | None:
    """Extract the region (e.g. ``us`` from ``/en-us/some-path``)."""
    m = _CULTURE_PREFIX_RE.match(get_path(url))
    return m["region"].lower() if m else None


def extract_language(url: str | None) -> str | None:
    """Extract the language (e.g. ``en`` from ``/en-us/some-path``)."""
    culture = extract_culture(url)
    return culture[:2] if culture else None


def strip_culture(url: str | None, include_query: bool = False) -> str:
    """Return the path (optionally with query) minus the culture prefix.

    ``/en-us/about`` becomes ``/about``; ``/en-us`` becomes ``/``.
    Paths without a culture prefix are returned unchanged.
    """
    path = get_path_and_query(url) if include_query else get_path(url)
    m = _CULTURE_PREFIX_RE.match(path)
    if m is None:
        return path
    rest = path[m.end() :]
    if not rest.startswith("/"):
        rest = f"/{rest}"
    return rest


def prefix_culture(url: str | None, culture: str) -> str:
    """Insert ``/{culture}`` as the first segment of the URL's path and query.

    ``/about`` becomes ``/en-us/about``, ``/`` becomes ``/en-us`` and
    ``/?x=1`` becomes ``/en-us?x=1``.
    """
    if not culture:
        msg = "culture is required to prefix a URL"
        raise InvalidArgumentError(msg)
    if not is_culture(culture):
        msg = f"not a culture code: {culture!r}"
        raise InvalidArgumentError(msg)
    path = get_path_and_query(url)
    if path == "/" or path.startswith("/?"):
        path = path[1:]
    elif path and not path.startswith(("/", "?")):
        path = f"/{path}"
    return f"/{culture.lower()}{path}"
