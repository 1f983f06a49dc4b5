"""Error taxonomy for culture parsing and resolution.

An unknown culture is never an error: it is returned as ``None``.
"""


class UrlCultureError(Exception):
    """Base class for all urlculture errors."""


class InvalidArgumentError(UrlCultureError, ValueError):
    """A required culture argument is empty or not shaped like ``xx-yy``."""


class MissingDependencyError(UrlCultureError, LookupError):
    """A required collaborator (culture store, request context) is absent."""
