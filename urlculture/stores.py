"""Culture stores: where a request keeps its resolved culture."""

import contextvars
from collections.abc import MutableMapping
from typing import Any

from starlette.requests import Request

# Key used in request-scoped item bags
CULTURE_KEY = "urlculture.culture"


class ContextVarCultureStore:
    """Store the culture in a ContextVar (one value per request context)."""

    def __init__(self, name: str = "culture"):
        self._var: contextvars.ContextVar[str | None] = contextvars.ContextVar(name, default=None)

    def get(self) -> str | None:
        return self._var.get()

    def set(self, culture: str | None) -> None:
        self._var.set(culture)

    def reset(self) -> None:
        """Forget the stored culture in the current context."""
        self._var.set(None)


class MappingCultureStore:
    """Store the culture in a request's mutable item bag."""

    def __init__(self, items: MutableMapping[str, Any], key: str = CULTURE_KEY):
        self._items = items
        self._key = key

    def get(self) -> str | None:
        value = self._items.get(self._key)
        return value if isinstance(value, str) else None

    def set(self, culture: str | None) -> None:
        self._items[self._key] = culture


class RequestStateCultureStore:
    """Store the culture on a Starlette ``request.state``."""

    def __init__(self, request: Request, attr: str = "culture"):
        self._request = request
        self._attr = attr

    def get(self) -> str | None:
        value = getattr(self._request.state, self._attr, None)
        return value if isinstance(value, str) else None

    def set(self, culture: str | None) -> None:
        setattr(self._request.state, self._attr, culture)
