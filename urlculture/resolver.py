"""Resolve the single authoritative culture for a request.

Sources, in order of precedence:

1. the culture prefix of the request URL,
2. the culture already stored for the request,
3. the configured default culture, only when the exclude-default policy is on.

The resolved culture is written back to the request's store so later reads
within the same request see it.
"""

from enum import StrEnum
from typing import Protocol

from loguru import logger

from urlculture.config import ResolutionConfig
from urlculture.errors import InvalidArgumentError, MissingDependencyError
from urlculture.url_parsing import extract_culture, is_culture


class CultureStore(Protocol):
    """Per-request storage for the resolved culture."""

    def get(self) -> str | None: ...

    def set(self, culture: str | None) -> None: ...


class CultureSource(StrEnum):
    """Where a resolved culture came from."""

    URL = "url"
    STORE = "store"
    DEFAULT = "default"


class CultureResolver:
    """Combine URL, stored and default cultures into one value.

    A strict resolver raises on missing collaborators and empty required
    values; a lenient one (the default) treats them as "no culture".
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def resolve(
        self, url: str | None, config: ResolutionConfig, store: CultureStore | None
    ) -> str | None:
        """Return the culture for the request at *url*, or None if unknown."""
        self._check_config(config)
        culture, source = extract_culture(url), CultureSource.URL
        if culture is None:
            culture, source = self._read(store), CultureSource.STORE
        if culture is None:
            culture, source = _default_for(config), CultureSource.DEFAULT
        if culture is None:
            logger.debug("No culture resolved for {}", url)
            return None

        logger.debug("Culture {} resolved from {} for {}", culture, source, url)
        if source is not CultureSource.STORE:
            self._write(culture, store)
        return culture

    def get_stored(self, config: ResolutionConfig, store: CultureStore | None) -> str | None:
        """Return the stored culture without looking at the URL."""
        self._check_config(config)
        culture = self._read(store)
        if culture is None:
            culture = _default_for(config)
        return culture

    def set_stored(
        self, culture: str | None, config: ResolutionConfig, store: CultureStore | None
    ) -> None:
        """Store *culture* for the rest of the request.

        An empty culture is replaced by the default culture when the
        exclude-default policy is on.
        """
        self._check_config(config)
        value = self._normalize(culture)
        if value is None:
            value = _default_for(config)
        if value is None and self.strict:
            msg = "culture is required"
            raise InvalidArgumentError(msg)
        self._write(value, store)

    def _check_config(self, config: ResolutionConfig) -> None:
        if self.strict and config.exclude_default_from_url and not config.default_culture:
            msg = "exclude_default_from_url is set but no default culture is configured"
            raise InvalidArgumentError(msg)

    def _read(self, store: CultureStore | None) -> str | None:
        if store is None:
            if self.strict:
                msg = "no culture store available for the current request"
                raise MissingDependencyError(msg)
            return None
        return self._normalize(store.get())

    def _write(self, culture: str | None, store: CultureStore | None) -> None:
        if store is None:
            if self.strict:
                msg = "no culture store available for the current request"
                raise MissingDependencyError(msg)
            logger.debug("No culture store, not storing {}", culture)
            return
        store.set(culture)

    def _normalize(self, culture: str | None) -> str | None:
        if not culture:
            return None
        if not is_culture(culture):
            if self.strict:
                msg = f"not a culture code: {culture!r}"
                raise InvalidArgumentError(msg)
            logger.warning("Ignoring malformed culture {!r}", culture)
            return None
        return culture.lower()


def _default_for(config: ResolutionConfig) -> str | None:
    if config.exclude_default_from_url:
        return config.default_culture
    return None
