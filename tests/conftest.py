"""Shared test fixtures."""

import pytest
from starlette.requests import Request

from urlculture.config import ResolutionConfig
from urlculture.resolver import CultureResolver
from urlculture.stores import MappingCultureStore


@pytest.fixture()
def items():
    """An empty per-request item bag."""
    return {}


@pytest.fixture()
def store(items):
    return MappingCultureStore(items)


@pytest.fixture()
def resolver():
    return CultureResolver()


@pytest.fixture()
def strict_resolver():
    return CultureResolver(strict=True)


@pytest.fixture()
def default_policy():
    """Policy on: an unprefixed URL means es-mx."""
    return ResolutionConfig(default_culture="es-mx", exclude_default_from_url=True)


@pytest.fixture()
def no_policy():
    """Default culture configured, but the exclude-default policy is off."""
    return ResolutionConfig(default_culture="es-mx", exclude_default_from_url=False)


@pytest.fixture()
def make_request():
    """Build a bare Starlette request for a path."""

    def _make(path: str = "/", query: str = "") -> Request:
        scope = {
            "type": "http",
            "method": "GET",
            "path": path,
            "query_string": query.encode(),
            "headers": [],
        }
        return Request(scope)

    return _make
