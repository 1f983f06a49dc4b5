"""Tests for the per-request culture stores."""

import asyncio
import contextvars

from urlculture.config import ResolutionConfig
from urlculture.resolver import CultureResolver
from urlculture.stores import (
    CULTURE_KEY,
    ContextVarCultureStore,
    MappingCultureStore,
    RequestStateCultureStore,
)


class TestContextVarCultureStore:
    def test_empty_by_default(self) -> None:
        assert ContextVarCultureStore().get() is None

    def test_set_and_get(self) -> None:
        store = ContextVarCultureStore()
        store.set("en-us")
        assert store.get() == "en-us"
        store.reset()
        assert store.get() is None

    def test_value_not_visible_in_other_context(self) -> None:
        store = ContextVarCultureStore()
        ctx = contextvars.copy_context()
        ctx.run(store.set, "fr-fr")
        assert ctx.run(store.get) == "fr-fr"
        assert store.get() is None

    def test_isolated_per_task(self) -> None:
        store = ContextVarCultureStore()
        resolver = CultureResolver()
        config = ResolutionConfig()

        async def handle(url: str) -> str | None:
            resolver.resolve(url, config, store)
            await asyncio.sleep(0)
            return resolver.get_stored(config, store)

        async def main():
            return await asyncio.gather(handle("/en-us/a"), handle("/de-de/b"), handle("/c"))

        assert asyncio.run(main()) == ["en-us", "de-de", None]


class TestMappingCultureStore:
    def test_uses_culture_key(self) -> None:
        items: dict = {}
        MappingCultureStore(items).set("en-us")
        assert items == {CULTURE_KEY: "en-us"}

    def test_missing_key(self) -> None:
        assert MappingCultureStore({}).get() is None

    def test_non_string_ignored(self) -> None:
        assert MappingCultureStore({CULTURE_KEY: 42}).get() is None

    def test_custom_key(self) -> None:
        items = {"lang": "pl-pl"}
        assert MappingCultureStore(items, key="lang").get() == "pl-pl"


class TestRequestStateCultureStore:
    def test_empty_by_default(self, make_request) -> None:
        assert RequestStateCultureStore(make_request("/about")).get() is None

    def test_set_on_request_state(self, make_request) -> None:
        request = make_request("/about")
        RequestStateCultureStore(request).set("cs-cz")
        assert request.state.culture == "cs-cz"
        assert RequestStateCultureStore(request).get() == "cs-cz"

    def test_not_shared_between_requests(self, make_request) -> None:
        RequestStateCultureStore(make_request("/a")).set("cs-cz")
        assert RequestStateCultureStore(make_request("/b")).get() is None

    def test_resolve_from_request(self, make_request, resolver, default_policy) -> None:
        request = make_request("/en-gb/about", query="x=1")
        store = RequestStateCultureStore(request)
        assert resolver.resolve(str(request.url), default_policy, store) == "en-gb"
        assert request.state.culture == "en-gb"

    def test_non_string_state_ignored(self, make_request) -> None:
        request = make_request("/about")
        request.state.culture = object()
        assert RequestStateCultureStore(request).get() is None

    def test_non_string_state_falls_back_to_default(
        self, make_request, resolver, default_policy
    ) -> None:
        request = make_request("/about")
        request.state.culture = object()
        store = RequestStateCultureStore(request)
        assert resolver.resolve("/about", default_policy, store) == "es-mx"
        assert request.state.culture == "es-mx"
