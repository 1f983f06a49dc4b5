"""Culture prefixes in URLs (``/en-us/...``) and per-request culture resolution."""

from urlculture.config import ResolutionConfig, config_from_settings, load_config
from urlculture.errors import InvalidArgumentError, MissingDependencyError, UrlCultureError
from urlculture.links import install_culture_filters, localize_url
from urlculture.logging_config import disable_logging, enable_logging
from urlculture.resolver import CultureResolver, CultureSource, CultureStore
from urlculture.stores import (
    CULTURE_KEY,
    ContextVarCultureStore,
    MappingCultureStore,
    RequestStateCultureStore,
)
from urlculture.url_parsing import (
    extract_culture,
    extract_language,
    extract_region,
    is_culture,
    prefix_culture,
    strip_culture,
)

disable_logging()

__all__ = [
    "CULTURE_KEY",
    "ContextVarCultureStore",
    "CultureResolver",
    "CultureSource",
    "CultureStore",
    "InvalidArgumentError",
    "MappingCultureStore",
    "MissingDependencyError",
    "RequestStateCultureStore",
    "ResolutionConfig",
    "UrlCultureError",
    "config_from_settings",
    "disable_logging",
    "enable_logging",
    "extract_culture",
    "extract_language",
    "extract_region",
    "install_culture_filters",
    "is_culture",
    "load_config",
    "localize_url",
    "prefix_culture",
    "strip_culture",
]
