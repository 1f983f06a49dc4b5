"""Resolution configuration: default culture and the exclude-default policy."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from urlculture.errors import InvalidArgumentError
from urlculture.url_parsing import is_culture

# Environment variables read by load_config()
DEFAULT_CULTURE_ENV = "URLCULTURE_DEFAULT_CULTURE"
EXCLUDE_DEFAULT_ENV = "URLCULTURE_EXCLUDE_DEFAULT_FROM_URL"

# App-settings keys read by config_from_settings()
DEFAULT_CULTURE_SETTING = "Default Culture"
EXCLUDE_DEFAULT_SETTING = "Exclude Default Culture From URL"


@dataclass(frozen=True)
class ResolutionConfig:
    """Per-call resolution settings.

    When ``exclude_default_from_url`` is set, the default culture is left out
    of generated URLs, so a URL without a culture prefix means "the default
    culture applies" rather than "no culture".
    """

    default_culture: str | None = None
    exclude_default_from_url: bool = False

    def __post_init__(self) -> None:
        culture = self.default_culture or None
        if culture is not None:
            if not is_culture(culture):
                msg = f"default culture is not a culture code: {culture!r}"
                raise InvalidArgumentError(msg)
            culture = culture.lower()
        object.__setattr__(self, "default_culture", culture)


def parse_bool(value: str | None) -> bool:
    """Only ``"true"`` (any case) is truthy; everything else is False."""
    return (value or "").strip().lower() == "true"


def config_from_settings(settings: Mapping[str, str]) -> ResolutionConfig:
    """Build a config from an app-settings mapping."""
    return ResolutionConfig(
        default_culture=(settings.get(DEFAULT_CULTURE_SETTING) or "").strip() or None,
        exclude_default_from_url=parse_bool(settings.get(EXCLUDE_DEFAULT_SETTING)),
    )


def load_config() -> ResolutionConfig:
    """Build a config from URLCULTURE_* environment variables."""
    return ResolutionConfig(
        default_culture=os.environ.get(DEFAULT_CULTURE_ENV, "").strip() or None,
        exclude_default_from_url=parse_bool(os.environ.get(EXCLUDE_DEFAULT_ENV)),
    )
