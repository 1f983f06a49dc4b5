"""Link generation that leaves the default culture out of URLs when configured."""

from functools import partial

from jinja2 import Environment

from urlculture.config import ResolutionConfig
from urlculture.url_parsing import prefix_culture, strip_culture


def localize_url(url: str, culture: str | None, config: ResolutionConfig) -> str:
    """Return the path and query of *url* prefixed with *culture*.

    Any culture already in the URL is replaced. No prefix is added when
    *culture* is empty, or when it is the default culture and the
    exclude-default policy is on.
    """
    path = strip_culture(url, include_query=True)
    if not culture:
        return path
    if config.exclude_default_from_url and culture.lower() == config.default_culture:
        return path
    return prefix_culture(path, culture)


def install_culture_filters(env: Environment, config: ResolutionConfig) -> None:
    """Register the ``localize_url`` filter on a Jinja2 environment."""
    env.filters["localize_url"] = partial(localize_url, config=config)
