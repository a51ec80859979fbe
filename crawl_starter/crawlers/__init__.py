"""Crawlers module - ready-to-run crawler templates."""

from typing import Awaitable, Callable, Dict

from .base import CrawlerBundle
from .beautifulsoup_crawler import create_beautifulsoup_crawler
from .firefox_crawler import create_firefox_crawler
from .http_crawler import create_http_crawler


CrawlerFactory = Callable[..., Awaitable[CrawlerBundle]]


class UnknownTemplateError(KeyError):
    """Raised when a crawler template name is not registered."""


TEMPLATES: Dict[str, CrawlerFactory] = {
    "http": create_http_crawler,
    "beautifulsoup": create_beautifulsoup_crawler,
    "firefox": create_firefox_crawler,
}


def get_template(name: str) -> CrawlerFactory:
    """Look up a crawler factory by template name."""
    try:
        return TEMPLATES[name]
    except KeyError:
        available = ", ".join(sorted(TEMPLATES))
        raise UnknownTemplateError(f"Unknown crawler template '{name}' (available: {available})") from None


__all__ = [
    "CrawlerBundle",
    "TEMPLATES",
    "UnknownTemplateError",
    "create_beautifulsoup_crawler",
    "create_firefox_crawler",
    "create_http_crawler",
    "get_template",
]
