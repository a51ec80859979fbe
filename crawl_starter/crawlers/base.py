"""
Shared plumbing for the crawler templates.

Opens storages, seeds the request queue and assembles the options every
template passes to its crawler constructor.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup
from crawlee import ConcurrencySettings, Request
from crawlee.crawlers import BasicCrawler
from crawlee.proxy_configuration import ProxyConfiguration
from crawlee.storages import Dataset, RequestQueue

from crawl_starter.config import CrawlerConfig


# Crawlee starts scaling from this many parallel tasks
DEFAULT_DESIRED_CONCURRENCY = 10


@dataclass
class CrawlerBundle:
    """A ready-to-run crawler with the storages it was wired to."""

    name: str
    crawler: BasicCrawler
    queue: RequestQueue
    dataset: Dataset


async def open_storages(
    queue_name: str | None = None,
    dataset_name: str | None = None,
) -> tuple[RequestQueue, Dataset]:
    """Open the request queue and dataset (default ones when unnamed)."""
    queue = await RequestQueue.open(name=queue_name)
    dataset = await Dataset.open(name=dataset_name)
    return queue, dataset


async def seed_queue(
    queue: RequestQueue,
    urls: list[str],
    label: str | None = None,
) -> int:
    """
    Add the initial URLs to the queue.

    Args:
        queue: Request queue to seed
        urls: URLs to enqueue
        label: Router label for the requests (default handler if None)

    Returns:
        Number of requests added
    """
    requests = [Request.from_url(url, label=label) for url in urls]
    await queue.add_requests(requests)
    return len(requests)


def crawler_options(
    cfg: CrawlerConfig,
    proxy_configuration: Optional[ProxyConfiguration] = None,
) -> Dict[str, Any]:
    """Keyword arguments common to every template's crawler."""
    return {
        "proxy_configuration": proxy_configuration,
        "concurrency_settings": ConcurrencySettings(
            max_concurrency=cfg.max_concurrency,
            desired_concurrency=min(cfg.max_concurrency, DEFAULT_DESIRED_CONCURRENCY),
        ),
        "max_requests_per_crawl": cfg.max_requests_per_crawl,
        "request_handler_timeout": timedelta(seconds=cfg.request_handler_timeout_secs),
        "max_request_retries": cfg.max_request_retries,
        # Logging is set up by the CLI
        "configure_logging": False,
    }


def select_text(soup: BeautifulSoup, selector: str) -> str:
    """Text of every element matching ``selector``, concatenated."""
    return "".join(tag.get_text() for tag in soup.select(selector))
