"""
BeautifulSoup Crawler Template

Static HTML crawler: pages are fetched over HTTP and parsed with
BeautifulSoup, then fields are picked out with CSS selectors.
"""

from crawlee.crawlers import BeautifulSoupCrawler, BeautifulSoupCrawlingContext
from crawlee.http_clients import HttpxHttpClient
from crawlee.router import Router
from crawlee.storages import Dataset

from crawl_starter.config import BeautifulSoupCrawlerConfig, config
from crawl_starter.crawlers.base import (
    CrawlerBundle,
    crawler_options,
    open_storages,
    seed_queue,
    select_text,
)
from crawl_starter.proxies import ProxyLists, build_proxy_configuration, load_proxies


NAME = "beautifulsoup"


def create_router(dataset: Dataset) -> Router[BeautifulSoupCrawlingContext]:
    """Build the request router pushing records into ``dataset``."""
    router = Router[BeautifulSoupCrawlingContext]()

    @router.default_handler
    async def default_handler(context: BeautifulSoupCrawlingContext) -> None:
        context.log.info(f"Processing request: {context.request.url}")

        # Example: extract page title
        title = select_text(context.soup, "title")

        await dataset.push_data({
            "url": context.request.loaded_url,
            "title": title,
            # Add your data extraction here
        })

    @router.handler("DETAIL")
    async def detail_handler(context: BeautifulSoupCrawlingContext) -> None:
        context.log.info(f"Processing DETAIL request: {context.request.url}")

        soup = context.soup
        title = select_text(soup, "title")

        # Example: extract more detailed data using CSS selectors
        heading = select_text(soup, "h1")
        description = select_text(soup, ".description")

        await dataset.push_data({
            "url": context.request.loaded_url,
            "title": title,
            "heading": heading,
            "description": description,
            "type": "detail",
            # Add your detailed data extraction here
        })

    return router


async def create_beautifulsoup_crawler(
    cfg: BeautifulSoupCrawlerConfig | None = None,
    proxies: ProxyLists | None = None,
    urls: list[str] | None = None,
    label: str | None = None,
) -> CrawlerBundle:
    """
    Assemble the BeautifulSoup crawler template.

    Proxies are only configured when at least one tier has entries.
    """
    cfg = cfg or config.beautifulsoup
    if proxies is None:
        proxies = load_proxies()
    proxy_configuration = None if proxies.is_empty else build_proxy_configuration(proxies)

    queue, dataset = await open_storages(cfg.queue_name, cfg.dataset_name)
    await seed_queue(queue, urls or cfg.initial_urls, label=label)

    crawler = BeautifulSoupCrawler(
        **crawler_options(cfg, proxy_configuration),
        parser=cfg.parser,
        http_client=HttpxHttpClient(),
        request_handler=create_router(dataset),
        request_manager=queue,
    )

    return CrawlerBundle(name=NAME, crawler=crawler, queue=queue, dataset=dataset)
