"""
HTTP Crawler Template

Plain HTTP crawler (httpx client) with no HTML parsing. Handlers only record
the URL; add your own extraction from ``context.http_response``.
"""

from crawlee.crawlers import HttpCrawler, HttpCrawlingContext
from crawlee.http_clients import HttpxHttpClient
from crawlee.router import Router
from crawlee.storages import Dataset

from crawl_starter.config import HttpCrawlerConfig, config
from crawl_starter.crawlers.base import CrawlerBundle, crawler_options, open_storages, seed_queue
from crawl_starter.proxies import ProxyLists, build_proxy_configuration


NAME = "http"


def create_router(dataset: Dataset) -> Router[HttpCrawlingContext]:
    """Build the request router pushing records into ``dataset``."""
    router = Router[HttpCrawlingContext]()

    @router.default_handler
    async def default_handler(context: HttpCrawlingContext) -> None:
        context.log.info(f"Processing request: {context.request.url}")

        await dataset.push_data({
            "url": context.request.url,
            # Add your data here
        })

    @router.handler("SPECIAL")
    async def special_handler(context: HttpCrawlingContext) -> None:
        context.log.info(f"Processing SPECIAL request: {context.request.url}")

        await dataset.push_data({
            "url": context.request.url,
            "type": "special",
            # Add your data here
        })

    return router


async def create_http_crawler(
    cfg: HttpCrawlerConfig | None = None,
    proxies: ProxyLists | None = None,
    urls: list[str] | None = None,
    label: str | None = None,
) -> CrawlerBundle:
    """
    Assemble the HTTP crawler template.

    Args:
        cfg: Template configuration (global config if None)
        proxies: Proxy lists (loaded from files if None)
        urls: Seed URLs (template defaults if None)
        label: Router label for the seeds

    Returns:
        CrawlerBundle with a seeded queue
    """
    cfg = cfg or config.http
    proxy_configuration = build_proxy_configuration(proxies)

    queue, dataset = await open_storages(cfg.queue_name, cfg.dataset_name)
    await seed_queue(queue, urls or cfg.initial_urls, label=label)

    crawler = HttpCrawler(
        **crawler_options(cfg, proxy_configuration),
        http_client=HttpxHttpClient(),
        request_handler=create_router(dataset),
        request_manager=queue,
    )

    return CrawlerBundle(name=NAME, crawler=crawler, queue=queue, dataset=dataset)
