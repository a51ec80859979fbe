"""
Firefox Crawler Template

Headless Firefox driven by Playwright for JavaScript-rendered sites.
Heavy resources and ad domains are blocked before each navigation.
"""

from crawlee.crawlers import PlaywrightCrawler, PlaywrightCrawlingContext
from crawlee.router import Router
from crawlee.storages import Dataset

from crawl_starter.blocking import blocking_pre_navigation_hook
from crawl_starter.config import FirefoxCrawlerConfig, config
from crawl_starter.crawlers.base import CrawlerBundle, crawler_options, open_storages, seed_queue
from crawl_starter.proxies import ProxyLists, build_proxy_configuration, load_proxies


NAME = "firefox"


def create_router(dataset: Dataset) -> Router[PlaywrightCrawlingContext]:
    """Build the request router pushing records into ``dataset``."""
    router = Router[PlaywrightCrawlingContext]()

    @router.default_handler
    async def default_handler(context: PlaywrightCrawlingContext) -> None:
        context.log.info(f"Processing request: {context.request.url}")

        page = context.page
        await page.wait_for_load_state("networkidle")
        title = await page.title()

        await dataset.push_data({
            "url": context.request.loaded_url,
            "title": title,
            # Add your data here
        })

    @router.handler("DETAIL")
    async def detail_handler(context: PlaywrightCrawlingContext) -> None:
        context.log.info(f"Processing DETAIL request: {context.request.url}")

        page = context.page
        await page.wait_for_load_state("networkidle")
        title = await page.title()

        await dataset.push_data({
            "url": context.request.loaded_url,
            "title": title,
            "type": "detail",
            # Add your detailed data extraction here
        })

    return router


async def create_firefox_crawler(
    cfg: FirefoxCrawlerConfig | None = None,
    proxies: ProxyLists | None = None,
    urls: list[str] | None = None,
    label: str | None = None,
) -> CrawlerBundle:
    """
    Assemble the headless Firefox crawler template.

    Proxies are only configured when at least one tier has entries.
    """
    cfg = cfg or config.firefox
    if proxies is None:
        proxies = load_proxies()
    proxy_configuration = None if proxies.is_empty else build_proxy_configuration(proxies)

    queue, dataset = await open_storages(cfg.queue_name, cfg.dataset_name)
    await seed_queue(queue, urls or cfg.initial_urls, label=label)

    crawler = PlaywrightCrawler(
        **crawler_options(cfg, proxy_configuration),
        browser_type="firefox",
        headless=cfg.headless,
        request_handler=create_router(dataset),
        request_manager=queue,
    )
    crawler.pre_navigation_hook(blocking_pre_navigation_hook)

    return CrawlerBundle(name=NAME, crawler=crawler, queue=queue, dataset=dataset)
