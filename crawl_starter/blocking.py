"""
Resource Blocking Module

Pre-navigation hook that aborts heavy resources and ad domains when crawling
with a headless browser.
"""

import logging
from typing import Any, Iterable

from crawlee.crawlers import PlaywrightPreNavCrawlingContext

from crawl_starter.config import BlockingConfig


def should_block(
    resource_type: str,
    url: str,
    blocked_resource_types: Iterable[str] | None = None,
    blocked_domains: Iterable[str] | None = None,
) -> bool:
    """
    Check if a browser request should be aborted.

    Args:
        resource_type: Playwright resource type (image, font, ...)
        url: Requested URL
        blocked_resource_types: Types to block (default from config)
        blocked_domains: Domain substrings to block (default from config)

    Returns:
        True if the URL contains a blocked domain or the type is blocked
    """
    if blocked_resource_types is None or blocked_domains is None:
        settings = BlockingConfig()
        if blocked_resource_types is None:
            blocked_resource_types = settings.blocked_resource_types
        if blocked_domains is None:
            blocked_domains = settings.blocked_domains

    if any(domain in url for domain in blocked_domains):
        return True
    return resource_type in set(blocked_resource_types)


async def block_resources(page: Any, log: logging.Logger | logging.LoggerAdapter) -> None:
    """
    Install a route on the page that aborts unwanted requests.

    Errors while installing the route are logged, never raised.

    Args:
        page: Playwright page
        log: Logger for per-request and error messages
    """
    settings = BlockingConfig()

    async def handle_route(route):
        request = route.request
        log.debug(f"Blocking resources for: {request.url}")
        if should_block(
            request.resource_type,
            request.url,
            settings.blocked_resource_types,
            settings.blocked_domains,
        ):
            await route.abort()
        else:
            await route.continue_()

    try:
        await page.route("**/*", handle_route)
    except Exception as e:
        log.error(f"Error in block_resources pre-navigation hook: {e}")


async def blocking_pre_navigation_hook(context: PlaywrightPreNavCrawlingContext) -> None:
    """Block unwanted resources before the browser navigates."""
    await block_resources(context.page, context.log)
    context.log.info(f"Navigating to {context.request.url}")
