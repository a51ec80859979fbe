"""
Proxy List Module

Loads datacenter and residential proxy lists from flat files and turns them
into a tiered proxy configuration for the crawling framework.
"""

import logging
from pathlib import Path
from typing import NamedTuple, Optional

from crawlee.proxy_configuration import ProxyConfiguration

from crawl_starter.config import ProxyConfig


logger = logging.getLogger(__name__)


class ProxyLists(NamedTuple):
    """Proxy URLs grouped by tier, in fallback order."""

    datacenter: list[str]
    residential: list[str]

    @property
    def tiers(self) -> list[list[str]]:
        """Tiers in the order the crawler should try them."""
        return [self.datacenter, self.residential]

    @property
    def is_empty(self) -> bool:
        return not self.datacenter and not self.residential


def parse_proxy_lines(content: str) -> list[str]:
    """
    Extract proxy URLs from file content.

    Lines are trimmed; only non-empty lines starting with ``http`` are kept,
    in file order.
    """
    proxies = []
    for line in content.split("\n"):
        line = line.strip()
        if line and line.startswith("http"):
            proxies.append(line)
    return proxies


def _log_tier(name: str, proxies: list[str]) -> None:
    if proxies:
        logger.info(f"Loaded {len(proxies)} {name} proxies.")
    else:
        logger.info(f"No {name} proxies loaded. File may be empty.")


def load_proxies(
    proxies_dir: str | Path | None = None,
    datacenter_file: str | None = None,
    residential_file: str | None = None,
) -> ProxyLists:
    """
    Load datacenter and residential proxies from their list files.

    A ``PROXIES_PATH`` set in the environment (or ``.env``) takes precedence
    over ``proxies_dir``. Paths are resolved against the working directory.

    Args:
        proxies_dir: Directory where the proxy files live
        datacenter_file: Filename of the datacenter proxy list
        residential_file: Filename of the residential proxy list

    Returns:
        ProxyLists; both lists are empty if either file cannot be read
    """
    settings = ProxyConfig()

    if "proxies_path" in settings.model_fields_set or not proxies_dir:
        directory = Path(settings.proxies_path)
    else:
        directory = Path(proxies_dir)

    base = Path.cwd() / directory
    datacenter_path = base / (datacenter_file or settings.datacenter_proxies_file)
    residential_path = base / (residential_file or settings.residential_proxies_file)

    try:
        datacenter = parse_proxy_lines(datacenter_path.read_text(encoding="utf-8"))
        residential = parse_proxy_lines(residential_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not load proxies: {e}")
        return ProxyLists([], [])

    _log_tier("datacenter", datacenter)
    _log_tier("residential", residential)

    return ProxyLists(datacenter, residential)


def build_proxy_configuration(
    proxies: ProxyLists | None = None,
) -> Optional[ProxyConfiguration]:
    """
    Build a tiered proxy configuration, datacenter before residential.

    Args:
        proxies: Pre-loaded proxy lists (loaded from files if None)

    Returns:
        ProxyConfiguration, or None when there is nothing to rotate
    """
    if proxies is None:
        proxies = load_proxies()

    tiers = [tier for tier in proxies.tiers if tier]
    if not tiers:
        logger.info("No proxies configured, crawling without proxy")
        return None

    return ProxyConfiguration(tiered_proxy_urls=tiers)
