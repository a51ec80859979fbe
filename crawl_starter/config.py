"""
Configuration module for the crawler templates.

Uses Pydantic Settings for type-safe configuration with environment variable
and ``.env`` file support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_HTTPS_SEEDS = [
    "https://example.com",
    "https://example.org",
    "https://example.net",
]

DEFAULT_HTTP_SEEDS = [
    "http://example.com",
    "http://example.org",
    "http://example.net",
]


class ProxyConfig(BaseSettings):
    """Location of the tiered proxy list files."""

    # Blank values fall back to the defaults
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    proxies_path: Path = Field(default=Path("proxies"), description="Directory holding proxy files")
    datacenter_proxies_file: str = Field(
        default="proxy-datacenter.txt",
        description="Datacenter proxy list (first tier)",
    )
    residential_proxies_file: str = Field(
        default="proxy-residential.txt",
        description="Residential proxy list (fallback tier)",
    )


class BlockingConfig(BaseSettings):
    """Resources aborted by the browser pre-navigation hook."""

    model_config = SettingsConfigDict(env_prefix="BLOCKING_", env_file=".env", extra="ignore")

    blocked_resource_types: list[str] = Field(
        default=["image", "stylesheet", "font", "media"],
        description="Playwright resource types to abort",
    )
    blocked_domains: list[str] = Field(
        default=[
            "googlesyndication.com",
            "adservice.google.com",
            "doubleclick.net",
            "ad.doubleclick.net",
        ],
        description="URL substrings of ad domains to abort",
    )


class CrawlerConfig(BaseSettings):
    """Limits handed to the crawling framework, shared by every template."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    max_concurrency: int = Field(default=30, description="Maximum parallel requests")
    max_requests_per_crawl: int = Field(default=1000, description="Stop after this many requests")
    request_handler_timeout_secs: int = Field(default=30, description="Per-request handler timeout")
    max_request_retries: int = Field(default=3, description="Retries before a request is failed")

    # None opens the default (unnamed) storage
    queue_name: str | None = Field(default=None, description="Request queue name")
    dataset_name: str | None = Field(default=None, description="Dataset name")

    initial_urls: list[str] = Field(
        default_factory=lambda: list(DEFAULT_HTTPS_SEEDS),
        description="URLs the request queue is seeded with",
    )


class HttpCrawlerConfig(CrawlerConfig):
    """Plain HTTP crawler template."""

    model_config = SettingsConfigDict(env_prefix="HTTP_CRAWLER_", env_file=".env", extra="ignore")

    max_concurrency: int = 50
    initial_urls: list[str] = Field(default_factory=lambda: list(DEFAULT_HTTP_SEEDS))


class BeautifulSoupCrawlerConfig(CrawlerConfig):
    """BeautifulSoup (static HTML) crawler template."""

    model_config = SettingsConfigDict(
        env_prefix="BEAUTIFULSOUP_CRAWLER_",
        env_file=".env",
        extra="ignore",
    )

    max_concurrency: int = 30
    parser: Literal["lxml", "html.parser", "html5lib"] = Field(
        default="lxml",
        description="BeautifulSoup tree builder",
    )


class FirefoxCrawlerConfig(CrawlerConfig):
    """Headless Firefox (Playwright) crawler template."""

    model_config = SettingsConfigDict(env_prefix="FIREFOX_CRAWLER_", env_file=".env", extra="ignore")

    max_concurrency: int = 10
    request_handler_timeout_secs: int = 60
    headless: bool = Field(default=True, description="Run browser in headless mode")


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    http: HttpCrawlerConfig = Field(default_factory=HttpCrawlerConfig)
    beautifulsoup: BeautifulSoupCrawlerConfig = Field(default_factory=BeautifulSoupCrawlerConfig)
    firefox: FirefoxCrawlerConfig = Field(default_factory=FirefoxCrawlerConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )


# Global config instance (can be overridden)
config = AppConfig()
