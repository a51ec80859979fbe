"""
Tests for the resource blocking hook.
"""

import logging
from types import SimpleNamespace

import pytest

from crawl_starter.blocking import block_resources, blocking_pre_navigation_hook, should_block


class FakeRoute:
    """Minimal stand-in for a Playwright route."""

    def __init__(self, url: str, resource_type: str):
        self.request = SimpleNamespace(url=url, resource_type=resource_type)
        self.action = None

    async def abort(self):
        self.action = "abort"

    async def continue_(self):
        self.action = "continue"


class FakePage:
    """Records the route handler installed by the hook."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.pattern = None
        self.handler = None

    async def route(self, pattern, handler):
        if self.fail:
            raise RuntimeError("page closed")
        self.pattern = pattern
        self.handler = handler


class TestShouldBlock:
    """Tests for should_block."""

    def test_blocks_resource_types(self):
        """Test default heavy resource types are blocked."""
        for resource_type in ("image", "stylesheet", "font", "media"):
            assert should_block(resource_type, "https://example.com/asset") is True

    def test_allows_documents_and_scripts(self):
        """Test other resource types pass through."""
        for resource_type in ("document", "script", "xhr", "fetch"):
            assert should_block(resource_type, "https://example.com/") is False

    def test_blocks_ad_domains(self):
        """Test ad domains are blocked whatever the resource type."""
        urls = [
            "https://pagead2.googlesyndication.com/pagead/show_ads.js",
            "https://adservice.google.com/adsid/integrator.js",
            "https://stats.g.doubleclick.net/r/collect",
        ]
        for url in urls:
            assert should_block("script", url) is True

    def test_custom_lists(self):
        """Test explicit lists replace the configured defaults."""
        assert should_block("image", "https://example.com/a.png", [], []) is False
        assert should_block("script", "https://tracker.test/t.js", [], ["tracker.test"]) is True
        assert should_block("xhr", "https://example.com/api", ["xhr"], []) is True

    def test_environment_config(self, monkeypatch):
        """Test the blocked lists can be set from the environment."""
        monkeypatch.setenv("BLOCKING_BLOCKED_RESOURCE_TYPES", '["script"]')
        monkeypatch.setenv("BLOCKING_BLOCKED_DOMAINS", '["evil.test"]')

        assert should_block("script", "https://example.com/") is True
        assert should_block("image", "https://example.com/a.png") is False
        assert should_block("document", "https://evil.test/") is True


@pytest.mark.asyncio
async def test_block_resources_installs_route():
    """Test the hook routes every request through the filter."""
    page = FakePage()
    await block_resources(page, logging.getLogger("test"))

    assert page.pattern == "**/*"

    image = FakeRoute("https://example.com/logo.png", "image")
    ad = FakeRoute("https://ad.doubleclick.net/x", "script")
    document = FakeRoute("https://example.com/", "document")

    for route in (image, ad, document):
        await page.handler(route)

    assert image.action == "abort"
    assert ad.action == "abort"
    assert document.action == "continue"


@pytest.mark.asyncio
async def test_block_resources_logs_errors(caplog):
    """Test a failing page.route is logged, not raised."""
    page = FakePage(fail=True)

    with caplog.at_level(logging.ERROR):
        await block_resources(page, logging.getLogger("test"))

    assert "page closed" in caplog.text


@pytest.mark.asyncio
async def test_pre_navigation_hook(caplog):
    """Test the pre-navigation hook blocks resources and logs navigation."""
    page = FakePage()
    context = SimpleNamespace(
        page=page,
        log=logging.getLogger("test"),
        request=SimpleNamespace(url="https://example.com/"),
    )

    with caplog.at_level(logging.INFO):
        await blocking_pre_navigation_hook(context)

    assert page.handler is not None
    assert "Navigating to https://example.com/" in caplog.text
