"""
Tests for the CLI entry point.
"""

import argparse
import sys
from types import SimpleNamespace

import pytest

import main
from crawl_starter.crawlers import CrawlerBundle


def make_args(**overrides) -> argparse.Namespace:
    values = {
        "crawler": "beautifulsoup",
        "list": False,
        "url": None,
        "file": None,
        "label": None,
        "output": None,
        "log_level": "INFO",
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class FakeCrawler:
    """Crawler stand-in recording run and export calls."""

    def __init__(self):
        self.runs = 0
        self.exports = []

    async def run(self):
        self.runs += 1
        return SimpleNamespace(to_dict=lambda: {"requests_finished": 3})

    async def export_data(self, path, dataset_name=None):
        self.exports.append((path, dataset_name))


class RecordingFactory:
    """Template factory stand-in remembering its arguments."""

    def __init__(self):
        self.calls = []
        self.crawler = FakeCrawler()

    async def __call__(self, **kwargs):
        self.calls.append(kwargs)
        return CrawlerBundle(
            name="fake",
            crawler=self.crawler,
            queue=None,
            dataset=SimpleNamespace(name="pages"),
        )


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Leave the root logger alone during CLI tests."""
    monkeypatch.setattr(main, "setup_logging", lambda level="INFO": None)


class TestLoadUrlsFromFile:
    """Tests for load_urls_from_file."""

    def test_skips_comments_and_blank_lines(self, tmp_path):
        """Test comments and blank lines are ignored."""
        path = tmp_path / "urls.txt"
        path.write_text("# seeds\nhttps://example.com\n\n  https://example.org  \n#https://skipped.test\n")

        assert main.load_urls_from_file(str(path)) == ["https://example.com", "https://example.org"]

    def test_missing_file_exits(self, tmp_path):
        """Test a missing URL file exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main.load_urls_from_file(str(tmp_path / "missing.txt"))

        assert exc_info.value.code == 1


class TestMainAsync:
    """Tests for main_async."""

    @pytest.mark.asyncio
    async def test_list_templates(self, capsys):
        """Test --list prints every template name."""
        await main.main_async(make_args(list=True))

        output = capsys.readouterr().out
        for name in ("http", "beautifulsoup", "firefox"):
            assert name in output

    @pytest.mark.asyncio
    async def test_unknown_template_exits(self):
        """Test an unknown template name exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            await main.main_async(make_args(crawler="chrome"))

        assert exc_info.value.code == 1

    @pytest.mark.asyncio
    async def test_template_seeds_by_default(self, monkeypatch):
        """Test no URLs means the template's own seeds are used."""
        factory = RecordingFactory()
        monkeypatch.setattr(main, "get_template", lambda name: factory)

        await main.main_async(make_args())

        assert factory.calls == [{"urls": None, "label": None}]
        assert factory.crawler.runs == 1
        assert factory.crawler.exports == []

    @pytest.mark.asyncio
    async def test_urls_label_and_export(self, tmp_path, monkeypatch):
        """Test URLs, label and output are passed through."""
        url_file = tmp_path / "urls.txt"
        url_file.write_text("# more\nhttps://example.net\n")
        factory = RecordingFactory()
        monkeypatch.setattr(main, "get_template", lambda name: factory)

        await main.main_async(make_args(
            crawler="firefox",
            url=["https://example.com"],
            file=str(url_file),
            label="DETAIL",
            output="out.json",
        ))

        assert factory.calls == [{
            "urls": ["https://example.com", "https://example.net"],
            "label": "DETAIL",
        }]
        assert factory.crawler.exports == [("out.json", "pages")]


class TestMain:
    """Tests for the synchronous entry point."""

    def test_interrupt_exits_cleanly(self, monkeypatch, capsys):
        """Test Ctrl-C during the crawl is reported, not raised."""
        def interrupted(coro):
            coro.close()
            raise KeyboardInterrupt

        monkeypatch.setattr(sys, "argv", ["main.py", "--crawler", "http"])
        monkeypatch.setattr(main.asyncio, "run", interrupted)

        with pytest.raises(SystemExit) as exc_info:
            main.main()

        assert exc_info.value.code == 130
        assert "Interrupted by user" in capsys.readouterr().out
