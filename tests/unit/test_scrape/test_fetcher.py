"""Tests for opening set pages."""

import requests

from conftest import make_row, make_set_html
from quizlet_downloader.scrape import fetcher as fetcher_module
from quizlet_downloader.scrape.config import ScrapeConfig
from quizlet_downloader.scrape.dom import SoupDocument
from quizlet_downloader.scrape.fetcher import PageFetcher, canonical_url


class FakeResponse:
    def __init__(self, text, url, status=200):
        self.text = text
        self.url = url
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")


class TestFileStrategy:
    def test_auto_reads_existing_file(self, tmp_path):
        page = tmp_path / "set.html"
        page.write_text(
            make_set_html([make_row("a", "b")], canonical="https://quizlet.com/42/set/"),
            encoding="utf-8",
        )

        result = PageFetcher(ScrapeConfig()).open(str(page))

        assert result.success
        assert result.strategy == "file"
        assert isinstance(result.document, SoupDocument)
        assert result.document.url == "https://quizlet.com/42/set/"

    def test_file_without_canonical_uses_file_uri(self, tmp_path):
        page = tmp_path / "set.html"
        page.write_text("<html><body></body></html>", encoding="utf-8")

        result = PageFetcher(ScrapeConfig(strategy="file")).open(str(page))
        assert result.document.url.startswith("file://")

    def test_missing_file_fails(self, tmp_path):
        result = PageFetcher(ScrapeConfig(strategy="file")).open(str(tmp_path / "nope.html"))
        assert not result.success
        assert "Cannot read" in result.error

    def test_canonical_falls_back_to_og_url(self):
        html = '<head><meta property="og:url" content="https://quizlet.com/7/x/"></head>'
        assert canonical_url(html) == "https://quizlet.com/7/x/"
        assert canonical_url("<p>no head</p>") == ""


class TestHttpStrategy:
    def test_http_success(self, monkeypatch):
        calls = []

        def fake_get(url, **kwargs):
            calls.append((url, kwargs))
            return FakeResponse(make_set_html([make_row("a", "b")]), url)

        monkeypatch.setattr(fetcher_module.requests, "get", fake_get)
        result = PageFetcher(ScrapeConfig(timeout=7)).open("https://quizlet.com/1/set/")

        assert result.success
        assert result.strategy == "http"
        assert result.document.url == "https://quizlet.com/1/set/"
        assert len(calls) == 1
        assert calls[0][1]["timeout"] == 7

    def test_http_error_fails_without_retry(self, monkeypatch):
        calls = []

        def fake_get(url, **kwargs):
            calls.append(url)
            return FakeResponse("", url, status=403)

        monkeypatch.setattr(fetcher_module.requests, "get", fake_get)
        result = PageFetcher(ScrapeConfig(strategy="http")).open("https://quizlet.com/1/set/")

        assert not result.success
        assert "403" in result.error
        assert len(calls) == 1

    def test_unknown_strategy(self):
        result = PageFetcher(ScrapeConfig(strategy="carrier-pigeon")).open("https://quizlet.com/1/")
        assert not result.success
        assert "Unknown strategy" in result.error


class TestScrapeConfig:
    def test_defaults(self):
        config = ScrapeConfig()
        assert config.strategy == "auto"
        assert config.expand_threshold == 100
        assert config.expand_delay == 2.0
        assert "quizlet-downloader" in config.user_agent

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("QDL_STRATEGY", "browser")
        monkeypatch.setenv("QDL_EXPAND_DELAY", "0.5")
        monkeypatch.setenv("QDL_HEADLESS", "false")

        config = ScrapeConfig.from_env()
        assert config.strategy == "browser"
        assert config.expand_delay == 0.5
        assert config.headless is False

    def test_with_strategy_copies(self):
        config = ScrapeConfig(timeout=5)
        http = config.with_strategy("http")
        assert http.strategy == "http"
        assert http.timeout == 5
        assert config.strategy == "auto"
