"""Opens a Quizlet set page as a queryable document."""

import logging
from pathlib import Path
from typing import Optional

import requests
from bs4 import BeautifulSoup

from .config import ScrapeConfig
from .dom import BrowserDocument, DomDocument, SoupDocument

logger = logging.getLogger(__name__)


class FetchResult:
    """Result of opening a page."""

    def __init__(
        self,
        target: str,
        document: Optional[DomDocument] = None,
        strategy: Optional[str] = None,
        success: bool = False,
        error: Optional[str] = None,
    ):
        self.target = target
        self.document = document
        self.strategy = strategy  # Which strategy was used
        self.success = success
        self.error = error

    def close(self):
        """Release the browser session, if any."""
        if isinstance(self.document, BrowserDocument):
            self.document.close()


def canonical_url(html: str) -> str:
    """Page URL recorded inside saved HTML (canonical link or og:url)."""
    soup = BeautifulSoup(html, "html.parser")

    link = soup.find("link", rel="canonical")
    if link and link.get("href"):
        return link["href"]

    og_url = soup.find("meta", property="og:url")
    if og_url and og_url.get("content"):
        return og_url["content"]

    return ""


class PageFetcher:
    """Opens a set page from a saved file, over HTTP, or in a real browser."""

    def __init__(self, config: Optional[ScrapeConfig] = None):
        """
        Initialize page fetcher.

        Args:
            config: Scraping configuration (uses defaults if None)
        """
        self.config = config or ScrapeConfig.from_env()

    def open(self, target: str) -> FetchResult:
        """
        Open ``target`` with the configured strategy.

        ``auto`` reads a local file when ``target`` is an existing path and
        falls back to HTTP otherwise. The browser strategy is never chosen
        implicitly.

        Args:
            target: URL or path to a saved page

        Returns:
            FetchResult with the document on success
        """
        strategy = self.config.strategy
        if strategy == "auto":
            strategy = "file" if Path(target).is_file() else "http"

        strategies = {
            "file": self._open_file,
            "http": self._open_http,
            "browser": self._open_browser,
        }
        if strategy not in strategies:
            return FetchResult(target=target, success=False, error=f"Unknown strategy: {strategy}")

        logger.info(f"Opening {target} via {strategy}")
        result = strategies[strategy](target)
        if not result.success:
            logger.warning(f"{strategy} failed: {result.error}")
        return result

    def _open_file(self, target: str) -> FetchResult:
        """
        Read a page saved from the browser.

        Args:
            target: Path to the HTML file

        Returns:
            FetchResult
        """
        path = Path(target)
        try:
            html = path.read_text(encoding="utf-8")
        except OSError as e:
            return FetchResult(target=target, success=False, error=f"Cannot read {path}: {e}")

        url = canonical_url(html) or path.resolve().as_uri()
        return FetchResult(
            target=target,
            document=SoupDocument(html, url=url),
            strategy="file",
            success=True,
        )

    def _open_http(self, target: str) -> FetchResult:
        """
        Fetch using a single HTTP request.

        Args:
            target: URL to fetch

        Returns:
            FetchResult
        """
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
        }

        try:
            response = requests.get(
                target,
                headers=headers,
                timeout=self.config.timeout,
                allow_redirects=True,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            return FetchResult(target=target, success=False, error=f"HTTP request failed: {e}")

        return FetchResult(
            target=target,
            document=SoupDocument(response.text, url=response.url or target),
            strategy="http",
            success=True,
        )

    def _open_browser(self, target: str) -> FetchResult:
        """
        Open the page in Chrome through Selenium.

        Args:
            target: URL to open

        Returns:
            FetchResult holding a live BrowserDocument
        """
        try:
            from selenium import webdriver
            from selenium.webdriver.chrome.options import Options
            from selenium.webdriver.chrome.service import Service
            from selenium.webdriver.common.by import By
            from selenium.webdriver.support import expected_conditions as EC
            from selenium.webdriver.support.ui import WebDriverWait
            from webdriver_manager.chrome import ChromeDriverManager
        except ImportError:
            return FetchResult(
                target=target,
                success=False,
                error="Selenium not installed (pip install quizlet-downloader[browser])",
            )

        options = Options()
        if self.config.headless:
            options.add_argument("--headless")
        options.add_argument("--disable-gpu")
        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        options.add_argument(f"user-agent={self.config.user_agent}")

        driver = None
        try:
            driver = webdriver.Chrome(
                service=Service(ChromeDriverManager().install()),
                options=options,
            )
            driver.set_page_load_timeout(self.config.timeout)
            driver.get(target)

            WebDriverWait(driver, self.config.page_wait).until(
                EC.presence_of_element_located((By.TAG_NAME, "body"))
            )

            return FetchResult(
                target=target,
                document=BrowserDocument(driver),
                strategy="browser",
                success=True,
            )

        except Exception as e:
            if driver:
                driver.quit()
            return FetchResult(
                target=target,
                success=False,
                error=f"Browser failed: {e}",
            )
