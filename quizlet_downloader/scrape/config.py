"""Configuration for page access and extraction."""

import os
from typing import Optional

from quizlet_downloader import __version__

STRATEGIES = ("auto", "file", "http", "browser")


class ScrapeConfig:
    """Configuration for how the set page is opened and read."""

    def __init__(
        self,
        strategy: str = "auto",
        timeout: int = 30,
        headless: bool = True,
        page_wait: int = 10,
        expand_threshold: int = 100,
        expand_delay: float = 2.0,
        selectors_file: Optional[str] = None,
        user_agent: Optional[str] = None,
    ):
        """
        Initialize scraping configuration.

        Args:
            strategy: How to open the page: auto, file, http or browser (default: auto)
            timeout: Page load timeout in seconds (default: 30)
            headless: Run the browser without a window (default: True)
            page_wait: Seconds to wait for the page body to load in the browser (default: 10)
            expand_threshold: Terms shown before Quizlet truncates the list (default: 100)
            expand_delay: Seconds between the two auto-expand passes (default: 2.0)
            selectors_file: Optional JSON selector table overriding the built-in one
            user_agent: Custom user agent string
        """
        self.strategy = strategy
        self.timeout = timeout
        self.headless = headless
        self.page_wait = page_wait
        self.expand_threshold = expand_threshold
        self.expand_delay = expand_delay
        self.selectors_file = selectors_file
        self.user_agent = user_agent or self._default_user_agent()

    @staticmethod
    def _default_user_agent() -> str:
        """Get default user agent string."""
        return (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            f"(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36 quizlet-downloader/{__version__}"
        )

    @classmethod
    def from_env(cls) -> "ScrapeConfig":
        """Load configuration from environment variables."""
        return cls(
            strategy=os.getenv("QDL_STRATEGY", "auto") or "auto",
            timeout=int(os.getenv("QDL_TIMEOUT", "30") or "30"),
            headless=os.getenv("QDL_HEADLESS", "true").lower() == "true",
            page_wait=int(os.getenv("QDL_PAGE_WAIT", "10") or "10"),
            expand_threshold=int(os.getenv("QDL_EXPAND_THRESHOLD", "100") or "100"),
            expand_delay=float(os.getenv("QDL_EXPAND_DELAY", "2.0") or "2.0"),
            selectors_file=os.getenv("QDL_SELECTORS_FILE") or None,
            user_agent=os.getenv("QDL_USER_AGENT"),
        )

    def with_strategy(self, strategy: str) -> "ScrapeConfig":
        """Return a copy using a different page strategy."""
        return ScrapeConfig(
            strategy=strategy,
            timeout=self.timeout,
            headless=self.headless,
            page_wait=self.page_wait,
            expand_threshold=self.expand_threshold,
            expand_delay=self.expand_delay,
            selectors_file=self.selectors_file,
            user_agent=self.user_agent,
        )
