"""Best-effort expansion of truncated term lists.

Quizlet renders the first 100 terms and hides the rest behind a
"See N more terms" button. Expansion never fails the scrape: any error is
logged and dropped.
"""

import logging
import time
from typing import Callable, Optional

from .dom import DomDocument
from .extractor import parse_first_integer
from .selectors import DEFAULT_SELECTORS, SelectorTable

logger = logging.getLogger(__name__)

LOG_PREFIX = "[Quizlet Downloader]"
DEFAULT_THRESHOLD = 100
DEFAULT_DELAY = 2.0


def remaining_terms(total: int, threshold: int = DEFAULT_THRESHOLD) -> int:
    """Number of terms hidden behind the show-more button (0 if none)."""
    return max(total - threshold, 0)


class AutoExpander:
    """Clicks the show-more button whose label names the hidden term count."""

    def __init__(
        self,
        selectors: Optional[SelectorTable] = None,
        threshold: int = DEFAULT_THRESHOLD,
        delay: float = DEFAULT_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.selectors = selectors or DEFAULT_SELECTORS
        self.threshold = threshold
        self.delay = delay
        self._sleep = sleep

    def expand(self, document: DomDocument) -> bool:
        """
        Try one expansion pass.

        Returns:
            True if a show-more button was clicked
        """
        try:
            count_el = document.select_one(self.selectors.set_count)
            if count_el is None:
                return False

            total = parse_first_integer(count_el.text)
            if total is None or total <= self.threshold:
                return False

            remaining = remaining_terms(total, self.threshold)
            for button in document.select(self.selectors.show_more_button):
                if str(remaining) in button.text:
                    logger.info(f"{LOG_PREFIX} Found 'Show more' button for {remaining} terms. Clicking...")
                    button.click()
                    return True

            logger.debug(f"{LOG_PREFIX} No 'Show more' button mentions {remaining} terms")
            return False
        except Exception as e:
            logger.error(f"{LOG_PREFIX} Auto-expand failed: {e}")
            return False

    def run_on_load(self, document: DomDocument) -> bool:
        """Expand right after load and once more after the configured delay."""
        clicked = self.expand(document)
        self._sleep(self.delay)
        return self.expand(document) or clicked
