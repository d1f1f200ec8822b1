"""Read-only DOM query service used by the page agent.

The extractor only ever talks to the ``DomDocument``/``DomNode`` protocols, so
it runs the same against static HTML (BeautifulSoup) and a live browser page
(Selenium).
"""

import logging
import re
from typing import List, Optional, Protocol
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

logger = logging.getLogger(__name__)

# Elements whose boundaries render as line breaks in innerText
BLOCK_TAGS = {
    "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt",
    "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hr", "li", "main", "nav", "ol", "p", "pre", "section",
    "table", "tr", "ul",
}
SKIPPED_TAGS = {"script", "style", "noscript", "template"}
URL_ATTRIBUTES = {"href", "src"}

_SOURCE_WS = re.compile(r"\s+")


class DomNode(Protocol):
    """A single element of the page."""

    @property
    def text(self) -> str: ...

    def attr(self, name: str) -> str: ...

    def click(self) -> None: ...

    def select_one(self, selector: str) -> Optional["DomNode"]: ...

    def select(self, selector: str) -> List["DomNode"]: ...


class DomDocument(Protocol):
    """The page as a whole."""

    @property
    def url(self) -> str: ...

    def select_one(self, selector: str) -> Optional[DomNode]: ...

    def select(self, selector: str) -> List[DomNode]: ...


def _collect_text(tag: Tag, parts: list):
    for child in tag.children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, NavigableString):
            parts.append(_SOURCE_WS.sub(" ", str(child)))
        elif isinstance(child, Tag):
            if child.name in SKIPPED_TAGS:
                continue
            if child.name == "br":
                parts.append("\n")
            elif child.name in BLOCK_TAGS:
                parts.append("\n")
                _collect_text(child, parts)
                parts.append("\n")
            else:
                _collect_text(child, parts)


def inner_text(tag: Tag) -> str:
    """
    Approximate the browser's innerText for a parsed element.

    Source whitespace collapses to single spaces, ``<br>`` and block element
    boundaries become newlines.
    """
    parts = []
    _collect_text(tag, parts)
    return "".join(parts).strip()


class SoupNode:
    """DomNode backed by a BeautifulSoup tag."""

    def __init__(self, tag: Tag, base_url: str = ""):
        self._tag = tag
        self._base_url = base_url

    @property
    def text(self) -> str:
        return inner_text(self._tag)

    def attr(self, name: str) -> str:
        value = self._tag.get(name)
        if value is None:
            return ""
        if isinstance(value, list):
            value = " ".join(value)
        if name in URL_ATTRIBUTES and value:
            # Browsers expose href/src as absolute URLs
            return urljoin(self._base_url, value)
        return value

    def click(self) -> None:
        logger.debug("Ignoring click on static HTML element <%s>", self._tag.name)

    def select_one(self, selector: str) -> Optional["SoupNode"]:
        found = self._tag.select_one(selector)
        return SoupNode(found, self._base_url) if found is not None else None

    def select(self, selector: str) -> List["SoupNode"]:
        return [SoupNode(tag, self._base_url) for tag in self._tag.select(selector)]


class SoupDocument:
    """DomDocument over static HTML."""

    def __init__(self, html: str, url: str = ""):
        self._soup = BeautifulSoup(html, "html.parser")
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    def select_one(self, selector: str) -> Optional[SoupNode]:
        found = self._soup.select_one(selector)
        return SoupNode(found, self._url) if found is not None else None

    def select(self, selector: str) -> List[SoupNode]:
        return [SoupNode(tag, self._url) for tag in self._soup.select(selector)]


class BrowserNode:
    """DomNode backed by a Selenium WebElement."""

    def __init__(self, element):
        self._element = element

    @property
    def text(self) -> str:
        return self._element.text or ""

    def attr(self, name: str) -> str:
        return self._element.get_attribute(name) or ""

    def click(self) -> None:
        self._element.click()

    def select_one(self, selector: str) -> Optional["BrowserNode"]:
        found = self.select(selector)
        return found[0] if found else None

    def select(self, selector: str) -> List["BrowserNode"]:
        from selenium.webdriver.common.by import By

        return [BrowserNode(el) for el in self._element.find_elements(By.CSS_SELECTOR, selector)]


class BrowserDocument:
    """DomDocument over a live Selenium WebDriver session."""

    def __init__(self, driver):
        self._driver = driver

    @property
    def url(self) -> str:
        return self._driver.current_url

    @property
    def driver(self):
        return self._driver

    def select_one(self, selector: str) -> Optional[BrowserNode]:
        found = self.select(selector)
        return found[0] if found else None

    def select(self, selector: str) -> List[BrowserNode]:
        from selenium.webdriver.common.by import By

        return [BrowserNode(el) for el in self._driver.find_elements(By.CSS_SELECTOR, selector)]

    def close(self) -> None:
        self._driver.quit()
