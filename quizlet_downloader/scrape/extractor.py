"""Term/definition extraction from a Quizlet set page."""

import logging
import re
from datetime import datetime
from typing import Optional

from ..core.errors import CountMismatchError, EmptySetError
from ..formatting.normalize import normalize_text
from .dom import DomDocument, DomNode
from .models import (
    DefinitionPart,
    ExtractionResult,
    QuizRecord,
    SetInfo,
    local_timestamp,
    padded_index,
)
from .selectors import DEFAULT_SELECTORS, SelectorTable

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Set"
DEFAULT_CREATOR = "Unknown"

# Quizlet serves card images from its o.quizlet.com CDN
IMAGE_URL_PATTERN = re.compile(r"https://o\..+")

_FIRST_INTEGER = re.compile(r"\d+")


def parse_first_integer(text: str) -> Optional[int]:
    """Return the first run of digits in ``text`` as an int, or None."""
    match = _FIRST_INTEGER.search(text or "")
    return int(match.group(0)) if match else None


def normalize_image_url(raw_src: str) -> str:
    """Keep the CDN part of an image URL; fall back to the raw value."""
    match = IMAGE_URL_PATTERN.search(raw_src)
    return match.group(0) if match else raw_src


class SetExtractor:
    """Builds an ExtractionResult from a set page.

    Every element lookup is nil-safe: missing elements fall back to defaults.
    The only hard checks are the count validation and the empty-set check.
    """

    def __init__(self, selectors: Optional[SelectorTable] = None):
        self.selectors = selectors or DEFAULT_SELECTORS

    def expected_count(self, document: DomDocument) -> Optional[int]:
        """Term count displayed on the page, if the indicator is present."""
        count_el = document.select_one(self.selectors.set_count)
        if count_el is None:
            return None
        return parse_first_integer(count_el.text)

    def extract(self, document: DomDocument, swap: bool = False, now: Optional[datetime] = None) -> ExtractionResult:
        """
        Extract the full set from the page.

        Args:
            document: Page to read
            swap: Presentation order flag recorded in the metadata
            now: Clock override for the scrape timestamp

        Returns:
            ExtractionResult with zero-padded keys "1".."N"

        Raises:
            CountMismatchError: Rows found differ from the displayed count
            EmptySetError: No rows found
        """
        sel = self.selectors

        title = self._text_or(document.select_one(sel.set_title), DEFAULT_TITLE)
        creator_name = self._text_or(document.select_one(sel.creator_name), DEFAULT_CREATOR)
        creator_el = document.select_one(sel.creator_url)
        creator_url = creator_el.attr("href") if creator_el is not None else ""

        rows = document.select(sel.term_rows)
        count = len(rows)

        expected = self.expected_count(document)
        if expected is not None and count != expected:
            logger.warning(f"Found {count} term rows but page reports {expected}")
            raise CountMismatchError(found=count, expected=expected)

        if count == 0:
            raise EmptySetError()

        quiz_data = {}
        for position, row in enumerate(rows, start=1):
            quiz_data[padded_index(position, count)] = self._extract_row(row)

        info = SetInfo(
            quizSetTitle=title,
            quizSetURL=document.url,
            creatorName=creator_name,
            creatorURL=creator_url,
            dateScraped=local_timestamp(now),
            numberOfQuizzes=count,
            swapped=bool(swap),
        )
        logger.info(f"Extracted {count} terms from '{title}'")
        return ExtractionResult(info=info, quizData=quiz_data)

    def _extract_row(self, row: DomNode) -> QuizRecord:
        sel = self.selectors

        term_el = row.select_one(sel.term_text)
        term = normalize_text(term_el.text) if term_el is not None else ""

        definition = DefinitionPart()
        container = row.select_one(sel.definition)
        if container is not None:
            text_el = container.select_one(sel.definition_text)
            if text_el is not None:
                definition.text = normalize_text(text_el.text)

            image_el = container.select_one(sel.definition_image)
            if image_el is not None:
                raw_src = image_el.attr("src")
                if raw_src:
                    definition.image = normalize_image_url(raw_src)

        return QuizRecord(termPart=term, definitionPart=definition)

    @staticmethod
    def _text_or(node: Optional[DomNode], default: str) -> str:
        if node is None:
            return default
        return normalize_text(node.text)
