"""Word document output built with python-docx."""

import logging
from io import BytesIO
from typing import Callable, Optional

import requests
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Emu, Inches

from ..core.errors import ImageFetchError
from ..scrape.models import DefinitionPart, ExtractionResult
from .csv_export import column_headers
from .style import (
    INFO_SIZE,
    BODY_SIZE,
    add_hyperlink,
    add_multiline_run,
    add_text_run,
    format_paragraph,
    wrap_run_in_hyperlink,
)

logger = logging.getLogger(__name__)

TABLE_STYLE = "Table Grid"
COLUMN_SHARES = (0.3, 0.7)


def fetch_image(url: str, timeout: int = 15) -> bytes:
    """
    Download image bytes.

    Raises:
        ImageFetchError: On any network or HTTP error
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise ImageFetchError(url, str(e)) from e
    return response.content


class DocxBuilder:
    """Lays out the info preamble and the two-column card table."""

    def __init__(
        self,
        include_images: bool = True,
        image_width: float = 2.0,
        image_timeout: int = 15,
        image_fetcher: Optional[Callable[[str], bytes]] = None,
    ):
        """
        Initialize document builder.

        Args:
            include_images: Embed definition images
            image_width: Display width of embedded images in inches
            image_timeout: Per-image download timeout in seconds
            image_fetcher: Override for downloading image bytes
        """
        self.include_images = include_images
        self.image_width = image_width
        self.image_fetcher = image_fetcher or (lambda url: fetch_image(url, timeout=image_timeout))

    def build(self, result: ExtractionResult) -> bytes:
        doc = Document()
        self._add_info_section(doc, result)
        self._add_card_table(doc, result)

        buffer = BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    def _add_info_section(self, doc, result: ExtractionResult):
        info = result.info
        self._info_line(doc, "Quiz Set Title: ", info.quizSetTitle)
        self._link_line(doc, "Quiz Set URL: ", info.quizSetURL)
        self._info_line(doc, "Creator Name: ", info.creatorName)
        self._link_line(doc, "Creator URL: ", info.creatorURL)
        self._info_line(doc, "Date Scraped: ", info.dateScraped)
        self._info_line(doc, "Number of Quizzes: ", info.numberOfQuizzes)
        format_paragraph(doc.add_paragraph(), spacing_after=10)

    def _info_line(self, doc, label, value):
        para = doc.add_paragraph()
        add_text_run(para, label, size=INFO_SIZE, bold=True)
        add_text_run(para, str(value), size=INFO_SIZE)
        format_paragraph(para, spacing_after=5)

    def _link_line(self, doc, label, url):
        para = doc.add_paragraph()
        add_text_run(para, label, size=INFO_SIZE, bold=True)
        if url:
            add_hyperlink(para, url, url, size=INFO_SIZE)
        format_paragraph(para, spacing_after=5)

    def _add_card_table(self, doc, result: ExtractionResult):
        swapped = result.info.swapped
        section = doc.sections[0]
        usable = section.page_width - section.left_margin - section.right_margin
        widths = [Emu(int(usable * share)) for share in COLUMN_SHARES]

        table = doc.add_table(rows=1, cols=2)
        table.style = TABLE_STYLE
        table.autofit = False

        for cell, label, width in zip(table.rows[0].cells, column_headers(swapped), widths):
            cell.width = width
            para = cell.paragraphs[0]
            add_text_run(para, label, size=INFO_SIZE, bold=True)
            format_paragraph(para, alignment=WD_ALIGN_PARAGRAPH.CENTER)

        for key, record in result.sorted_items():
            cells = table.add_row().cells
            for cell, part, width in zip(cells, record.ordered_parts(swapped), widths):
                cell.width = width
                self._fill_cell(cell, part, key)

    def _fill_cell(self, cell, part, key):
        text = part.text if isinstance(part, DefinitionPart) else part
        add_multiline_run(cell.paragraphs[0], text, size=BODY_SIZE)

        if isinstance(part, DefinitionPart) and self.include_images and part.has_image:
            self._add_image(cell, part.image, key)

    def _add_image(self, cell, url, key):
        """Embed the image in a bordered one-cell table linking back to ``url``."""
        try:
            data = self.image_fetcher(url)
        except Exception as e:
            logger.warning(f"Skipping image for term {key}: {e}")
            return

        frame = cell.add_table(rows=1, cols=1)
        frame.style = TABLE_STYLE
        para = frame.cell(0, 0).paragraphs[0]
        run = para.add_run()
        try:
            run.add_picture(BytesIO(data), width=Inches(self.image_width))
        except Exception as e:
            logger.warning(f"Skipping unreadable image for term {key}: {e}")
            cell._tc.remove(frame._tbl)
            cell._tc.remove(cell.paragraphs[-1]._p)
            return

        wrap_run_in_hyperlink(para, run, url)
