"""CSV output: a Key,Value info block, a blank row, then the cards."""

import csv
import io

from ..scrape.models import DefinitionPart, ExtractionResult

BOM = "\ufeff"

TERM_HEADER = "Term"
DEFINITION_HEADER = "Definition"


def column_headers(swapped: bool) -> tuple:
    if swapped:
        return DEFINITION_HEADER, TERM_HEADER
    return TERM_HEADER, DEFINITION_HEADER


def cell_text(part, include_images: bool = True) -> str:
    """Flatten a card part to one cell; images become a ``(url)`` suffix."""
    if not isinstance(part, DefinitionPart):
        return part or ""
    if include_images and part.has_image:
        return f"{part.text} ({part.image})" if part.text else f"({part.image})"
    return part.text


def generate_csv(result: ExtractionResult, include_images: bool = True) -> str:
    """
    Render the set as CSV text (no BOM).

    Cells containing a comma, quote or newline are quoted with inner quotes
    doubled; rows are separated by ``\\n``.
    """
    info = result.info
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)

    # section info
    writer.writerow(["Key", "Value"])
    writer.writerow(["Quiz Set Title", info.quizSetTitle])
    writer.writerow(["Quiz Set URL", info.quizSetURL])
    writer.writerow(["Creator Name", info.creatorName])
    writer.writerow(["Creator URL", info.creatorURL])
    writer.writerow(["Date Scraped", info.dateScraped])
    writer.writerow(["Number of Quizzes", info.numberOfQuizzes])
    writer.writerow(["", ""])

    # section data
    writer.writerow(column_headers(info.swapped))
    for _, record in result.sorted_items():
        left, right = record.ordered_parts(info.swapped)
        writer.writerow([cell_text(left, include_images), cell_text(right, include_images)])

    return buffer.getvalue().rstrip("\n")


def encode_csv(text: str) -> bytes:
    """UTF-8 bytes with a byte-order mark so spreadsheet apps detect the encoding."""
    if not text.startswith(BOM):
        text = BOM + text
    return text.encode("utf-8")
