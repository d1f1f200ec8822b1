"""Export format dispatch."""

import logging
from typing import Callable, Dict, Optional

from ..core.errors import UnsupportedFormatError
from ..scrape.models import ExtractionResult
from .csv_export import encode_csv, generate_csv
from .docx_export import DocxBuilder
from .json_export import generate_json

logger = logging.getLogger(__name__)

MIME_TYPES = {
    "json": "application/json;charset=utf-8",
    "csv": "text/csv;charset=utf-8",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}
SUPPORTED_FORMATS = tuple(MIME_TYPES)


class ExportedFile:
    """Serialized output ready to be written."""

    def __init__(self, content: bytes, mime_type: str, extension: str):
        self.content = content
        self.mime_type = mime_type
        self.extension = extension


class ExportConverter:
    """Convert an extraction result into one of the supported file formats."""

    def __init__(
        self,
        include_images: bool = True,
        image_width: float = 2.0,
        image_timeout: int = 15,
        image_fetcher: Optional[Callable[[str], bytes]] = None,
    ):
        """
        Initialize export converter.

        Args:
            include_images: Carry definition images into the output
            image_width: Document image width in inches
            image_timeout: Per-image download timeout in seconds
            image_fetcher: Override for downloading image bytes (document only)
        """
        self.include_images = include_images
        self.image_width = image_width
        self.image_timeout = image_timeout
        self.image_fetcher = image_fetcher

    def convert(self, result: ExtractionResult, fmt: str) -> ExportedFile:
        """
        Serialize ``result`` as ``fmt``.

        Raises:
            UnsupportedFormatError: ``fmt`` is not json, csv or docx
        """
        fmt = (fmt or "").lower()
        converters: Dict[str, Callable[[ExtractionResult], bytes]] = {
            "json": self.to_json,
            "csv": self.to_csv,
            "docx": self.to_docx,
        }
        if fmt not in converters:
            raise UnsupportedFormatError(fmt, list(SUPPORTED_FORMATS))

        logger.info(f"Formatting {result.info.numberOfQuizzes} terms as {fmt}")
        return ExportedFile(converters[fmt](result), MIME_TYPES[fmt], fmt)

    def to_json(self, result: ExtractionResult) -> bytes:
        return generate_json(result, include_images=self.include_images).encode("utf-8")

    def to_csv(self, result: ExtractionResult) -> bytes:
        return encode_csv(generate_csv(result, include_images=self.include_images))

    def to_docx(self, result: ExtractionResult) -> bytes:
        builder = DocxBuilder(
            include_images=self.include_images,
            image_width=self.image_width,
            image_timeout=self.image_timeout,
            image_fetcher=self.image_fetcher,
        )
        return builder.build(result)
