"""Output formatting: JSON, CSV and Word documents."""

from .normalize import clean_string, normalize_text
from .converters import ExportConverter, ExportedFile, MIME_TYPES, SUPPORTED_FORMATS

__all__ = ["clean_string", "normalize_text", "ExportConverter", "ExportedFile", "MIME_TYPES", "SUPPORTED_FORMATS"]
