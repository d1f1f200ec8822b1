"""Core exception hierarchy for Quizlet Downloader.

All project exceptions inherit from QuizletDownloaderError, enabling both
specific and broad exception handling.

Exception Hierarchy:
    QuizletDownloaderError (base)
    ├── ExtractionError - Page could not be turned into a payload
    │   ├── CountMismatchError
    │   └── EmptySetError
    ├── ChannelError - Page agent could not be reached
    │   ├── PageNotReadyError
    │   ├── ChannelBusyError
    │   └── NotAQuizletPageError
    ├── ExportError - Output generation issues
    │   ├── UnsupportedFormatError
    │   └── ImageFetchError
    └── ConfigurationError - Config and options issues
        ├── InvalidOptionError
        └── InvalidSelectorsError
"""

from typing import Any, Dict, Optional


class QuizletDownloaderError(Exception):
    """Base exception for all Quizlet Downloader errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code (e.g., "COUNT_MISMATCH")
        details: Optional dict with additional context
    """

    error_code: str = "QDL_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if error_code:
            self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dict for machine-readable output."""
        return {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


# Extraction Errors
class ExtractionError(QuizletDownloaderError):
    """Base class for errors raised while reading the set page."""

    error_code = "EXTRACTION_ERROR"


class CountMismatchError(ExtractionError):
    """Rows found on the page differ from the displayed term count."""

    error_code = "COUNT_MISMATCH"

    def __init__(self, found: int, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(
            f"Mismatch error: Found {found} terms but expected {expected}. Please scroll down/expand all.",
            details={"found": found, "expected": expected},
        )


class EmptySetError(ExtractionError):
    """No term rows were found on the page."""

    error_code = "EMPTY_SET"

    def __init__(self):
        super().__init__("No terms found on the page.", details={"count": 0})


# Channel Errors
class ChannelError(QuizletDownloaderError):
    """Base class for page agent communication errors."""

    error_code = "CHANNEL_ERROR"


class PageNotReadyError(ChannelError):
    """The page agent is not reachable (page not loaded, blocked, navigated away)."""

    error_code = "PAGE_NOT_READY"

    def __init__(self, reason: Optional[str] = None):
        super().__init__(
            "Page not ready or blocked.",
            details={"reason": reason} if reason else None,
        )
        self.reason = reason


class ChannelBusyError(ChannelError):
    """A request is already in flight on this channel."""

    error_code = "CHANNEL_BUSY"

    def __init__(self):
        super().__init__("A scrape request is already in progress.")


class NotAQuizletPageError(ChannelError):
    """Target is not a Quizlet set page."""

    error_code = "NOT_A_QUIZLET_PAGE"

    def __init__(self, target: str):
        super().__init__(
            "Please open a Quizlet set page.",
            details={"target": target},
        )


# Export Errors
class ExportError(QuizletDownloaderError):
    """Base class for output generation errors."""

    error_code = "EXPORT_ERROR"


class UnsupportedFormatError(ExportError):
    """Requested output format is not known."""

    error_code = "UNSUPPORTED_FORMAT"

    def __init__(self, fmt: str, supported: Optional[list] = None):
        msg = f"Unsupported output format: {fmt}"
        if supported:
            msg += f" (choose from {', '.join(supported)})"
        super().__init__(msg, details={"format": fmt, "supported": supported or []})


class ImageFetchError(ExportError):
    """Image bytes could not be downloaded."""

    error_code = "IMAGE_FETCH_FAILED"

    def __init__(self, url: str, reason: str):
        super().__init__(
            f"Failed to fetch image {url}: {reason}",
            details={"url": url, "reason": reason},
        )


# Configuration Errors
class ConfigurationError(QuizletDownloaderError):
    """Base class for configuration errors."""

    error_code = "CONFIG_ERROR"


class InvalidOptionError(ConfigurationError):
    """A user option has an invalid name or value."""

    error_code = "INVALID_OPTION"

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid value for option '{key}': {value!r} ({reason})",
            details={"key": key, "value": value, "reason": reason},
        )


class InvalidSelectorsError(ConfigurationError):
    """A selector table file is missing, unreadable or incomplete."""

    error_code = "INVALID_SELECTORS"

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Cannot load selector table {path}: {reason}",
            details={"path": path, "reason": reason},
        )
