"""Quizlet Downloader package exports.

Keep package import lightweight by lazily importing heavy modules.
"""

from typing import TYPE_CHECKING, Any

__version__ = "1.2.0"
__author__ = "quizlet-downloader contributors"
__homepage__ = "https://github.com/quizlet-downloader/quizlet-downloader"

if TYPE_CHECKING:
    from .config import AppConfig

__all__ = ["AppConfig", "ExportConverter", "SetExtractor", "open_channel"]


def __getattr__(name: str) -> Any:
    """Lazily resolve top-level exports."""
    if name == "AppConfig":
        from .config import AppConfig

        return AppConfig

    if name == "ExportConverter":
        from .formatting import ExportConverter

        return ExportConverter

    if name in {"SetExtractor", "open_channel"}:
        from . import scrape

        return getattr(scrape, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
