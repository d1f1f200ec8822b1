"""Core pieces shared by the CLI: errors, filenames and persisted options."""

from .errors import QuizletDownloaderError
from .filename import DEFAULT_PATTERN, generate_filename
from .options import OptionsStore, UserOptions

__all__ = [
    "QuizletDownloaderError",
    "DEFAULT_PATTERN",
    "generate_filename",
    "OptionsStore",
    "UserOptions",
]
