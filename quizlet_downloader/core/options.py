"""Persisted user options for exports.

Options live in a flat JSON object. Every change writes the whole record
back; there is no schema version and absent keys keep their defaults.
"""

import json
import logging
from pathlib import Path
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .errors import InvalidOptionError
from .filename import DEFAULT_PATTERN

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS_PATH = Path.home() / ".quizlet_downloader" / "options.json"

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


class UserOptions(BaseModel):
    """User-facing export settings."""

    filename_pattern: str = Field(default=DEFAULT_PATTERN, description="Filename pattern with date tokens")
    output_format: Literal["json", "csv", "docx"] = Field(default="json", description="Output file format")
    swap: bool = Field(default=False, description="Put the definition column first")
    include_images: bool = Field(default=True, description="Carry definition images into the output")
    custom_format_enabled: bool = Field(default=False, description="Use filename_pattern instead of the default")

    @property
    def effective_pattern(self) -> str:
        """Pattern actually used for filenames."""
        if self.custom_format_enabled and self.filename_pattern:
            return self.filename_pattern
        return DEFAULT_PATTERN


def parse_option_value(key: str, raw: str) -> Any:
    """Convert a CLI string to the option's type."""
    if key not in UserOptions.model_fields:
        raise InvalidOptionError(key, raw, f"unknown option, choose from {', '.join(UserOptions.model_fields)}")

    annotation = UserOptions.model_fields[key].annotation
    if annotation is bool:
        lowered = raw.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise InvalidOptionError(key, raw, "expected true/false")
    if key == "output_format":
        return raw.strip().lower()
    return raw


def update_option(options: UserOptions, key: str, raw: str) -> UserOptions:
    """Return a copy of ``options`` with ``key`` set from a CLI string."""
    value = parse_option_value(key, raw)
    data = options.model_dump()
    data[key] = value
    try:
        return UserOptions.model_validate(data)
    except ValidationError as e:
        raise InvalidOptionError(key, raw, e.errors()[0]["msg"]) from e


class OptionsStore:
    """Load/save UserOptions as a JSON file."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else DEFAULT_OPTIONS_PATH

    def load(self, current: Optional[UserOptions] = None) -> UserOptions:
        """
        Read stored options over ``current`` (or the defaults).

        Unreadable files and invalid values are logged and ignored, leaving
        the in-memory value in place.
        """
        options = current or UserOptions()
        if not self.path.exists():
            return options

        try:
            stored = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable options file {self.path}: {e}")
            return options

        if not isinstance(stored, dict):
            logger.warning(f"Ignoring options file {self.path}: expected a JSON object")
            return options

        data = options.model_dump()
        for key, value in stored.items():
            if key not in UserOptions.model_fields:
                logger.debug(f"Ignoring unknown option '{key}'")
                continue
            candidate = dict(data, **{key: value})
            try:
                UserOptions.model_validate(candidate)
            except ValidationError:
                logger.warning(f"Ignoring invalid stored value for '{key}': {value!r}")
                continue
            data = candidate

        return UserOptions.model_validate(data)

    def save(self, options: UserOptions) -> None:
        """Write the full options record."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(options.model_dump(), indent=2), encoding="utf-8")
        logger.debug(f"Saved options to {self.path}")
