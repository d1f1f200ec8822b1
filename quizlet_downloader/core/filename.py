"""Output filename generation from a user pattern.

Patterns use moment.js-style date tokens (``YYYY-MM-DD_HH-mm-ss``), ``[...]``
for literal text, and ``{name}`` placeholders filled from the set metadata.
"""

import re
from datetime import datetime
from typing import Optional

DEFAULT_PATTERN = "{quizSetTitle}_YYYY-MM-DD_HH-mm-ss_{swapState}"
DEFAULT_TITLE = "quizlet_set"

# TD: term column first (default), DT: definition column first
SWAP_CODES = {False: "TD", True: "DT"}

_PLACEHOLDER = re.compile(r"(\{.*?\})")
_WHITESPACE = re.compile(r"\s+")
_UNSAFE = re.compile(r"[^\w-]")

# Longest tokens first so "MMMM" wins over "MM"
_DATE_TOKEN = re.compile(
    r"\[[^\]]*\]|YYYY|YY|MMMM|MMM|MM|M|Do|DD|D|dddd|ddd|HH|H|hh|h|mm|m|ss|s|SSS|A|a"
)


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def _hour12(when: datetime) -> int:
    return when.hour % 12 or 12


_TOKEN_VALUES = {
    "YYYY": lambda d: f"{d.year:04d}",
    "YY": lambda d: f"{d.year % 100:02d}",
    "MMMM": lambda d: d.strftime("%B"),
    "MMM": lambda d: d.strftime("%b"),
    "MM": lambda d: f"{d.month:02d}",
    "M": lambda d: str(d.month),
    "Do": lambda d: _ordinal(d.day),
    "DD": lambda d: f"{d.day:02d}",
    "D": lambda d: str(d.day),
    "dddd": lambda d: d.strftime("%A"),
    "ddd": lambda d: d.strftime("%a"),
    "HH": lambda d: f"{d.hour:02d}",
    "H": lambda d: str(d.hour),
    "hh": lambda d: f"{_hour12(d):02d}",
    "h": lambda d: str(_hour12(d)),
    "mm": lambda d: f"{d.minute:02d}",
    "m": lambda d: str(d.minute),
    "ss": lambda d: f"{d.second:02d}",
    "s": lambda d: str(d.second),
    "SSS": lambda d: f"{d.microsecond // 1000:03d}",
    "A": lambda d: "AM" if d.hour < 12 else "PM",
    "a": lambda d: "am" if d.hour < 12 else "pm",
}


def format_date_pattern(pattern: str, when: Optional[datetime] = None) -> str:
    """Expand moment-style date tokens in ``pattern``; ``[...]`` is kept literally."""
    when = when or datetime.now()

    def replace(match):
        token = match.group(0)
        if token.startswith("["):
            return token[1:-1]
        return _TOKEN_VALUES[token](when)

    return _DATE_TOKEN.sub(replace, pattern)


def safe_title(title: Optional[str]) -> str:
    """Filesystem-safe title: spaces to underscores, other symbols to hyphens."""
    title = _WHITESPACE.sub(" ", title or "").strip() or DEFAULT_TITLE
    return _UNSAFE.sub("-", title.replace(" ", "_"))


def swap_code(swapped: bool) -> str:
    return SWAP_CODES[bool(swapped)]


def generate_filename(pattern: str, info, extension: str, now: Optional[datetime] = None) -> str:
    """
    Build the output filename.

    Args:
        pattern: Date pattern with ``{quizSetTitle}``/``{swapState}`` placeholders
        info: Set metadata (anything with ``quizSetTitle`` and ``swapped``)
        extension: File extension without the dot
        now: Clock override

    Returns:
        Filename ending in ``.extension`` exactly once
    """
    protected = _PLACEHOLDER.sub(r"[\1]", pattern or DEFAULT_PATTERN)
    name = format_date_pattern(protected, now)

    name = name.replace("{quizSetTitle}", safe_title(getattr(info, "quizSetTitle", "")))
    name = name.replace("{swapState}", swap_code(getattr(info, "swapped", False)))

    suffix = f".{extension}"
    if not name.lower().endswith(suffix.lower()):
        name += suffix
    return name
