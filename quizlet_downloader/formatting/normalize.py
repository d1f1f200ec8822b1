import logging
import re

logger = logging.getLogger(__name__)

_HORIZONTAL_WS = re.compile(r"[ \t\r\f\v]+")
_NEWLINE_RUNS = re.compile(r"\n+")


def normalize_text(text: str) -> str:
    """
    Normalize text read from the page: trim, collapse runs of horizontal
    whitespace to a single space and runs of newlines to a single newline.
    """
    if not text:
        return ""

    # Normalize line breaks to Unix-style (LF)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.replace("\u00a0", " ")

    lines = [_HORIZONTAL_WS.sub(" ", line).strip() for line in text.split("\n")]
    text = "\n".join(lines)

    # Blank lines left by stripping are folded into the surrounding breaks
    text = _NEWLINE_RUNS.sub("\n", text)
    return text.strip()


def clean_string(value):
    """Collapse horizontal whitespace and trim. Non-strings pass through unchanged."""
    if not isinstance(value, str):
        return value
    return _HORIZONTAL_WS.sub(" ", value).strip()
