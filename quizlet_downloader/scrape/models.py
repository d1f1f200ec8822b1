"""Payload models exchanged between the page agent and the exporter.

Field names follow the JSON wire format, so ``model_dump()`` produces the
exported document as-is.
"""

from datetime import datetime
from typing import Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

SCRAPE_ACTION = "scrape_quizlet"


class DefinitionPart(BaseModel):
    """Definition side of a card: text plus an optional image URL."""

    text: str = ""
    image: str = ""

    @property
    def has_image(self) -> bool:
        return bool(self.image)


class QuizRecord(BaseModel):
    """One term/definition card."""

    termPart: str = ""
    definitionPart: DefinitionPart = Field(default_factory=DefinitionPart)

    def ordered_parts(self, swapped: bool) -> tuple:
        """Return (left, right) presentation order for tabular output."""
        if swapped:
            return self.definitionPart, self.termPart
        return self.termPart, self.definitionPart


class SetInfo(BaseModel):
    """Metadata block describing the scraped set."""

    quizSetTitle: str = "Untitled Set"
    quizSetURL: str = ""
    creatorName: str = "Unknown"
    creatorURL: str = ""
    dateScraped: str = ""
    numberOfQuizzes: int = 0
    swapped: bool = False


class ExtractionResult(BaseModel):
    """Full payload: metadata plus cards keyed by zero-padded index."""

    info: SetInfo
    quizData: Dict[str, QuizRecord] = Field(default_factory=dict)

    def sorted_items(self):
        """Records in index order (padded keys sort numerically as strings)."""
        return [(key, self.quizData[key]) for key in sorted(self.quizData)]


class ScrapeRequest(BaseModel):
    """Message sent from the control side to the page agent."""

    model_config = ConfigDict(frozen=True)

    action: Literal["scrape_quizlet"] = SCRAPE_ACTION
    swap: bool = False


class ScrapeSuccess(BaseModel):
    status: Literal["success"] = "success"
    payload: ExtractionResult


class ScrapeFailure(BaseModel):
    status: Literal["fail"] = "fail"
    message: Optional[str] = None
    count: Optional[int] = None

    def to_wire(self) -> dict:
        """Only the populated failure field goes on the wire."""
        return self.model_dump(exclude_none=True)


ScrapeResponse = Union[ScrapeSuccess, ScrapeFailure]


def parse_response(data: dict) -> ScrapeResponse:
    """Parse a wire reply into a typed response."""
    if data.get("status") == "success":
        return ScrapeSuccess.model_validate(data)
    return ScrapeFailure.model_validate(data)


def local_timestamp(now: Optional[datetime] = None) -> str:
    """Wall-clock ISO-8601 timestamp with a literal ``Z`` suffix (no zone conversion)."""
    now = now or datetime.now()
    return now.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def pad_width(count: int) -> int:
    return len(str(count))


def padded_index(position: int, count: int) -> str:
    """1-based position padded to the digit length of ``count``."""
    return str(position).zfill(pad_width(count))
