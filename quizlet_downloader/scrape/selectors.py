"""CSS selector table describing the Quizlet set page layout."""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from ..core.errors import InvalidSelectorsError

logger = logging.getLogger(__name__)


class SelectorTable(BaseModel):
    """Immutable selector set for one revision of the page layout.

    When Quizlet ships a redesign, a new table (new ``version``) is all that
    needs to change; the extractor reads every lookup from here.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str
    set_title: str
    set_count: str
    show_more_button: str
    creator_name: str
    creator_url: str
    term_rows: str
    term_text: str
    definition: str
    definition_text: str
    definition_image: str

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SelectorTable":
        """
        Load a selector table from a JSON file.

        Raises:
            InvalidSelectorsError: File missing, not JSON, or not a complete table
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
            table = cls.model_validate(data)
        except ValidationError as e:
            raise InvalidSelectorsError(str(path), f"{e.error_count()} invalid or missing field(s)") from e
        except (OSError, ValueError) as e:
            # ValueError covers bad JSON and undecodable bytes
            raise InvalidSelectorsError(str(path), str(e)) from e
        logger.info(f"Loaded selector table {table.version} from {path}")
        return table


DEFAULT_SELECTORS = SelectorTable(
    version="2024.1",
    set_title=".s1ygu81a",
    set_count=".t1hzdbu9 .t18rmeis",
    show_more_button=".a1qd8xfe.a1q8vbq2",
    creator_name=".u1xtrgf5 .UserLink-content .UILink span",
    creator_url=".u1xtrgf5 .UserLink-content .UILink",
    term_rows=".SetPageTermsList-term .se6rv9p",
    term_text=".s7ascy3",
    definition=".l1rpwius",
    definition_text=".hdftvph .TermText",
    definition_image=".sumuxuf .SetPageTerm-image",
)


def load_selectors(path: Optional[str] = None) -> SelectorTable:
    """Return the selector table at ``path``, or the built-in default."""
    if not path:
        return DEFAULT_SELECTORS
    return SelectorTable.from_file(path)
