"""
Pydantic models for the session layer.

Configuration and search results live here. The WordSearchSession class
itself is in session.py.
"""

from typing import List
from pydantic import BaseModel, Field

from ..locator.models import Match
from ..locator.grid import BLANK_DISPLAY
from ..locator.report import NOT_FOUND, SEPARATOR


class SessionConfig(BaseModel):
    """Presentation and input settings for a session."""
    not_found_marker: str = NOT_FOUND
    separator: str = SEPARATOR
    blank_display: str = Field(default=BLANK_DISPLAY, min_length=1)
    collapse_duplicate_spans: bool = False
    encoding: str = "utf-8-sig"


class WordResult(BaseModel):
    """Search outcome for a single word."""
    word: str
    matches: List[Match] = Field(default_factory=list)
    locations: str = ""

    @property
    def found(self) -> bool:
        return len(self.matches) > 0


class SearchReport(BaseModel):
    """Results for every word in one search request."""
    rows: int
    cols: int
    results: List[WordResult] = Field(default_factory=list)
    message: str = ""

    @property
    def words_processed(self) -> int:
        return len(self.results)

    def as_table(self) -> List[str]:
        """One ``WORD<TAB>locations`` line per word."""
        return [f"{r.word}\t{r.locations}" for r in self.results]
