from pathlib import Path
from typing import List, Optional, Union
from pydantic import BaseModel, Field

from ..locator.models import EmptyInputError, Grid
from ..locator.parsing import normalize, parse_word_list
from ..locator.locate import locate, collapse_spans
from ..locator.report import format_locations
from ..locator.grid import render_grid_preview
from .models import SessionConfig, WordResult, SearchReport


class WordSearchSession(BaseModel):
    """
    Holds the currently loaded grid and the last status message.

    A grid stays read-only until it is replaced by another load. A failed
    load drops the previous grid so searches are disabled until a valid
    source is loaded again.

    Attributes:
        config: Presentation and input settings
        grid: The loaded grid, or None when nothing is loaded
        message: User-facing status of the last operation
    """

    config: SessionConfig = Field(default_factory=SessionConfig)
    grid: Optional[Grid] = None
    message: str = ""

    @property
    def search_enabled(self) -> bool:
        return self.grid is not None

    def clear(self) -> None:
        """Forget the loaded grid and status message."""
        self.grid = None
        self.message = ""

    def load_text(self, text: str) -> bool:
        """
        Normalize grid text and make it the current grid.

        Returns:
            True if the grid was loaded, False if the text was rejected
        """
        try:
            grid = normalize(text)
        except EmptyInputError as e:
            self._fail(str(e))
            return False

        self.grid = grid
        self.message = f"Loaded {grid.rows}x{grid.cols} grid."
        return True

    def load_file(self, path: Union[str, Path]) -> bool:
        """
        Read a grid file and load its contents.

        Returns:
            True if the grid was loaded, False otherwise
        """
        try:
            text = Path(path).read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            self._fail(str(e))
            return False

        return self.load_text(text)

    def preview(self) -> str:
        return render_grid_preview(self.grid, blank=self.config.blank_display)

    def search(self, raw_words: str) -> Optional[SearchReport]:
        """
        Locate each word of a comma-delimited list in the current grid.

        Returns:
            A SearchReport, or None if there is no grid or no words. In
            that case the reason is left in ``message``.
        """
        if self.grid is None:
            self.message = "Please upload a CSV grid first."
            return None

        if not (raw_words or '').strip():
            self.message = "Please enter words, comma-separated."
            return None

        words = parse_word_list(raw_words)
        results: List[WordResult] = [self._search_word(word) for word in words]

        self.message = f"{len(words)} word(s) processed."
        return SearchReport(
            rows=self.grid.rows,
            cols=self.grid.cols,
            results=results,
            message=self.message,
        )

    def _search_word(self, word: str) -> WordResult:
        matches = locate(self.grid, word)
        if self.config.collapse_duplicate_spans:
            matches = collapse_spans(matches)

        return WordResult(
            word=word.upper(),
            matches=matches,
            locations=format_locations(
                matches,
                separator=self.config.separator,
                not_found=self.config.not_found_marker,
            ),
        )

    def _fail(self, reason: str) -> None:
        self.grid = None
        self.message = f"Error: {reason}"
