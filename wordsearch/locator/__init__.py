"""Word-search grid normalization and location."""

from .models import BLANK, DIRECTIONS, Direction, EmptyInputError, Grid, Match, Position
from .parsing import normalize, expand_cells, parse_word_list
from .locate import locate, in_bounds, collapse_spans
from .report import format_match, format_locations, NOT_FOUND
from .grid import render_grid_preview

__all__ = [
    # Models
    "BLANK",
    "DIRECTIONS",
    "Direction",
    "EmptyInputError",
    "Grid",
    "Match",
    "Position",
    # Parsing
    "normalize",
    "expand_cells",
    "parse_word_list",
    # Location
    "locate",
    "in_bounds",
    "collapse_spans",
    # Formatting
    "format_match",
    "format_locations",
    "NOT_FOUND",
    "render_grid_preview",
]
