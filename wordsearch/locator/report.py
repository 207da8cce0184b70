"""Text formatting for match results."""

from typing import List

from .models import Match


NOT_FOUND = "not found"
SEPARATOR = ", "


def format_match(match: Match) -> str:
    """Render a match as ``<Dir>: (<row>,<col>)->(<row>,<col>)``."""
    (r1, c1), (r2, c2) = match.start, match.end
    return f"{match.direction}: ({r1},{c1})->({r2},{c2})"


def format_locations(
    matches: List[Match],
    separator: str = SEPARATOR,
    not_found: str = NOT_FOUND,
) -> str:
    """Join match descriptors in order, or return the not-found marker."""
    if not matches:
        return not_found
    return separator.join(format_match(m) for m in matches)
