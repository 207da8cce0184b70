"""
Multi-directional word location.

Every cell holding the word's first letter is tried as a start, and from
each start every direction in DIRECTIONS is walked. All successful walks
are reported, in row-major start order and then direction order.
"""

from typing import List, Optional, Set, Tuple

from .models import DIRECTIONS, Grid, Match, Position
from .parsing import trim


def in_bounds(row: int, col: int, rows: int, cols: int) -> bool:
    """Whether a 0-indexed position lies inside a rows x cols grid."""
    return 0 <= row < rows and 0 <= col < cols


def locate(grid: Grid, raw_word: Optional[str]) -> List[Match]:
    """
    Find every occurrence of a word in the grid.

    The word is trimmed and uppercased first. Empty words and empty grids
    produce no matches. Positions in the returned matches are 1-indexed.
    """
    word = trim(raw_word or '').upper()
    if not word or grid.is_empty:
        return []

    num_rows, num_cols = grid.rows, grid.cols
    cells = grid.cells
    first = word[0]
    matches: List[Match] = []

    for r in range(num_rows):
        for c in range(num_cols):
            if cells[r * num_cols + c] != first:
                continue

            for dr, dc, label in DIRECTIONS:
                rr, cc = r, c
                ok = True
                for letter in word[1:]:
                    rr += dr
                    cc += dc
                    if not in_bounds(rr, cc, num_rows, num_cols) or cells[rr * num_cols + cc] != letter:
                        ok = False
                        break

                if ok:
                    matches.append(Match(
                        start=Position(r + 1, c + 1),
                        end=Position(rr + 1, cc + 1),
                        direction=label,
                    ))

    return matches


def collapse_spans(matches: List[Match]) -> List[Match]:
    """Keep the first match for each (start, end) span, preserving order."""
    seen: Set[Tuple[Position, Position]] = set()
    collapsed: List[Match] = []

    for match in matches:
        if match.span in seen:
            continue
        seen.add(match.span)
        collapsed.append(match)

    return collapsed
