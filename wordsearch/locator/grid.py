"""Grid rendering utilities."""

from typing import Optional

from .models import BLANK, Grid


BLANK_DISPLAY = '·'


def render_grid_preview(grid: Optional[Grid], blank: str = BLANK_DISPLAY) -> str:
    """
    Render the grid as a text block with 1-indexed row and column numbers.

    Column numbers form a header line. Each following line starts with its
    row number. BLANK cells are shown using ``blank``.
    """
    if grid is None or grid.is_empty:
        return ""

    num_width = max(len(str(grid.rows)), len(str(grid.cols)), 2)
    cell_width = max(2, len(str(grid.cols)))

    header = ' ' * (num_width + 1) + ' '.join(
        str(i + 1).rjust(cell_width) for i in range(grid.cols)
    )

    lines = [header]
    for r in range(grid.rows):
        cells = ' '.join(
            (blank if ch == BLANK else ch).rjust(cell_width) for ch in grid.row(r)
        )
        lines.append(f"{str(r + 1).rjust(num_width)} {cells}")

    return '\n'.join(lines)
