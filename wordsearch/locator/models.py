"""Data models for grid normalization and word location."""

from typing import Annotated, List, Literal, NamedTuple, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator


# Cell value for an empty or missing grid entry
BLANK = " "

Cell = Annotated[str, Field(min_length=1, max_length=1)]

DirectionLabel = Literal['E', 'W', 'S', 'N', 'SE', 'SW', 'NE', 'NW']


class EmptyInputError(ValueError):
    """Raised when grid text has no non-blank lines."""


class Direction(NamedTuple):
    """A unit step over the grid with its compass label."""
    dr: int
    dc: int
    label: str


# Enumeration order determines match order for a given start cell
DIRECTIONS: Tuple[Direction, ...] = (
    Direction(0, 1, 'E'),
    Direction(0, -1, 'W'),
    Direction(1, 0, 'S'),
    Direction(-1, 0, 'N'),
    Direction(1, 1, 'SE'),
    Direction(1, -1, 'SW'),
    Direction(-1, 1, 'NE'),
    Direction(-1, -1, 'NW'),
)


class Position(NamedTuple):
    """A 1-indexed (row, col) grid coordinate."""
    row: int
    col: int


class Match(BaseModel):
    """One linear occurrence of a word in the grid."""
    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position
    direction: DirectionLabel

    @property
    def span(self) -> Tuple[Position, Position]:
        return self.start, self.end


class Grid(BaseModel):
    """
    Immutable rectangular matrix of single-character cells.

    Cells are stored row-major in one flat tuple, so the cell at
    (row, col) lives at index ``row * cols + col`` (0-indexed).
    """
    model_config = ConfigDict(frozen=True)

    rows: int = Field(..., ge=0)
    cols: int = Field(..., ge=0)
    cells: Tuple[Cell, ...] = ()

    @model_validator(mode='after')
    def _check_shape(self) -> "Grid":
        if len(self.cells) != self.rows * self.cols:
            raise ValueError(
                f"Grid of {self.rows}x{self.cols} needs {self.rows * self.cols} cells, "
                f"got {len(self.cells)}"
            )
        return self

    @classmethod
    def from_rows(cls, rows: List[List[str]]) -> "Grid":
        """Build a grid from equal-length rows of cells."""
        num_cols = len(rows[0]) if rows else 0
        cells = tuple(cell for row in rows for cell in row)
        return cls(rows=len(rows), cols=num_cols, cells=cells)

    @property
    def is_empty(self) -> bool:
        return self.rows == 0 or self.cols == 0

    def cell(self, row: int, col: int) -> str:
        """Cell value at a 0-indexed position."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"({row}, {col}) is outside a {self.rows}x{self.cols} grid")
        return self.cells[row * self.cols + col]

    def row(self, row: int) -> Tuple[str, ...]:
        start = row * self.cols
        return self.cells[start:start + self.cols]

    def to_rows(self) -> List[List[str]]:
        return [list(self.row(r)) for r in range(self.rows)]
