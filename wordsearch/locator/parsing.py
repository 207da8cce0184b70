"""Grid and word-list parsing utilities."""

import re
from typing import Iterable, List

from .models import BLANK, EmptyInputError, Grid


DELIMITER = ','

BOM = '\ufeff'


def trim(text: str) -> str:
    """Strip whitespace and byte-order marks from both ends."""
    # str.strip() treats U+FEFF as a character, not whitespace
    previous = None
    while text != previous:
        previous = text
        text = text.strip().strip(BOM)
    return text


def expand_cells(fields: Iterable[str]) -> List[str]:
    """
    Expand trimmed, uppercased fields into single-character cells.

    An empty field becomes one BLANK cell, and a multi-character field is
    exploded into one cell per character.
    """
    expanded: List[str] = []
    for field in fields:
        if not field:
            expanded.append(BLANK)
        else:
            expanded.extend(field)
    return expanded


def normalize(raw_text: str) -> Grid:
    """
    Parse comma-delimited text into a rectangular grid.

    Lines are split on either newline convention and trimmed; lines that
    end up empty are dropped. Rows shorter than the longest row are padded
    on the right with BLANK cells.

    Raises EmptyInputError if no non-blank lines remain.
    """
    lines = [trim(line) for line in re.split(r'\r?\n', raw_text or '')]
    lines = [line for line in lines if line]

    if not lines:
        raise EmptyInputError("Empty CSV content")

    rows = [
        expand_cells(trim(cell).upper() for cell in line.split(DELIMITER))
        for line in lines
    ]

    max_len = max(len(row) for row in rows)
    for row in rows:
        row.extend([BLANK] * (max_len - len(row)))

    return Grid.from_rows(rows)


def parse_word_list(raw: str) -> List[str]:
    """Split a comma-delimited word list, dropping empty entries."""
    words = [trim(word) for word in (raw or '').split(DELIMITER)]
    return [word for word in words if word]
