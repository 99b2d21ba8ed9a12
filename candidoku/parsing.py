"""
Puzzle text -> raw 9x9 matrix (0 = blank).

Two notations are understood:

Comma notation (one row per line, blank marker configurable):
  x,7,x,2,3,x,x,x,x
  x,x,x,7,4,x,x,x,9
  ...

Compact notation: 81 cells of digits and '.', anything else ignored:
  53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79

The parsers only turn text into numbers. Whether the matrix is 9x9 is
checked by Grid.from_raw().
"""

from __future__ import annotations

from typing import Iterable, List

from .errors import PuzzleFormatError
from .models import LENGTH

DEFAULT_BLANKS = ("x",)

REFERENCE_PUZZLE = (
    "x,7,x,2,3,x,x,x,x\n"
    "x,x,x,7,4,x,x,x,9\n"
    "x,6,x,1,x,9,x,x,2\n"
    "x,3,5,4,x,x,x,x,x\n"
    "6,x,7,x,x,2,5,x,1\n"
    "8,x,x,x,x,5,7,6,x\n"
    "2,x,x,6,x,3,1,9,x\n"
    "7,x,9,x,2,1,x,x,x\n"
    "x,x,x,9,7,4,x,x,x"
)


def parse_comma_grid(text: str, blanks: Iterable[str] = DEFAULT_BLANKS) -> List[List[int]]:
    """
    One row per non-empty line, cells separated by commas.
    A cell is a digit 0-9 (0 is blank) or one of the blank markers (case-insensitive).
    """
    markers = {b.strip().lower() for b in blanks}
    grid: List[List[int]] = []

    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue

        row: List[int] = []
        for cell in line.split(","):
            token = cell.strip()
            if token.lower() in markers:
                row.append(0)
            elif len(token) == 1 and token.isdigit():
                row.append(int(token))
            else:
                raise PuzzleFormatError(f"Unrecognised cell {token!r}", line=line_no)
        grid.append(row)

    if not grid:
        raise PuzzleFormatError("Puzzle text is empty")
    return grid


def parse_compact_grid(text: str) -> List[List[int]]:
    """
    Extract digits and '.' from text; ignore whitespace and other characters.
    Expect exactly 81 cells after filtering.
    """
    raw = "".join(ch for ch in text if ch in "0123456789.")
    if len(raw) != LENGTH * LENGTH:
        raise PuzzleFormatError(f"Expected {LENGTH * LENGTH} cells, got {len(raw)} after filtering")

    values = [0 if ch in ".0" else int(ch) for ch in raw]
    return [values[i:i + LENGTH] for i in range(0, len(values), LENGTH)]


def parse_puzzle(text: str, blanks: Iterable[str] = DEFAULT_BLANKS) -> List[List[int]]:
    """Comma notation if the text has a comma in it, compact notation otherwise."""
    if "," in text:
        return parse_comma_grid(text, blanks)
    return parse_compact_grid(text)
