from __future__ import annotations


class SudokuError(Exception):
    """Base class for everything this package raises on purpose."""


class ShapeError(SudokuError, ValueError):
    """The input matrix is not exactly 9 rows of 9 cells."""


class PuzzleFormatError(SudokuError, ValueError):
    """Puzzle text could not be read into a raw matrix."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class ConfigError(SudokuError):
    """The TOML configuration is unreadable or holds an invalid value."""


class SolveError(SudokuError):
    """Solving stopped without a solution."""


class ContradictionError(SolveError):
    """
    A cell ran out of legal values, or a locked-in digit repeats in one of
    its units. The partial assignment that produced the grid is inconsistent.
    """

    def __init__(self, row: int, col: int, message: str | None = None):
        self.row = row
        self.col = col
        if message is None:
            message = f"No legal values to put in grid[{row}][{col}]"
        super().__init__(message)


class UnsolvableError(SolveError):
    """Every candidate at one level of the search failed."""

    def __init__(self, message: str = "Unable to find valid solution!", depth: int = 0):
        self.depth = depth
        super().__init__(message)
