from .models import CandidateSet, DIGITS, LENGTH
from .errors import (
    SudokuError,
    ShapeError,
    PuzzleFormatError,
    ConfigError,
    SolveError,
    ContradictionError,
    UnsolvableError,
)
from .grid import Grid, SolveOutcome
from .parsing import REFERENCE_PUZZLE, parse_puzzle, parse_comma_grid, parse_compact_grid
from .config import SolverConfig, load_config

__all__ = [
    "CandidateSet",
    "DIGITS",
    "LENGTH",
    "SudokuError",
    "ShapeError",
    "PuzzleFormatError",
    "ConfigError",
    "SolveError",
    "ContradictionError",
    "UnsolvableError",
    "Grid",
    "SolveOutcome",
    "REFERENCE_PUZZLE",
    "parse_puzzle",
    "parse_comma_grid",
    "parse_compact_grid",
    "SolverConfig",
    "load_config",
]
