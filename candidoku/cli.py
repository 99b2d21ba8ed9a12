"""
Command-line front end.

RUN
---
candidoku puzzle.txt
candidoku --puzzle "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"
echo "..." | candidoku
# With no puzzle given and an interactive terminal, the built-in reference puzzle is solved.

Exit codes: 0 solved, 1 bad puzzle input, 2 no solution, 3 bad config, 99 unexpected.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import SolverConfig, load_config
from .errors import ConfigError, PuzzleFormatError, ShapeError, UnsolvableError
from .grid import Grid
from .parsing import REFERENCE_PUZZLE, parse_puzzle

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_UNSOLVABLE = 2
EXIT_BAD_CONFIG = 3
EXIT_FATAL = 99


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Solve a 9x9 Sudoku by propagation and backtracking")
    p.add_argument("file", nargs="?", help="Path to puzzle file (default: stdin)")
    p.add_argument("--puzzle", metavar="TEXT", help="Puzzle text given inline")
    p.add_argument("--config", metavar="PATH", help="TOML config file (default: ./sudoku.toml if present)")
    p.add_argument("--candidates", action="store_true",
                   help="Print grids as rows of candidate sets")
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    return p.parse_args(argv)


def _read_puzzle_text(args: argparse.Namespace) -> str:
    if args.puzzle is not None:
        return args.puzzle
    try:
        if args.file:
            with open(args.file, "r", encoding="utf-8") as f:
                return f.read()
        if sys.stdin.isatty():
            log.info("No puzzle given, using the reference puzzle")
            return REFERENCE_PUZZLE
        return sys.stdin.read()
    except UnicodeDecodeError as e:
        raise PuzzleFormatError(f"Puzzle text is not valid UTF-8: {e}") from e


def _setup_logging(config: SolverConfig, args: argparse.Namespace) -> None:
    level = config.log_level
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format=config.log_format, force=True)


def _render(grid: Grid, show_candidates: bool) -> str:
    return str(grid) if show_candidates else grid.pretty()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as ex:
        print(f"CONFIG ERROR: {ex}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    _setup_logging(config, args)
    show_candidates = args.candidates or config.show_candidates

    try:
        raw = parse_puzzle(_read_puzzle_text(args), blanks=config.blanks)
        grid = Grid.from_raw(raw)

        print("Initial puzzle:")
        print(_render(grid, show_candidates))
        print()

        solved = grid.solve()

        print("Solution:")
        print(_render(solved, show_candidates))
        return EXIT_OK

    except (PuzzleFormatError, ShapeError, OSError) as ex:
        print(f"INPUT ERROR: {ex}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except UnsolvableError as ex:
        print(f"NO SOLUTION: {ex}", file=sys.stderr)
        return EXIT_UNSOLVABLE
    except Exception as ex:  # unexpected
        print(f"FATAL: {type(ex).__name__}: {ex}", file=sys.stderr)
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
