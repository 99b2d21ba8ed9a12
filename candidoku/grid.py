"""
Grid: a 9x9 board of candidate sets, solved by deduction first, then guessing.

SOLVING STRATEGY
----------------
1) Propagation: every cell that is not locked in gets its candidates
   recomputed as {1..9} minus the digits locked in across its row, column
   and box. Repeat until a pass changes nothing (naked singles to saturation).

2) Guessing: if the fixpoint is not a full solution, take the first cell
   (row-major) with more than one candidate and try each digit in ascending
   order on a copied grid. The first branch that solves wins; a branch that
   hits a contradiction is simply dropped.

A Grid is never mutated. Every propagation pass and every guess produces a
new Grid, so a failed branch leaves nothing to undo.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple
import logging

from .errors import ContradictionError, ShapeError, SolveError, UnsolvableError
from .helper import PEERS, cell_name
from .models import DIGITS, LENGTH, CandidateSet

log = logging.getLogger(__name__)

Square = Optional[CandidateSet]
Row = Tuple[Square, ...]


@dataclass(frozen=True)
class SolveOutcome:
    """
    Result of one search node: either a solved grid or the error that ended it.

    branches counts every branch grid explored below this node,
    depth is the deepest recursion level reached.
    """
    grid: Optional["Grid"] = None
    error: Optional[SolveError] = None
    branches: int = 0
    depth: int = 0

    @property
    def ok(self) -> bool:
        return self.grid is not None


class Grid:
    """
    Immutable 9x9 array of CandidateSet-or-None (None = unknown).

    Build one from a raw digit matrix with Grid.from_raw(); the constructor
    itself takes already-built cells and only checks the shape.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Sequence[Sequence[Square]]):
        if cells is None:
            raise ShapeError("Grid cells are missing")
        if len(cells) != LENGTH:
            raise ShapeError(f"Must have {LENGTH} rows, got {len(cells)}")

        rows: List[Row] = []
        for i, row in enumerate(cells):
            if row is None:
                raise ShapeError(f"Row {i} is null!")
            if len(row) != LENGTH:
                raise ShapeError(f"Row {i} has {len(row)} columns instead of {LENGTH}!")
            rows.append(tuple(row))

        self._cells: Tuple[Row, ...] = tuple(rows)

    @classmethod
    def from_raw(cls, raw: Sequence[Sequence[int]]) -> "Grid":
        """
        Build the initial grid from a 9x9 matrix of ints: 0 is blank, 1-9 are givens.
        Givens become locked-in candidate sets; blanks stay unknown.
        """
        if raw is None:
            raise ShapeError("Puzzle matrix is missing")
        if len(raw) != LENGTH:
            raise ShapeError(f"Must have {LENGTH} rows")

        cells: List[List[Square]] = []
        for i, row in enumerate(raw):
            if row is None:
                raise ShapeError(f"Row {i} is null!")
            if len(row) != LENGTH:
                raise ShapeError(f"Row {i} has {len(row)} columns instead of {LENGTH}!")

            squares: List[Square] = []
            for j, value in enumerate(row):
                if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= LENGTH:
                    raise ShapeError(f"grid[{i}][{j}] must be an int 0-{LENGTH}, got {value!r}")
                squares.append(None if value == 0 else CandidateSet.of(value))
            cells.append(squares)

        return cls(cells)

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    def cell(self, r: int, c: int) -> Square:
        return self._cells[r][c]

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._cells

    def __iter__(self) -> Iterator[Row]:
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def is_solved(self) -> bool:
        """True when every cell holds exactly one candidate."""
        for row in self._cells:
            for square in row:
                if square is None or not square.is_locked:
                    return False
        return True

    def with_cell(self, r: int, c: int, square: Square) -> "Grid":
        """Copy of this grid with one cell replaced."""
        cells = [list(row) for row in self._cells]
        cells[r][c] = square
        return Grid(cells)

    # -------------------------------------------------------------------------
    # Deduction
    # -------------------------------------------------------------------------

    def _represented_numbers(self, r: int, c: int) -> frozenset[int]:
        """
        Digits already locked in across the row, column and box of (r, c),
        not counting (r, c) itself.
        """
        output = set()
        for pr, pc in PEERS[r][c]:
            square = self._cells[pr][pc]
            if square is not None and square.is_locked:
                output.add(square.value)
        return frozenset(output)

    @staticmethod
    def _duplicate(r: int, c: int, digit: int) -> ContradictionError:
        return ContradictionError(
            r, c, f"Digit {digit} at grid[{r}][{c}] is repeated in its row, column or box"
        )

    def _assert_consistent(self) -> None:
        """Raise ContradictionError if a locked-in digit repeats among its peers."""
        for r, row in enumerate(self._cells):
            for c, square in enumerate(row):
                if square is not None and square.is_locked:
                    if square.value in self._represented_numbers(r, c):
                        raise self._duplicate(r, c, square.value)

    def calculate_possibilities(self) -> "Grid":
        """
        One propagation pass.

        Cells that are unknown or ambiguous get {1..9} minus the locked-in
        digits of their peers, read from this grid (not from cells updated
        earlier in the same pass). Locked-in cells are copied through.

        Raises ContradictionError when a cell is left with no candidates, or a
        locked-in digit is also locked in one of its peers.
        """
        new_cells: List[List[Square]] = []

        for r, row in enumerate(self._cells):
            new_row: List[Square] = []
            for c, square in enumerate(row):
                represented = self._represented_numbers(r, c)

                if square is not None and square.is_locked:
                    if square.value in represented:
                        raise self._duplicate(r, c, square.value)
                    new_row.append(square)
                    continue

                possibilities = DIGITS - represented
                if not possibilities:
                    raise ContradictionError(r, c)
                new_row.append(CandidateSet(possibilities))
            new_cells.append(new_row)

        return Grid(new_cells)

    def propagate(self) -> "Grid":
        """Apply calculate_possibilities until the grid stops changing."""
        previous = self
        updated = self.calculate_possibilities()
        rounds = 1

        while updated != previous:
            previous = updated
            updated = updated.calculate_possibilities()
            rounds += 1

        log.debug("Reached fixpoint after %d propagation rounds", rounds)
        return updated

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def _first_ambiguous(self) -> Tuple[int, int]:
        """
        First cell, row-major, holding more than one candidate.
        A propagated grid that is not solved always has one.
        """
        for r, row in enumerate(self._cells):
            for c, square in enumerate(row):
                if square is not None and len(square) > 1:
                    return r, c
        raise ValueError("Grid has no ambiguous cell")

    def try_solve(self, depth: int = 0) -> SolveOutcome:
        """
        Solve without raising: returns a SolveOutcome holding either the
        solved grid or the error that ended this branch.
        """
        if self.is_solved():
            try:
                self._assert_consistent()
            except ContradictionError as e:
                return SolveOutcome(error=e, depth=depth)
            return SolveOutcome(grid=self, depth=depth)

        try:
            updated = self.propagate()
        except ContradictionError as e:
            return SolveOutcome(error=e, depth=depth)

        # updated is the best we can do by deduction alone
        if updated.is_solved():
            return SolveOutcome(grid=updated, depth=depth)

        r, c = updated._first_ambiguous()
        branches = 0
        deepest = depth

        for digit in updated.cell(r, c):
            log.debug("Guess %s=%d (depth %d)", cell_name(r, c), digit, depth)
            branch = updated.with_cell(r, c, CandidateSet.of(digit))

            outcome = branch.try_solve(depth + 1)
            branches += 1 + outcome.branches
            deepest = max(deepest, outcome.depth)

            if outcome.ok:
                return SolveOutcome(grid=outcome.grid, branches=branches, depth=deepest)

            log.info(
                "Tried invalid value %s=%d: %s: %s",
                cell_name(r, c), digit, type(outcome.error).__name__, outcome.error,
            )

        return SolveOutcome(
            error=UnsolvableError(depth=depth), branches=branches, depth=deepest
        )

    def solve(self) -> "Grid":
        """
        Return the solved grid, or raise UnsolvableError when no valid
        completion exists. An already-solved grid is returned as-is.
        """
        outcome = self.try_solve()
        if outcome.ok:
            log.debug("Solved after %d branches, depth %d", outcome.branches, outcome.depth)
            return outcome.grid

        error = outcome.error
        if isinstance(error, UnsolvableError):
            raise error
        raise UnsolvableError() from error

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_matrix(self) -> List[List[int]]:
        """The solved digits as a 9x9 list of ints."""
        if not self.is_solved():
            raise ValueError("Grid is not solved")
        return [[square.value for square in row] for row in self._cells]

    def pretty(self) -> str:
        out = []
        for r, row in enumerate(self._cells):
            line = []
            for c, square in enumerate(row):
                line.append(str(square.value) if square is not None and square.is_locked else ".")
                if c in (2, 5):
                    line.append("|")
            out.append(" ".join(line))
            if r in (2, 5):
                out.append("-" * 21)
        return "\n".join(out)

    def __str__(self) -> str:
        lines = [f"{type(self).__name__}:"]
        for row in self._cells:
            lines.append(", ".join("None" if square is None else str(square) for square in row))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        locked = sum(1 for row in self._cells for s in row if s is not None and s.is_locked)
        return f"<Grid locked={locked}/{LENGTH * LENGTH}>"
