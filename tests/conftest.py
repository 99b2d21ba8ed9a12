from __future__ import annotations

from typing import Callable, List

import pytest

from candidoku import REFERENCE_PUZZLE, parse_puzzle

_CLASSIC_TEXT = "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"

_CLASSIC_PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

_CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# menneske.no 3241368
_HARD_PUZZLE = [
    [0, 3, 0, 0, 8, 0, 4, 0, 0],
    [7, 0, 0, 0, 4, 5, 0, 0, 0],
    [0, 0, 0, 0, 0, 2, 0, 1, 0],
    [0, 4, 0, 2, 5, 0, 0, 0, 0],
    [8, 0, 0, 0, 0, 7, 0, 0, 3],
    [0, 9, 0, 0, 0, 0, 7, 0, 0],
    [1, 5, 0, 6, 0, 4, 0, 8, 0],
    [3, 0, 0, 0, 0, 0, 0, 0, 4],
    [0, 0, 0, 0, 0, 0, 0, 7, 6],
]

_HARD_SOLUTION = [
    [5, 3, 2, 7, 8, 1, 4, 6, 9],
    [7, 6, 1, 9, 4, 5, 2, 3, 8],
    [9, 8, 4, 3, 6, 2, 5, 1, 7],
    [6, 4, 7, 2, 5, 3, 8, 9, 1],
    [8, 1, 5, 4, 9, 7, 6, 2, 3],
    [2, 9, 3, 8, 1, 6, 7, 4, 5],
    [1, 5, 9, 6, 7, 4, 3, 8, 2],
    [3, 7, 6, 1, 2, 8, 9, 5, 4],
    [4, 2, 8, 5, 3, 9, 1, 7, 6],
]

# Box 0 has four blanks that can only be 1 or 2.
_BOX_TRAP_PUZZLE = [
    [0, 0, 3, 4, 5, 6, 7, 8, 9],
    [0, 0, 6, 7, 8, 9, 3, 4, 5],
] + [[0] * 9 for _ in range(7)]


def _assert_valid_solution(matrix: List[List[int]]) -> None:
    digits = list(range(1, 10))
    for r in range(9):
        assert sorted(matrix[r]) == digits, f"row {r}"
    for c in range(9):
        assert sorted(matrix[r][c] for r in range(9)) == digits, f"column {c}"
    for br in range(3):
        for bc in range(3):
            box = [matrix[br * 3 + dr][bc * 3 + dc] for dr in range(3) for dc in range(3)]
            assert sorted(box) == digits, f"box {br},{bc}"


@pytest.fixture
def reference_raw() -> List[List[int]]:
    return parse_puzzle(REFERENCE_PUZZLE)


@pytest.fixture
def classic_raw() -> List[List[int]]:
    return [row[:] for row in _CLASSIC_PUZZLE]


@pytest.fixture
def empty_raw() -> List[List[int]]:
    return [[0] * 9 for _ in range(9)]


@pytest.fixture
def classic_text() -> str:
    return _CLASSIC_TEXT


@pytest.fixture
def classic_solution() -> List[List[int]]:
    return [row[:] for row in _CLASSIC_SOLUTION]


@pytest.fixture
def hard_raw() -> List[List[int]]:
    return [row[:] for row in _HARD_PUZZLE]


@pytest.fixture
def hard_solution() -> List[List[int]]:
    return [row[:] for row in _HARD_SOLUTION]


@pytest.fixture
def box_trap_raw() -> List[List[int]]:
    return [row[:] for row in _BOX_TRAP_PUZZLE]


@pytest.fixture
def assert_valid_solution() -> Callable[[List[List[int]]], None]:
    """Checker: every row, column and box of a solved matrix is a permutation of 1-9."""
    return _assert_valid_solution
