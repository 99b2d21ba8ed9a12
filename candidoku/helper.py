from __future__ import annotations
from typing import List, Tuple

from .models import LENGTH

BOX = 3

Cell = Tuple[int, int]


def box_index(r: int, c: int) -> Tuple[int, int]:
    """Box coordinates of (r, c): (r // 3, c // 3)."""
    return r // BOX, c // BOX


def box_cells(r: int, c: int) -> List[Cell]:
    """The 9 cells of the box containing (r, c), row-major."""
    br, bc = box_index(r, c)
    return [
        (br * BOX + dr, bc * BOX + dc)
        for dr in range(BOX)
        for dc in range(BOX)
    ]


def _peers(r: int, c: int) -> Tuple[Cell, ...]:
    cells = set((r, x) for x in range(LENGTH))
    cells.update((x, c) for x in range(LENGTH))
    cells.update(box_cells(r, c))
    cells.remove((r, c))
    return tuple(sorted(cells))


# PEERS[r][c] = every cell sharing a row, column or box with (r, c), excluding (r, c).
PEERS: List[List[Tuple[Cell, ...]]] = [
    [_peers(r, c) for c in range(LENGTH)] for r in range(LENGTH)
]


def cell_name(r: int, c: int) -> str:
    """Human-readable 1-based cell label, e.g. r1c3."""
    return f"r{r + 1}c{c + 1}"
