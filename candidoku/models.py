from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple


LENGTH = 9
DIGITS = frozenset(range(1, LENGTH + 1))


@dataclass(frozen=True, slots=True)
class CandidateSet:
    """
    The digits still possible for one cell.

    Never empty: an empty result is a contradiction, and callers detect it
    before they get here. A set of size 1 means the cell is locked in.
    """
    values: frozenset[int]

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError("A candidate set cannot be empty")
        stray = self.values - DIGITS
        if stray:
            raise ValueError(f"Candidate digits must be 1-{LENGTH}, got {sorted(stray)}")

    @classmethod
    def of(cls, digit: int) -> "CandidateSet":
        """Singleton set for a fixed digit."""
        return cls(frozenset((digit,)))

    @classmethod
    def from_digits(cls, digits: Iterable[int]) -> "CandidateSet":
        return cls(frozenset(digits))

    @property
    def is_locked(self) -> bool:
        return len(self.values) == 1

    @property
    def value(self) -> int:
        if not self.is_locked:
            raise ValueError(f"Cell is not locked in: {self}")
        return next(iter(self.values))

    def sorted_values(self) -> Tuple[int, ...]:
        return tuple(sorted(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, digit: object) -> bool:
        return digit in self.values

    def __iter__(self) -> Iterator[int]:
        return iter(self.sorted_values())

    def __str__(self) -> str:
        return "[" + ", ".join(str(d) for d in self.sorted_values()) + "]"
