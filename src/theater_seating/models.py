"""Data models for theater seating."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class TheaterConfig:
    """Grid dimensions and the buffer kept between neighbouring groups."""

    rows: int = 10
    columns: int = 20
    buffer: int = 3

    def __post_init__(self) -> None:
        if self.rows < 1:
            raise ValueError(f"rows must be at least 1, got {self.rows}")
        if self.columns < 1:
            raise ValueError(f"columns must be at least 1, got {self.columns}")
        if self.buffer < 0:
            raise ValueError(f"buffer must not be negative, got {self.buffer}")


@dataclass
class Reservation:
    """A group booking read from the input file."""

    identifier: str
    party_size: int
    line: int = 0


@dataclass(frozen=True)
class SeatBlock:
    """Contiguous seats in one row, ``start`` and ``end`` inclusive."""

    row: int
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def columns(self) -> range:
        return range(self.start, self.end + 1)


@dataclass
class RunResult:
    """Outcome of processing a batch of reservations."""

    lines: List[str] = field(default_factory=list)
    rejected: List[str] = field(default_factory=list)
    assignments: List[Tuple[str, List[SeatBlock]]] = field(default_factory=list)

    @property
    def accepted(self) -> int:
        return len(self.lines)

    @property
    def seats_assigned(self) -> int:
        return sum(block.size for _, blocks in self.assignments for block in blocks)
