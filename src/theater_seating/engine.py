"""
Greedy seat allocation for a fixed theater grid.

Rows are tried in preference order: the middle row first, then every row
behind it, then the front rows from the screen back to the middle. A group is
kept in a single row when one still has room; otherwise it is spread over the
preferred rows in sweep order. Every group is followed by ``buffer`` empty
seats in its row.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from .models import SeatBlock, TheaterConfig

logger = logging.getLogger(__name__)


def row_preferences(rows: int) -> List[int]:
    """Return row indices from most to least preferred."""
    middle = rows // 2
    return list(range(middle, rows)) + list(range(0, middle))


class Theater:
    """Seating availability of a single theater."""

    def __init__(self, config: TheaterConfig | None = None) -> None:
        self.config = config or TheaterConfig()
        self.preferences: List[int] = row_preferences(self.config.rows)
        # First free column per row; may run past the last column.
        self._first_available: List[int] = [0] * self.config.rows
        self.available_seats: int = self.config.rows * self.config.columns

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def buffer(self) -> int:
        return self.config.buffer

    @property
    def first_available_columns(self) -> List[int]:
        return list(self._first_available)

    def reserve(self, people: int) -> Optional[List[SeatBlock]]:
        """Assign seats for a group of ``people``.

        Returns the seat blocks in assignment order, or ``None`` when the
        theater does not have enough seats left. Nothing changes on ``None``.
        """
        if people < 1:
            raise ValueError(f"people must be positive, got {people}")
        if people > self.available_seats:
            logger.debug("Cannot seat %d people, %d seats left", people, self.available_seats)
            return None

        row = self.find_first_available_row(people)
        if row is not None:
            return [self.fill_single_row(people, row)]
        return self.fill_multiple_rows(people)

    def find_first_available_row(self, people: int) -> Optional[int]:
        """Most preferred row that fits the whole group, or ``None``."""
        for row in self.preferences:
            if self._first_available[row] + people <= self.columns:
                return row
        return None

    def fill_single_row(self, people: int, row: int) -> SeatBlock:
        """Seat the whole group at the front of the free part of ``row``."""
        start = self._first_available[row]
        self._advance(row, people)
        logger.debug("Seated %d people in row %d at column %d", people, row, start)
        return SeatBlock(row=row, start=start, end=start + people - 1)

    def fill_multiple_rows(self, people: int) -> List[SeatBlock]:
        """Spread the group over rows in preference order until all are seated.

        The caller must have checked ``people`` against ``available_seats``.
        """
        blocks: List[SeatBlock] = []
        remaining = people
        while remaining:
            for row in self.preferences:
                start = self._first_available[row]
                if start >= self.columns:
                    continue
                filled = min(remaining, self.columns - start)
                self._advance(row, filled)
                blocks.append(SeatBlock(row=row, start=start, end=start + filled - 1))
                remaining -= filled
                if not remaining:
                    break
        logger.debug("Split %d people over %d rows", people, len(blocks))
        return blocks

    def _advance(self, row: int, filled: int) -> None:
        """Move the row cursor past ``filled`` seats and the buffer."""
        old = self._first_available[row]
        new = old + filled + self.buffer
        self._first_available[row] = new
        # Buffer overshoot past the last column counts as used.
        if new >= self.columns:
            self.available_seats -= self.columns - old
        else:
            self.available_seats -= new - old
