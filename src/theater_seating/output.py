"""Seat labels and result formatting."""
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import pandas as pd

from .engine import Theater
from .models import RunResult, SeatBlock, TheaterConfig


def row_letter(row: int) -> str:
    """Letter for a row index: ``A`` for 0, ``Z`` for 25, then ``AA``, ``AB`` ..."""
    if row < 0:
        raise ValueError(f"row must not be negative, got {row}")
    letters = ""
    n = row + 1
    while n:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def seat_label(row: int, column: int) -> str:
    return f"{row_letter(row)}{column + 1}"


def format_seats(blocks: Iterable[SeatBlock]) -> str:
    """Comma separated labels for every seat in ``blocks``, in order."""
    return ",".join(seat_label(b.row, column) for b in blocks for column in b.columns())


def format_line(identifier: str, blocks: Sequence[SeatBlock]) -> str:
    return f"{identifier} {format_seats(blocks)}"


def seat_map(config: TheaterConfig, assignments: Iterable[Tuple[str, List[SeatBlock]]]) -> pd.DataFrame:
    """Grid of the theater with the reservation identifier in each taken seat."""
    grid = pd.DataFrame(
        "",
        index=[row_letter(r) for r in range(config.rows)],
        columns=[c + 1 for c in range(config.columns)],
    )
    for identifier, blocks in assignments:
        for block in blocks:
            grid.iloc[block.row, block.start:block.end + 1] = identifier
    return grid


def format_report(result: RunResult, theater: Theater) -> str:
    return (
        f"[REPORT] accepted={result.accepted} rejected={len(result.rejected)} "
        f"seats_assigned={result.seats_assigned} remaining={theater.available_seats}"
    )
