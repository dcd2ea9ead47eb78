"""Batch processing of reservation files."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Tuple

from .engine import Theater
from .exceptions import NoInputProvided, OutputUnavailable
from .loader import load_reservations
from .models import Reservation, RunResult, TheaterConfig
from .output import format_line

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("output.txt")


def process_reservations(theater: Theater, reservations: Iterable[Reservation]) -> RunResult:
    """Seat every reservation in input order.

    Reservations that no longer fit are recorded in ``RunResult.rejected``
    and processing carries on with the next one.
    """
    result = RunResult()
    for reservation in reservations:
        blocks = theater.reserve(reservation.party_size)
        if blocks is None:
            logger.info(
                "Not enough seats for reservation %s (%d people, %d left)",
                reservation.identifier, reservation.party_size, theater.available_seats,
            )
            result.rejected.append(reservation.identifier)
            continue
        result.assignments.append((reservation.identifier, blocks))
        result.lines.append(format_line(reservation.identifier, blocks))
    return result


def write_output(path: Path | str, lines: Iterable[str]) -> Path:
    """Write one line per accepted reservation and return the absolute path."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as exc:
        raise OutputUnavailable(f"Cannot write output: {path}") from exc
    return path.resolve()


def run(
    input_path: Path | str | None,
    output_path: Path | str = DEFAULT_OUTPUT,
    config: TheaterConfig | None = None,
) -> Tuple[RunResult, Theater, Path]:
    """Load, seat and write a reservation file.

    Raises ``NoInputProvided`` or ``InputUnavailable`` before anything is
    written.
    """
    if input_path is None:
        raise NoInputProvided("No input file found.")
    reservations = load_reservations(input_path)
    theater = Theater(config)
    result = process_reservations(theater, reservations)
    resolved = write_output(output_path, result.lines)
    logger.info("Wrote %d reservations to %s", result.accepted, resolved)
    return result, theater, resolved
