"""Reservation file loading."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import IO, Any, List

import pandas as pd

from .exceptions import InputUnavailable
from .models import Reservation

# Never appears in reservation files, so each line lands in a single cell.
_LINE_SEPARATOR = "\x1f"


def _read_lines(source: Path | str | IO[Any]) -> List[str]:
    try:
        df = pd.read_csv(
            source,
            header=None,
            names=["record"],
            sep=_LINE_SEPARATOR,
            dtype=str,
            quoting=csv.QUOTE_NONE,
            keep_default_na=False,
            skip_blank_lines=False,
        )
    except pd.errors.EmptyDataError:
        return []
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnavailable(f"Cannot read reservations: {source}") from exc
    return [value if isinstance(value, str) else "" for value in df["record"]]


def parse_reservation(text: str, line: int) -> Reservation:
    """Parse ``<identifier> <party size>``; extra tokens are ignored."""
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError(f"line {line}: expected an identifier and a party size, got {text.strip()!r}")
    identifier, size_text = tokens[0], tokens[1]
    try:
        party_size = int(size_text)
    except ValueError:
        raise ValueError(f"line {line}: party size {size_text!r} is not a number") from None
    if party_size < 1:
        raise ValueError(f"line {line}: party size must be positive, got {party_size}")
    return Reservation(identifier=identifier, party_size=party_size, line=line)


def load_reservations(source: Path | str | IO[Any]) -> List[Reservation]:
    """Load reservations from a whitespace separated text file.

    Blank lines are skipped. Raises ``InputUnavailable`` when the file cannot
    be opened and ``ValueError`` on the first malformed line.
    """
    reservations: List[Reservation] = []
    for index, text in enumerate(_read_lines(source), start=1):
        if not text.strip():
            continue
        reservations.append(parse_reservation(text, index))
    return reservations
