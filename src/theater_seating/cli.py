"""Command line interface for theater seating."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .exceptions import InputUnavailable, NoInputProvided, OutputUnavailable
from .models import TheaterConfig
from .output import format_report
from .runner import DEFAULT_OUTPUT, run


def build_parser() -> argparse.ArgumentParser:
    defaults = TheaterConfig()
    parser = argparse.ArgumentParser(description="Assign theater seats to group reservations")
    parser.add_argument("input", nargs="?", type=Path,
                        help="Reservation file: one '<identifier> <party size>' per line.")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT,
                        help="Where to write seat assignments (default: output.txt).")
    parser.add_argument("--rows", type=int, default=defaults.rows,
                        help=f"Number of seat rows (default: {defaults.rows}).")
    parser.add_argument("--columns", type=int, default=defaults.columns,
                        help=f"Seats per row (default: {defaults.columns}).")
    parser.add_argument("--buffer", type=int, default=defaults.buffer,
                        help=f"Empty seats kept between groups (default: {defaults.buffer}).")
    parser.add_argument("--report", action="store_true",
                        help="Print a summary of accepted and rejected reservations.")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every seating decision.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by ``theater-seating`` and ``python -m theater_seating.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        config = TheaterConfig(rows=args.rows, columns=args.columns, buffer=args.buffer)
    except ValueError as e:
        parser.error(str(e))

    try:
        result, theater, output_path = run(args.input, args.output, config)
    except NoInputProvided:
        print("No input file found.")
        return 1
    except (InputUnavailable, OutputUnavailable):
        print("Failed to open file.")
        return 1
    except ValueError as e:
        print(f"Error parsing reservations: {e}")
        return 1

    for identifier in result.rejected:
        print(f"Not enough seats for reservation: {identifier}")
    if args.report:
        print(format_report(result, theater))
    print(f"Output File Path: {output_path}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
