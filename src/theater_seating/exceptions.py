"""Errors that abort a seating run."""
from __future__ import annotations


class SeatingError(Exception):
    """Base class for run level failures."""


class NoInputProvided(SeatingError):
    """No reservation source was given."""


class InputUnavailable(SeatingError):
    """The reservation source could not be opened or read."""


class OutputUnavailable(SeatingError):
    """The output file could not be created or written."""
