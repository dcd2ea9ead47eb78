"""Theater seating package."""
from .models import Reservation, RunResult, SeatBlock, TheaterConfig
from .engine import Theater, row_preferences
from .loader import load_reservations
from .runner import process_reservations, run

__all__ = [
    "Reservation",
    "RunResult",
    "SeatBlock",
    "TheaterConfig",
    "Theater",
    "row_preferences",
    "load_reservations",
    "process_reservations",
    "run",
]
