"""Data models for the Berlin Clock."""

from .clock import TOTAL_LAMPS, BerlinClock
from .config import AppConfig
from .enums import LampState, OutputFormat
from .time_of_day import TimeOfDay

__all__ = [
    "AppConfig",
    # Models
    "BerlinClock",
    "TimeOfDay",
    # Enums
    "LampState",
    "OutputFormat",
    # Constants
    "TOTAL_LAMPS",
]
