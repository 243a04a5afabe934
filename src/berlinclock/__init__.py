"""Berlin Clock: encode a time of day as Berlin Clock lamp states."""

__version__ = "0.1.0"

from .core import compute, encode, parse_time
from .exceptions import EmptyTimeError, InvalidTimeFormatError, TimeErrorKind, TimeInputError
from .models import BerlinClock, LampState, TimeOfDay

__all__ = [
    "BerlinClock",
    "EmptyTimeError",
    "InvalidTimeFormatError",
    "LampState",
    "TimeErrorKind",
    "TimeInputError",
    "TimeOfDay",
    "compute",
    "encode",
    "parse_time",
]
