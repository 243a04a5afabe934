"""Time input exceptions.

This module defines the two ways a time string can be rejected:
- EmptyTimeError: nothing to parse (None, empty or blank)
- InvalidTimeFormatError: text present but not a valid hh:mm:ss time

Both carry a `kind` so callers can branch without parsing message text.
"""

from enum import Enum

from .base import BerlinClockError


class TimeErrorKind(str, Enum):
    """Closed set of time input failures."""

    EMPTY_INPUT = "empty_input"
    INVALID_FORMAT = "invalid_format"


EMPTY_TIME_MESSAGE = "The time cannot be empty or blank."
INVALID_TIME_MESSAGE = "Invalid time. Make sure the time is in the format: hh:mm:ss."


class TimeInputError(BerlinClockError):
    """A time value could not be turned into a time of day."""

    kind: TimeErrorKind

    def __init__(self, kind: TimeErrorKind, user_message: str, technical_message: str, value=None):
        super().__init__(
            user_message=user_message,
            technical_message=technical_message,
            recovery_hint="Pass a 24-hour time such as 13:05:42 (hours 0-23, minutes and seconds 0-59)",
        )
        self.kind = kind
        self.value = value


class EmptyTimeError(TimeInputError):
    """Time input is None, empty or made only of whitespace."""

    def __init__(self, value=None):
        super().__init__(
            TimeErrorKind.EMPTY_INPUT,
            EMPTY_TIME_MESSAGE,
            f"Empty time input: {value!r}",
            value=value,
        )


class InvalidTimeFormatError(TimeInputError):
    """Time input does not match hh:mm:ss or is out of range."""

    def __init__(self, value):
        super().__init__(
            TimeErrorKind.INVALID_FORMAT,
            INVALID_TIME_MESSAGE,
            f"Time input {value!r} does not match the hh:mm:ss pattern",
            value=value,
        )
