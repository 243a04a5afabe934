"""Time input parsing and validation."""

import logging
import re
from typing import Optional

from berlinclock.exceptions import EmptyTimeError, InvalidTimeFormatError
from berlinclock.models import TimeOfDay

logger = logging.getLogger(__name__)

# Single-digit components are accepted ("9:5:1")
TIME_PATTERN = re.compile(r"(2[0-3]|[01]?[0-9]):([0-5]?[0-9]):([0-5]?[0-9])")

# Spaces that still count as content: no-break spaces and NEL
_NOT_BLANK = frozenset("\u00a0\u2007\u202f\u0085")


def is_blank(text: str) -> bool:
    """True for "" and strings made only of breaking whitespace."""
    return all(ch.isspace() and ch not in _NOT_BLANK for ch in text)


def parse_time(text: Optional[str]) -> TimeOfDay:
    """
    Parse an ``hh:mm:ss`` string into a TimeOfDay.

    Args:
        text: Time string, e.g. "16:50:06"

    Returns:
        The validated time of day

    Raises:
        EmptyTimeError: If text is None, empty or only breaking whitespace
        InvalidTimeFormatError: If text is anything else that is not a valid time
    """
    if text is None or (isinstance(text, str) and is_blank(text)):
        raise EmptyTimeError(text)

    if not isinstance(text, str):
        raise InvalidTimeFormatError(text)

    match = TIME_PATTERN.fullmatch(text)
    if match is None:
        logger.debug(f"Rejected time input {text!r}")
        raise InvalidTimeFormatError(text)

    hour, minute, second = (int(group) for group in match.groups())
    return TimeOfDay(hour=hour, minute=minute, second=second)
