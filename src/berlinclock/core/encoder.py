"""Lamp encoder: maps a time of day onto Berlin Clock lamp rows.

Rows, top to bottom:

    seconds         1 lamp   Y on even seconds, O on odd
    top hours       4 lamps  R per full 5 hours
    bottom hours    4 lamps  R per remaining hour
    top minutes    11 lamps  Y per full 5 minutes, every third one R
    bottom minutes  4 lamps  Y per remaining minute

All functions are pure and return new strings.
"""

import logging
from typing import Optional

from berlinclock.core.parser import parse_time
from berlinclock.models import BerlinClock, LampState, TimeOfDay
from berlinclock.models.clock import (
    BOTTOM_HOURS_LAMPS,
    BOTTOM_MINUTES_LAMPS,
    TOP_HOURS_LAMPS,
    TOP_MINUTES_LAMPS,
)

logger = logging.getLogger(__name__)

QUARTER_EVERY = 3


def generate_row(lit_count: int, row_length: int, lit_color: LampState) -> str:
    """
    Build a row with ``lit_count`` lit lamps followed by unlit lamps.

    ``lit_count`` is clamped to ``[0, row_length]``.

    Example:
        >>> generate_row(3, 4, LampState.RED)
        'RRRO'
    """
    lit_count = max(0, min(lit_count, row_length))
    return lit_color.value * lit_count + LampState.OFF.value * (row_length - lit_count)


def seconds_row(second: int) -> str:
    """Y when the second is even, O when odd."""
    return LampState.YELLOW.value if second % 2 == 0 else LampState.OFF.value


def top_hours_row(hour: int) -> str:
    return generate_row(hour // 5, TOP_HOURS_LAMPS, LampState.RED)


def bottom_hours_row(hour: int) -> str:
    return generate_row(hour % 5, BOTTOM_HOURS_LAMPS, LampState.RED)


def mark_quarters(row: str) -> str:
    """
    Recolor every third lit lamp of a top-minutes row red.

    Positions are counted from 1 within the lit prefix, so only lamps 3, 6
    and 9 can change. Unlit lamps are left alone.
    """
    lamps = list(row)
    for index, lamp in enumerate(lamps):
        if lamp == LampState.OFF.value:
            break
        if (index + 1) % QUARTER_EVERY == 0:
            lamps[index] = LampState.RED.value
    return "".join(lamps)


def top_minutes_row(minute: int) -> str:
    return mark_quarters(generate_row(minute // 5, TOP_MINUTES_LAMPS, LampState.YELLOW))


def bottom_minutes_row(minute: int) -> str:
    return generate_row(minute % 5, BOTTOM_MINUTES_LAMPS, LampState.YELLOW)


def encode(time_of_day: TimeOfDay) -> BerlinClock:
    """
    Encode a validated time of day into its five lamp rows.

    Args:
        time_of_day: Time to encode

    Returns:
        BerlinClock holding the rows; ``.lamps`` gives the 24-character string
    """
    return BerlinClock(
        seconds=seconds_row(time_of_day.second),
        top_hours=top_hours_row(time_of_day.hour),
        bottom_hours=bottom_hours_row(time_of_day.hour),
        top_minutes=top_minutes_row(time_of_day.minute),
        bottom_minutes=bottom_minutes_row(time_of_day.minute),
    )


def compute(text: Optional[str]) -> str:
    """
    Convert an ``hh:mm:ss`` string into its 24-character Berlin Clock lamps.

    Args:
        text: Time string, e.g. "23:59:59"

    Returns:
        Lamp string made of Y, R and O, e.g. "ORRRRRRROYYRYYRYYRYYYYYY"

    Raises:
        EmptyTimeError: If text is None, empty or only whitespace
        InvalidTimeFormatError: If text is not a valid hh:mm:ss time
    """
    lamps = encode(parse_time(text)).lamps
    logger.debug(f"Encoded {text!r} as {lamps}")
    return lamps
