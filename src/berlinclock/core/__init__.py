"""Core encoding logic."""

from .encoder import (
    bottom_hours_row,
    bottom_minutes_row,
    compute,
    encode,
    generate_row,
    mark_quarters,
    seconds_row,
    top_hours_row,
    top_minutes_row,
)
from .parser import is_blank, parse_time

__all__ = [
    "bottom_hours_row",
    "bottom_minutes_row",
    "compute",
    "encode",
    "generate_row",
    "is_blank",
    "mark_quarters",
    "parse_time",
    "seconds_row",
    "top_hours_row",
    "top_minutes_row",
]
