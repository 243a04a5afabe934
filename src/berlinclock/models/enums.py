"""Enumerations for the Berlin Clock."""

from enum import Enum


class LampState(str, Enum):
    """Lamp symbols as they appear in the encoded output."""

    YELLOW = "Y"  # Lit, yellow lamp
    RED = "R"  # Lit, red lamp
    OFF = "O"  # Unlit


class OutputFormat(str, Enum):
    """How the CLI prints an encoded clock."""

    COMPACT = "compact"  # Single 24-character line
    ROWS = "rows"  # One line per lamp row
