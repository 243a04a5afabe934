"""Encoded Berlin Clock model."""

from pydantic import BaseModel, ConfigDict, Field

# Lamps per row, in display order
SECONDS_LAMPS = 1
TOP_HOURS_LAMPS = 4
BOTTOM_HOURS_LAMPS = 4
TOP_MINUTES_LAMPS = 11
BOTTOM_MINUTES_LAMPS = 4

TOTAL_LAMPS = (
    SECONDS_LAMPS
    + TOP_HOURS_LAMPS
    + BOTTOM_HOURS_LAMPS
    + TOP_MINUTES_LAMPS
    + BOTTOM_MINUTES_LAMPS
)

_LAMP_PATTERN = "^[YRO]+$"


class BerlinClock(BaseModel):
    """The five lamp rows of a Berlin Clock face.

    Rows are stored as strings of lamp symbols (see ``LampState``). Each field
    is length-checked so a BerlinClock always holds exactly ``TOTAL_LAMPS``
    lamps.
    """

    model_config = ConfigDict(frozen=True)

    seconds: str = Field(
        min_length=SECONDS_LAMPS, max_length=SECONDS_LAMPS, pattern=_LAMP_PATTERN
    )
    top_hours: str = Field(
        min_length=TOP_HOURS_LAMPS, max_length=TOP_HOURS_LAMPS, pattern=_LAMP_PATTERN
    )
    bottom_hours: str = Field(
        min_length=BOTTOM_HOURS_LAMPS, max_length=BOTTOM_HOURS_LAMPS, pattern=_LAMP_PATTERN
    )
    top_minutes: str = Field(
        min_length=TOP_MINUTES_LAMPS, max_length=TOP_MINUTES_LAMPS, pattern=_LAMP_PATTERN
    )
    bottom_minutes: str = Field(
        min_length=BOTTOM_MINUTES_LAMPS, max_length=BOTTOM_MINUTES_LAMPS, pattern=_LAMP_PATTERN
    )

    @property
    def rows(self) -> tuple[str, str, str, str, str]:
        """All rows, top of the clock first."""
        return (
            self.seconds,
            self.top_hours,
            self.bottom_hours,
            self.top_minutes,
            self.bottom_minutes,
        )

    @property
    def lamps(self) -> str:
        """The 24-character lamp string, rows concatenated without separators."""
        return "".join(self.rows)

    def __str__(self) -> str:
        return self.lamps
