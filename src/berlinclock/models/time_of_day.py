"""Time-of-day model."""

from pydantic import BaseModel, ConfigDict, Field


class TimeOfDay(BaseModel):
    """A validated hour/minute/second triple within a single day.

    The model is frozen: once parsed, a time of day is never mutated.
    """

    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0, le=23, description="Hour (0-23)")
    minute: int = Field(ge=0, le=59, description="Minute (0-59)")
    second: int = Field(ge=0, le=59, description="Second (0-59)")

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
