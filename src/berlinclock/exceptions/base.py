"""Base exception class for Berlin Clock."""

from typing import Optional


class BerlinClockError(Exception):
    """
    Root of every error berlinclock raises on purpose.

    Attributes:
        user_message: Short sentence the CLI shows after "ERROR:"
        technical_message: What gets logged; includes the offending value
        recovery_hint: What to type or edit instead, if there is one
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
