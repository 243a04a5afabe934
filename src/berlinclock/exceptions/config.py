"""Configuration file errors."""

from pathlib import Path
from typing import Optional

from .base import BerlinClockError


class ConfigError(BerlinClockError):
    """The config file exists but cannot be used.

    Raised for empty files, broken JSON and values AppConfig rejects. The
    file is never rewritten when this is raised.
    """

    def __init__(self, path: Path, reason: str, field: Optional[str] = None):
        self.path = Path(path)
        self.reason = reason
        self.field = field

        where = f"'{field}' in {self.path}" if field else str(self.path)
        super().__init__(
            user_message=f"Cannot use configuration {where}: {reason}",
            technical_message=f"Config {self.path} rejected (field={field}): {reason}",
            recovery_hint=(
                f"Fix {self.path} by hand, or run 'berlinclock config reset' "
                "to write defaults (the old file is kept as .bak)"
            ),
        )
