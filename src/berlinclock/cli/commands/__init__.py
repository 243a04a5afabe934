"""CLI commands for berlinclock."""

from .config import config
from .show import show

__all__ = ["config", "show"]
