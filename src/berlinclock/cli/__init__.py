"""Command-line interface for berlinclock."""

from .main import cli

__all__ = ["cli"]
