"""Error display for CLI commands."""

import sys
from pathlib import Path
from typing import Optional

import click

from berlinclock.exceptions import BerlinClockError


def report_error(error: BerlinClockError, log_path: Optional[Path] = None) -> None:
    """Print an ERROR banner, the recovery hint and the log location, then exit 1."""
    click.echo("=" * 70, err=True)
    click.echo(f"ERROR: {error.user_message}", err=True)
    click.echo("=" * 70, err=True)

    if error.recovery_hint:
        click.echo(f"\n{error.recovery_hint}", err=True)

    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)

    sys.exit(1)
