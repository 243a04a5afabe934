"""
Config commands.

Commands:
    - config show                                   # Display configuration
    - config set --output-format rows --log-dir D   # Update configuration
    - config reset                                  # Restore defaults
"""

import logging
from pathlib import Path
from typing import Optional

import click

from berlinclock.exceptions import ConfigError
from berlinclock.models import AppConfig, OutputFormat

from ..errors import report_error

logger = logging.getLogger(__name__)


@click.group(name="config")
def config():
    """Configure Berlin Clock settings."""
    pass


@config.command(name="show")
@click.pass_context
def show_config(ctx):
    """Display the current configuration."""
    if ctx.obj["config_error"]:
        report_error(ctx.obj["config_error"], ctx.obj["log_path"])

    app_config: AppConfig = ctx.obj["config"]
    click.echo(f"Config file: {ctx.obj['config_path']}\n")
    for name, value in app_config.model_dump(mode="json").items():
        click.echo(f"  {name}: {value}")


@config.command(name="set")
@click.option(
    '--output-format',
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help='Default output format for "berlinclock show"'
)
@click.option(
    '--log-dir',
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help='Directory for the rotating log file'
)
@click.pass_context
def set_config(ctx, output_format: Optional[str], log_dir: Optional[Path]):
    """Update configuration values and save them."""
    updates = {}
    if output_format is not None:
        updates["output_format"] = output_format.lower()
    if log_dir is not None:
        updates["log_dir"] = str(log_dir)

    if not updates:
        raise click.UsageError("Nothing to set. Pass --output-format and/or --log-dir.")

    config_path: Path = ctx.obj["config_path"]
    current = ctx.obj["config"].model_dump(mode="json")

    try:
        new_config = AppConfig.from_values({**current, **updates}, config_path)
    except ConfigError as e:
        report_error(e, ctx.obj["log_path"])

    new_config.save(config_path)
    logger.info(f"Updated config {config_path}: {updates}")

    for name, value in updates.items():
        click.echo(f"[OK] {name} = {value}")


@config.command(name="reset")
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
def reset_config(ctx, yes: bool):
    """Restore the default configuration."""
    config_path: Path = ctx.obj["config_path"]

    if not yes:
        click.confirm(f"Reset {config_path} to defaults?", abort=True)

    AppConfig().save(config_path)
    logger.info(f"Reset config {config_path} to defaults")
    click.echo(f"[OK] Configuration reset: {config_path}")
