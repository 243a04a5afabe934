"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from berlinclock import __version__
from berlinclock.exceptions import ConfigError
from berlinclock.models import AppConfig
from berlinclock.models.config import DEFAULT_CONFIG_PATH

from .commands import config, show
from .errors import report_error

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path], log_dir: Path) -> Path:
    """Pick the log file: explicit path, ./berlinclock-debug.log, or the configured log dir."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "berlinclock-debug.log"
    return log_dir / "berlinclock.log"


def setup_logging(
    verbose: int, debug: bool, log_file: Optional[Path], log_level: str, log_dir: Path
) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
        log_dir: Directory for the default log file

    Returns:
        Path of the log file in use
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins when logging to a custom file
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file, log_dir)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="berlinclock")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f'Configuration file (default: {DEFAULT_CONFIG_PATH})'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./berlinclock-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Berlin Clock - show a time of day as Berlin Clock lamps.

    Lamps are printed as Y (yellow), R (red) and O (off), in row order:
    seconds, 5-hour blocks, hours, 5-minute blocks, minutes.

    \b
    Examples:
      # Encode a time
      berlinclock show 16:50:06

      # One line per lamp row
      berlinclock show 16:50:06 --format rows

      # Make row output the default
      berlinclock config set --output-format rows

      # Enable debug logging
      berlinclock --debug show 23:59:59
    """
    config_path = config_path or DEFAULT_CONFIG_PATH
    config_error = None

    try:
        app_config = AppConfig.load_or_default(config_path)
    except ConfigError as e:
        # 'config' subcommands still run so 'config reset' can repair the file
        if ctx.invoked_subcommand != "config":
            report_error(e)
        config_error = e
        app_config = AppConfig()

    log_path = setup_logging(verbose, debug, log_file, log_level, app_config.log_dir)
    if config_error:
        logger.warning(f"Ignoring invalid config {config_path}: {config_error.technical_message}")

    ctx.ensure_object(dict)
    ctx.obj["config"] = app_config
    ctx.obj["config_path"] = config_path
    ctx.obj["config_error"] = config_error
    ctx.obj["log_path"] = log_path


cli.add_command(show)
cli.add_command(config)

if __name__ == "__main__":
    cli()
