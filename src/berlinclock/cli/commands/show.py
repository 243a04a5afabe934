"""Show command: encode a time and print its lamps."""

import logging
from typing import Optional

import click

from berlinclock.core import encode, parse_time
from berlinclock.exceptions import TimeInputError
from berlinclock.models import OutputFormat

from ..errors import report_error

logger = logging.getLogger(__name__)

ROW_LABELS = ("seconds", "hours x5", "hours", "minutes x5", "minutes")


@click.command(name="show")
@click.argument("time_text", metavar="TIME")
@click.option(
    '--format',
    '-f',
    'output_format',
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help='compact (one line) or rows (one line per row); defaults to the configured format'
)
@click.option('--labels/--no-labels', default=False, help='Prefix each row with its name (rows format only)')
@click.pass_context
def show(ctx, time_text: str, output_format: Optional[str], labels: bool):
    """Print the Berlin Clock lamps for TIME (hh:mm:ss)."""
    fmt = OutputFormat(output_format.lower()) if output_format else ctx.obj["config"].output_format

    try:
        clock = encode(parse_time(time_text))
    except TimeInputError as e:
        logger.warning(f"Rejected time ({e.kind.value}): {e.technical_message}")
        report_error(e, ctx.obj["log_path"])

    logger.info(f"{time_text} -> {clock.lamps}")

    if fmt is OutputFormat.COMPACT:
        click.echo(clock.lamps)
        return

    width = max(len(label) for label in ROW_LABELS)
    for label, row in zip(ROW_LABELS, clock.rows):
        if labels:
            click.echo(f"{label:<{width}}  {row}")
        else:
            click.echo(row)
