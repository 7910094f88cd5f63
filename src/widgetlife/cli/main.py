"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from .commands import config, run, tree, tui

logger = logging.getLogger(__name__)

LOG_DIR = Path.home() / ".widgetlife" / "logs"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_level(verbose: int, debug: bool) -> int:
    if debug or verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Send log records to a rotating file.

    Without `log_file` the level follows -v/--debug and records go to
    ~/.widgetlife/logs/widgetlife.log (./widgetlife-debug.log with --debug).
    With `log_file`, `log_level` decides the level.

    Returns:
        Path of the log file
    """
    if log_file:
        level = getattr(logging, log_level.upper())
        log_path = log_file
    elif debug:
        level = logging.DEBUG
        log_path = Path.cwd() / "widgetlife-debug.log"
    else:
        level = _console_level(verbose, debug)
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        log_path = LOG_DIR / "widgetlife.log"

    # 5 x 10MB
    handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.info(f"Logging to {log_path} at {logging.getLevelName(level)}")
    return log_path


@click.group()
@click.version_option(version="0.1.0", prog_name="widgetlife")
@click.option('-v', '--verbose', count=True, help='Increase verbosity (-v: INFO, -vv: DEBUG)')
@click.option(
    '--debug',
    is_flag=True,
    help='DEBUG level, logging to ./widgetlife-debug.log'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Write the log here instead of ~/.widgetlife/logs/widgetlife.log'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Level used with --log-file (default: INFO)'
)
@click.pass_context
def cli(ctx, verbose: int, debug: bool, log_file: Optional[Path], log_level: str):
    """
    widgetlife - run the widgets declared in a markup document.

    Nodes carrying a widget attribute (widget="widgets/a" by default) are
    resolved to Widget classes, pre-initialized, post-initialized and,
    optionally, torn down again.

    \b
    Examples:
      # Initialize and tear down every widget in a page
      widgetlife run page.html

      # Keep widgets alive (skip teardown) and use a custom config
      widgetlife run page.html --no-teardown --config ./widgetlife.json

      # List widget nodes in document order
      widgetlife tree page.html

      # Interactive browser
      widgetlife tui page.html
    """
    ctx.ensure_object(dict)
    ctx.obj["log_path"] = setup_logging(verbose, debug, log_file, log_level)


cli.add_command(run)
cli.add_command(tree)
cli.add_command(tui)
cli.add_command(config)

if __name__ == "__main__":
    cli()
