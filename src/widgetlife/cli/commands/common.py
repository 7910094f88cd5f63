"""Helpers shared by CLI commands."""

import logging
from pathlib import Path
from typing import Optional

import click

from widgetlife.exceptions import ErrorContext, format_error_for_display
from widgetlife.markup import MarkupDocument, parse_markup_file
from widgetlife.models import OrchestratorConfig

logger = logging.getLogger(__name__)

config_option = click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.widgetlife/config.json)'
)


def fail(ctx: click.Context, error: Exception) -> None:
    """Print a clean error message and exit with status 1."""
    logger.error(f"Command failed: {error}", exc_info=True)
    user_message, recovery_hint = format_error_for_display(error)

    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    log_path = (ctx.obj or {}).get("log_path")
    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
    ctx.exit(1)


def load_config(
    ctx: click.Context,
    config_path: Optional[Path],
    resolver_package: Optional[str] = None,
) -> OrchestratorConfig:
    """Load the config (or defaults), applying command line overrides."""
    try:
        widget_config = OrchestratorConfig.load_or_default(config_path)
        if resolver_package:
            widget_config = OrchestratorConfig.model_validate(
                {**widget_config.model_dump(), "resolver_package": resolver_package}
            )
    except Exception as e:
        fail(ctx, e)
    return widget_config


def widget_depth(node, widget_nodes: set) -> int:
    """Number of widget-hosting ancestors of `node`."""
    depth = 0
    parent = node.parent
    while parent is not None:
        if parent in widget_nodes:
            depth += 1
        parent = parent.parent
    return depth


def read_markup(ctx: click.Context, markup_file: Path) -> MarkupDocument:
    """Parse MARKUP_FILE, exiting with a clean error when it cannot be read."""
    with ErrorContext(f"parse {markup_file}", logger, re_raise=False) as parsing:
        document = parse_markup_file(markup_file)
    if parsing.error is not None:
        fail(ctx, parsing.error)
    return document
