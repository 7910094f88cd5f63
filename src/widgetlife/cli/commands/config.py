"""Config commands: show or create the orchestrator configuration."""

from pathlib import Path
from typing import Optional

import click

from widgetlife.models import DEFAULT_CONFIG_PATH, OrchestratorConfig

from .common import config_option, fail, load_config


@click.group()
def config():
    """Show or create the configuration file."""
    pass


@config.command()
@config_option
@click.pass_context
def show(ctx, config_path: Optional[Path]):
    """Print the effective configuration as JSON."""
    widget_config = load_config(ctx, config_path)
    click.echo(widget_config.model_dump_json(indent=2))


@config.command()
@config_option
@click.option('--force', is_flag=True, help='Overwrite an existing file')
@click.pass_context
def init(ctx, config_path: Optional[Path], force: bool):
    """Write a config file with default values."""
    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists() and not force:
        click.echo(f"Config already exists: {path} (use --force to overwrite)", err=True)
        ctx.exit(1)

    try:
        OrchestratorConfig().save(path)
    except Exception as e:
        fail(ctx, e)
    click.echo(f"Wrote default config to {path}")
