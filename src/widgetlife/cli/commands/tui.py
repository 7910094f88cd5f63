"""TUI command: interactive widget browser."""

from pathlib import Path
from typing import Optional

import click

from .common import config_option, load_config, read_markup


@click.command()
@click.argument('markup_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@config_option
@click.pass_context
def tui(ctx, markup_file: Path, config_path: Optional[Path]):
    """Browse and drive the widgets of MARKUP_FILE (i: initialize, t: teardown)."""
    # Lazy import keeps textual out of non-interactive commands
    from widgetlife.tui import WidgetBrowser

    widget_config = load_config(ctx, config_path)
    document = read_markup(ctx, markup_file)
    WidgetBrowser(document, config=widget_config).run()
