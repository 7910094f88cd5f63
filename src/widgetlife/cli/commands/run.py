"""Run command: initialize (and tear down) the widgets of a markup file."""

import asyncio
from pathlib import Path
from typing import Optional

import click

from widgetlife.orchestration import FeedbackBuffer, WidgetOrchestrator

from .common import config_option, fail, load_config, read_markup


@click.command()
@click.argument('markup_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@config_option
@click.option(
    '--package',
    'resolver_package',
    default=None,
    help='Package to import widget type paths from (overrides config)'
)
@click.option(
    '--teardown/--no-teardown',
    default=True,
    help='Destroy the widgets again after initializing them (default: teardown)'
)
@click.pass_context
def run(
    ctx,
    markup_file: Path,
    config_path: Optional[Path],
    resolver_package: Optional[str],
    teardown: bool,
):
    """
    Initialize every widget in MARKUP_FILE and report the outcome.

    Exits with status 1 when any widget fails.
    """
    widget_config = load_config(ctx, config_path, resolver_package)
    attribute = widget_config.widget_attribute

    document = read_markup(ctx, markup_file)

    feedback = FeedbackBuffer()
    orchestrator = WidgetOrchestrator(feedback=feedback, config=widget_config)
    errors = asyncio.run(orchestrator.initialize(document))

    nodes = document.query_attribute(attribute)
    click.echo(f"Initialized {len(orchestrator)} of {len(nodes)} widget(s)")
    for node in nodes:
        status = "live" if node in orchestrator else "failed"
        click.echo(f"  {node.get_attribute(attribute):<24} {status:<7} {node.classes}")

    if teardown:
        try:
            orchestrator.teardown(document)
        except Exception as e:
            fail(ctx, e)
        click.echo(f"Teardown complete, {len(orchestrator)} widget(s) still registered")

    if len(feedback):
        click.echo("\nFeedback:")
        for line in feedback:
            click.echo(f"  {line}")

    if errors:
        ctx.exit(1)
