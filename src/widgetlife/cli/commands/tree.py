"""Tree command: list widget nodes in document order."""

from pathlib import Path
from typing import Optional

import click

from widgetlife.orchestration import widget_class_name

from .common import config_option, load_config, read_markup, widget_depth


@click.command()
@click.argument('markup_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@config_option
@click.pass_context
def tree(ctx, markup_file: Path, config_path: Optional[Path]):
    """List the widget nodes of MARKUP_FILE and the classes they resolve to."""
    widget_config = load_config(ctx, config_path)
    attribute = widget_config.widget_attribute

    document = read_markup(ctx, markup_file)
    nodes = document.query_attribute(attribute)

    if not nodes:
        click.echo("No widget nodes found.")
        return

    widget_nodes = set(nodes)
    for index, node in enumerate(nodes):
        path = node.get_attribute(attribute)
        indent = "  " * widget_depth(node, widget_nodes)
        node_id = f"#{node.id}" if node.id else ""
        class_name = widget_class_name(path, widget_config.class_prefix)
        click.echo(f"[{index}] {indent}{path} <{node.tag}{node_id}> -> {class_name}")
