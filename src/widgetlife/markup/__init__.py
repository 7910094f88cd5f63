"""Markup tree: nodes, HTML parsing and the headless document environment."""

from .environment import (
    HeadlessEnvironment,
    ensure_environment,
    is_provisioned,
)
from .node import ClassList, MarkupDocument, MarkupNode
from .parser import parse_markup, parse_markup_file

__all__ = [
    "ClassList",
    "HeadlessEnvironment",
    "MarkupDocument",
    "MarkupNode",
    "ensure_environment",
    "is_provisioned",
    "parse_markup",
    "parse_markup_file",
]
