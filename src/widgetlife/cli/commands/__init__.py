"""CLI commands for widgetlife."""

from .config import config
from .run import run
from .tree import tree
from .tui import tui

__all__ = ["config", "run", "tree", "tui"]
