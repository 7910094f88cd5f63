"""Textual user interface."""

from .app import WidgetBrowser

__all__ = ["WidgetBrowser"]
