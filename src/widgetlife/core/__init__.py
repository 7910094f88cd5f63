"""Core widget lifecycle: the Widget state machine and its states."""

from .observer import ObserverManager
from .states import ALL_ANNOTATIONS, Annotation, WidgetState
from .widget import Widget

__all__ = [
    "ALL_ANNOTATIONS",
    "Annotation",
    "ObserverManager",
    "Widget",
    "WidgetState",
]
