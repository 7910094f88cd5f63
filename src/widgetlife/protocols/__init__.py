"""Protocol definitions for widget orchestration.

This package contains:
- Events: widget lifecycle and batch events
- Observers: protocols for components that react to these events
- Lifecycle contracts: widget, host node, feedback sink and resolver shapes
"""

from .events import WidgetEvent
from .lifecycle import FeedbackSink, Resolver, WidgetHost, WidgetLifecycle
from .observers import LifecycleObserver

__all__ = [
    "FeedbackSink",
    "LifecycleObserver",
    "Resolver",
    "WidgetEvent",
    "WidgetHost",
    "WidgetLifecycle",
]
