"""Observer protocol definitions for orchestration events."""

from typing import Any, Protocol, runtime_checkable

from .events import WidgetEvent


@runtime_checkable
class LifecycleObserver(Protocol):
    """
    Observer that receives widget lifecycle events from the orchestrator.

    This allows UIs (the TUI tree view, for instance) to refresh node state
    without the orchestrator knowing about them.
    """

    def on_widget_event(self, event: WidgetEvent, node: Any, **kwargs: Any) -> None:
        """
        Handle a lifecycle event.

        Args:
            event: The type of lifecycle event
            node: The markup node involved (the root for BATCH_COMPLETED)
            **kwargs: Event-specific data (``widget_path``, ``error``, ``errors``)
        """
        ...
