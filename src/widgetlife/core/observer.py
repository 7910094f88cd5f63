"""Observer list used by the orchestrator to publish lifecycle events."""

import logging
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Ordered set of observers with fault-isolated notification.

    Notification runs on the caller's thread and iterates over a snapshot, so
    an observer may unregister itself (or others) from inside its callback.
    A raising observer is logged and skipped; it never reaches the notifier.

    Example:
        ```python
        observers = ObserverManager[LifecycleObserver]("lifecycle")
        observers.register(tree_view)
        observers.notify("on_widget_event", WidgetEvent.INITIALIZED, node)
        ```
    """

    def __init__(self, observer_type_name: str = "observer"):
        self._observers: list[T] = []
        self._kind = observer_type_name

    def register(self, observer: T) -> None:
        """Add `observer` unless it is already registered."""
        if observer in self._observers:
            logger.debug(f"{self._kind} observer already registered: {observer}")
            return
        self._observers.append(observer)
        logger.info(f"Registered {self._kind} observer: {observer}")

    def unregister(self, observer: T) -> None:
        try:
            self._observers.remove(observer)
        except ValueError:
            logger.warning(f"Cannot unregister unknown {self._kind} observer: {observer}")
            return
        logger.debug(f"Unregistered {self._kind} observer: {observer}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """Call ``observer.<callback_name>(*args, **kwargs)`` on every observer."""
        for observer in tuple(self._observers):
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(f"{self._kind} observer {observer} has no method '{callback_name}'")
                continue
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"{self._kind} observer {observer} failed in {callback_name}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        if self._observers:
            logger.info(f"Clearing {len(self._observers)} {self._kind} observer(s)")
        self._observers.clear()

    def __contains__(self, observer: T) -> bool:
        return observer in self._observers

    def __len__(self) -> int:
        return len(self._observers)

    def __bool__(self) -> bool:
        return bool(self._observers)
