"""Base widget with a two-phase lifecycle.

A widget is bound to one markup node. The orchestrator drives it through
``pre_init`` (structural setup, run for every widget in a subtree first) and
``post_init`` (logic that may rely on neighbouring widgets existing), and
later ``destroy``. The node's class list mirrors the lifecycle:

    pre_init   -> + pre-initialized, - finished
    post_init  -> + initialized, - pre-initialized
    fail       -> + failed
    finish     -> + finished
    destroy    -> - all of the above

Subclasses override ``pre_init``/``post_init``, call ``super()`` first and
funnel their own errors into ``fail`` instead of letting them escape:

```python
class WidgetClock(Widget):
    async def pre_init(self, node):
        try:
            await super().pre_init(node)
            self.timezone = node.get_attribute("data-tz") or "UTC"
        except Exception as e:
            self.fail(e)

    def tick_handler(self, now):
        self.node.text = now.strftime("%H:%M")
```

Methods named ``<event>_handler`` are registered as listeners for
``<event>`` on the node during ``pre_init`` and removed on ``destroy``.
"""

import logging
from collections.abc import Callable
from typing import Any, Optional

from .states import ALL_ANNOTATIONS, Annotation, WidgetState

logger = logging.getLogger(__name__)

HANDLER_SUFFIX = "_handler"


class Widget:
    """
    Lifecycle state machine for a single widget.

    Attributes:
        node: The bound markup node (None until pre_init)
        is_being_initialized: True between pre_init and a successful post_init
        has_failed: Set permanently by fail()
        is_destroyed: Set permanently by the first destroy()
        error: The error passed to fail(), if any
    """

    def __init__(self) -> None:
        self.node: Optional[Any] = None
        self.is_being_initialized = False
        self.has_failed = False
        self.is_destroyed = False
        self.error: Optional[Exception] = None
        self._bound_handlers: dict[str, Callable[..., Any]] = {}

    @property
    def state(self) -> WidgetState:
        if self.is_destroyed:
            return WidgetState.DESTROYED
        if self.has_failed:
            return WidgetState.FAILED
        if self.is_being_initialized:
            return WidgetState.PRE_INITIALIZING
        if self.node is not None:
            return WidgetState.INITIALIZED
        return WidgetState.UNINITIALIZED

    async def pre_init(self, node: Any) -> None:
        """
        Bind the widget to its node and mark it pre-initialized.

        Args:
            node: The markup node hosting this widget
        """
        if self.has_failed or self.is_destroyed:
            return
        self.is_being_initialized = True
        self.node = node
        self._bind_event_handlers()
        self._set_pre_init_state()

    async def post_init(self, node: Any = None) -> None:
        """Finish initialization and mark the node initialized."""
        if self.has_failed or self.is_destroyed:
            return
        if self.node is None:
            self.node = node
        self._set_post_init_state()
        self.is_being_initialized = False

    def fail(self, error: Exception) -> None:
        """
        Mark the widget as failed.

        Safe to call from inside pre_init/post_init error handling, and
        before any node has been bound.

        Args:
            error: The error that caused the widget to fail
        """
        self.has_failed = True
        self.error = error
        if self.node is not None:
            self.node.classes.add(Annotation.FAILED.value)
        logger.error(f"Widget failed to initialize: {error}")

    def finish(self) -> None:
        """Mark the widget's node as finished."""
        if self.node is not None:
            self.node.classes.add(Annotation.FINISHED.value)
        logger.info("Widget marked as finished.")

    def destroy(self) -> None:
        """
        Remove handler bindings and annotations, and mark the widget destroyed.

        Only the first call does any cleanup; repeat calls log and return.
        """
        if self.is_destroyed:
            logger.debug("Widget already destroyed.")
            return
        self.is_destroyed = True
        self._remove_event_handlers()
        self._reset_state()
        logger.info("Widget destroyed and state reset.")

    # =================================================================
    # Event handler binding
    # =================================================================

    def _handler_names(self) -> list[str]:
        names = {
            name for name in dir(type(self))
            if name.endswith(HANDLER_SUFFIX) and not name.startswith("_")
            and callable(getattr(type(self), name, None))
        }
        names.update(
            name for name, value in vars(self).items()
            if name.endswith(HANDLER_SUFFIX) and not name.startswith("_") and callable(value)
        )
        return sorted(names)

    def _bind_event_handlers(self) -> None:
        """Register every ``<event>_handler`` as a listener on the node."""
        for name in self._handler_names():
            event = name[: -len(HANDLER_SUFFIX)]
            handler = getattr(self, name)
            self._bound_handlers[event] = handler
            if self.node is not None and hasattr(self.node, "add_event_listener"):
                self.node.add_event_listener(event, handler)

    def _remove_event_handlers(self) -> None:
        for event, handler in self._bound_handlers.items():
            if self.node is not None and hasattr(self.node, "remove_event_listener"):
                self.node.remove_event_listener(event, handler)
        self._bound_handlers.clear()

    # =================================================================
    # Node annotations
    # =================================================================

    def _set_pre_init_state(self) -> None:
        self.node.classes.add(Annotation.PRE_INITIALIZED.value)
        self.node.classes.remove(Annotation.FINISHED.value)

    def _set_post_init_state(self) -> None:
        if self.node is None:
            return
        self.node.classes.add(Annotation.INITIALIZED.value)
        self.node.classes.remove(Annotation.PRE_INITIALIZED.value)

    def _reset_state(self) -> None:
        if self.node is not None:
            self.node.classes.remove(*ALL_ANNOTATIONS)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} state={self.state.value}>"
