"""
Widget orchestrator: discovery, two-phase initialization and teardown.

Architecture:
    WidgetOrchestrator (this class)
    ├── Registry: markup node -> widget instance (live widgets only)
    ├── Resolver: type path -> module exporting Widget<NAME>
    ├── Feedback sink (optional): human-readable lines
    └── Observers: LifecycleObserver objects (TUI, tests)

Everything runs sequentially on one event loop. Each awaited lifecycle call
finishes before the next widget is touched, so the registry needs no locking.

Error policy:
    - Resolution and lifecycle errors are collected per node; the batch goes on.
    - WidgetDestroyedError during teardown is logged; teardown goes on.
    - Any other error from destroy() propagates and stops the teardown.
      Callers must treat a raising teardown as partially completed.
    - A failing feedback sink or observer is logged and skipped.
    - A widget whose pre-init failed is destroyed before it is dropped, so
      none of its event handlers stay bound to the node.
"""

import inspect
import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Optional

from widgetlife.core import Annotation, ObserverManager
from widgetlife.exceptions import (
    ErrorCollector,
    WidgetClassNotFoundError,
    WidgetDestroyedError,
    WidgetLifecycleError,
    WidgetResolutionError,
    collect_errors,
)
from widgetlife.markup import ensure_environment, is_provisioned
from widgetlife.models import OrchestratorConfig
from widgetlife.protocols import (
    FeedbackSink,
    LifecycleObserver,
    Resolver,
    WidgetEvent,
    WidgetHost,
    WidgetLifecycle,
)

from .resolver import ModuleResolver, lookup_widget_class, widget_class_name

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[Optional[list[Exception]]], Any]


class WidgetOrchestrator:
    """
    Finds widget nodes under a root and drives their lifecycles.

    The registry only ever holds widgets whose pre_init succeeded and that
    have not been destroyed. Nodes already registered are skipped by later
    `initialize` calls.
    """

    def __init__(
        self,
        resolver: Optional[Resolver] = None,
        feedback: Optional[FeedbackSink] = None,
        config: Optional[OrchestratorConfig] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            resolver: Type path -> module lookup (defaults to a ModuleResolver
                over ``config.resolver_package``)
            feedback: Optional sink for completion and error lines
            config: Discovery and resolution settings
        """
        self.config = config or OrchestratorConfig()
        self.resolver: Resolver = resolver or ModuleResolver(self.config.resolver_package)
        self.feedback = feedback
        self._widgets: dict[Any, WidgetLifecycle] = {}
        self._observers = ObserverManager[LifecycleObserver](observer_type_name="lifecycle")

        # Widgets may create elements during pre_init; make sure a document exists
        if not is_provisioned():
            logger.debug("Provisioning headless markup document")
        self.document = ensure_environment()

    # =================================================================
    # Registry access (read-only)
    # =================================================================

    @property
    def registry(self) -> Mapping[Any, WidgetLifecycle]:
        return MappingProxyType(self._widgets)

    def get_widget(self, node: Any) -> Optional[WidgetLifecycle]:
        return self._widgets.get(node)

    def __len__(self) -> int:
        return len(self._widgets)

    def __contains__(self, node: Any) -> bool:
        return node in self._widgets

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: LifecycleObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: LifecycleObserver) -> None:
        self._observers.unregister(observer)

    def _notify_observers(self, event: WidgetEvent, node: Any, **kwargs: Any) -> None:
        self._observers.notify("on_widget_event", event, node, **kwargs)

    # =================================================================
    # Initialization
    # =================================================================

    async def initialize(
        self, root: WidgetHost, on_complete: Optional[CompletionCallback] = None
    ) -> Optional[list[Exception]]:
        """
        Initialize every widget under `root` that is not registered yet.

        `on_complete` is called exactly once, with None when every widget
        succeeded or with the errors in the order they occurred (all pre-init
        failures come before post-init failures). Nothing is raised: a failure
        outside any single widget, such as the tree query itself, is reported
        as a one-element list.

        Args:
            root: Node whose descendants are searched for widget nodes
            on_complete: Completion callback

        Returns:
            The same value passed to `on_complete`
        """
        try:
            collector = await self._initialize_tree(root)
            errors = collector.exceptions
            if collector.has_errors:
                logger.warning(collector.get_summary())
        except Exception as e:
            logger.error(f"Widget initialization aborted: {e}", exc_info=True)
            errors = [e]

        result = errors or None
        if on_complete is not None:
            on_complete(result)

        for error in errors:
            self._write_feedback(str(error))
        self._notify_observers(WidgetEvent.BATCH_COMPLETED, root, errors=list(errors))
        return result

    async def _initialize_tree(self, root: WidgetHost) -> ErrorCollector:
        nodes = self._discover(root)
        collector = collect_errors("initialize widgets")
        logger.debug(f"Discovered {len(nodes)} widget node(s) under {root!r}")

        # Pass 1: every widget in the subtree is bound before any post_init runs
        pending: list[Any] = []
        for node in nodes:
            if node in self._widgets:
                logger.debug(f"Skipping already registered widget {self._widget_path(node)}")
                continue
            if await self._pre_init_node(node, collector):
                pending.append(node)

        # Pass 2: same document order, only widgets registered by pass 1
        for node in pending:
            await self._post_init_node(node, collector)

        return collector

    async def _pre_init_node(self, node: Any, collector: ErrorCollector) -> bool:
        widget_path = self._widget_path(node)
        widget: Optional[WidgetLifecycle] = None
        try:
            widget_class = await self._resolve_class(widget_path)
            widget = widget_class()
            await widget.pre_init(node)
        except WidgetResolutionError as e:
            self._record_failure(node, widget_path, e, collector)
            return False
        except Exception as e:
            error = WidgetLifecycleError(widget_path, "pre-init", str(e))
            error.__cause__ = e
            self._discard(widget, widget_path)
            self._record_failure(node, widget_path, error, collector)
            return False

        if widget.has_failed:
            # The widget called fail() itself
            error = WidgetLifecycleError(
                widget_path,
                "pre-init",
                str(getattr(widget, "error", None) or "failed"),
                message=f"Widget {widget_path} failed during pre-initialization.",
            )
            self._discard(widget, widget_path)
            self._record_failure(node, widget_path, error, collector)
            return False

        self._widgets[node] = widget
        collector.success_count += 1
        logger.debug(f"Pre-initialized widget {widget_path}")
        self._notify_observers(WidgetEvent.PRE_INITIALIZED, node, widget_path=widget_path)
        return True

    async def _post_init_node(self, node: Any, collector: ErrorCollector) -> None:
        widget = self._widgets.get(node)
        if widget is None or widget.has_failed:
            return

        widget_path = self._widget_path(node)
        try:
            await widget.post_init(node)
        except Exception as e:
            # The widget stays registered so teardown can still destroy it
            error = WidgetLifecycleError(widget_path, "post-init", str(e))
            error.__cause__ = e
            self._record_failure(node, widget_path, error, collector)
            return

        if widget.has_failed:
            error = WidgetLifecycleError(
                widget_path,
                "post-init",
                str(getattr(widget, "error", None) or "failed"),
                message=f"Widget {widget_path} failed during post-initialization.",
            )
            self._record_failure(node, widget_path, error, collector, annotate=False)
            return

        self._annotate(node, Annotation.INITIALIZED)
        logger.info(f"Widget {widget_path} initialized.")
        self._notify_observers(WidgetEvent.INITIALIZED, node, widget_path=widget_path)

    async def _resolve_class(self, widget_path: str) -> type:
        """
        Resolve a type path to its widget class.

        Raises:
            WidgetResolutionError: The resolver failed
            WidgetClassNotFoundError: The module lacks the derived class name
        """
        try:
            module = self.resolver(widget_path)
            if inspect.isawaitable(module):
                module = await module
        except WidgetResolutionError:
            raise
        except Exception as e:
            raise WidgetResolutionError(widget_path, str(e)) from e

        class_name = widget_class_name(widget_path, self.config.class_prefix)
        widget_class = lookup_widget_class(module, class_name)
        if widget_class is None:
            raise WidgetClassNotFoundError(widget_path, class_name)
        return widget_class

    def _record_failure(
        self,
        node: Any,
        widget_path: str,
        error: Exception,
        collector: ErrorCollector,
        annotate: bool = True,
    ) -> None:
        logger.error(str(error))
        if annotate:
            self._annotate(node, Annotation.FAILED)
        collector.add(widget_path, error)
        self._notify_observers(WidgetEvent.FAILED, node, widget_path=widget_path, error=error)

    def _discard(self, widget: Optional[WidgetLifecycle], widget_path: str) -> None:
        """
        Undo a partial pre_init of a widget that will not be registered.

        destroy() unbinds the widget's event handlers and clears its
        annotations, so a retry starts from a clean node. The caller
        re-annotates the node as failed afterwards.
        """
        if widget is None or widget.is_destroyed:
            return
        try:
            widget.destroy()
        except Exception as e:
            logger.warning(f"Cleanup of failed widget {widget_path} raised: {e}", exc_info=True)

    # =================================================================
    # Teardown
    # =================================================================

    def teardown(self, root: WidgetHost) -> int:
        """
        Destroy every registered widget under `root`, last node first.

        Reverse document order means children go before their parents.

        Args:
            root: Node whose descendants are searched for widget nodes

        Returns:
            Number of registry entries removed

        Raises:
            Exception: Anything other than WidgetDestroyedError raised by a
                widget's destroy(). Widgets later in the reverse order are
                left untouched.
        """
        removed = 0
        for node in reversed(self._discover(root)):
            widget_path = self._widget_path(node)
            widget = self._widgets.get(node)

            if widget is None or widget.is_destroyed:
                logger.debug(f"No instance found or already destroyed for {widget_path}")
                if widget is not None:
                    del self._widgets[node]
                continue

            try:
                widget.destroy()
            except WidgetDestroyedError as e:
                logger.error(e.user_message)
                self._write_feedback(e.user_message)
                del self._widgets[node]
                removed += 1
                self._notify_observers(WidgetEvent.DESTROYED, node, widget_path=widget_path, error=e)
                continue

            del self._widgets[node]
            removed += 1
            logger.info(f"Widget {widget_path} destroyed.")
            if self.config.report_destroyed:
                self._write_feedback(f"Widget {widget_path} destroyed.")
            self._notify_observers(WidgetEvent.DESTROYED, node, widget_path=widget_path)

        return removed

    # =================================================================
    # Helpers
    # =================================================================

    def _discover(self, root: WidgetHost) -> list[Any]:
        return list(root.query_attribute(self.config.widget_attribute))

    def _widget_path(self, node: Any) -> str:
        return node.get_attribute(self.config.widget_attribute) or ""

    def _annotate(self, node: Any, annotation: Annotation) -> None:
        classes = getattr(node, "classes", None)
        if classes is not None:
            classes.add(annotation.value)

    def _write_feedback(self, line: str) -> None:
        """Write to the sink; a failing sink is logged and never interrupts a batch."""
        if self.feedback is None:
            return
        try:
            self.feedback.write_line(line)
        except Exception as e:
            logger.error(f"Feedback sink {self.feedback!r} failed: {e}", exc_info=True)
