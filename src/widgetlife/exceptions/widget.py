"""Widget lifecycle exceptions.

This module defines the per-widget error kinds raised and handled by the
orchestrator:
- WidgetResolutionError: the resolver failed or the module lacks the widget class
- WidgetLifecycleError: pre_init or post_init raised
- WidgetDestroyedError: a widget was destroyed while still initializing

Any other exception escaping `destroy()` is not wrapped; it propagates out of
`WidgetOrchestrator.teardown`.
"""

from typing import Any, Optional

from .base import WidgetLifeError


def describe_node(node: Any) -> str:
    """Short identifier for a node: id, then class list, then tag name."""
    node_id = node.get_attribute("id") if hasattr(node, "get_attribute") else None
    if node_id:
        return node_id
    classes = getattr(node, "classes", None)
    if classes:
        return " ".join(classes)
    return getattr(node, "tag", type(node).__name__)


class WidgetError(WidgetLifeError):
    """Base class for errors tied to a single widget node."""

    def __init__(
        self,
        user_message: str,
        widget_path: Optional[str] = None,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(
            user_message=user_message,
            technical_message=technical_message,
            recoverable=True,
            recovery_hint=recovery_hint,
        )
        self.widget_path = widget_path


class WidgetResolutionError(WidgetError):
    """The resolver could not provide an implementation for a type path."""

    def __init__(self, widget_path: str, reason: str):
        """
        Initialize resolution error.

        Args:
            widget_path: The widget type path that failed to resolve
            reason: Why resolution failed
        """
        super().__init__(
            user_message=f"Error in {widget_path}: {reason}",
            widget_path=widget_path,
            technical_message=f"Resolution of {widget_path!r} failed: {reason}",
            recovery_hint="Check the widget attribute value and the resolver package",
        )
        self.reason = reason


class WidgetClassNotFoundError(WidgetResolutionError):
    """The resolved module does not export the expected widget class."""

    def __init__(self, widget_path: str, class_name: str):
        """
        Initialize class-not-found error.

        Args:
            widget_path: The widget type path
            class_name: The class name derived from the type path
        """
        super().__init__(
            widget_path,
            f"Widget class {class_name} not found in {widget_path}",
        )
        self.class_name = class_name


class WidgetLifecycleError(WidgetError):
    """A widget's pre_init or post_init raised."""

    def __init__(self, widget_path: str, phase: str, reason: str, message: Optional[str] = None):
        """
        Initialize lifecycle error.

        Args:
            widget_path: The widget type path
            phase: "pre-init" or "post-init"
            reason: The underlying failure message
            message: Full user message, overriding the phase default
        """
        if message is None and phase == "post-init":
            message = f"Error in {widget_path} during post-init: {reason}"
        elif message is None:
            message = f"Error in {widget_path}: {reason}"
        super().__init__(
            user_message=message,
            widget_path=widget_path,
            technical_message=f"{phase} of {widget_path!r} failed: {reason}",
        )
        self.phase = phase
        self.reason = reason


class WidgetDestroyedError(WidgetError):
    """A widget was destroyed during initialization.

    Teardown treats this as a recognized, non-fatal condition.
    """

    def __init__(self, node: Any, widget_path: str):
        """
        Initialize destroyed-during-init error.

        Args:
            node: The markup node hosting the widget
            widget_path: The widget type path
        """
        identifier = describe_node(node)
        super().__init__(
            user_message=(
                f"Widget {identifier} (Path: {widget_path}) was destroyed during initialization."
            ),
            widget_path=widget_path,
        )
        self.node = node
