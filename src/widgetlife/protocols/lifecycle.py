"""Structural contracts consumed by the orchestrator.

- WidgetLifecycle: what any widget implementation must expose
- WidgetHost: the markup query/annotation surface a node must provide
- FeedbackSink: where human-readable completion/error lines go
"""

from collections.abc import Awaitable, Callable
from typing import Any, Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class WidgetHost(Protocol):
    """
    A markup node that can host a widget or contain widget nodes.

    Any tree structure is compatible as long as it can list tagged
    descendants in document order and read an attribute off a node.
    """

    def query_attribute(self, name: str) -> list[Any]:
        """All descendants carrying attribute `name`, in document order."""
        ...

    def get_attribute(self, name: str) -> Optional[str]:
        """Attribute value, or None if missing."""
        ...


@runtime_checkable
class WidgetLifecycle(Protocol):
    """
    The lifecycle contract every widget implementation satisfies.

    `pre_init` and `post_init` are coroutines. Both are no-ops once the
    widget has failed or been destroyed. `destroy` is idempotent.
    """

    is_being_initialized: bool
    has_failed: bool
    is_destroyed: bool

    async def pre_init(self, node: Any) -> None:
        ...

    async def post_init(self, node: Any = None) -> None:
        ...

    def fail(self, error: Exception) -> None:
        ...

    def destroy(self) -> None:
        ...


@runtime_checkable
class FeedbackSink(Protocol):
    """
    Receiver of human-readable lines.

    Textual's `Log` widget satisfies this protocol as-is.
    """

    def write_line(self, line: str) -> Any:
        ...


# A resolver maps a widget type path to a module-like object, sync or async
Resolver = Callable[[str], Union[Any, Awaitable[Any]]]
