"""Markup tree nodes.

A `MarkupNode` is the host for a widget: it carries the widget type attribute,
an ordered class list used for state annotations, and per-event listener
lists that widgets bind their handlers to. Nodes hash by identity so they can
key the orchestrator's registry.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

logger = logging.getLogger(__name__)


class ClassList:
    """Ordered, duplicate-free list of class names on a node."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: list[str] = []
        self.add(*names)

    def add(self, *names: str) -> None:
        for name in names:
            if name and name not in self._names:
                self._names.append(name)

    def remove(self, *names: str) -> None:
        """Remove names; missing names are ignored."""
        for name in names:
            if name in self._names:
                self._names.remove(name)

    def contains(self, name: str) -> bool:
        return name in self._names

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __str__(self) -> str:
        return " ".join(self._names)

    def __repr__(self) -> str:
        return f"ClassList({self._names!r})"


class MarkupNode:
    """
    An element in a markup tree.

    Attributes:
        tag: Lower-case element name
        attributes: Attribute values (the ``class`` attribute lives in ``classes``)
        classes: Ordered class list
        children: Child nodes in document order
        parent: Parent node, or None for a detached node or the document
        owner_document: Document this node was created by, if any
        text: Concatenated character data directly inside this node
    """

    def __init__(
        self,
        tag: str,
        attributes: Optional[dict[str, str]] = None,
        owner_document: Optional["MarkupNode"] = None,
    ) -> None:
        self.tag = tag.lower()
        self.attributes: dict[str, str] = {}
        self.classes = ClassList()
        self.children: list[MarkupNode] = []
        self.parent: Optional[MarkupNode] = None
        self.owner_document = owner_document
        self.text = ""
        self._listeners: dict[str, list[Callable[..., Any]]] = {}

        for name, value in (attributes or {}).items():
            self.set_attribute(name, value)

    # =================================================================
    # Attributes
    # =================================================================

    def get_attribute(self, name: str) -> Optional[str]:
        if name == "class":
            return str(self.classes) if self.classes else None
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: Optional[str]) -> None:
        value = "" if value is None else str(value)
        if name == "class":
            self.classes = ClassList(value.split())
        else:
            self.attributes[name] = value

    def has_attribute(self, name: str) -> bool:
        if name == "class":
            return bool(self.classes)
        return name in self.attributes

    def remove_attribute(self, name: str) -> None:
        if name == "class":
            self.classes = ClassList()
        else:
            self.attributes.pop(name, None)

    @property
    def id(self) -> Optional[str]:
        return self.attributes.get("id")

    # =================================================================
    # Tree structure
    # =================================================================

    def append_child(self, child: "MarkupNode") -> "MarkupNode":
        """Append `child`, detaching it from any previous parent."""
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: "MarkupNode") -> "MarkupNode":
        self.children.remove(child)
        child.parent = None
        return child

    def iter_descendants(self) -> Iterator["MarkupNode"]:
        """Yield descendants in document (pre-order) order, excluding self."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def query_attribute(self, name: str) -> list["MarkupNode"]:
        """All descendants carrying attribute `name`, in document order."""
        return [node for node in self.iter_descendants() if node.has_attribute(name)]

    def find(self, tag: str) -> Optional["MarkupNode"]:
        """First descendant with the given tag."""
        tag = tag.lower()
        for node in self.iter_descendants():
            if node.tag == tag:
                return node
        return None

    def get_element_by_id(self, node_id: str) -> Optional["MarkupNode"]:
        for node in self.iter_descendants():
            if node.id == node_id:
                return node
        return None

    # =================================================================
    # Events
    # =================================================================

    def add_event_listener(self, event: str, listener: Callable[..., Any]) -> None:
        listeners = self._listeners.setdefault(event, [])
        if listener not in listeners:
            listeners.append(listener)

    def remove_event_listener(self, event: str, listener: Callable[..., Any]) -> None:
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)
        if not listeners:
            self._listeners.pop(event, None)

    def listeners(self, event: str) -> list[Callable[..., Any]]:
        return list(self._listeners.get(event, []))

    def dispatch_event(self, event: str, *args: Any, **kwargs: Any) -> int:
        """
        Call every listener registered for `event`.

        Returns:
            Number of listeners called
        """
        listeners = self.listeners(event)
        for listener in listeners:
            listener(*args, **kwargs)
        logger.debug(f"Dispatched {event!r} on <{self.tag}> to {len(listeners)} listener(s)")
        return len(listeners)

    def __repr__(self) -> str:
        parts = [self.tag]
        if self.id:
            parts.append(f"id={self.id!r}")
        if self.classes:
            parts.append(f"class={str(self.classes)!r}")
        return f"<MarkupNode {' '.join(parts)}>"


class MarkupDocument(MarkupNode):
    """Root of a markup tree; creates elements owned by itself."""

    def __init__(self) -> None:
        super().__init__("#document")

    def create_element(self, tag: str, attributes: Optional[dict[str, str]] = None) -> MarkupNode:
        return MarkupNode(tag, attributes, owner_document=self)

    @property
    def document_element(self) -> Optional[MarkupNode]:
        return self.children[0] if self.children else None

    @property
    def body(self) -> MarkupNode:
        """The ``<body>`` element, or the document itself when there is none."""
        return self.find("body") or self
