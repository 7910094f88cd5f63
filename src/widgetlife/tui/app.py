"""Textual browser for widget lifecycles in a markup document."""

import logging
from typing import Any, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header, Log, Tree
from textual.widgets.tree import TreeNode

from widgetlife.models import OrchestratorConfig
from widgetlife.orchestration import WidgetOrchestrator
from widgetlife.protocols import Resolver, WidgetEvent

logger = logging.getLogger(__name__)


class _TreeRefresher:
    """Lifecycle observer that redraws the tree after every widget event."""

    def __init__(self, app: "WidgetBrowser"):
        self._app = app

    def on_widget_event(self, event: WidgetEvent, node: Any, **kwargs: Any) -> None:
        self._app.refresh_tree()


class WidgetBrowser(App):
    """
    Shows the widget nodes of a document and drives them interactively.

    The left pane lists widget nodes nested by ancestry, labelled with their
    type path and current annotations. The right pane is the orchestrator's
    feedback sink.
    """

    TITLE = "widgetlife"

    CSS = """
    #widget-tree {
        width: 1fr;
    }

    #feedback {
        width: 1fr;
        border-left: solid $primary;
    }
    """

    BINDINGS = [
        Binding("i", "initialize", "Initialize", show=True),
        Binding("t", "teardown", "Teardown", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        root: Any,
        config: Optional[OrchestratorConfig] = None,
        resolver: Optional[Resolver] = None,
    ):
        """
        Args:
            root: Document or node whose widgets are managed
            config: Orchestrator settings
            resolver: Resolver override (defaults to the module resolver)
        """
        super().__init__()
        self.markup_root = root
        self.widget_config = config or OrchestratorConfig()
        self._resolver = resolver
        self.orchestrator: Optional[WidgetOrchestrator] = None
        self.last_errors: Optional[list[Exception]] = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield Tree("widgets", id="widget-tree")
            yield Log(id="feedback")
        yield Footer()

    def on_mount(self) -> None:
        feedback = self.query_one("#feedback", Log)
        self.orchestrator = WidgetOrchestrator(
            resolver=self._resolver,
            feedback=feedback,
            config=self.widget_config,
        )
        self.orchestrator.register_observer(_TreeRefresher(self))
        self.refresh_tree()

    async def action_initialize(self) -> None:
        await self.orchestrator.initialize(self.markup_root, self._on_initialized)

    def _on_initialized(self, errors: Optional[list[Exception]]) -> None:
        self.last_errors = errors
        if errors is None:
            self.notify("All widgets initialized")
        else:
            self.notify(f"{len(errors)} widget(s) failed", severity="error")

    def action_teardown(self) -> None:
        try:
            removed = self.orchestrator.teardown(self.markup_root)
        except Exception as e:
            logger.exception("Teardown aborted")
            self.notify(f"Teardown aborted: {e}", severity="error")
            self.refresh_tree()
            return
        self.notify(f"Destroyed {removed} widget(s)")
        self.refresh_tree()

    def refresh_tree(self) -> None:
        tree = self.query_one("#widget-tree", Tree)
        tree.clear()
        tree.root.expand()
        self._add_children(tree.root, self.markup_root)

    def _add_children(self, parent: TreeNode, node: Any) -> None:
        attribute = self.widget_config.widget_attribute
        for child in node.children:
            if child.has_attribute(attribute):
                branch = parent.add(self._label(child), data=child, expand=True)
                self._add_children(branch, child)
            else:
                self._add_children(parent, child)

    def _label(self, node: Any) -> str:
        path = node.get_attribute(self.widget_config.widget_attribute)
        classes = " ".join(node.classes)
        live = self.orchestrator is not None and node in self.orchestrator
        marker = "●" if live else "○"
        return f"{marker} {path} ({classes})" if classes else f"{marker} {path}"
