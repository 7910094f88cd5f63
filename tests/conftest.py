"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from widgetlife.core import Widget
from widgetlife.markup import parse_markup
from widgetlife.orchestration import FeedbackBuffer, RegistryResolver, WidgetOrchestrator

# A contains B; C is A's sibling. Document order: a, b, c
NESTED_PAGE = """
<html><body>
  <div id="root">
    <section id="a" widget="a"><span id="b" widget="b"></span></section>
    <aside id="c" widget="c"></aside>
  </div>
</body></html>
"""

SAMPLE_PAGE = """
<!DOCTYPE html>
<html><body>
  <main id="app">
    <div id="first" widget="widgets/a">
      <button id="counter" widget="widgets/b" data-clicks="2">Click</button>
    </div>
    <p>Plain paragraph</p>
    <div id="last" widget="widgets/c"></div>
  </main>
</body></html>
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def document():
    """Parsed document with widgets a(b) and c."""
    return parse_markup(NESTED_PAGE)


@pytest.fixture
def root(document):
    return document.get_element_by_id("root")


@pytest.fixture
def feedback():
    return FeedbackBuffer()


@pytest.fixture
def calls():
    """Shared record of lifecycle calls as (method, widget name) tuples."""
    return []


@pytest.fixture
def widget_factory(calls):
    """
    Build Widget subclasses that record their lifecycle calls.

    Options:
        fail_pre / fail_post: raise RuntimeError from pre_init / post_init
        destroy_error: callable(widget) -> exception raised from destroy()
            after the base cleanup ran
    """

    def make(name, fail_pre=False, fail_post=False, destroy_error=None):
        class RecordingWidget(Widget):
            async def pre_init(self, node):
                calls.append(("pre_init", name))
                if fail_pre:
                    raise RuntimeError(f"{name} pre-init exploded")
                await super().pre_init(node)

            async def post_init(self, node=None):
                calls.append(("post_init", name))
                if fail_post:
                    raise RuntimeError(f"{name} post-init exploded")
                await super().post_init(node)

            def destroy(self):
                calls.append(("destroy", name))
                super().destroy()
                if destroy_error is not None:
                    raise destroy_error(self)

        RecordingWidget.__name__ = f"Widget{name.upper()}"
        return RecordingWidget

    return make


@pytest.fixture
def make_orchestrator(widget_factory, feedback):
    """Orchestrator over recording widgets; keyword args override a/b/c classes."""

    def make(**overrides):
        classes = {name: overrides.get(name) or widget_factory(name) for name in ("a", "b", "c")}
        resolver = RegistryResolver.from_classes(classes)
        return WidgetOrchestrator(resolver=resolver, feedback=feedback)

    return make


@pytest.fixture
def completion():
    """Completion callback that records every call it receives."""

    class Completion:
        def __init__(self):
            self.results = []

        def __call__(self, errors):
            self.results.append(errors)

        @property
        def errors(self):
            assert len(self.results) == 1, f"expected one call, got {len(self.results)}"
            return self.results[0]

    return Completion()


@pytest.fixture
def sample_document():
    """Parsed page using the bundled widgets/a, widgets/b and widgets/c."""
    return parse_markup(SAMPLE_PAGE)


@pytest.fixture
def sample_file(temp_dir):
    """SAMPLE_PAGE written to disk."""
    path = temp_dir / "page.html"
    path.write_text(SAMPLE_PAGE, encoding="utf-8")
    return path
