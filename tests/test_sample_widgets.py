"""End-to-end tests for the bundled widgets resolved by module path."""

import pytest

from widgetlife.core import Annotation
from widgetlife.markup import parse_markup
from widgetlife.orchestration import FeedbackBuffer, WidgetOrchestrator


@pytest.fixture
def orchestrator(feedback):
    """Orchestrator with the default module resolver."""
    return WidgetOrchestrator(feedback=feedback)


@pytest.mark.integration
@pytest.mark.asyncio
class TestBundledWidgets:
    """Test widgets/a, widgets/b and widgets/c together."""

    async def test_sample_page_initializes(self, orchestrator, sample_document, completion):
        """Test every bundled widget initializes with the default resolver."""
        await orchestrator.initialize(sample_document, completion)

        assert completion.errors is None
        assert len(orchestrator) == 3
        first = sample_document.get_element_by_id("first")
        assert type(orchestrator.get_widget(first)).__name__ == "WidgetA"
        assert Annotation.INITIALIZED.value in first.classes

    async def test_widget_c_finishes(self, orchestrator, sample_document):
        """Test widget C marks its node finished after post-init."""
        await orchestrator.initialize(sample_document)

        last = sample_document.get_element_by_id("last")
        assert list(last.classes) == ["initialized", "finished"]

    async def test_widget_b_counts_clicks(self, orchestrator, sample_document):
        """Test click events reach widget B and update the node."""
        await orchestrator.initialize(sample_document)
        counter = sample_document.get_element_by_id("counter")
        widget = orchestrator.get_widget(counter)

        assert widget.clicks == 2
        counter.dispatch_event("click")

        assert widget.clicks == 3
        assert counter.get_attribute("data-clicks") == "3"

    async def test_widget_b_stops_listening_after_teardown(self, orchestrator, sample_document):
        """Test teardown unbinds the click handler."""
        await orchestrator.initialize(sample_document)
        counter = sample_document.get_element_by_id("counter")
        widget = orchestrator.get_widget(counter)

        orchestrator.teardown(sample_document)
        counter.dispatch_event("click")

        assert widget.clicks == 2
        assert len(counter.classes) == 0

    async def test_widget_b_bad_click_count(self, orchestrator, completion):
        """Test an invalid data-clicks value fails widget B only."""
        document = parse_markup(
            '<div widget="widgets/a"><b id="bad" widget="widgets/b" data-clicks="many"></b></div>'
        )

        await orchestrator.initialize(document, completion)

        (error,) = completion.errors
        assert str(error) == "Widget widgets/b failed during pre-initialization."
        assert "many" in error.reason
        bad = document.get_element_by_id("bad")
        assert bad not in orchestrator
        assert list(bad.classes) == [Annotation.FAILED.value]
        assert bad.listeners("click") == []
        assert len(orchestrator) == 1

    async def test_widget_b_retry_binds_one_listener(self, orchestrator, completion):
        """Test a failed widget B leaves no click listener behind for a retry."""
        document = parse_markup('<b id="bad" widget="widgets/b" data-clicks="oops"></b>')
        bad = document.get_element_by_id("bad")
        assert await orchestrator.initialize(document) is not None

        bad.set_attribute("data-clicks", "5")
        await orchestrator.initialize(document, completion)

        assert completion.errors is None
        widget = orchestrator.get_widget(bad)
        assert len(bad.listeners("click")) == 1
        assert bad.dispatch_event("click") == 1
        assert widget.clicks == 6
        assert Annotation.INITIALIZED.value in bad.classes
        assert Annotation.PRE_INITIALIZED.value not in bad.classes

    async def test_teardown_feedback_order(self, orchestrator, sample_document, feedback):
        """Test teardown reports children before their parents."""
        await orchestrator.initialize(sample_document)

        assert orchestrator.teardown(sample_document) == 3

        assert feedback.lines == [
            "Widget widgets/c destroyed.",
            "Widget widgets/b destroyed.",
            "Widget widgets/a destroyed.",
        ]

    async def test_report_destroyed_disabled(self, sample_document):
        """Test report_destroyed=False keeps teardown quiet."""
        from widgetlife.models import OrchestratorConfig

        feedback = FeedbackBuffer()
        orchestrator = WidgetOrchestrator(
            feedback=feedback, config=OrchestratorConfig(report_destroyed=False)
        )
        await orchestrator.initialize(sample_document)

        orchestrator.teardown(sample_document)

        assert feedback.lines == []
