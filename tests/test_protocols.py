"""Tests that the concrete classes satisfy the orchestration protocols."""

import pytest

from widgetlife.core import Widget
from widgetlife.markup import MarkupDocument, MarkupNode
from widgetlife.orchestration import FeedbackBuffer
from widgetlife.protocols import FeedbackSink, WidgetHost, WidgetLifecycle
from widgetlife.widgets.b import WidgetB


@pytest.mark.unit
class TestProtocols:

    def test_widgets_satisfy_lifecycle(self):
        assert isinstance(Widget(), WidgetLifecycle)
        assert isinstance(WidgetB(), WidgetLifecycle)

    def test_nodes_satisfy_host(self):
        assert isinstance(MarkupNode("div"), WidgetHost)
        assert isinstance(MarkupDocument(), WidgetHost)

    def test_feedback_sink(self):
        assert isinstance(FeedbackBuffer(), FeedbackSink)
        assert not isinstance(object(), FeedbackSink)
