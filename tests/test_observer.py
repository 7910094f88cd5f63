"""Tests for ObserverManager."""

from unittest.mock import Mock

import pytest

from widgetlife.core import ObserverManager
from widgetlife.protocols import LifecycleObserver, WidgetEvent


@pytest.mark.unit
class TestObserverManager:

    def test_register_is_idempotent(self):
        manager = ObserverManager[LifecycleObserver]("lifecycle")
        observer = Mock(spec=LifecycleObserver)

        manager.register(observer)
        manager.register(observer)

        assert len(manager) == 1
        assert observer in manager

    def test_notify_isolates_failures(self):
        manager = ObserverManager[LifecycleObserver]("lifecycle")
        bad, good = Mock(spec=LifecycleObserver), Mock(spec=LifecycleObserver)
        bad.on_widget_event.side_effect = RuntimeError("Bad observer")
        manager.register(bad)
        manager.register(good)

        manager.notify("on_widget_event", WidgetEvent.INITIALIZED, "node", widget_path="a")

        good.on_widget_event.assert_called_once_with(WidgetEvent.INITIALIZED, "node", widget_path="a")

    def test_missing_callback_is_logged(self, caplog):
        manager = ObserverManager("lifecycle")
        manager.register(object())

        manager.notify("on_widget_event")

        assert "has no method 'on_widget_event'" in caplog.text

    def test_observer_may_unregister_during_notify(self):
        manager = ObserverManager("lifecycle")
        observer = Mock()
        observer.on_widget_event.side_effect = lambda *args: manager.unregister(observer)
        manager.register(observer)

        manager.notify("on_widget_event", WidgetEvent.DESTROYED, None)

        assert not manager

    def test_clear(self):
        manager = ObserverManager()
        manager.register(Mock())
        manager.clear()
        assert len(manager) == 0
