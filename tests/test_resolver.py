"""Tests for type path resolution."""

from types import SimpleNamespace

import pytest

from widgetlife.core import Widget
from widgetlife.exceptions import WidgetResolutionError
from widgetlife.orchestration import (
    ModuleResolver,
    RegistryResolver,
    lookup_widget_class,
    widget_class_name,
)


@pytest.mark.unit
class TestClassNameDerivation:
    """Test Widget + UPPER(last segment)."""

    @pytest.mark.parametrize(
        "type_path,expected",
        [
            ("a", "WidgetA"),
            ("widgets/b", "WidgetB"),
            ("ui/forms/date", "WidgetDATE"),
            ("widgets/dateRange", "WidgetDATERANGE"),
        ],
    )
    def test_derived_names(self, type_path, expected):
        assert widget_class_name(type_path) == expected

    def test_custom_prefix(self):
        assert widget_class_name("forms/date", prefix="Form") == "FormDATE"


@pytest.mark.unit
class TestLookup:

    def test_attribute_lookup(self):
        module = SimpleNamespace(WidgetA=Widget)
        assert lookup_widget_class(module, "WidgetA") is Widget
        assert lookup_widget_class(module, "WidgetB") is None

    def test_mapping_lookup(self):
        assert lookup_widget_class({"WidgetA": Widget}, "WidgetA") is Widget
        assert lookup_widget_class({}, "WidgetA") is None


@pytest.mark.unit
@pytest.mark.asyncio
class TestModuleResolver:
    """Test importing type paths from a package."""

    async def test_resolves_bundled_widget(self):
        """Test widgets/a imports widgetlife.widgets.a."""
        from widgetlife.widgets import a

        module = await ModuleResolver()("widgets/a")

        assert module is a
        assert hasattr(module, "WidgetA")

    async def test_missing_module(self):
        """Test an unknown path raises a resolution error."""
        with pytest.raises(WidgetResolutionError) as exc_info:
            await ModuleResolver()("widgets/nope")

        assert exc_info.value.widget_path == "widgets/nope"
        assert str(exc_info.value).startswith("Error in widgets/nope:")
        assert isinstance(exc_info.value.__cause__, ImportError)

    async def test_empty_path(self):
        """Test an empty type path is rejected before importing."""
        with pytest.raises(WidgetResolutionError, match="empty widget type path"):
            await ModuleResolver()("")

    async def test_module_name(self):
        resolver = ModuleResolver("myapp")
        assert resolver.module_name("widgets/a") == "myapp.widgets.a"
        assert resolver.module_name("/widgets//a/") == "myapp.widgets.a"


@pytest.mark.unit
class TestRegistryResolver:
    """Test the explicit mapping resolver."""

    def test_from_classes_uses_derived_name(self):
        """Test classes are exposed under the derived name, whatever they are called."""

        class Anything(Widget):
            pass

        resolver = RegistryResolver.from_classes({"widgets/x": Anything})

        module = resolver("widgets/x")
        assert module.WidgetX is Anything
        assert "widgets/x" in resolver

    def test_register_module(self):
        module = SimpleNamespace(WidgetA=Widget)
        resolver = RegistryResolver()

        resolver.register("a", module)

        assert resolver("a") is module

    def test_unknown_path(self):
        resolver = RegistryResolver({"a": object()})

        with pytest.raises(WidgetResolutionError, match="no module registered for 'b'"):
            resolver("b")
        assert "b" not in resolver
