"""Tests for the exception hierarchy and error handling helpers."""

import logging

import pytest
from pydantic import BaseModel, ValidationError

from widgetlife.exceptions import (
    ConfigFileInvalidError,
    ConfigValidationError,
    ErrorContext,
    WidgetClassNotFoundError,
    WidgetDestroyedError,
    WidgetLifeError,
    WidgetLifecycleError,
    WidgetResolutionError,
    collect_errors,
    describe_node,
    format_error_for_display,
    wrap_pydantic_error,
)
from widgetlife.markup import MarkupNode


class Strict(BaseModel):
    count: int
    name: str


@pytest.mark.unit
class TestWidgetErrors:
    """Test widget error messages."""

    def test_resolution_error(self):
        error = WidgetResolutionError("widgets/x", "module not found")

        assert str(error) == "Error in widgets/x: module not found"
        assert error.widget_path == "widgets/x"
        assert error.recoverable
        assert isinstance(error, WidgetLifeError)

    def test_class_not_found_is_a_resolution_error(self):
        error = WidgetClassNotFoundError("widgets/x", "WidgetX")

        assert isinstance(error, WidgetResolutionError)
        assert str(error) == "Error in widgets/x: Widget class WidgetX not found in widgets/x"

    def test_lifecycle_messages(self):
        pre = WidgetLifecycleError("a", "pre-init", "boom")
        post = WidgetLifecycleError("a", "post-init", "boom")
        custom = WidgetLifecycleError("a", "pre-init", "boom", message="Widget a failed.")

        assert str(pre) == "Error in a: boom"
        assert str(post) == "Error in a during post-init: boom"
        assert str(custom) == "Widget a failed."
        assert custom.technical_message == "pre-init of 'a' failed: boom"

    def test_destroyed_error_identifies_node(self):
        node = MarkupNode("div", {"id": "clock"})

        error = WidgetDestroyedError(node, "widgets/clock")

        assert str(error) == "Widget clock (Path: widgets/clock) was destroyed during initialization."
        assert error.node is node

    @pytest.mark.parametrize(
        "attributes,expected",
        [
            ({"id": "x", "class": "a b"}, "x"),
            ({"class": "a b"}, "a b"),
            ({}, "section"),
        ],
    )
    def test_describe_node(self, attributes, expected):
        assert describe_node(MarkupNode("section", attributes)) == expected


@pytest.mark.unit
class TestConfigErrors:

    def test_trailing_comma_hint(self):
        error = ConfigFileInvalidError("/tmp/c.json", "Trailing comma at line 3")
        assert error.user_message == "Configuration file has a trailing comma"
        assert "/tmp/c.json" in error.recovery_hint

    def test_empty_file_hint(self):
        error = ConfigFileInvalidError("/tmp/c.json", "File is empty")
        assert error.user_message == "Configuration file is empty"
        assert "widgetlife config init" in error.recovery_hint

    def test_generic_syntax_error(self):
        error = ConfigFileInvalidError("/tmp/c.json", "expected value")
        assert error.user_message == "Configuration file has invalid syntax"
        assert "Suggestion:" in error.get_full_message()

    def test_validation_hint_for_prefix(self):
        error = ConfigValidationError("class_prefix", "1x", "bad")
        assert "identifier" in error.recovery_hint


@pytest.mark.unit
class TestWrapPydanticError:
    """Test conversion of pydantic errors."""

    def test_invalid_json(self):
        with pytest.raises(ValidationError) as exc_info:
            Strict.model_validate_json('{"count": 1,}')

        wrapped = wrap_pydantic_error(exc_info.value, "c.json")

        assert isinstance(wrapped, ConfigFileInvalidError)

    def test_single_field(self):
        with pytest.raises(ValidationError) as exc_info:
            Strict.model_validate({"count": "many", "name": "x"})

        wrapped = wrap_pydantic_error(exc_info.value, "c.json")

        assert isinstance(wrapped, ConfigValidationError)
        assert wrapped.field == "count"
        assert wrapped.value == "many"

    def test_multiple_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            Strict.model_validate({})

        wrapped = wrap_pydantic_error(exc_info.value, "c.json")

        assert wrapped.field == "multiple fields"
        assert "2 validation errors" in str(wrapped)


@pytest.mark.unit
class TestHandlers:
    """Test ErrorCollector, ErrorContext and display formatting."""

    def test_collector_keeps_order(self):
        collector = collect_errors("initialize widgets")
        first, second = RuntimeError("one"), WidgetResolutionError("b", "two")

        collector.success_count += 1
        collector.add("a", first)
        collector.add("b", second)

        assert collector.exceptions == [first, second]
        assert collector.success_count == 1
        assert collector.error_count == 2
        assert collector.get_summary() == (
            "Failed 2 of 3 operations:\n"
            "  - a: one\n"
            "  - b: Error in b: two"
        )

    def test_collector_summary_without_errors(self):
        collector = collect_errors("noop")
        assert not collector.has_errors
        assert collector.get_summary() == "All operations completed successfully (0 total)"

    def test_error_context_re_raises(self, caplog):
        with pytest.raises(ValueError):
            with ErrorContext("parse page"):
                raise ValueError("bad markup")

        assert "Failed to parse page: bad markup" in caplog.text

    def test_error_context_swallows_when_asked(self, caplog):
        with caplog.at_level(logging.ERROR):
            with ErrorContext("resolve", re_raise=False) as ctx:
                raise WidgetResolutionError("a", "gone")

        assert isinstance(ctx.error, WidgetResolutionError)
        assert "Resolution of 'a' failed: gone" in caplog.text

    def test_format_for_display(self):
        assert format_error_for_display(RuntimeError("x")) == ("RuntimeError: x", None)
        message, hint = format_error_for_display(WidgetResolutionError("a", "gone"))
        assert message == "Error in a: gone"
        assert hint is not None
