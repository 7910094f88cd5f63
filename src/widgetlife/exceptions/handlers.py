"""
Error handling helpers.

| Situation | Helper |
|-----------|--------|
| Many widgets, keep going past failures | `collector = collect_errors(...)`, then `collector.add(path, error)` |
| One step that should be logged if it fails | `with ErrorContext("parse page"): ...` |
| Pydantic rejected a config file | `raise wrap_pydantic_error(e, path) from e` |
| Showing an error to a person | `format_error_for_display(e)` |

Per-widget failures are collected, never raised, so one broken widget does
not stop its siblings. Only unexpected errors from `destroy()` escape.
"""

import logging
from typing import Optional

from .base import WidgetLifeError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Log the outcome of one operation; optionally swallow its error.

    Example:
        ```python
        with ErrorContext("parse page.html", re_raise=False) as ctx:
            document = parse_markup_file(path)
        if ctx.error:
            ...
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True,
    ):
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self) -> "ErrorContext":
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_val is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val
        if isinstance(exc_val, WidgetLifeError):
            # Expected failure: the technical message says enough
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)
        return not self.re_raise


def _field_name(error_details: dict) -> str:
    return ".".join(str(part) for part in error_details.get("loc", ("unknown",)))


def wrap_pydantic_error(error: Exception, file_path: str) -> WidgetLifeError:
    """
    Translate a pydantic failure while loading `file_path`.

    JSON syntax problems become `ConfigFileInvalidError`; rejected values
    become `ConfigValidationError` naming the field (or "multiple fields").
    """
    from pydantic import ValidationError

    text = str(error)
    if "json_invalid" in text or "Invalid JSON" in text:
        # pydantic renders these as "Invalid JSON: <detail> [type=json_invalid, ..."
        detail = text.split("Invalid JSON:", 1)[-1].split("[type=", 1)[0].strip()
        return ConfigFileInvalidError(file_path, detail or text)

    details = error.errors() if isinstance(error, ValidationError) else []
    if len(details) == 1:
        (only,) = details
        return ConfigValidationError(
            field=_field_name(only),
            value=only.get("input"),
            error_msg=only.get("msg", "validation failed"),
            file_path=file_path,
        )
    if details:
        lines = [f"  - {_field_name(d)}: {d.get('msg', 'validation failed')}" for d in details]
        return ConfigValidationError(
            field="multiple fields",
            value=None,
            error_msg=f"{len(details)} validation errors:\n" + "\n".join(lines),
            file_path=file_path,
        )
    return ConfigValidationError(field="unknown", value=None, error_msg=text, file_path=file_path)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return ``(message, recovery_hint)`` for showing `error` to a user."""
    if isinstance(error, WidgetLifeError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """Start an `ErrorCollector` for a batch called `operation`."""
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Accumulates the failures of a batch in the order they happened.

    Each entry is ``(sub_operation, exception)``; for the orchestrator the
    sub operation is the widget's type path.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def exceptions(self) -> list[Exception]:
        return [error for _, error in self.errors]

    def add(self, sub_operation: str, error: Exception) -> None:
        self.errors.append((sub_operation, error))

    def get_summary(self) -> str:
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        total = self.error_count + self.success_count
        lines = [f"Failed {self.error_count} of {total} operations:"]
        lines.extend(f"  - {sub_op}: {error}" for sub_op, error in self.errors)
        return "\n".join(lines)
