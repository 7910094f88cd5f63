"""Errors raised while loading or saving `OrchestratorConfig` files."""

from typing import Any, Optional

from .base import WidgetLifeError

# Extra guidance appended to validation errors, keyed by config field
FIELD_HINTS = {
    "widget_attribute": "Use the attribute your markup puts on widget hosts, e.g. 'widget'",
    "class_prefix": "The prefix must be a valid Python identifier, e.g. 'Widget'",
    "resolver_package": "The package must be importable, e.g. 'widgetlife'",
}


class ConfigurationError(WidgetLifeError):
    """The configuration could not be loaded or saved."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """The config file is not valid JSON (or is empty)."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: Config file that failed to parse
            parse_error: Parser message
        """
        lowered = parse_error.lower()
        if "empty" in lowered:
            user_msg = "Configuration file is empty"
            recovery = f"Delete {file_path} or run 'widgetlife config init' to recreate it"
        elif "trailing comma" in lowered:
            user_msg = "Configuration file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON allows no comma after the last member of an object or array"
            )
        else:
            user_msg = "Configuration file has invalid syntax"
            recovery = (
                f"Fix the JSON in {file_path}, or run "
                "'widgetlife config init --force' to start over from defaults"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A config value was rejected by the model's validators."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Args:
            field: Dotted field name ("multiple fields" when several failed)
            value: The rejected input
            error_msg: Validator message
            file_path: Config file the value came from, if any
        """
        hints = [f"Update the '{field}' value in your configuration"]
        if file_path:
            hints.append(f"Config file: {file_path}")
        if field in FIELD_HINTS:
            hints.append(FIELD_HINTS[field])

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(hints),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
