"""Orchestrator configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from widgetlife.models.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".widgetlife" / "config.json"


class OrchestratorConfig(BaseModel):
    """Settings for widget discovery and resolution."""

    widget_attribute: str = Field(
        default="widget",
        min_length=1,
        description="Markup attribute that tags a node as a widget host and names its type path",
    )
    class_prefix: str = Field(
        default="Widget",
        description="Prefix of the class name derived from a type path (Widget + 'A' for 'widgets/a')",
    )
    resolver_package: str = Field(
        default="widgetlife",
        min_length=1,
        description="Package the default resolver imports type paths from",
    )
    report_destroyed: bool = Field(
        default=True,
        description="Write a feedback line for every widget destroyed during teardown",
    )

    @field_validator("class_prefix")
    @classmethod
    def validate_class_prefix(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError("must be a valid Python identifier")
        return value

    @field_validator("resolver_package")
    @classmethod
    def validate_resolver_package(cls, value: str) -> str:
        if not all(part.isidentifier() for part in value.split(".")):
            raise ValueError("must be a dotted Python package name")
        return value

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "OrchestratorConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.widgetlife/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
