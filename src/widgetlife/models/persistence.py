"""JSON persistence for pydantic models.

Reads validate through the model and turn pydantic/IO failures into
`ConfigurationError` subclasses. Writes keep the previous file as ``.bak``
and go through a temporary sibling file that is renamed into place, so a
crash mid-write never leaves a truncated config behind.
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from widgetlife.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _sibling(path: Path, suffix: str) -> Path:
    return path.with_suffix(path.suffix + suffix)


class PydanticPersistence:
    """Stateless load/save helpers shared by the config models."""

    @staticmethod
    def load_json(path: Path, model_type: type[M]) -> M:
        """
        Read `path` and validate it as `model_type`.

        Raises:
            FileNotFoundError: `path` does not exist
            ConfigFileInvalidError: Empty file, unreadable file or bad JSON
            ConfigValidationError: JSON is fine but a value is rejected
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

        if not content.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(content)
        except ValidationError as e:
            logger.error(f"Could not load {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(data: BaseModel, path: Path, indent: int = 2, backup: bool = True) -> None:
        """
        Write `data` to `path` as JSON.

        Parent directories are created as needed. With `backup`, an existing
        file is copied to ``<name>.bak`` first.

        Raises:
            OSError: The file system refused the write
            ConfigurationError: The model could not be serialized
        """
        try:
            content = data.model_dump_json(indent=indent)
        except Exception as e:
            raise ConfigurationError(
                user_message=f"Failed to save configuration to {path}",
                technical_message=f"Serializing {type(data).__name__} failed: {e}",
            ) from e

        path.parent.mkdir(parents=True, exist_ok=True)
        if backup and path.exists():
            shutil.copy2(path, _sibling(path, ".bak"))

        temp_path = _sibling(path, ".tmp")
        try:
            temp_path.write_text(content, encoding="utf-8")
            temp_path.replace(path)
        except OSError as e:
            logger.error(f"Could not write {path}: {e}")
            raise
        finally:
            temp_path.unlink(missing_ok=True)
        logger.debug(f"Saved {type(data).__name__} to {path}")

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[M], default_factory: Callable[[], M] | None = None
    ) -> M:
        """Like `load_json`, but a missing file yields a default instance."""
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"No config at {path}, using {model_type.__name__} defaults")
            return default_factory() if default_factory else model_type()
