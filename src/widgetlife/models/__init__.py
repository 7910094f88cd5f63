"""Configuration models and persistence."""

from .config import DEFAULT_CONFIG_PATH, OrchestratorConfig
from .persistence import PydanticPersistence

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "OrchestratorConfig",
    "PydanticPersistence",
]
