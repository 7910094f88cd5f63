"""Domain events for observer pattern.

This module defines events that can occur while widgets are orchestrated:
- Widget events: per-node lifecycle transitions
- Batch events: an initialize or teardown call finished
"""

from enum import Enum


class WidgetEvent(Enum):
    """Lifecycle events fired by the orchestrator."""

    PRE_INITIALIZED = "pre_initialized"      # pre_init succeeded, node registered
    INITIALIZED = "initialized"              # post_init succeeded
    FAILED = "failed"                        # resolution, pre_init or post_init failed
    DESTROYED = "destroyed"                  # destroy completed, node unregistered
    BATCH_COMPLETED = "batch_completed"      # initialize() finished (node is the root)
