"""Widget states and the node annotations applied for them."""

from enum import Enum


class WidgetState(str, Enum):
    """Lifecycle state of a widget instance."""

    UNINITIALIZED = "uninitialized"        # Created, pre_init not yet run
    PRE_INITIALIZING = "pre_initializing"  # pre_init done, waiting for post_init
    INITIALIZED = "initialized"            # post_init done
    FAILED = "failed"                      # fail() was called (permanent)
    DESTROYED = "destroyed"                # destroy() was called (terminal)


class Annotation(str, Enum):
    """Class names a widget puts on its node."""

    PRE_INITIALIZED = "pre-initialized"
    INITIALIZED = "initialized"
    FINISHED = "finished"
    FAILED = "failed"


ALL_ANNOTATIONS = tuple(annotation.value for annotation in Annotation)
