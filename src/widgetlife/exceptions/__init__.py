"""
Custom exception hierarchy for widgetlife.

## Exception Hierarchy

```
WidgetLifeError (base)
├── WidgetError
│   ├── WidgetResolutionError
│   │   └── WidgetClassNotFoundError
│   ├── WidgetLifecycleError
│   └── WidgetDestroyedError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

## Usage

All custom exceptions inherit from `WidgetLifeError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Signalling destruction during initialization

```python
from widgetlife.exceptions import WidgetDestroyedError

class SlowWidget(Widget):
    def destroy(self):
        was_initializing = self.is_being_initialized
        super().destroy()
        if was_initializing:
            raise WidgetDestroyedError(self.node, "widgets/slow")
```

`WidgetOrchestrator.teardown` logs the error and keeps going. Any other
exception raised by `destroy()` aborts the teardown and reaches the caller.
"""

from .base import WidgetLifeError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)
from .widget import (
    WidgetClassNotFoundError,
    WidgetDestroyedError,
    WidgetError,
    WidgetLifecycleError,
    WidgetResolutionError,
    describe_node,
)

__all__ = [
    # Base
    "WidgetLifeError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Widget
    "WidgetClassNotFoundError",
    "WidgetDestroyedError",
    "WidgetError",
    "WidgetLifecycleError",
    "WidgetResolutionError",
    "describe_node",
    # Handlers
    "ErrorCollector",
    "ErrorContext",
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
