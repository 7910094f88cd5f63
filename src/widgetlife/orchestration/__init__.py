"""Widget orchestration layer.

The orchestrator is responsible for:
- Discovering widget nodes under a root, in document order
- Resolving each node's type path to a widget class
- Running the pre-init pass, then the post-init pass
- Tearing widgets down in reverse document order
"""

from .feedback import FeedbackBuffer
from .orchestrator import WidgetOrchestrator
from .resolver import ModuleResolver, RegistryResolver, lookup_widget_class, widget_class_name

__all__ = [
    "FeedbackBuffer",
    "ModuleResolver",
    "RegistryResolver",
    "WidgetOrchestrator",
    "lookup_widget_class",
    "widget_class_name",
]
