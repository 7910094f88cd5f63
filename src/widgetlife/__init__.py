"""widgetlife: lifecycle orchestration for widgets declared in markup."""

__version__ = "0.1.0"

from .core import Annotation, Widget, WidgetState
from .markup import MarkupDocument, MarkupNode, ensure_environment, parse_markup
from .orchestration import FeedbackBuffer, ModuleResolver, RegistryResolver, WidgetOrchestrator

__all__ = [
    "Annotation",
    "FeedbackBuffer",
    "MarkupDocument",
    "MarkupNode",
    "ModuleResolver",
    "RegistryResolver",
    "Widget",
    "WidgetOrchestrator",
    "WidgetState",
    "ensure_environment",
    "parse_markup",
]
