"""Widget resolvers.

A resolver turns a widget type path (the value of the widget attribute, e.g.
``"widgets/a"``) into a module-like object. The orchestrator then looks up
the class named by `widget_class_name` on it. Resolvers may be plain or
async callables.
"""

import importlib
import logging
from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any, Optional

from widgetlife.exceptions import WidgetResolutionError

logger = logging.getLogger(__name__)


def widget_class_name(type_path: str, prefix: str = "Widget") -> str:
    """
    Derive the class name a module must export for a type path.

    The last ``/``-separated segment is upper-cased and prefixed:

        >>> widget_class_name("widgets/a")
        'WidgetA'
        >>> widget_class_name("ui/forms/date", prefix="Form")
        'FormDATE'
    """
    return f"{prefix}{type_path.split('/')[-1].upper()}"


def lookup_widget_class(module: Any, class_name: str) -> Optional[type]:
    """Read `class_name` off a module, namespace or mapping."""
    if isinstance(module, Mapping):
        return module.get(class_name)
    return getattr(module, class_name, None)


class ModuleResolver:
    """
    Default resolver: imports type paths as modules of a package.

    ``"widgets/a"`` under package ``"widgetlife"`` imports
    ``widgetlife.widgets.a``.
    """

    def __init__(self, package: str = "widgetlife"):
        self.package = package

    def module_name(self, type_path: str) -> str:
        parts = [part for part in type_path.strip().split("/") if part]
        if not parts:
            raise WidgetResolutionError(type_path, "empty widget type path")
        return ".".join([self.package, *parts])

    async def __call__(self, type_path: str) -> Any:
        module_name = self.module_name(type_path)
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise WidgetResolutionError(type_path, str(e)) from e
        logger.debug(f"Resolved {type_path!r} to module {module_name}")
        return module

    def __repr__(self) -> str:
        return f"ModuleResolver({self.package!r})"


class RegistryResolver:
    """
    Resolver backed by an explicit ``{type_path: module}`` mapping.

    Useful where widget code is not importable by path, or in tests.
    """

    def __init__(self, modules: Optional[Mapping[str, Any]] = None):
        self._modules: dict[str, Any] = dict(modules or {})

    @classmethod
    def from_classes(
        cls, classes: Mapping[str, type], prefix: str = "Widget"
    ) -> "RegistryResolver":
        """
        Build a resolver from ``{type_path: widget_class}``.

        Each class is exposed under the name derived from its type path, so
        the class's own ``__name__`` does not matter.
        """
        resolver = cls()
        for type_path, widget_class in classes.items():
            resolver.register_class(type_path, widget_class, prefix=prefix)
        return resolver

    def register(self, type_path: str, module: Any) -> None:
        self._modules[type_path] = module

    def register_class(self, type_path: str, widget_class: type, prefix: str = "Widget") -> None:
        name = widget_class_name(type_path, prefix)
        self.register(type_path, SimpleNamespace(**{name: widget_class}))

    def __call__(self, type_path: str) -> Any:
        try:
            return self._modules[type_path]
        except KeyError:
            raise WidgetResolutionError(type_path, f"no module registered for {type_path!r}") from None

    def __contains__(self, type_path: str) -> bool:
        return type_path in self._modules
