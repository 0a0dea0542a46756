"""Widget registry for assembling dialogs from named widgets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List

from ..core.table import WidgetTable, build_widget_table
from ..ui.abstract_widget import AbstractWidget

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WidgetDescriptor:
    """Metadata for registered widgets."""

    key: str
    factory: Callable[[], AbstractWidget]
    description: str = ""


class WidgetRegistry:
    """Registry holding widget factories keyed by a short identifier."""

    def __init__(self) -> None:
        self._widgets: Dict[str, WidgetDescriptor] = {}

    def register(self, descriptor: WidgetDescriptor) -> None:
        if descriptor.key in self._widgets:
            raise ValueError(f"Widget with key '{descriptor.key}' already registered")
        self._widgets[descriptor.key] = descriptor

    def get(self, key: str) -> WidgetDescriptor:
        return self._widgets[key]

    def create(self, key: str) -> AbstractWidget:
        descriptor = self.get(key)
        return descriptor.factory()

    def list_descriptors(self) -> List[WidgetDescriptor]:
        return list(self._widgets.values())

    def create_table(self, keys: Iterable[str]) -> WidgetTable:
        """Instantiate the widgets named by *keys* and assemble their definitions."""

        widgets = [self.create(key) for key in keys]
        _logger.debug("Creating widget table for %s", [widget.widget_id for widget in widgets])
        return build_widget_table(widgets)


# Singleton registry that higher level code can import and populate.
registry = WidgetRegistry()
