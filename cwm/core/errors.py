"""Exceptions raised for malformed widget declarations and live UI access."""

from __future__ import annotations

from typing import Sequence


class WidgetError(Exception):
    """Base class for all widget layer errors."""


class MissingWidgetType(WidgetError, RuntimeError):
    """Raised when a widget class never fixed its ``widget_type``."""

    def __init__(self, widget_class: type) -> None:
        super().__init__(f"Widget '{widget_class.__qualname__}' does not set its widget type")
        self.widget_class = widget_class


class MissingMandatoryHook(WidgetError, TypeError):
    """Raised when a widget class lacks a hook its variant requires."""

    def __init__(self, widget_class: type, hooks: Sequence[str]) -> None:
        names = ", ".join(hooks)
        super().__init__(f"Widget '{widget_class.__qualname__}' must implement: {names}")
        self.widget_class = widget_class
        self.hooks = tuple(hooks)


class DuplicateWidgetId(WidgetError, ValueError):
    """Raised when two widgets of one dialog share an id."""

    def __init__(self, widget_id: str) -> None:
        super().__init__(f"Widget with id '{widget_id}' already present in the dialog")
        self.widget_id = widget_id


class UnsupportedAttribute(WidgetError, ValueError):
    """Raised when a live UI backend cannot serve an attribute."""
