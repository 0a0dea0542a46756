"""Core non-GUI components: terms, errors and live UI access."""

from .errors import (
    DuplicateWidgetId,
    MissingMandatoryHook,
    MissingWidgetType,
    UnsupportedAttribute,
    WidgetError,
)
from .live_ui import LiveUI, MemoryLiveUI, get_live_ui, set_live_ui
from .table import build_widget_table
from .term import Id, Item, Term, collect_ids, ui_term

__all__ = [
    "DuplicateWidgetId",
    "Id",
    "Item",
    "LiveUI",
    "MemoryLiveUI",
    "MissingMandatoryHook",
    "MissingWidgetType",
    "Term",
    "UnsupportedAttribute",
    "WidgetError",
    "build_widget_table",
    "collect_ids",
    "get_live_ui",
    "set_live_ui",
    "ui_term",
]
