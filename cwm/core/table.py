"""Assemble the widget table of a whole dialog."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable

from .errors import DuplicateWidgetId

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..ui.abstract_widget import AbstractWidget

_logger = logging.getLogger(__name__)

WidgetTable = Dict[str, Dict[str, Any]]


def build_widget_table(widgets: Iterable["AbstractWidget"]) -> WidgetTable:
    """Return definitions of *widgets* keyed by widget id."""

    table: WidgetTable = {}
    for widget in widgets:
        widget_id = widget.widget_id
        if widget_id in table:
            raise DuplicateWidgetId(widget_id)
        table[widget_id] = widget.assemble_definition()
    _logger.debug("Built widget table with %d widgets", len(table))
    return table
