"""Live UI query/change primitives shared by all widgets."""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Dict, Optional, Protocol

_logger = logging.getLogger(__name__)

VALUE = "Value"
ENABLED = "Enabled"
CURRENT_ITEM = "CurrentItem"
SELECTED_ITEMS = "SelectedItems"
CURRENT_BUTTON = "CurrentButton"
ITEMS = "Items"


class LiveUI(Protocol):
    """Contract for the host engine's rendered widget state."""

    def query_widget(self, widget_id: str, attribute: str) -> Any:
        """Return the current value of *attribute* on widget *widget_id*."""

    def change_widget(self, widget_id: str, attribute: str, value: Any) -> None:
        """Set *attribute* on widget *widget_id* to *value*."""


class MemoryLiveUI:
    """Dictionary backed live UI for headless hosts and tests."""

    def __init__(self, initial: Optional[Dict[str, Dict[str, Any]]] = None) -> None:
        self._state: Dict[str, Dict[str, Any]] = {
            widget_id: dict(attributes) for widget_id, attributes in (initial or {}).items()
        }

    def query_widget(self, widget_id: str, attribute: str) -> Any:
        return self._state.get(widget_id, {}).get(attribute)

    def change_widget(self, widget_id: str, attribute: str, value: Any) -> None:
        _logger.debug("Changing %s of '%s' to %r", attribute, widget_id, value)
        self._state.setdefault(widget_id, {})[attribute] = value

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        """Return a copy of every stored attribute."""

        return deepcopy(self._state)


_live_ui: Optional[LiveUI] = None


def get_live_ui() -> LiveUI:
    if _live_ui is None:
        raise RuntimeError("Live UI backend not set. Call set_live_ui() before querying widgets.")
    return _live_ui


def set_live_ui(backend: Optional[LiveUI]) -> Optional[LiveUI]:
    """Install *backend* process wide and return the previous one."""

    global _live_ui
    previous = _live_ui
    _live_ui = backend
    return previous
