"""Optional behavior bundles mixed into widget variants."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from ..core.live_ui import ITEMS, VALUE
from ..core.term import Id, Item

_logger = logging.getLogger(__name__)


class ValueBasedWidget:
    """Access to the widget value kept in the live UI.

    Variants storing their value under another attribute override
    ``value_attribute``.
    """

    value_attribute: str = VALUE

    @property
    def value(self) -> Any:
        return self.live_ui.query_widget(self.widget_id, self.value_attribute)

    @value.setter
    def value(self, val: Any) -> None:
        self.live_ui.change_widget(self.widget_id, self.value_attribute, val)


class ItemsSelection:
    """Widgets offering a choice from a list of ``(id, text)`` pairs.

    Example::

        def items(self):
            return [
                ("canada", _("Canada")),
                ("usa", _("United States of America")),
                ("north_pole", _("Really cold place")),
            ]
    """

    mandatory_hooks: Tuple[str, ...] = ("label",)

    def items(self) -> Sequence[Tuple[str, str]]:
        return []

    def assemble_definition(self) -> Dict[str, Any]:
        definition = super().assemble_definition()
        definition["items"] = list(self.items())
        return definition

    def change_items(self, items_list: Iterable[Tuple[str, str]]) -> None:
        """Replace the items offered by the rendered widget."""

        terms: List[Any] = [Item(Id(key), text) for key, text in items_list]
        _logger.debug("Replacing %d items of '%s'", len(terms), self.widget_id)
        self.live_ui.change_widget(self.widget_id, ITEMS, terms)
