"""Concrete widget variants authors subclass."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..core.live_ui import CURRENT_BUTTON, CURRENT_ITEM, SELECTED_ITEMS
from ..core.term import collect_ids
from .abstract_widget import AbstractWidget
from .mixins import ItemsSelection, ValueBasedWidget

# bounds of a C signed int as accepted by the engine
INT_FIELD_MIN = -(2**30)
INT_FIELD_MAX = 2**31 - 1


class InputField(ValueBasedWidget, AbstractWidget):
    """Single line text entry. ``label`` is mandatory.

    Example::

        class MyWidget(InputField):
            def __init__(self, myconfig):
                self.widget_id = "my_widget"
                self._config = myconfig

            def label(self):
                return _("The best widget ever is:")

            def init(self):
                self.value = self._config.value

            def store(self):
                self._config.value = self.value
    """

    widget_type = "inputfield"
    mandatory_hooks = ("label",)


class Password(ValueBasedWidget, AbstractWidget):
    """Masked text entry. ``label`` is mandatory."""

    widget_type = "password"
    mandatory_hooks = ("label",)


class CheckBox(ValueBasedWidget, AbstractWidget):
    """Boolean check box. ``label`` is mandatory."""

    widget_type = "checkbox"
    mandatory_hooks = ("label",)

    def checked(self) -> bool:
        return bool(self.value)

    def unchecked(self) -> bool:
        return not self.value

    def check(self) -> None:
        self.value = True

    def uncheck(self) -> None:
        self.value = False


class ComboBox(ValueBasedWidget, ItemsSelection, AbstractWidget):
    """Drop-down choice of one item."""

    widget_type = "combobox"
    mandatory_hooks = ("label",)


class SelectionBox(ValueBasedWidget, ItemsSelection, AbstractWidget):
    """List with one selected item; the value is the id of the current item."""

    widget_type = "selection_box"
    mandatory_hooks = ("label",)
    value_attribute = CURRENT_ITEM


class MultiSelectionBox(ValueBasedWidget, ItemsSelection, AbstractWidget):
    """List allowing several selected items; the value is a list of ids."""

    widget_type = "multi_selection_box"
    mandatory_hooks = ("label",)
    value_attribute = SELECTED_ITEMS

    @property
    def value(self) -> List[Any]:
        return list(self.live_ui.query_widget(self.widget_id, SELECTED_ITEMS) or [])

    @value.setter
    def value(self, val: Optional[Sequence[Any]]) -> None:
        self.live_ui.change_widget(self.widget_id, SELECTED_ITEMS, list(val or []))


class IntField(ValueBasedWidget, AbstractWidget):
    """Integer entry. ``label`` is mandatory.

    Optional ``minimum`` and ``maximum`` hooks limit the accepted range::

        def minimum(self):
            return 50

        def maximum(self):
            return 200
    """

    widget_type = "intfield"
    mandatory_hooks = ("label",)

    def assemble_definition(self) -> Dict[str, Any]:
        definition = super().assemble_definition()
        for bound in ("minimum", "maximum"):
            if self.implements(bound):
                definition[bound] = self._bounded(bound, self._hook_value(bound))
        return definition

    def _bounded(self, name: str, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} of '{self.widget_id}' must be an integer, got {value!r}")
        if not INT_FIELD_MIN <= value <= INT_FIELD_MAX:
            raise ValueError(
                f"{name} of '{self.widget_id}' must lie within [{INT_FIELD_MIN}, {INT_FIELD_MAX}]"
            )
        return value


class RadioButtons(ValueBasedWidget, ItemsSelection, AbstractWidget):
    """Group of radio buttons; the value is the id of the checked button."""

    widget_type = "radio_buttons"
    mandatory_hooks = ("label",)
    value_attribute = CURRENT_BUTTON


class PushButton(AbstractWidget):
    """Button.

    Example::

        class ApplyButton(PushButton):
            def __init__(self):
                self.widget_id = "apply"

            def label(self):
                return _("Apply")

            def handle(self, event):
                if not self.is_own_event(event):
                    return None
                apply_changes()
                return None
    """

    widget_type = "push_button"


class MenuButton(ItemsSelection, AbstractWidget):
    """Button opening a menu built from ``items``."""

    widget_type = "menu_button"
    mandatory_hooks = ("label",)


class MultiLineEdit(ValueBasedWidget, AbstractWidget):
    """Multi line text entry. ``label`` is mandatory."""

    widget_type = "multi_line_edit"
    mandatory_hooks = ("label",)


class RichText(ValueBasedWidget, AbstractWidget):
    """Formatted read-only text."""

    widget_type = "richtext"


class CustomWidget(AbstractWidget):
    """Widget whose contents is a UI term built by ``contents``.

    Useful for reusable groups of several sub-widgets. Events of every id found in
    the contents are routed to ``handle``::

        class UndoBox(CustomWidget):
            def __init__(self):
                self.widget_id = "undo_box"

            def contents(self):
                return HBox(
                    PushButton(Id("reset"), _("Reset")),
                    PushButton(Id("undo"), _("Undo")),
                )

            def handle(self, event):
                if event["ID"] == "reset":
                    ...
                elif event["ID"] == "undo":
                    ...
    """

    widget_type = "custom"
    mandatory_hooks = ("contents",)

    def assemble_definition(self) -> Dict[str, Any]:
        definition = super().assemble_definition()
        contents = self.contents()
        definition["custom_widget"] = contents
        if not self.handle_all_events:
            definition["handle_events"] = self.ids_in_contents(contents)
        return definition

    def ids_in_contents(self, contents: Any = None) -> List[Any]:
        """Return ids found in *contents* followed by the widget's own id."""

        ids = collect_ids(self.contents() if contents is None else contents)
        if self.widget_id not in ids:
            ids.append(self.widget_id)
        return ids


class EmptyWidget(AbstractWidget):
    """Placeholder, e.g. for a replace point or to catch global events.

    Example::

        widget = EmptyWidget("replace_point")
        table = build_widget_table([widget])
    """

    widget_type = "empty"

    def __init__(self, widget_id: str) -> None:
        self.widget_id = widget_id
