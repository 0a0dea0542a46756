"""Widget classes handed to the dialog engine."""

from .abstract_widget import AbstractWidget
from .mixins import ItemsSelection, ValueBasedWidget
from .qt_backend import QtLiveUI
from .variants import (
    CheckBox,
    ComboBox,
    CustomWidget,
    EmptyWidget,
    InputField,
    IntField,
    MenuButton,
    MultiLineEdit,
    MultiSelectionBox,
    Password,
    PushButton,
    RadioButtons,
    RichText,
    SelectionBox,
)

__all__ = [
    "AbstractWidget",
    "CheckBox",
    "ComboBox",
    "CustomWidget",
    "EmptyWidget",
    "InputField",
    "IntField",
    "ItemsSelection",
    "MenuButton",
    "MultiLineEdit",
    "MultiSelectionBox",
    "Password",
    "PushButton",
    "QtLiveUI",
    "RadioButtons",
    "RichText",
    "SelectionBox",
    "ValueBasedWidget",
]
