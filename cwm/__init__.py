"""Declarative widgets for modal dialogs built by subclassing."""

from .config.registry import WidgetDescriptor, WidgetRegistry, registry
from .config.defaults import load_config, register_widgets_from_config
from .core import (
    DuplicateWidgetId,
    Id,
    Item,
    LiveUI,
    MemoryLiveUI,
    MissingMandatoryHook,
    MissingWidgetType,
    Term,
    UnsupportedAttribute,
    WidgetError,
    build_widget_table,
    collect_ids,
    get_live_ui,
    set_live_ui,
)
from .ui import (
    AbstractWidget,
    CheckBox,
    ComboBox,
    CustomWidget,
    EmptyWidget,
    InputField,
    IntField,
    ItemsSelection,
    MenuButton,
    MultiLineEdit,
    MultiSelectionBox,
    Password,
    PushButton,
    QtLiveUI,
    RadioButtons,
    RichText,
    SelectionBox,
    ValueBasedWidget,
)

__all__ = [
    "AbstractWidget",
    "CheckBox",
    "ComboBox",
    "CustomWidget",
    "DuplicateWidgetId",
    "EmptyWidget",
    "Id",
    "InputField",
    "IntField",
    "Item",
    "ItemsSelection",
    "LiveUI",
    "MemoryLiveUI",
    "MenuButton",
    "MissingMandatoryHook",
    "MissingWidgetType",
    "MultiLineEdit",
    "MultiSelectionBox",
    "Password",
    "PushButton",
    "QtLiveUI",
    "RadioButtons",
    "RichText",
    "SelectionBox",
    "Term",
    "UnsupportedAttribute",
    "ValueBasedWidget",
    "WidgetDescriptor",
    "WidgetError",
    "WidgetRegistry",
    "build_widget_table",
    "collect_ids",
    "get_live_ui",
    "load_config",
    "register_widgets_from_config",
    "registry",
    "set_live_ui",
]
