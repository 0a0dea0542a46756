"""Live UI backend reading and changing already built Qt widgets."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtWidgets import (
    QButtonGroup,
    QCheckBox,
    QComboBox,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPlainTextEdit,
    QSpinBox,
    QTextEdit,
    QWidget,
)

from ..core.errors import UnsupportedAttribute
from ..core.live_ui import CURRENT_BUTTON, CURRENT_ITEM, ENABLED, ITEMS, SELECTED_ITEMS, VALUE
from ..core.term import Id, Item, item_pairs

_logger = logging.getLogger(__name__)

ID_ROLE = Qt.ItemDataRole.UserRole


class QtLiveUI(QObject):
    """Serve widget attributes from Qt objects registered under widget ids.

    Radio buttons are represented by a ``QButtonGroup`` whose buttons carry the
    item id as their object name.
    """

    widgetChanged = Signal(str, str, object)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._widgets: Dict[str, QObject] = {}

    def register(self, widget_id: str, widget: QObject) -> None:
        if widget_id in self._widgets:
            raise ValueError(f"Widget with id '{widget_id}' already registered")
        self._widgets[widget_id] = widget

    def unregister(self, widget_id: str) -> None:
        self._widgets.pop(widget_id, None)

    def widget(self, widget_id: str) -> QObject:
        try:
            return self._widgets[widget_id]
        except KeyError as exc:
            raise KeyError(f"Widget '{widget_id}' is not rendered") from exc

    # ----------------------------------------------------------------------------
    # LiveUI

    def query_widget(self, widget_id: str, attribute: str) -> Any:
        target = self.widget(widget_id)
        if attribute == ENABLED:
            return self._is_enabled(target)
        if attribute == VALUE:
            return self._read_value(target)
        if attribute == CURRENT_ITEM and isinstance(target, QListWidget):
            item = target.currentItem()
            return item.data(ID_ROLE) if item is not None else None
        if attribute == SELECTED_ITEMS and isinstance(target, QListWidget):
            return [
                target.item(row).data(ID_ROLE)
                for row in range(target.count())
                if target.item(row).isSelected()
            ]
        if attribute == CURRENT_BUTTON and isinstance(target, QButtonGroup):
            button = target.checkedButton()
            return button.objectName() if button is not None else None
        if attribute == ITEMS:
            return self._read_items(target)
        raise UnsupportedAttribute(f"{attribute} is not available on {type(target).__name__}")

    def change_widget(self, widget_id: str, attribute: str, value: Any) -> None:
        target = self.widget(widget_id)
        if attribute == ENABLED:
            self._set_enabled(target, bool(value))
        elif attribute == VALUE:
            self._write_value(widget_id, target, value)
        elif attribute == CURRENT_ITEM and isinstance(target, QListWidget):
            for row in range(target.count()):
                if target.item(row).data(ID_ROLE) == value:
                    target.setCurrentRow(row)
                    break
            else:
                _logger.warning("Item '%s' not found in '%s'", value, widget_id)
        elif attribute == SELECTED_ITEMS and isinstance(target, QListWidget):
            wanted = list(value or [])
            for row in range(target.count()):
                item = target.item(row)
                item.setSelected(item.data(ID_ROLE) in wanted)
        elif attribute == CURRENT_BUTTON and isinstance(target, QButtonGroup):
            for button in target.buttons():
                if button.objectName() == value:
                    button.setChecked(True)
                    break
            else:
                _logger.warning("Button '%s' not found in '%s'", value, widget_id)
        elif attribute == ITEMS:
            self._write_items(target, value)
        else:
            raise UnsupportedAttribute(f"{attribute} cannot be changed on {type(target).__name__}")

        _logger.debug("Changed %s of '%s'", attribute, widget_id)
        self.widgetChanged.emit(widget_id, attribute, value)

    # ----------------------------------------------------------------------------
    # Helpers

    @staticmethod
    def _is_enabled(target: QObject) -> bool:
        if isinstance(target, QButtonGroup):
            return all(button.isEnabled() for button in target.buttons())
        if isinstance(target, QWidget):
            return target.isEnabled()
        raise UnsupportedAttribute(f"{ENABLED} is not available on {type(target).__name__}")

    @staticmethod
    def _set_enabled(target: QObject, enabled: bool) -> None:
        if isinstance(target, QButtonGroup):
            for button in target.buttons():
                button.setEnabled(enabled)
        elif isinstance(target, QWidget):
            target.setEnabled(enabled)
        else:
            raise UnsupportedAttribute(f"{ENABLED} cannot be changed on {type(target).__name__}")

    @staticmethod
    def _read_value(target: QObject) -> Any:
        if isinstance(target, QCheckBox):
            return target.isChecked()
        if isinstance(target, (QLineEdit, QLabel)):
            return target.text()
        if isinstance(target, QSpinBox):
            return target.value()
        if isinstance(target, QComboBox):
            data = target.currentData(ID_ROLE)
            return data if data is not None else target.currentText()
        if isinstance(target, QPlainTextEdit):
            return target.toPlainText()
        if isinstance(target, QTextEdit):
            return target.toHtml()
        raise UnsupportedAttribute(f"{VALUE} is not available on {type(target).__name__}")

    @staticmethod
    def _write_value(widget_id: str, target: QObject, value: Any) -> None:
        text = "" if value is None else str(value)
        if isinstance(target, QCheckBox):
            target.setChecked(bool(value))
        elif isinstance(target, (QLineEdit, QLabel)):
            target.setText(text)
        elif isinstance(target, QSpinBox):
            target.setValue(int(value))
        elif isinstance(target, QComboBox):
            index = target.findData(value, ID_ROLE)
            if index >= 0:
                target.setCurrentIndex(index)
            elif target.isEditable():
                target.setEditText(text)
            else:
                _logger.warning("Item '%s' not found in '%s'", value, widget_id)
        elif isinstance(target, QPlainTextEdit):
            target.setPlainText(text)
        elif isinstance(target, QTextEdit):
            target.setHtml(text)
        else:
            raise UnsupportedAttribute(f"{VALUE} cannot be changed on {type(target).__name__}")

    @staticmethod
    def _read_items(target: QObject) -> List[Any]:
        if isinstance(target, QComboBox):
            return [Item(Id(target.itemData(i, ID_ROLE)), target.itemText(i)) for i in range(target.count())]
        if isinstance(target, QListWidget):
            return [
                Item(Id(target.item(row).data(ID_ROLE)), target.item(row).text())
                for row in range(target.count())
            ]
        raise UnsupportedAttribute(f"{ITEMS} is not available on {type(target).__name__}")

    @staticmethod
    def _write_items(target: QObject, items: Any) -> None:
        pairs = item_pairs(items)
        if isinstance(target, QComboBox):
            target.clear()
            for key, text in pairs:
                target.addItem(str(text), key)
        elif isinstance(target, QListWidget):
            target.clear()
            for key, text in pairs:
                entry = QListWidgetItem(str(text))
                entry.setData(ID_ROLE, key)
                target.addItem(entry)
        else:
            raise UnsupportedAttribute(f"{ITEMS} cannot be changed on {type(target).__name__}")
