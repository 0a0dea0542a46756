import pytest
from PySide6.QtWidgets import (
    QButtonGroup,
    QCheckBox,
    QComboBox,
    QLineEdit,
    QListWidget,
    QPlainTextEdit,
    QRadioButton,
    QSpinBox,
)

from cwm.core.errors import UnsupportedAttribute
from cwm.core.term import Id, Item
from cwm.ui.qt_backend import QtLiveUI
from cwm.ui.variants import CheckBox, ComboBox, InputField, MultiSelectionBox, RadioButtons


@pytest.fixture
def backend(qapp):
    return QtLiveUI()


def _labelled(base, widget_id, backend):
    widget = type("Labelled", (base,), {"label": lambda self: "Label"})()
    widget.widget_id = widget_id
    widget.live_ui = backend
    return widget


def test_line_edit_value_and_enabled(backend):
    line = QLineEdit()
    backend.register("name", line)
    widget = _labelled(InputField, "name", backend)

    widget.value = "alice"
    assert line.text() == "alice"
    assert widget.value == "alice"

    widget.disable()
    assert not line.isEnabled()
    assert widget.enabled() is False


def test_check_box(backend):
    box = QCheckBox()
    backend.register("agree", box)
    widget = _labelled(CheckBox, "agree", backend)

    widget.check()
    assert box.isChecked()
    assert widget.checked() is True
    widget.uncheck()
    assert widget.unchecked() is True


def test_combo_box_items_and_value(backend):
    combo = QComboBox()
    backend.register("country", combo)
    widget = _labelled(ComboBox, "country", backend)

    widget.change_items([("ca", "Canada"), ("us", "USA")])
    assert combo.count() == 2
    assert backend.query_widget("country", "Items") == [Item(Id("ca"), "Canada"), Item(Id("us"), "USA")]

    widget.value = "us"
    assert combo.currentText() == "USA"
    assert widget.value == "us"


def test_list_widget_multi_selection(backend):
    listing = QListWidget()
    listing.setSelectionMode(QListWidget.SelectionMode.MultiSelection)
    backend.register("colors", listing)
    widget = _labelled(MultiSelectionBox, "colors", backend)

    widget.change_items([("r", "Red"), ("g", "Green"), ("b", "Blue")])
    widget.value = ["b", "r"]
    assert widget.value == ["r", "b"]


def test_list_widget_current_item(backend):
    listing = QListWidget()
    backend.register("colors", listing)
    backend.change_widget("colors", "Items", [("r", "Red"), ("g", "Green")])
    backend.change_widget("colors", "CurrentItem", "g")
    assert backend.query_widget("colors", "CurrentItem") == "g"


def test_radio_buttons(backend):
    group = QButtonGroup()
    buttons = []
    for name in ("small", "large"):
        button = QRadioButton(name.title())
        button.setObjectName(name)
        group.addButton(button)
        buttons.append(button)
    backend.register("size", group)
    widget = _labelled(RadioButtons, "size", backend)

    widget.value = "large"
    assert buttons[1].isChecked()
    assert widget.value == "large"

    widget.disable()
    assert not any(button.isEnabled() for button in buttons)


def test_spin_box_and_plain_text(backend):
    spin = QSpinBox()
    spin.setRange(0, 100)
    edit = QPlainTextEdit()
    backend.register("count", spin)
    backend.register("notes", edit)

    backend.change_widget("count", "Value", 42)
    backend.change_widget("notes", "Value", "line one\nline two")
    assert backend.query_widget("count", "Value") == 42
    assert backend.query_widget("notes", "Value") == "line one\nline two"


def test_changes_are_signalled(backend):
    received = []
    backend.widgetChanged.connect(lambda *args: received.append(args))
    backend.register("name", QLineEdit())
    backend.change_widget("name", "Value", "bob")
    assert received == [("name", "Value", "bob")]


def test_errors(backend):
    backend.register("name", QLineEdit())
    with pytest.raises(ValueError):
        backend.register("name", QLineEdit())
    with pytest.raises(KeyError):
        backend.query_widget("missing", "Value")
    with pytest.raises(UnsupportedAttribute):
        backend.query_widget("name", "CurrentButton")
    with pytest.raises(UnsupportedAttribute):
        backend.change_widget("name", "Items", [])


def test_unregister(backend):
    backend.register("name", QLineEdit())
    backend.unregister("name")
    with pytest.raises(KeyError):
        backend.widget("name")
