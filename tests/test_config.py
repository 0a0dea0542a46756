import textwrap

import pytest

from cwm.config.defaults import (
    dialog_widget_keys,
    import_callable,
    load_config,
    register_widgets_from_config,
    resolve_config_path,
)
from cwm.config.registry import WidgetRegistry

from widgets_fixture import HostnameWidget

CONFIG = textwrap.dedent(
    """
    widgets:
      - key: hostname
        class: widgets_fixture:HostnameWidget
        description: Host name entry
        kwargs:
          default: example.org
      - key: hostname_all
        class: widgets_fixture.HostnameWidget
        widget_id: other_host
        handle_all_events: true
      - just a string
      - key: no_class
    dialogs:
      network: [hostname, hostname_all]
      single: hostname
    """
)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "widgets.yaml"
    path.write_text(CONFIG, encoding="utf-8")
    return path


def test_load_config(config_file):
    config = load_config(config_file)
    assert config["dialogs"]["network"] == ["hostname", "hostname_all"]


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_load_empty_config(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == {}


def test_resolve_config_path(monkeypatch, tmp_path):
    monkeypatch.delenv("CWM_CONFIG", raising=False)
    assert resolve_config_path(None) is None
    monkeypatch.setenv("CWM_CONFIG", str(tmp_path / "env.yaml"))
    assert resolve_config_path(None) == tmp_path / "env.yaml"
    assert resolve_config_path(tmp_path / "arg.yaml") == tmp_path / "arg.yaml"


def test_register_widgets_from_config(config_file, caplog):
    target = WidgetRegistry()
    with caplog.at_level("WARNING"):
        keys = register_widgets_from_config(load_config(config_file), target)

    assert keys == ["hostname", "hostname_all"]
    assert len([r for r in caplog.records if r.levelname == "WARNING"]) == 2

    widget = target.create("hostname")
    assert isinstance(widget, HostnameWidget)
    assert widget.default == "example.org"
    assert target.get("hostname").description == "Host name entry"

    other = target.create("hostname_all")
    assert other.widget_id == "other_host"
    assert other.handle_all_events is True


def test_dialog_table_from_config(config_file):
    config = load_config(config_file)
    target = WidgetRegistry()
    register_widgets_from_config(config, target)

    table = target.create_table(dialog_widget_keys(config, "network"))
    assert set(table) == {"hostname", "other_host"}
    assert "handle_events" not in table["other_host"]
    assert dialog_widget_keys(config, "single") == ["hostname"]


def test_unknown_dialog(config_file):
    with pytest.raises(KeyError):
        dialog_widget_keys(load_config(config_file), "missing")


def test_import_callable_errors():
    with pytest.raises(ValueError):
        import_callable("nomodule")
    with pytest.raises(ImportError):
        import_callable("widgets_fixture:Missing")
    with pytest.raises(TypeError):
        import_callable("widgets_fixture:NOT_CALLABLE")


def test_non_widget_class_is_rejected():
    config = {"widgets": [{"key": "bad", "class": "widgets_fixture:not_a_widget"}]}
    with pytest.raises(TypeError):
        register_widgets_from_config(config, WidgetRegistry())
