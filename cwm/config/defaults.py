"""Populate the widget registry from a YAML configuration file."""

from __future__ import annotations

import importlib
import logging
import os
import pathlib
from typing import Any, Callable, Dict, List, Mapping, Optional

import yaml

from ..ui.abstract_widget import AbstractWidget
from .registry import WidgetDescriptor, WidgetRegistry, registry

_logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CWM_CONFIG"


def load_config(path: pathlib.Path) -> dict:
    """Load YAML configuration from *path*."""

    with pathlib.Path(path).open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must define a mapping at the top level")
    return data


def resolve_config_path(argument: Optional[pathlib.Path] = None) -> Optional[pathlib.Path]:
    if argument:
        return pathlib.Path(argument)
    from_env = os.getenv(CONFIG_ENV_VAR)
    if from_env:
        return pathlib.Path(from_env)
    return None


def import_callable(path: str) -> Callable:
    """Import a callable specified as ``module:attr`` or dotted path."""

    module_name: str
    attr_name: str
    if ":" in path:
        module_name, attr_name = path.split(":", 1)
    else:
        module_name, _, attr_name = path.rpartition(".")
        if not module_name:
            raise ValueError(f"Unable to determine module in widget path '{path}'")

    module = importlib.import_module(module_name)
    try:
        loaded = getattr(module, attr_name)
    except AttributeError as exc:
        raise ImportError(f"Widget '{attr_name}' not found in module '{module_name}'") from exc

    if not callable(loaded):
        raise TypeError(f"Imported object '{path}' is not callable")

    return loaded


def _make_factory(
    widget_class: Callable[..., AbstractWidget],
    kwargs: Mapping[str, Any],
    widget_id: Optional[str],
    handle_all_events: Optional[bool],
) -> Callable[[], AbstractWidget]:
    def factory() -> AbstractWidget:
        widget = widget_class(**kwargs)
        if widget_id:
            widget.widget_id = widget_id
        if handle_all_events is not None:
            widget.handle_all_events = handle_all_events
        return widget

    return factory


def register_widgets_from_config(
    config: Mapping[str, Any],
    registry_instance: Optional[WidgetRegistry] = None,
) -> List[str]:
    """Register every entry of the ``widgets`` section and return their keys."""

    target = registry_instance or registry
    entries = config.get("widgets", []) if isinstance(config, Mapping) else []
    registered: List[str] = []

    for entry in entries if isinstance(entries, list) else []:
        if not isinstance(entry, dict):
            _logger.warning("Skipping widget entry %r: not a mapping", entry)
            continue
        key = entry.get("key")
        class_path = entry.get("class")
        if not isinstance(key, str) or not isinstance(class_path, str):
            _logger.warning("Skipping widget entry %r: 'key' and 'class' are required", entry)
            continue

        widget_class = import_callable(class_path)
        if not (isinstance(widget_class, type) and issubclass(widget_class, AbstractWidget)):
            raise TypeError(f"Widget class '{class_path}' must derive from AbstractWidget")

        kwargs = entry.get("kwargs") if isinstance(entry.get("kwargs"), dict) else {}
        widget_id = entry.get("widget_id") if isinstance(entry.get("widget_id"), str) else None
        handle_all_events = entry.get("handle_all_events")
        if handle_all_events is not None:
            handle_all_events = bool(handle_all_events)

        target.register(
            WidgetDescriptor(
                key=key,
                factory=_make_factory(widget_class, dict(kwargs), widget_id, handle_all_events),
                description=str(entry.get("description", "")),
            )
        )
        registered.append(key)

    _logger.info("Registered %d widgets from configuration", len(registered))
    return registered


def dialog_widget_keys(config: Mapping[str, Any], name: str) -> List[str]:
    """Return the widget keys listed for dialog *name*."""

    dialogs: Dict[str, Any] = config.get("dialogs", {}) if isinstance(config, Mapping) else {}
    if not isinstance(dialogs, dict) or name not in dialogs:
        raise KeyError(f"Dialog '{name}' is not configured")
    keys = dialogs[name]
    if isinstance(keys, str):
        return [keys]
    return [str(key) for key in keys or []]
