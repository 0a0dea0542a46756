"""Configuration helpers for assembling dialog widget sets."""

from .defaults import (
    dialog_widget_keys,
    import_callable,
    load_config,
    register_widgets_from_config,
    resolve_config_path,
)
from .registry import WidgetDescriptor, WidgetRegistry, registry

__all__ = [
    "WidgetDescriptor",
    "WidgetRegistry",
    "dialog_widget_keys",
    "import_callable",
    "load_config",
    "register_widgets_from_config",
    "registry",
    "resolve_config_path",
]
