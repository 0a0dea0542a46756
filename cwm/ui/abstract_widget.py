"""Base class turning hook implementations into declarative widget definitions.

Widgets are declared by subclassing rather than by instancing a configuration
object full of callbacks::

    class HostnameWidget(InputField):
        def __init__(self, config):
            self.widget_id = "hostname"
            self._config = config

        def label(self):
            return _("Host name")

        def init(self):
            self.value = self._config.hostname

        def store(self):
            self._config.hostname = self.value

Only the hooks a class implements end up in the definition returned by
:meth:`AbstractWidget.assemble_definition`.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Tuple

from ..core.errors import MissingMandatoryHook, MissingWidgetType
from ..core.live_ui import ENABLED, LiveUI, get_live_ui

_logger = logging.getLogger(__name__)

HOOKS: Tuple[str, ...] = (
    "help",
    "label",
    "opt",
    "init",
    "handle",
    "store",
    "validate",
    "cleanup",
    "minimum",
    "maximum",
    "items",
    "contents",
)

EVENT_ID = "ID"


def _accepts_event(hook: Callable[..., Any]) -> bool:
    """Return True if the bound *hook* takes a positional argument."""

    try:
        signature = inspect.signature(hook)
    except (TypeError, ValueError):  # pragma: no cover - builtins without signature
        return True
    for parameter in signature.parameters.values():
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        ):
            return True
    return False


class AbstractWidget:
    """Base for every widget handed to the dialog engine."""

    widget_type: Optional[str] = None
    mandatory_hooks: Tuple[str, ...] = ()

    _widget_id: Optional[str] = None
    _handle_all_events: bool = False
    _live_ui: Optional[LiveUI] = None

    def __new__(cls, *args: Any, **kwargs: Any) -> "AbstractWidget":
        missing = cls.missing_hooks()
        if missing:
            raise MissingMandatoryHook(cls, missing)
        return super().__new__(cls)

    # ----------------------------------------------------------------------------
    # Declaration

    @classmethod
    def implements(cls, hook: str) -> bool:
        return getattr(cls, hook, None) is not None

    @classmethod
    def capabilities(cls) -> FrozenSet[str]:
        """Return the names of the optional hooks this class provides."""

        return frozenset(hook for hook in HOOKS if cls.implements(hook))

    @classmethod
    def missing_hooks(cls) -> List[str]:
        return [hook for hook in cls.mandatory_hooks if not cls.implements(hook)]

    @property
    def widget_id(self) -> str:
        if self._widget_id:
            return self._widget_id
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    @widget_id.setter
    def widget_id(self, value: str) -> None:
        self._widget_id = value

    @property
    def handle_all_events(self) -> bool:
        """Whether the widget receives every dialog event or only its own."""

        return bool(self._handle_all_events)

    @handle_all_events.setter
    def handle_all_events(self, value: bool) -> None:
        self._handle_all_events = bool(value)

    @property
    def live_ui(self) -> LiveUI:
        return self._live_ui if self._live_ui is not None else get_live_ui()

    @live_ui.setter
    def live_ui(self, backend: Optional[LiveUI]) -> None:
        self._live_ui = backend

    # ----------------------------------------------------------------------------
    # Definition

    def assemble_definition(self) -> Dict[str, Any]:
        """Build the definition mapping consumed by the dialog engine.

        Data hooks (``help``, ``label``, ``opt``) are evaluated here. Lifecycle
        hooks (``init``, ``handle``, ``store``, ``validate``, ``cleanup``) are only
        wrapped into callbacks and run later by the engine.

        Raises:
            MissingWidgetType: the class never set ``widget_type``.
        """

        widget_type = self.widget_type
        if widget_type is None:
            raise MissingWidgetType(type(self))

        hooks = self.capabilities()
        definition: Dict[str, Any] = {}

        if "help" in hooks:
            definition["help"] = self._hook_value("help")
        else:
            definition["no_help"] = ""
        if "label" in hooks:
            definition["label"] = self._hook_value("label")
        if "opt" in hooks:
            definition["opt"] = list(self._hook_value("opt"))
        if "validate" in hooks:
            definition["validate_function"] = self._validate_callback()
            definition["validate_type"] = "function"
        if not self.handle_all_events:
            definition["handle_events"] = [self.widget_id]
        if "init" in hooks:
            definition["init"] = self._init_callback()
        if "handle" in hooks:
            definition["handle"] = self._handle_callback()
        if "store" in hooks:
            definition["store"] = self._store_callback()
        if "cleanup" in hooks:
            definition["cleanup"] = self._cleanup_callback()
        definition["widget"] = widget_type

        _logger.debug("Assembled %s definition for '%s'", widget_type, self.widget_id)
        return definition

    def _hook_value(self, hook: str) -> Any:
        # plain class attributes are accepted in place of data hook methods
        value = getattr(self, hook)
        return value() if callable(value) else value

    # ----------------------------------------------------------------------------
    # Live state

    def enabled(self) -> bool:
        """Return True if the widget is open for modification."""

        return bool(self.live_ui.query_widget(self.widget_id, ENABLED))

    def enable(self) -> None:
        self.live_ui.change_widget(self.widget_id, ENABLED, True)

    def disable(self) -> None:
        self.live_ui.change_widget(self.widget_id, ENABLED, False)

    def is_own_event(self, event: Mapping[str, Any]) -> bool:
        """Return True if *event* was raised by this widget."""

        return event.get(EVENT_ID) == self.widget_id

    # ----------------------------------------------------------------------------
    # Engine callbacks

    def _init_callback(self) -> Callable[[str], None]:
        def init_callback(_widget_id: str) -> None:
            self.init()

        return init_callback

    def _handle_callback(self) -> Callable[[str, Mapping[str, Any]], Any]:
        # with the event the hook can tell apart several sources, which matters
        # for custom widgets and when handle_all_events is set
        pass_event = _accepts_event(self.handle)

        def handle_callback(_widget_id: str, event: Mapping[str, Any]) -> Any:
            if pass_event:
                return self.handle(event)
            return self.handle()

        return handle_callback

    def _store_callback(self) -> Callable[[str, Mapping[str, Any]], None]:
        def store_callback(_widget_id: str, _event: Mapping[str, Any]) -> None:
            self.store()

        return store_callback

    def _validate_callback(self) -> Callable[[str, Mapping[str, Any]], bool]:
        def validate_callback(_widget_id: str, _event: Mapping[str, Any]) -> bool:
            return bool(self.validate())

        return validate_callback

    def _cleanup_callback(self) -> Callable[[str], None]:
        def cleanup_callback(_widget_id: str) -> None:
            self.cleanup()

        return cleanup_callback
