"""Public list-window API contracts."""

from listwindow.api.events import (
    EventBus,
    ItemsReplaced,
    ScrollChanged,
    Subscription,
    ViewportResized,
    WindowChanged,
    create_event_bus,
)
from listwindow.api.list_window import create_list_controller, create_list_window
from listwindow.api.logging import JsonFormatter, LoggingConfig, configure_logging, get_logger
from listwindow.api.window import (
    EMPTY_WINDOW,
    InvalidConfiguration,
    LayoutParams,
    ViewportState,
    WindowResult,
)

__all__ = [
    "EMPTY_WINDOW",
    "EventBus",
    "InvalidConfiguration",
    "ItemsReplaced",
    "JsonFormatter",
    "LayoutParams",
    "LoggingConfig",
    "ScrollChanged",
    "Subscription",
    "ViewportResized",
    "ViewportState",
    "WindowChanged",
    "WindowResult",
    "configure_logging",
    "create_event_bus",
    "create_list_controller",
    "create_list_window",
    "get_logger",
]
