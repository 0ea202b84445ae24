"""Public factories for list windows and their controllers."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import TYPE_CHECKING

from listwindow.api.events import EventBus
from listwindow.api.window import LayoutParams, ViewportState

if TYPE_CHECKING:
    from listwindow.ui_runtime.controller import VirtualListController
    from listwindow.ui_runtime.windowing import ListWindow


def create_list_window(*, item_height: float, buffer_count: int = 0, item_count: int = 0) -> "ListWindow":
    """Create a validated fixed-height list window.

    Raises `InvalidConfiguration` immediately for unusable parameters.
    """
    from listwindow.ui_runtime.windowing import ListWindow

    return ListWindow.create(item_height=item_height, buffer_count=buffer_count, item_count=item_count)


def create_list_controller[T](
    bus: EventBus,
    items: Sequence[T],
    *,
    key: Callable[[T], Hashable] | None = None,
    layout: LayoutParams | None = None,
    viewport: ViewportState | None = None,
    immediate: bool = False,
) -> "VirtualListController[T]":
    """Create a controller, defaulting layout and viewport from config."""
    from listwindow.runtime.config import get_list_config
    from listwindow.ui_runtime.controller import VirtualListController
    from listwindow.ui_runtime.items import sequence_of

    config = get_list_config().layout
    return VirtualListController(
        bus,
        sequence_of(items, key),
        layout if layout is not None else config.layout_params(),
        viewport=viewport if viewport is not None else ViewportState(viewport_height=config.viewport_height),
        wheel_lines=config.wheel_lines,
        immediate=immediate,
    )
