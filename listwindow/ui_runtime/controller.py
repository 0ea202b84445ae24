"""Single-writer viewport state holder driving window recomputation."""

from __future__ import annotations

import logging
from dataclasses import replace

from listwindow.api.events import (
    EventBus,
    ItemsReplaced,
    ScrollChanged,
    Subscription,
    ViewportResized,
    WindowChanged,
)
from listwindow.api.window import LayoutParams, ViewportState, WindowResult
from listwindow.runtime.errors import RECOVERABLE_RUNTIME_ERRORS, log_recoverable
from listwindow.runtime.snapshot_exchange import LatestValueExchange
from listwindow.ui_runtime.items import ItemSequence
from listwindow.ui_runtime.list_viewport import ScrollAlign, scroll_offset_for_index
from listwindow.ui_runtime.render import ListProjection, project_window
from listwindow.ui_runtime.scroll import apply_wheel_scroll, wheel_step
from listwindow.ui_runtime.windowing import ListWindow

_LOG = logging.getLogger(__name__)


class VirtualListController[T]:
    """Owns the viewport state of one virtualized list.

    Host notifications arrive as bus events and only record the latest
    viewport. `flush` runs once per render cycle, recomputes against the
    most recent state, and drops any superseded intermediate states. With
    `immediate=True` every notification flushes synchronously instead.
    """

    def __init__(
        self,
        bus: EventBus,
        items: ItemSequence[T],
        layout: LayoutParams,
        *,
        viewport: ViewportState | None = None,
        wheel_lines: int = 3,
        immediate: bool = False,
    ) -> None:
        self._bus = bus
        self._items = items
        self._list_window = ListWindow(layout, len(items))
        self._viewport = viewport if viewport is not None else ViewportState()
        self._wheel_lines = wheel_lines
        self._immediate = immediate
        self._pending: LatestValueExchange[ViewportState] = LatestValueExchange()
        self._stale = False
        self._window = self._list_window.compute(self._viewport)
        self._projection: ListProjection[T] | None = None
        self._recompute_count = 1
        self._subscriptions: list[Subscription] = [
            bus.subscribe(ScrollChanged, self._on_scroll),
            bus.subscribe(ViewportResized, self._on_resize),
            bus.subscribe(ItemsReplaced, self._on_items_replaced),
        ]

    @property
    def window(self) -> WindowResult:
        return self._window

    @property
    def viewport(self) -> ViewportState:
        """Latest viewport recorded, whether or not it has been flushed."""
        return self._viewport

    @property
    def items(self) -> ItemSequence[T]:
        return self._items

    @property
    def layout(self) -> LayoutParams:
        return self._list_window.layout

    @property
    def recompute_count(self) -> int:
        return self._recompute_count

    @property
    def coalesced_count(self) -> int:
        """Number of viewport states dropped before being computed against."""
        return self._pending.superseded_count

    @property
    def needs_flush(self) -> bool:
        return self._stale or self._pending.has_pending

    def flush(self) -> WindowResult:
        """Recompute once against the latest viewport and publish on change."""
        latest = self._pending.consume_latest()
        if latest is None and not self._stale:
            return self._window
        items_replaced = self._stale
        self._stale = False
        previous = self._window
        self._window = self._list_window.compute(self._viewport)
        self._recompute_count += 1
        if self._window == previous and not items_replaced:
            return self._window
        self._projection = None
        _LOG.debug(
            "window_changed start=%d end=%d offset_top=%s",
            self._window.start_index,
            self._window.end_index,
            self._window.offset_top,
        )
        try:
            self._bus.publish(WindowChanged(window=self._window, previous=previous))
        except RECOVERABLE_RUNTIME_ERRORS:
            log_recoverable(_LOG, "window_changed_subscriber_failed", level=logging.ERROR)
        return self._window

    def projection(self) -> ListProjection[T]:
        """Return the render projection for the current window."""
        if self._projection is None:
            self._projection = project_window(
                self._items,
                self._window,
                item_height=self._list_window.layout.item_height,
            )
        return self._projection

    def handle_wheel(self, dy: float) -> bool:
        """Translate a wheel delta into a scroll notification."""
        outcome = apply_wheel_scroll(
            dy,
            self._viewport.scroll_offset,
            step=wheel_step(self._list_window.layout.item_height, self._wheel_lines),
            max_offset=self._list_window.max_scroll_offset(self._viewport.viewport_height),
        )
        if outcome.handled:
            self._bus.publish(ScrollChanged(scroll_offset=outcome.next_offset))
        return outcome.handled

    def scroll_to_index(self, index: int, *, align: ScrollAlign = "nearest") -> float:
        """Publish the scroll offset that brings `index` into view."""
        target = scroll_offset_for_index(
            index,
            item_height=self._list_window.layout.item_height,
            item_count=self._list_window.item_count,
            viewport_height=self._viewport.viewport_height,
            current_offset=self._viewport.scroll_offset,
            align=align,
        )
        if target != self._viewport.scroll_offset:
            self._bus.publish(ScrollChanged(scroll_offset=target))
        return target

    def detach(self) -> None:
        """Stop listening to host notifications."""
        for subscription in self._subscriptions:
            self._bus.unsubscribe(subscription)
        self._subscriptions.clear()
        self._pending.discard()

    def _record(self, viewport: ViewportState) -> None:
        self._viewport = viewport
        self._pending.publish(viewport)
        if self._immediate:
            self.flush()

    def _on_scroll(self, event: ScrollChanged) -> None:
        self._record(replace(self._viewport, scroll_offset=event.scroll_offset))

    def _on_resize(self, event: ViewportResized) -> None:
        self._record(replace(self._viewport, viewport_height=event.viewport_height))

    def _on_items_replaced(self, event: ItemsReplaced) -> None:
        items = event.items
        if not isinstance(items, ItemSequence):
            raise TypeError(f"ItemsReplaced.items must be an ItemSequence, got {type(items).__name__}")
        self._items = items
        self._list_window = self._list_window.with_item_count(len(items))
        self._projection = None
        self._stale = True
        if self._immediate:
            self.flush()
