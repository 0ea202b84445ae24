"""Fixed-height windowing math for virtualized list rendering."""

from __future__ import annotations

import logging
import math

from listwindow.api.window import (
    EMPTY_WINDOW,
    LayoutParams,
    ViewportState,
    WindowResult,
    validate_item_count,
    validate_layout,
)
from listwindow.runtime.errors import InvalidConfiguration, log_transient_out_of_range

_LOG = logging.getLogger(__name__)


def compute_window(
    item_count: int,
    item_height: float,
    buffer_count: int,
    scroll_offset: float,
    viewport_height: float,
) -> WindowResult:
    """Return the materialized range for one scroll position.

    Raises `InvalidConfiguration` for unusable layout parameters. Out-of-range
    scroll and viewport values are clamped and never raise.
    """
    validate_item_count(item_count)
    validate_layout(item_height, buffer_count)
    _validate_extent(item_count, item_height)
    return _window(item_count, item_height, buffer_count, scroll_offset, viewport_height)


def max_scroll_offset(item_count: int, item_height: float, viewport_height: float) -> float:
    """Return the largest offset a hosting scroll container allows."""
    return max(0, item_count * item_height - max(0, viewport_height))


class ListWindow:
    """Validated windowing instance for one list.

    Configuration is checked once here so that `compute` stays total for any
    numeric viewport input.
    """

    def __init__(self, layout: LayoutParams, item_count: int) -> None:
        validate_item_count(item_count)
        _validate_extent(item_count, layout.item_height)
        self._layout = layout
        self._item_count = item_count

    @classmethod
    def create(cls, *, item_height: float, buffer_count: int = 0, item_count: int = 0) -> "ListWindow":
        return cls(LayoutParams(item_height=item_height, buffer_count=buffer_count), item_count)

    @property
    def layout(self) -> LayoutParams:
        return self._layout

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def total_height(self) -> float:
        return self._item_count * self._layout.item_height

    def with_item_count(self, item_count: int) -> "ListWindow":
        """Return a window for a replaced item sequence with the same layout."""
        return ListWindow(self._layout, item_count)

    def compute(self, viewport: ViewportState) -> WindowResult:
        """Return the window for the given viewport state."""
        return _window(
            self._item_count,
            self._layout.item_height,
            self._layout.buffer_count,
            viewport.scroll_offset,
            viewport.viewport_height,
        )

    def max_scroll_offset(self, viewport_height: float) -> float:
        return max_scroll_offset(self._item_count, self._layout.item_height, viewport_height)


def _window(
    item_count: int,
    item_height: float,
    buffer_count: int,
    scroll_offset: float,
    viewport_height: float,
) -> WindowResult:
    if item_count == 0:
        return EMPTY_WINDOW
    total_height = item_count * item_height
    # A viewport taller than the content is legitimate; only the excess is dropped.
    viewport = min(_clamp_input("viewport_height", viewport_height, math.inf), total_height)
    offset = _clamp_input("scroll_offset", scroll_offset, max(0, total_height - viewport))

    first_visible = math.floor(offset / item_height)
    # Guard against quotient rounding so the window over-covers.
    if first_visible * item_height > offset:
        first_visible -= 1
    bottom = offset + viewport
    past_visible = math.ceil(bottom / item_height)
    if past_visible * item_height < bottom:
        past_visible += 1

    start_index = _clamp_index(first_visible - buffer_count, 0, item_count)
    end_index = _clamp_index(past_visible + buffer_count, start_index, item_count)
    return WindowResult(
        start_index=start_index,
        end_index=end_index,
        offset_top=start_index * item_height,
        total_height=total_height,
    )


def _validate_extent(item_count: int, item_height: float) -> None:
    try:
        total_height = item_count * item_height
    except OverflowError:
        total_height = math.inf
    if not math.isfinite(total_height):
        raise InvalidConfiguration(f"total height overflows: {item_count!r} items of {item_height!r}")


def _clamp_input(field: str, raw: float, upper: float) -> float:
    value = raw
    if math.isnan(value):
        value = 0
    value = max(0, min(value, upper))
    if value != raw:
        log_transient_out_of_range(_LOG, field, raw, value)
    return value


def _clamp_index(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))
