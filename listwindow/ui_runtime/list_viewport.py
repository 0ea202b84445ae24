"""Generic list-viewport helpers over pixel scroll offsets."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Literal

from listwindow.api.window import WindowResult

ScrollAlign = Literal["start", "end", "nearest"]


def visible_slice[T](items: Sequence[T], window: WindowResult) -> list[T]:
    """Return the materialized items for a window, bounded by the sequence."""
    start = max(0, min(window.start_index, len(items)))
    end = max(start, min(window.end_index, len(items)))
    return list(items[start:end])


def clamp_scroll_offset(offset: float, viewport_height: float, total_height: float) -> float:
    """Clamp a pixel scroll offset to valid list viewport bounds."""
    max_offset = max(0.0, total_height - max(0.0, viewport_height))
    if math.isnan(offset):
        return 0.0
    return max(0.0, min(offset, max_offset))


def can_scroll_down(offset: float, viewport_height: float, total_height: float) -> bool:
    """Return whether there is content below the current viewport."""
    clamped = clamp_scroll_offset(offset, viewport_height, total_height)
    return clamped + max(0.0, viewport_height) < total_height


def can_scroll_up(offset: float, viewport_height: float, total_height: float) -> bool:
    return clamp_scroll_offset(offset, viewport_height, total_height) > 0.0


def scroll_offset_for_index(
    index: int,
    *,
    item_height: float,
    item_count: int,
    viewport_height: float,
    current_offset: float,
    align: ScrollAlign = "nearest",
) -> float:
    """Return the scroll offset that brings item `index` into view."""
    total_height = item_count * item_height
    if item_count <= 0:
        return 0.0
    bounded = max(0, min(index, item_count - 1))
    top = bounded * item_height
    bottom = top + item_height
    viewport = max(0.0, viewport_height)
    if align == "start":
        target = top
    elif align == "end":
        target = bottom - viewport
    else:
        current = clamp_scroll_offset(current_offset, viewport, total_height)
        if top < current:
            target = top
        elif bottom > current + viewport:
            target = bottom - viewport
        else:
            target = current
    return clamp_scroll_offset(target, viewport, total_height)
