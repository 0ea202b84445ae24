"""Cumulative-offset index for variable-height list windowing."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

import numpy as np

from listwindow.api.window import EMPTY_WINDOW, WindowResult, validate_buffer_count
from listwindow.runtime.errors import InvalidConfiguration, log_transient_out_of_range

_LOG = logging.getLogger(__name__)


class OffsetIndex:
    """Prefix-sum table of item tops with O(log N) range lookup.

    `offsets[i]` is the top of item `i`; `offsets[N]` is the total height.
    Heights are mutated only through `update_height`, which the host calls
    from its measurement callback.
    """

    def __init__(self, heights: Iterable[float]) -> None:
        values = np.asarray(list(heights), dtype=np.float64)
        if values.ndim != 1:
            raise InvalidConfiguration("heights must be a flat sequence")
        _validate_heights(values)
        self._heights = values
        self._offsets = _prefix_sums(values)
        if not math.isfinite(self.total_height):
            raise InvalidConfiguration("total height must be finite")

    @classmethod
    def uniform(cls, item_count: int, item_height: float) -> "OffsetIndex":
        """Build an index where every item starts at an estimated height."""
        if item_count < 0:
            raise InvalidConfiguration(f"item_count must be >= 0, got {item_count!r}")
        return cls(np.full(item_count, float(item_height)))

    def __len__(self) -> int:
        return int(self._heights.shape[0])

    @property
    def total_height(self) -> float:
        return float(self._offsets[-1])

    def height_of(self, index: int) -> float:
        return float(self._heights[index])

    def offset_of(self, index: int) -> float:
        """Return the top of item `index`; `len(self)` gives the total height."""
        return float(self._offsets[index])

    def index_at(self, offset: float) -> int:
        """Return the item whose span contains `offset`, clamped into range."""
        count = len(self)
        if count == 0:
            return 0
        position = int(np.searchsorted(self._offsets, offset, side="right")) - 1
        return max(0, min(position, count - 1))

    def update_height(self, index: int, height: float) -> bool:
        """Record a measured height. Returns whether any offset changed."""
        if not 0 <= index < len(self):
            raise IndexError(f"item index out of range: {index}")
        if not math.isfinite(height) or height < 0:
            raise InvalidConfiguration(f"measured height must be >= 0, got {height!r}")
        delta = float(height) - float(self._heights[index])
        if delta == 0.0:
            return False
        if not math.isfinite(self.total_height + delta):
            raise InvalidConfiguration("total height must be finite")
        self._heights[index] = height
        self._offsets[index + 1 :] += delta
        return True

    def compute_window(
        self,
        buffer_count: int,
        scroll_offset: float,
        viewport_height: float,
    ) -> WindowResult:
        """Return the materialized range for variable item heights."""
        validate_buffer_count(buffer_count)
        count = len(self)
        if count == 0:
            return EMPTY_WINDOW
        total_height = self.total_height
        viewport = _clamp("viewport_height", viewport_height, math.inf)
        viewport = min(viewport, total_height)
        offset = _clamp("scroll_offset", scroll_offset, max(0.0, total_height - viewport))
        bottom = offset + viewport

        # First item whose bottom edge lies past the offset.
        first_visible = int(np.searchsorted(self._offsets[1:], offset, side="right"))
        # First item whose top edge is at or past the viewport bottom.
        past_visible = int(np.searchsorted(self._offsets[:-1], bottom, side="left"))
        # Zero-height items at the boundary can invert the pair.
        past_visible = max(past_visible, first_visible)

        start_index = max(0, min(first_visible - buffer_count, count))
        end_index = max(start_index, min(past_visible + buffer_count, count))
        return WindowResult(
            start_index=start_index,
            end_index=end_index,
            offset_top=self.offset_of(start_index),
            total_height=total_height,
        )


def _prefix_sums(heights: np.ndarray) -> np.ndarray:
    offsets = np.zeros(heights.shape[0] + 1, dtype=np.float64)
    np.cumsum(heights, out=offsets[1:])
    return offsets


def _validate_heights(heights: np.ndarray) -> None:
    if heights.size and (not np.all(np.isfinite(heights)) or np.any(heights < 0)):
        raise InvalidConfiguration("item heights must be finite and >= 0")


def _clamp(field: str, raw: float, upper: float) -> float:
    value = 0.0 if math.isnan(raw) else raw
    value = max(0.0, min(value, upper))
    if value != raw:
        log_transient_out_of_range(_LOG, field, raw, value)
    return value
