"""Public list-window value contracts."""

from __future__ import annotations

import math
from dataclasses import dataclass

from listwindow.runtime.errors import InvalidConfiguration


@dataclass(frozen=True, slots=True)
class LayoutParams:
    """Fixed-height layout configuration, constant for the list lifetime."""

    item_height: float
    buffer_count: int = 0

    def __post_init__(self) -> None:
        validate_layout(self.item_height, self.buffer_count)


@dataclass(frozen=True, slots=True)
class ViewportState:
    """Latest scroll offset and viewport height reported by the host."""

    scroll_offset: float = 0.0
    viewport_height: float = 0.0


@dataclass(frozen=True, slots=True)
class WindowResult:
    """Materialized index range and its pixel placement.

    `end_index` is exclusive. Values are replaced per recomputation, never
    mutated.
    """

    start_index: int
    end_index: int
    offset_top: float
    total_height: float

    @property
    def count(self) -> int:
        return self.end_index - self.start_index

    def indices(self) -> range:
        """Return the materialized index range."""
        return range(self.start_index, self.end_index)

    def contains(self, index: int) -> bool:
        return self.start_index <= index < self.end_index


EMPTY_WINDOW = WindowResult(start_index=0, end_index=0, offset_top=0, total_height=0)


def validate_layout(item_height: float, buffer_count: int) -> None:
    """Raise `InvalidConfiguration` for unusable layout parameters."""
    if isinstance(item_height, bool) or not isinstance(item_height, (int, float)):
        raise InvalidConfiguration(f"item_height must be a number, got {item_height!r}")
    if not math.isfinite(item_height) or item_height <= 0:
        raise InvalidConfiguration(f"item_height must be > 0, got {item_height!r}")
    validate_buffer_count(buffer_count)


def validate_buffer_count(buffer_count: int) -> None:
    """Raise `InvalidConfiguration` for a negative or non-integer buffer."""
    if isinstance(buffer_count, bool) or not isinstance(buffer_count, int):
        raise InvalidConfiguration(f"buffer_count must be an integer, got {buffer_count!r}")
    if buffer_count < 0:
        raise InvalidConfiguration(f"buffer_count must be >= 0, got {buffer_count!r}")


def validate_item_count(item_count: int) -> None:
    """Raise `InvalidConfiguration` for a negative or non-integer item count."""
    if isinstance(item_count, bool) or not isinstance(item_count, int):
        raise InvalidConfiguration(f"item_count must be an integer, got {item_count!r}")
    if item_count < 0:
        raise InvalidConfiguration(f"item_count must be >= 0, got {item_count!r}")


__all__ = [
    "EMPTY_WINDOW",
    "InvalidConfiguration",
    "LayoutParams",
    "ViewportState",
    "WindowResult",
    "validate_buffer_count",
    "validate_item_count",
    "validate_layout",
]
