"""Render projection of a window result over a keyed item sequence."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

from listwindow.api.window import WindowResult
from listwindow.ui_runtime.geometry import Rect
from listwindow.ui_runtime.items import ItemSequence
from listwindow.ui_runtime.offset_index import OffsetIndex


@dataclass(frozen=True, slots=True)
class RowProjection[T]:
    """One materialized row, keyed by its stable item key."""

    key: Hashable
    index: int
    top: float
    height: float
    payload: T

    def rect(self, width: float) -> Rect:
        """Return the row rectangle in full-content coordinates."""
        return Rect(0.0, self.top, width, self.height)


@dataclass(frozen=True, slots=True)
class ListProjection[T]:
    """Spacer, positioning wrapper, and the rows rendered inside it.

    The spacer spans `total_height` so the host scrollbar behaves as if every
    item were rendered; the wrapper sits at `offset_top` inside it.
    """

    total_height: float
    offset_top: float
    rows: tuple[RowProjection[T], ...] = ()

    def keys(self) -> tuple[Hashable, ...]:
        return tuple(row.key for row in self.rows)

    def row_at(self, content_y: float) -> RowProjection[T] | None:
        """Return the rendered row under a full-content y coordinate."""
        for row in self.rows:
            if row.top <= content_y < row.top + row.height:
                return row
        return None


def project_window[T](
    items: ItemSequence[T],
    window: WindowResult,
    *,
    item_height: float | None = None,
    offsets: OffsetIndex | None = None,
) -> ListProjection[T]:
    """Materialize exactly the items in `[start_index, end_index)`.

    Row tops come from `offsets` when given, otherwise from the fixed
    `item_height`.
    """
    if offsets is None and item_height is None:
        raise ValueError("project_window requires item_height or offsets")
    start = max(0, min(window.start_index, len(items)))
    end = max(start, min(window.end_index, len(items)))
    rows: list[RowProjection[T]] = []
    for index in range(start, end):
        if offsets is not None:
            top = offsets.offset_of(index)
            height = offsets.height_of(index)
        else:
            height = float(item_height)
            top = index * height
        rows.append(
            RowProjection(
                key=items.key_at(index),
                index=index,
                top=top,
                height=height,
                payload=items[index],
            )
        )
    return ListProjection(
        total_height=window.total_height,
        offset_top=window.offset_top,
        rows=tuple(rows),
    )


def diff_keys(previous: ListProjection[object], current: ListProjection[object]) -> tuple[set[Hashable], set[Hashable]]:
    """Return `(mounted, unmounted)` keys between two projections.

    Rows present in both keep their identity as the window slides.
    """
    before = set(previous.keys())
    after = set(current.keys())
    return after - before, before - after
