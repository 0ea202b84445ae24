"""List-window UI runtime helpers."""

from listwindow.ui_runtime.controller import VirtualListController
from listwindow.ui_runtime.geometry import Rect
from listwindow.ui_runtime.items import ItemSequence, sequence_of
from listwindow.ui_runtime.list_viewport import (
    can_scroll_down,
    can_scroll_up,
    clamp_scroll_offset,
    scroll_offset_for_index,
    visible_slice,
)
from listwindow.ui_runtime.offset_index import OffsetIndex
from listwindow.ui_runtime.render import ListProjection, RowProjection, diff_keys, project_window
from listwindow.ui_runtime.scroll import ScrollOutcome, apply_wheel_scroll, wheel_step
from listwindow.ui_runtime.windowing import ListWindow, compute_window, max_scroll_offset

__all__ = [
    "ItemSequence",
    "ListProjection",
    "ListWindow",
    "OffsetIndex",
    "Rect",
    "RowProjection",
    "ScrollOutcome",
    "VirtualListController",
    "apply_wheel_scroll",
    "can_scroll_down",
    "can_scroll_up",
    "clamp_scroll_offset",
    "compute_window",
    "diff_keys",
    "max_scroll_offset",
    "project_window",
    "scroll_offset_for_index",
    "sequence_of",
    "visible_slice",
    "wheel_step",
]
