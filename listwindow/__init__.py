"""Windowed list virtualization for scrollable post listings."""

from listwindow.api.window import InvalidConfiguration, LayoutParams, ViewportState, WindowResult
from listwindow.ui_runtime.windowing import ListWindow, compute_window

__all__ = [
    "InvalidConfiguration",
    "LayoutParams",
    "ListWindow",
    "ViewportState",
    "WindowResult",
    "compute_window",
]
