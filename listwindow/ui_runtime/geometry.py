"""List-window geometry primitives."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle in content coordinates."""

    x: float
    y: float
    w: float
    h: float

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains(self, px: float, py: float) -> bool:
        """Return whether a point is inside the rectangle."""
        return self.x <= px <= self.x + self.w and self.y <= py < self.bottom

    def overlaps_span(self, top: float, bottom: float) -> bool:
        """Return whether the rectangle intersects the half-open span `[top, bottom)`."""
        return self.y < bottom and self.bottom > top

    def translated(self, dy: float) -> "Rect":
        return Rect(self.x, self.y + dy, self.w, self.h)
