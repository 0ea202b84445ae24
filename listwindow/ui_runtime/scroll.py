"""Generic list scrolling helpers for wheel input semantics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScrollOutcome:
    """Result of attempting to scroll a list-like viewport."""

    handled: bool
    next_offset: float


def apply_wheel_scroll(
    dy: float,
    current_offset: float,
    *,
    step: float,
    max_offset: float,
) -> ScrollOutcome:
    """Convert a wheel delta into a clamped pixel offset.

    Positive `dy` scrolls down. One notch moves by `step` pixels.
    """
    upper = max(0.0, max_offset)
    current = max(0.0, min(current_offset, upper))
    if dy < 0 and current > 0.0:
        return ScrollOutcome(handled=True, next_offset=max(0.0, current - step))
    if dy > 0 and current < upper:
        return ScrollOutcome(handled=True, next_offset=min(upper, current + step))
    return ScrollOutcome(handled=False, next_offset=current)


def wheel_step(item_height: float, lines: int) -> float:
    """Return pixels per wheel notch for `lines` rows."""
    return item_height * max(1, lines)
