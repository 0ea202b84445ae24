"""Latest-wins exchange between host notifications and window recomputation."""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class LatestValueExchange(Generic[T]):
    """Single-slot exchange that keeps only the most recent published value.

    Publishing over a pending value drops the older one; consuming clears the
    slot. `superseded_count` tracks how many values were coalesced away.
    """

    _lock: Lock = field(default_factory=Lock)
    _pending: T | None = None
    _has_pending: bool = False
    superseded_count: int = 0

    def publish(self, value: T) -> None:
        """Publish the latest value, replacing any pending one."""
        with self._lock:
            if self._has_pending:
                self.superseded_count += 1
            self._pending = value
            self._has_pending = True

    def consume_latest(self) -> T | None:
        """Consume and clear the latest published value atomically."""
        with self._lock:
            if not self._has_pending:
                return None
            payload = self._pending
            self._pending = None
            self._has_pending = False
            return payload

    def discard(self) -> bool:
        """Drop the pending value without consuming it."""
        with self._lock:
            had_pending = self._has_pending
            self._pending = None
            self._has_pending = False
            return had_pending

    @property
    def has_pending(self) -> bool:
        with self._lock:
            return self._has_pending
