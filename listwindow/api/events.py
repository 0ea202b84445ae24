"""Public event bus API contracts and list-window events."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

from listwindow.api.window import WindowResult

TEvent = TypeVar("TEvent")


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int


class EventBus(Protocol):
    """Public in-process pub/sub contract."""

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Subscribe handler for event type."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Unsubscribe token."""

    def publish(self, event: object) -> int:
        """Publish event and return invocation count."""


@dataclass(frozen=True, slots=True)
class ScrollChanged:
    """Host scroll container reported a new offset."""

    scroll_offset: float


@dataclass(frozen=True, slots=True)
class ViewportResized:
    """Host scroll container reported a new viewport height."""

    viewport_height: float


@dataclass(frozen=True, slots=True)
class ItemsReplaced:
    """The item sequence was replaced wholesale, e.g. on filter change."""

    items: object


@dataclass(frozen=True, slots=True)
class WindowChanged:
    """A recomputation produced a different window result."""

    window: WindowResult
    previous: WindowResult | None = None


def create_event_bus() -> EventBus:
    """Create default event bus implementation."""
    from listwindow.runtime.events import RuntimeEventBus

    return RuntimeEventBus()
