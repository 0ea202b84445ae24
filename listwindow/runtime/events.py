"""Lightweight event bus primitives for list-window hosts."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from listwindow.api.events import Subscription
from listwindow.runtime.errors import RECOVERABLE_RUNTIME_ERRORS, log_recoverable

TEvent = TypeVar("TEvent")
EventHandler = Callable[[Any], None]

_LOG = logging.getLogger(__name__)


class RuntimeEventBus:
    """Simple in-process pub/sub, dispatched on the caller's thread."""

    def __init__(self, *, isolate_handler_errors: bool = False) -> None:
        self._next_id = 1
        self._subscriptions: dict[int, tuple[type[object], EventHandler]] = {}
        self._isolate_handler_errors = isolate_handler_errors

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Subscribe handler for an event type."""
        sub_id = self._next_id
        self._next_id += 1
        self._subscriptions[sub_id] = (event_type, handler)
        return Subscription(sub_id)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""
        self._subscriptions.pop(subscription.id, None)

    @property
    def subscription_count(self) -> int:
        return len(self._subscriptions)

    def publish(self, event: object) -> int:
        """Publish one event and return number of invoked handlers."""
        invoked = 0
        for subscribed_type, handler in tuple(self._subscriptions.values()):
            if not isinstance(event, subscribed_type):
                continue
            if not self._isolate_handler_errors:
                handler(event)
                invoked += 1
                continue
            try:
                handler(event)
            except RECOVERABLE_RUNTIME_ERRORS:
                log_recoverable(
                    _LOG,
                    f"event_handler_failed event={type(event).__name__}",
                    level=logging.ERROR,
                )
            invoked += 1
        return invoked


EventBus = RuntimeEventBus
