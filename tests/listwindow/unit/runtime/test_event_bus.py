from __future__ import annotations

import logging
from dataclasses import dataclass

import pytest

from listwindow.api.events import ScrollChanged, create_event_bus
from listwindow.runtime.events import EventBus, RuntimeEventBus


@dataclass(frozen=True, slots=True)
class BaseEvent:
    name: str


@dataclass(frozen=True, slots=True)
class DerivedEvent(BaseEvent):
    code: int


def test_event_bus_publish_invokes_subscribers() -> None:
    bus = EventBus()
    seen: list[str] = []
    bus.subscribe(BaseEvent, lambda event: seen.append(event.name))

    invoked = bus.publish(BaseEvent(name="hello"))

    assert invoked == 1
    assert seen == ["hello"]


def test_event_bus_supports_polymorphic_subscription() -> None:
    bus = EventBus()
    seen: list[str] = []
    bus.subscribe(BaseEvent, lambda event: seen.append(event.name))

    invoked = bus.publish(DerivedEvent(name="child", code=42))

    assert invoked == 1
    assert seen == ["child"]


def test_event_bus_unsubscribe_stops_dispatch() -> None:
    bus = EventBus()
    seen: list[str] = []
    subscription = bus.subscribe(BaseEvent, lambda event: seen.append(event.name))
    bus.unsubscribe(subscription)

    invoked = bus.publish(BaseEvent(name="ignored"))

    assert invoked == 0
    assert seen == []
    assert bus.subscription_count == 0


def test_event_bus_dispatches_in_subscription_order() -> None:
    bus = EventBus()
    seen: list[str] = []
    bus.subscribe(ScrollChanged, lambda event: seen.append(f"a{event.scroll_offset}"))
    bus.subscribe(ScrollChanged, lambda event: seen.append(f"b{event.scroll_offset}"))

    bus.publish(ScrollChanged(scroll_offset=1))
    bus.publish(ScrollChanged(scroll_offset=2))

    assert seen == ["a1", "b1", "a2", "b2"]


def test_event_bus_propagates_handler_errors_by_default() -> None:
    bus = EventBus()

    def _fail(event: BaseEvent) -> None:
        raise ValueError("boom")

    bus.subscribe(BaseEvent, _fail)
    with pytest.raises(ValueError):
        bus.publish(BaseEvent(name="x"))


def test_event_bus_isolates_handler_errors_when_enabled(caplog) -> None:
    bus = RuntimeEventBus(isolate_handler_errors=True)
    seen: list[str] = []

    def _fail(event: BaseEvent) -> None:
        raise ValueError("boom")

    bus.subscribe(BaseEvent, _fail)
    bus.subscribe(BaseEvent, lambda event: seen.append(event.name))
    with caplog.at_level(logging.ERROR, logger="listwindow.runtime.events"):
        invoked = bus.publish(BaseEvent(name="x"))

    assert invoked == 2
    assert seen == ["x"]
    assert "event_handler_failed event=BaseEvent" in caplog.text


def test_create_event_bus_returns_runtime_bus() -> None:
    assert isinstance(create_event_bus(), RuntimeEventBus)
