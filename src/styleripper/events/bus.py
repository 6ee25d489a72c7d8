"""Synchronous event bus the ripper reports its progress on."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe bus dispatching ripper events in registration order.

    Listeners registered with :meth:`on_all` see every event before the
    listeners registered for that event's type.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, list[Listener]] = {}
        self._catch_all: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> Callable[[], None]:
        """Register *callback* for *event_type*; returns a function undoing it."""
        listeners = self._by_type.setdefault(event_type, [])
        listeners.append(callback)
        return lambda: listeners.remove(callback)

    def on_all(self, callback: Listener) -> Callable[[], None]:
        """Register *callback* for every event; returns a function undoing it."""
        self._catch_all.append(callback)
        return lambda: self._catch_all.remove(callback)

    def emit(self, event: Any) -> None:
        for callback in list(self._catch_all):
            callback(event)
        for callback in list(self._by_type.get(type(event), ())):
            callback(event)


class EventRecorder:
    """Collects every event emitted on a bus, in order."""

    def __init__(self, bus: EventBus) -> None:
        self.events: list[Any] = []
        self.detach = bus.on_all(self.events.append)

    def of_type(self, event_type: type) -> list[Any]:
        return [e for e in self.events if isinstance(e, event_type)]
