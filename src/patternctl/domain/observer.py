"""Observer pattern: a synchronous publish/subscribe bus.

Delivery contract:

- subscribers for an event run on the publisher's call path, in the order
  they subscribed, and all receive the same payload object;
- publishing an event nobody listens to is a no-op;
- a subscriber that raises aborts the delivery: the exception reaches the
  publisher and later subscribers are not called;
- ``publish`` iterates a snapshot taken when delivery starts, so a callback
  that subscribes during delivery is first called on the next publish.

PRECONDITION: ``subscribe`` and ``publish`` are not called concurrently from
different threads. The bus does no locking.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

from patternctl.domain.singleton import Singleton

logger = logging.getLogger(__name__)

Subscriber = Callable[[Any], None]

WEATHER_CHANGED = "weather_did_change"


class ObserverBus:
    """Maps event names to ordered subscriber lists."""

    def __init__(self) -> None:
        self._subscribers: defaultdict[str, list[Subscriber]] = defaultdict(list)

    def subscribe(self, event_name: str, callback: Subscriber) -> None:
        self._subscribers[event_name].append(callback)

    def subscriber_count(self, event_name: str) -> int:
        return len(self._subscribers.get(event_name, ()))

    def publish(self, event_name: str, payload: Any = None) -> int:
        """Deliver *payload* to every subscriber of *event_name*.

        Returns the number of callbacks invoked.
        """
        callbacks = tuple(self._subscribers.get(event_name, ()))
        for callback in callbacks:
            callback(payload)
        if callbacks:
            logger.debug("Published %s to %d subscribers", event_name, len(callbacks))
        return len(callbacks)


class NotificationCenter(Singleton, ObserverBus):
    """The process-wide default bus, reached through ``instance()``."""


class WeatherStation:
    """Publishes sensor readings on a bus."""

    def __init__(self, bus: ObserverBus) -> None:
        self._bus = bus

    def receive(self, data: dict[str, str]) -> int:
        return self._bus.publish(WEATHER_CHANGED, data)


class WeatherApp:
    """Records every weather report it is notified about."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.reports: list[dict[str, str]] = []

    def watch(self, bus: ObserverBus) -> None:
        bus.subscribe(WEATHER_CHANGED, self._on_weather)

    def _on_weather(self, data: dict[str, str]) -> None:
        self.reports.append(data)
