"""Tests for the synchronous observer bus."""

from __future__ import annotations

from typing import Any

import pytest

from patternctl.domain.observer import (
    WEATHER_CHANGED,
    NotificationCenter,
    ObserverBus,
    WeatherApp,
    WeatherStation,
)


class TestObserverBus:
    def test_publish_without_subscribers_is_noop(self) -> None:
        assert ObserverBus().publish("nothing", {"x": 1}) == 0

    def test_subscribers_called_in_order_with_same_payload(self) -> None:
        bus = ObserverBus()
        seen: list[tuple[str, Any]] = []
        bus.subscribe("ping", lambda p: seen.append(("first", p)))
        bus.subscribe("ping", lambda p: seen.append(("second", p)))
        payload = {"n": 1}

        assert bus.publish("ping", payload) == 2
        assert [name for name, _ in seen] == ["first", "second"]
        assert all(p is payload for _, p in seen)

    def test_events_are_independent(self) -> None:
        bus = ObserverBus()
        seen: list[Any] = []
        bus.subscribe("a", seen.append)
        bus.publish("b", 1)
        assert seen == []
        assert bus.subscriber_count("a") == 1
        assert bus.subscriber_count("b") == 0

    def test_failing_subscriber_aborts_delivery(self) -> None:
        bus = ObserverBus()
        seen: list[Any] = []

        def boom(_: Any) -> None:
            raise RuntimeError("subscriber failed")

        bus.subscribe("ping", seen.append)
        bus.subscribe("ping", boom)
        bus.subscribe("ping", seen.append)
        with pytest.raises(RuntimeError, match="subscriber failed"):
            bus.publish("ping", "x")
        assert seen == ["x"]

    def test_subscribe_during_publish_waits_for_next_publish(self) -> None:
        bus = ObserverBus()
        late: list[Any] = []

        def subscribe_late(_: Any) -> None:
            bus.subscribe("ping", late.append)

        bus.subscribe("ping", subscribe_late)
        assert bus.publish("ping", 1) == 1
        assert late == []
        bus.publish("ping", 2)
        assert late == [2]


class TestWeather:
    def test_station_reaches_every_app(self) -> None:
        bus = ObserverBus()
        apps = [WeatherApp("one"), WeatherApp("two")]
        for app in apps:
            app.watch(bus)
        report = {"city": "Toronto", "condition": "snow"}

        assert WeatherStation(bus).receive(report) == 2
        assert all(app.reports == [report] for app in apps)
        assert bus.subscriber_count(WEATHER_CHANGED) == 2

    def test_notification_center_is_a_singleton_bus(self) -> None:
        center = NotificationCenter.instance()
        assert center is NotificationCenter.instance()
        assert isinstance(center, ObserverBus)
