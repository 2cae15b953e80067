"""Tests for BehavioralService scenarios."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from patternctl.config.settings import PatternSettings
from patternctl.domain.observer import WEATHER_CHANGED, ObserverBus
from patternctl.services.behavioral import BehavioralService, parse_gumball_event


class TestParseGumballEvent:
    def test_plain_event(self) -> None:
        assert parse_gumball_event("insert-coin") == ("insert_coin", 0)

    def test_refill_amount(self) -> None:
        assert parse_gumball_event("refill=5") == ("refill", 5)

    @pytest.mark.parametrize("token", ["kick", "refill=lots"])
    def test_invalid(self, token: str) -> None:
        with pytest.raises(ValueError):
            parse_gumball_event(token)


class TestRunGumball:
    def test_last_gumball(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).run_gumball(["insert_coin", "turn_crank"], count=1)
        assert result.ok
        assert result.data["state"] == "depleted"
        assert result.data["dispensed"] == 1
        assert [s["accepted"] for s in result.data["steps"]] == [True, True]

    def test_rejections_are_steps_not_errors(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).run_gumball(["eject_coin", "turn_crank"])
        assert result.ok
        assert [s["accepted"] for s in result.data["steps"]] == [False, False]
        assert result.data["state"] == "no_coin"
        assert result.data["count"] == 10

    def test_refill_from_empty(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).run_gumball(["refill=2", "insert_coin"], count=0)
        assert result.data["state"] == "has_coin"
        assert result.data["count"] == 2

    def test_configured_initial_count(self, isolated_cwd: Path, write_config) -> None:
        write_config("[gumball]\ninitial_count = 0\n")
        settings = PatternSettings.from_cli(search_root=isolated_cwd)
        result = BehavioralService(settings).run_gumball(["insert_coin"])
        assert result.data["initial_count"] == 0
        assert result.data["state"] == "depleted"

    def test_unknown_event(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).run_gumball(["insert_coin", "kick"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"
        assert "refill" in result.error.detail["allowed"]

    def test_negative_count(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).run_gumball(["insert_coin"], count=-1)
        assert not result.ok


class TestPlayerAndTraffic:
    def test_player(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).toggle_player(3)
        assert result.data["labels"] == ["Playing", "Paused", "Playing"]
        assert result.data["state"] == "playing"

    def test_player_negative(self, settings: PatternSettings) -> None:
        assert not BehavioralService(settings).toggle_player(-1).ok

    def test_traffic(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).cycle_traffic(3)
        assert result.data["colors"] == ["red", "green", "yellow", "red"]
        assert result.data["state"] == "stop"

    def test_traffic_negative(self, settings: PatternSettings) -> None:
        assert not BehavioralService(settings).cycle_traffic(-2).ok


class TestPerformDuck:
    def test_defaults(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).perform_duck("rubber")
        assert result.data["description"] == "rubber duck"
        assert result.data["performed"] == {
            "sound": "squeak squeak",
            "water": "floating",
            "air": "can't fly",
        }

    def test_override(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).perform_duck("decoy", {"air": "rocket"})
        assert result.data["performed"]["air"] == "blast off!"
        assert result.data["performed"]["sound"] == ""

    def test_unset_slot(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).perform_duck("mallard", {"water": "none"})
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MISSING_BEHAVIOR"

    @pytest.mark.parametrize(("kind", "overrides"), [("goose", None), ("mallard", {"air": "jet"})])
    def test_unknown_names(
        self, settings: PatternSettings, kind: str, overrides: dict[str, str] | None
    ) -> None:
        result = BehavioralService(settings).perform_duck(kind, overrides)
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"


class TestBroadcastWeather:
    def test_every_app_notified(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).broadcast_weather("Toronto", "snow", apps=3)
        assert result.ok
        assert result.data["delivered"] == 3
        assert [a["reports"] for a in result.data["apps"]] == [1, 1, 1]

    def test_default_app_count(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).broadcast_weather("Toronto", "rain")
        assert result.data["delivered"] == 2

    def test_no_apps(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).broadcast_weather("Toronto", "fog", apps=0)
        assert result.data["delivered"] == 0

    def test_failing_subscriber_is_warning(self, settings: PatternSettings) -> None:
        bus = ObserverBus()

        def boom(_: Any) -> None:
            raise RuntimeError("app crashed")

        bus.subscribe(WEATHER_CHANGED, boom)
        result = BehavioralService(settings, bus=bus).broadcast_weather("Oslo", "sleet", apps=1)
        assert result.ok
        assert result.warnings == [f"Event dispatch failed for {WEATHER_CHANGED}"]
        assert result.data["delivered"] == 1
        assert result.data["observers"] == 0
        assert result.data["apps"][0]["reports"] == 1

    def test_outside_observer_receives_reading(self, settings: PatternSettings) -> None:
        bus = ObserverBus()
        seen: list[Any] = []
        bus.subscribe(WEATHER_CHANGED, seen.append)
        result = BehavioralService(settings, bus=bus).broadcast_weather("Oslo", "sleet", apps=2)
        assert result.data["observers"] == 1
        assert seen == [{"city": "Oslo", "condition": "sleet"}]

    def test_repeated_broadcasts_are_independent(self, settings: PatternSettings) -> None:
        bus = ObserverBus()
        service = BehavioralService(settings, bus=bus)
        first = service.broadcast_weather("Toronto", "snow", apps=2)
        second = service.broadcast_weather("Toronto", "rain", apps=2)
        assert first.data["delivered"] == second.data["delivered"] == 2
        assert [a["reports"] for a in second.data["apps"]] == [1, 1]
        assert bus.subscriber_count(WEATHER_CHANGED) == 0

    def test_negative_apps(self, settings: PatternSettings) -> None:
        assert not BehavioralService(settings).broadcast_weather("X", "Y", apps=-1).ok


class TestDriveRemote:
    def test_on_off_undo(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).drive_remote(["on:0", "off:0", "undo"])
        assert result.ok
        assert result.data["living_room_light"] is True
        assert result.data["history"] == ["LightOnCommand"]
        assert result.data["steps"][2] == {
            "press": "undo",
            "executed": True,
            "command": "LightOffCommand",
        }

    def test_party_macro(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).drive_remote(["on:3"])
        assert result.data["living_room_light"] is True
        assert result.data["kitchen_light"] is True

    def test_empty_slot_and_history(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).drive_remote(["on:6", "undo"])
        assert [s["executed"] for s in result.data["steps"]] == [False, False]

    def test_garage_undo_fails(self, settings: PatternSettings) -> None:
        result = BehavioralService(settings).drive_remote(["on:2", "undo"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNDO_NOT_SUPPORTED"
        assert result.error.detail["press"] == "undo"

    @pytest.mark.parametrize("token", ["on:9", "push:1", "on:x"])
    def test_bad_press(self, settings: PatternSettings, token: str) -> None:
        result = BehavioralService(settings).drive_remote([token])
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"

    def test_history_limit_from_config(self, isolated_cwd: Path, write_config) -> None:
        write_config("[remote]\nhistory_limit = 1\n")
        settings = PatternSettings.from_cli(search_root=isolated_cwd)
        result = BehavioralService(settings).drive_remote(["on:0", "on:1", "undo", "undo"])
        assert result.data["living_room_light"] is True
        assert result.data["kitchen_light"] is False
        assert result.data["steps"][3]["executed"] is False
