"""CLI tests for the pattern scenario commands."""

from __future__ import annotations

from click.testing import CliRunner

from patternctl.cli import cli
from patternctl.domain.observer import WEATHER_CHANGED, NotificationCenter


class TestCatalogCmd:
    def test_json(self, run_json) -> None:
        code, payload = run_json("catalog")
        assert code == 0
        assert payload["ok"] is True
        assert payload["data"]["count"] == len(payload["data"]["items"])

    def test_human_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["catalog", "--category", "creational"])
        assert result.exit_code == 0
        assert "Singleton" in result.output
        assert "Observer" not in result.output

    def test_bad_category(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["catalog", "--category", "mystical"])
        assert result.exit_code == 2


class TestFactoryCmd:
    def test_pizza(self, run_json) -> None:
        code, payload = run_json("factory", "pizza", "veggie")
        assert code == 0
        assert payload["data"]["cost"] == 11

    def test_pizza_fallback_warning_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["factory", "pizza", "anchovy"])
        assert result.exit_code == 0
        assert "WARNING: Unknown pizza 'anchovy'" in result.output

    def test_pizza_selector_any_case(self, run_json) -> None:
        _, payload = run_json("factory", "pizza", "Cheese")
        assert payload["data"]["kind"] == "cheese"
        assert payload["warnings"] == []

    def test_isp(self, run_json) -> None:
        _, payload = run_json("factory", "isp", "montreal", "power")
        assert payload["data"]["cost"] == "49.50"

    def test_rooms(self, run_json) -> None:
        _, payload = run_json("factory", "rooms", "enchanted")
        assert payload["data"]["factory"] == "EnchantedRoomFactory"


class TestStateCmd:
    def test_gumball_last_one(self, run_json) -> None:
        code, payload = run_json("state", "gumball", "--count", "1", "insert_coin", "turn_crank")
        assert code == 0
        assert payload["data"]["state"] == "depleted"

    def test_gumball_unknown_event_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["state", "gumball", "kick"])
        assert result.exit_code == 1
        assert "INVALID_ARGUMENT" in result.output

    def test_gumball_requires_events(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["state", "gumball"]).exit_code == 2

    def test_gumball_human_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["state", "gumball", "eject_coin"])
        assert result.exit_code == 0
        assert "no coin to eject" in result.output

    def test_player(self, run_json) -> None:
        _, payload = run_json("state", "player", "2")
        assert payload["data"]["labels"] == ["Playing", "Paused"]

    def test_traffic(self, run_json) -> None:
        _, payload = run_json("state", "traffic", "1")
        assert payload["data"]["colors"] == ["red", "green"]


class TestStrategyCmd:
    def test_duck_override(self, run_json) -> None:
        _, payload = run_json("strategy", "duck", "rubber", "--air", "rocket")
        assert payload["data"]["performed"]["air"] == "blast off!"

    def test_duck_missing_behavior(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "strategy", "duck", "decoy", "--sound", "none"])
        assert result.exit_code == 1
        assert "MISSING_BEHAVIOR" in result.output


class TestStructuralCmds:
    def test_coffee(self, run_json) -> None:
        _, payload = run_json("decorator", "coffee", "house-blend", "milk", "mocha", "mocha")
        assert payload["data"]["description"] == "House Blend milk mocha mocha"
        assert payload["data"]["cost"] == "1.99"

    def test_coffee_unknown_base(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decorator", "coffee", "latte"])
        assert result.exit_code == 1
        assert "latte" in result.output

    def test_theater(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["facade", "theater", "Alien"])
        assert result.exit_code == 0
        assert "title: Alien" in result.output

    def test_adapter(self, run_json) -> None:
        _, payload = run_json("adapter", "turkey")
        assert payload["data"]["turkey_flights"] == 5


class TestBehavioralCmds:
    def test_singleton(self, run_json) -> None:
        _, payload = run_json("singleton")
        assert payload["data"]["same_instance"] is True

    def test_weather(self, run_json) -> None:
        _, payload = run_json("observer", "weather", "Toronto", "snow", "--apps", "4")
        assert payload["data"]["delivered"] == 4
        assert payload["data"]["observers"] == 0

    def test_weather_repeated_runs_do_not_accumulate(self, run_json) -> None:
        run_json("observer", "weather", "Toronto", "snow", "--apps", "3")
        _, payload = run_json("observer", "weather", "Toronto", "rain", "--apps", "3")
        assert payload["data"]["delivered"] == 3
        assert NotificationCenter.instance().subscriber_count(WEATHER_CHANGED) == 0

    def test_weather_apps_from_config(self, run_json, write_config) -> None:
        write_config("[observer]\nweather_apps = 1\n")
        _, payload = run_json("observer", "weather", "Toronto", "snow")
        assert payload["data"]["delivered"] == 1

    def test_remote(self, run_json) -> None:
        code, payload = run_json("remote", "on:0", "off:0", "undo")
        assert code == 0
        assert payload["data"]["living_room_light"] is True

    def test_remote_irreversible_undo(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["remote", "on:2", "undo"])
        assert result.exit_code == 1
        assert "UNDO_NOT_SUPPORTED" in result.output

    def test_remote_slot_count_from_config(self, cli_runner: CliRunner, write_config) -> None:
        write_config("[remote]\nslot_count = 2\n")
        result = cli_runner.invoke(cli, ["-q", "remote", "on:2"])
        assert result.exit_code == 1
        assert "out of range" in result.output
