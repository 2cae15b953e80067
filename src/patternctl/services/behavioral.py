"""BehavioralService: state, strategy, observer, and command scenarios.

Rejected state-machine events are part of a normal run and are reported
per step; only malformed input or a domain error fails the result.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from patternctl.domain.command import (
    Command,
    GarageDoor,
    GarageDoorOpenCommand,
    Light,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    RemoteControl,
)
from patternctl.domain.errors import PatternError
from patternctl.domain.observer import WEATHER_CHANGED, ObserverBus, WeatherApp, WeatherStation
from patternctl.domain.state import GumballEvent, GumballMachine, MP3Player, TrafficLight
from patternctl.domain.strategy import DUCK_KINDS, Slot, make_behavior
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult

if TYPE_CHECKING:
    from patternctl.config.settings import PatternSettings

logger = logging.getLogger(__name__)

# Behaviour names bound to each slot when a duck is hatched.
KIND_DEFAULTS: dict[str, dict[str, str]] = {
    "mallard": {Slot.SOUND: "quacker", Slot.WATER: "swimmer", Slot.AIR: "flying-high"},
    "rubber": {Slot.SOUND: "squeaker", Slot.WATER: "floater", Slot.AIR: "cant-fly"},
    "decoy": {Slot.SOUND: "mute", Slot.WATER: "floater", Slot.AIR: "cant-fly"},
}

UNSET = "none"


def parse_gumball_event(token: str) -> tuple[str, int]:
    """Split ``refill=5`` style tokens into ``(event, amount)``.

    Raises:
        ValueError: for an unknown event or a non-integer amount.
    """
    name, _, raw_amount = token.partition("=")
    event = GumballEvent(name.strip().lower().replace("-", "_"))
    amount = int(raw_amount) if raw_amount else 0
    return event, amount


def build_remote(
    slot_count: int,
    history_limit: int | None,
) -> tuple[RemoteControl, dict[str, Any]]:
    """Program the demo remote.

    Slots: 0 living room light, 1 kitchen light, 2 garage door (no off
    command), 3 party macro switching both lights together.
    """
    living_room, kitchen, garage = Light("living room"), Light("kitchen"), GarageDoor()
    remote = RemoteControl(slot_count, history_limit=history_limit)
    bindings: list[tuple[Command | None, Command | None]] = [
        (LightOnCommand(living_room), LightOffCommand(living_room)),
        (LightOnCommand(kitchen), LightOffCommand(kitchen)),
        (GarageDoorOpenCommand(garage), None),
        (
            MacroCommand((LightOnCommand(living_room), LightOnCommand(kitchen))),
            MacroCommand((LightOffCommand(living_room), LightOffCommand(kitchen))),
        ),
    ]
    for index, (on, off) in enumerate(bindings[:slot_count]):
        remote.set_command(index, on, off)
    receivers = {"living_room": living_room, "kitchen": kitchen, "garage": garage}
    return remote, receivers


class BehavioralService(BaseService):
    """Scenarios for the behavioral patterns."""

    def __init__(
        self,
        settings: PatternSettings | None = None,
        *,
        bus: ObserverBus | None = None,
    ) -> None:
        super().__init__(settings, bus=bus)

    # -- State -------------------------------------------------------------

    def run_gumball(self, events: Sequence[str], *, count: int | None = None) -> ServiceResult:
        op = "run_gumball"
        initial = self.settings.gumball.initial_count if count is None else count
        try:
            parsed = [parse_gumball_event(token) for token in events]
            machine = GumballMachine(initial)
        except ValueError as exc:
            return self._failure(op, exc, allowed=[e.value for e in GumballEvent])

        steps = [asdict(machine.handle(event, amount)) for event, amount in parsed]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "initial_count": initial,
                "steps": steps,
                "state": machine.state,
                "count": machine.count,
                "dispensed": machine.dispensed,
            },
        )

    def toggle_player(self, presses: int) -> ServiceResult:
        op = "toggle_player"
        if presses < 0:
            return self._failure(op, ValueError(f"presses must be non-negative, got {presses}"))
        player = MP3Player()
        labels = [player.play() for _ in range(presses)]
        return ServiceResult(
            ok=True,
            op=op,
            data={"labels": labels, "state": player.state, "label": player.label},
        )

    def cycle_traffic(self, steps: int) -> ServiceResult:
        op = "cycle_traffic"
        if steps < 0:
            return self._failure(op, ValueError(f"steps must be non-negative, got {steps}"))
        light = TrafficLight()
        colors = [light.display()]
        colors.extend(light.next() for _ in range(steps))
        return ServiceResult(ok=True, op=op, data={"colors": colors, "state": light.state})

    # -- Strategy ----------------------------------------------------------

    def perform_duck(self, kind: str, overrides: dict[str, str] | None = None) -> ServiceResult:
        """Hatch *kind* with its default behaviours, apply *overrides*, perform.

        An override of ``"none"`` unbinds the slot, which makes the matching
        ``perform_*`` call fail with MISSING_BEHAVIOR.
        """
        op = "perform_duck"
        try:
            duck = DUCK_KINDS[kind]()
            bindings = {**KIND_DEFAULTS[kind], **(overrides or {})}
            for slot, name in bindings.items():
                behavior = None if name == UNSET else make_behavior(slot, name)
                duck.set_behavior(slot, behavior)
            performed = {
                Slot.SOUND.value: duck.perform_quack(),
                Slot.WATER.value: duck.perform_swim(),
                Slot.AIR.value: duck.perform_fly(),
            }
        except KeyError as exc:
            return self._failure(
                op,
                KeyError(f"Unknown duck kind or behavior: {exc.args[0]!r}"),
                kinds=sorted(DUCK_KINDS),
            )
        except (PatternError, ValueError) as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"kind": kind, "description": duck.description, "performed": performed},
        )

    # -- Observer ----------------------------------------------------------

    def broadcast_weather(
        self,
        city: str,
        condition: str,
        *,
        apps: int | None = None,
    ) -> ServiceResult:
        """Publish one reading from a weather station to freshly subscribed apps.

        The apps live on a bus scoped to this call. The reading is then
        forwarded on the service bus, if any, for outside observers.
        """
        op = "broadcast_weather"
        app_count = self.settings.observer.weather_apps if apps is None else apps
        if app_count < 0:
            return self._failure(op, ValueError(f"apps must be non-negative, got {app_count}"))
        station_bus = ObserverBus()
        watchers = [WeatherApp(f"app-{n}") for n in range(1, app_count + 1)]
        for app in watchers:
            app.watch(station_bus)
        station = WeatherStation(station_bus)

        warnings: list[str] = []
        payload = {"city": city, "condition": condition}
        delivered = self._deliver(WEATHER_CHANGED, lambda: station.receive(payload), warnings)
        observers = self._dispatch_event(WEATHER_CHANGED, payload, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "city": city,
                "condition": condition,
                "delivered": delivered,
                "observers": observers,
                "apps": [{"name": app.name, "reports": len(app.reports)} for app in watchers],
            },
            warnings=warnings,
        )

    # -- Command -----------------------------------------------------------

    def drive_remote(self, presses: Sequence[str]) -> ServiceResult:
        """Press buttons on the demo remote.

        Tokens are ``on:N``, ``off:N``, and ``undo``.
        """
        op = "drive_remote"
        config = self.settings.remote
        try:
            remote, receivers = build_remote(config.slot_count, config.history_limit)
        except ValueError as exc:
            return self._failure(op, exc)

        steps: list[dict[str, Any]] = []
        for token in presses:
            button, _, raw_index = token.partition(":")
            try:
                if button == "undo":
                    undone = remote.press_undo()
                    steps.append(
                        {
                            "press": token,
                            "executed": undone is not None,
                            "command": type(undone).__name__ if undone else None,
                        }
                    )
                    continue
                index = int(raw_index)
                if button == "on":
                    executed = remote.press_on(index)
                elif button == "off":
                    executed = remote.press_off(index)
                else:
                    msg = f"Unknown button {token!r}; use on:N, off:N or undo"
                    raise ValueError(msg)
            except (PatternError, ValueError, IndexError) as exc:
                return self._failure(op, exc, press=token, completed=steps)
            steps.append({"press": token, "executed": executed, "command": None})
            if executed:
                steps[-1]["command"] = type(remote.history[0]).__name__

        living_room, kitchen, garage = (
            receivers["living_room"],
            receivers["kitchen"],
            receivers["garage"],
        )
        logger.debug("Remote ran %d presses", len(steps))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "steps": steps,
                "living_room_light": living_room.is_on,
                "kitchen_light": kitchen.is_on,
                "garage_open": garage.is_open,
                "history": [type(c).__name__ for c in remote.history],
            },
        )
