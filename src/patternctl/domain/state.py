"""State pattern: MP3 player, gumball machine, and traffic light.

Each machine holds exactly one current state object and forwards every
event to it. The state object decides the outcome and drives the machine
through a narrow handle passed into the call, so states never keep a
back-reference to their owner.

Allowed moves are declared in transition maps and checked by
:func:`is_valid_transition` whenever a machine changes state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Protocol

logger = logging.getLogger(__name__)


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]],
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed


@dataclass(frozen=True)
class Transition:
    """Outcome of delivering one event to a machine.

    A rejected transition leaves the machine in ``state`` (unchanged) and
    explains why in ``message``.
    """

    accepted: bool
    event: str
    state: str
    message: str


# ---------------------------------------------------------------------------
# MP3 player
# ---------------------------------------------------------------------------


class PlayerStatus(StrEnum):
    PAUSED = "paused"
    PLAYING = "playing"


PLAYER_TRANSITIONS: dict[str, list[str]] = {
    "paused": ["playing"],
    "playing": ["paused"],
}


class PlayerHandle(Protocol):
    def set_state(self, name: str) -> None: ...


class PlayerState(Protocol):
    name: ClassVar[str]
    label: ClassVar[str]

    def play(self, player: PlayerHandle) -> None: ...


class PausedState:
    name: ClassVar[str] = PlayerStatus.PAUSED
    label: ClassVar[str] = "Paused"

    def play(self, player: PlayerHandle) -> None:
        player.set_state(PlayerStatus.PLAYING)


class PlayingState:
    name: ClassVar[str] = PlayerStatus.PLAYING
    label: ClassVar[str] = "Playing"

    def play(self, player: PlayerHandle) -> None:
        player.set_state(PlayerStatus.PAUSED)


class MP3Player:
    """A single play button that toggles between paused and playing."""

    def __init__(self, states: Iterable[PlayerState] | None = None) -> None:
        resolved = list(states) if states is not None else [PausedState(), PlayingState()]
        self._states = {s.name: s for s in resolved}
        self._current = self._states[PlayerStatus.PAUSED]

    @property
    def state(self) -> str:
        return self._current.name

    @property
    def label(self) -> str:
        return self._current.label

    def set_state(self, name: str) -> None:
        if not is_valid_transition(self._current.name, name, PLAYER_TRANSITIONS):
            msg = f"Player cannot move from {self._current.name} to {name}"
            raise ValueError(msg)
        self._current = self._states[name]

    def play(self) -> str:
        """Press play. Returns the label of the new state."""
        self._current.play(self)
        return self._current.label


# ---------------------------------------------------------------------------
# Gumball machine
# ---------------------------------------------------------------------------


class GumballStatus(StrEnum):
    NO_COIN = "no_coin"
    HAS_COIN = "has_coin"
    DISPENSING = "dispensing"
    DEPLETED = "depleted"


class GumballEvent(StrEnum):
    INSERT_COIN = "insert_coin"
    EJECT_COIN = "eject_coin"
    TURN_CRANK = "turn_crank"
    DISPENSE = "dispense"
    REFILL = "refill"


GUMBALL_TRANSITIONS: dict[str, list[str]] = {
    "no_coin": ["has_coin"],
    "has_coin": ["no_coin", "dispensing"],
    "dispensing": ["no_coin", "depleted"],
    "depleted": ["no_coin"],
}


class MachineHandle(Protocol):
    """What a gumball state may read and change on its machine."""

    @property
    def state(self) -> str: ...

    @property
    def count(self) -> int: ...

    def state_at(self, name: str) -> GumballState: ...

    def set_state(self, name: str) -> None: ...

    def decrement(self) -> None: ...

    def add(self, amount: int) -> None: ...


class GumballState(Protocol):
    """Every gumball state answers every event."""

    name: ClassVar[str]

    def insert_coin(self, machine: MachineHandle) -> Transition: ...

    def eject_coin(self, machine: MachineHandle) -> Transition: ...

    def turn_crank(self, machine: MachineHandle) -> Transition: ...

    def dispense(self, machine: MachineHandle) -> Transition: ...

    def refill(self, machine: MachineHandle, amount: int) -> Transition: ...


def _accept(machine: MachineHandle, event: str, message: str) -> Transition:
    return Transition(accepted=True, event=event, state=machine.state, message=message)


def _reject(machine: MachineHandle, event: str, message: str) -> Transition:
    return Transition(accepted=False, event=event, state=machine.state, message=message)


def _refill(machine: MachineHandle, amount: int) -> Transition:
    if amount <= 0:
        return _reject(machine, GumballEvent.REFILL, "refill amount must be positive")
    machine.add(amount)
    return _accept(machine, GumballEvent.REFILL, f"added {amount} gumballs")


class NoCoinState:
    name: ClassVar[str] = GumballStatus.NO_COIN

    def insert_coin(self, machine: MachineHandle) -> Transition:
        machine.set_state(GumballStatus.HAS_COIN)
        return _accept(machine, GumballEvent.INSERT_COIN, "coin inserted")

    def eject_coin(self, machine: MachineHandle) -> Transition:
        return _reject(machine, GumballEvent.EJECT_COIN, "no coin to eject")

    def turn_crank(self, machine: MachineHandle) -> Transition:
        return _reject(machine, GumballEvent.TURN_CRANK, "insert a coin first")

    def dispense(self, machine: MachineHandle) -> Transition:
        return _reject(machine, GumballEvent.DISPENSE, "pay first")

    def refill(self, machine: MachineHandle, amount: int) -> Transition:
        return _refill(machine, amount)


class HasCoinState:
    name: ClassVar[str] = GumballStatus.HAS_COIN

    def insert_coin(self, machine: MachineHandle) -> Transition:
        return _reject(machine, GumballEvent.INSERT_COIN, "a coin is already inserted")

    def eject_coin(self, machine: MachineHandle) -> Transition:
        machine.set_state(GumballStatus.NO_COIN)
        return _accept(machine, GumballEvent.EJECT_COIN, "coin returned")

    def turn_crank(self, machine: MachineHandle) -> Transition:
        machine.set_state(GumballStatus.DISPENSING)
        return _accept(machine, GumballEvent.TURN_CRANK, "crank turned")

    def dispense(self, machine: MachineHandle) -> Transition:
        return _reject(machine, GumballEvent.DISPENSE, "turn the crank first")

    def refill(self, machine: MachineHandle, amount: int) -> Transition:
        return _refill(machine, amount)


class DispensingState:
    name: ClassVar[str] = GumballStatus.DISPENSING

    def insert_coin(self, machine: MachineHandle) -> Transition:
        return _reject(machine, GumballEvent.INSERT_COIN, "wait, a gumball is on its way")

    def eject_coin(self, machine: MachineHandle) -> Transition:
        return _reject(machine, GumballEvent.EJECT_COIN, "too late, the crank was turned")

    def turn_crank(self, machine: MachineHandle) -> Transition:
        return _reject(machine, GumballEvent.TURN_CRANK, "turning twice does not help")

    def dispense(self, machine: MachineHandle) -> Transition:
        machine.decrement()
        if machine.count > 0:
            machine.set_state(GumballStatus.NO_COIN)
            return _accept(machine, GumballEvent.DISPENSE, "gumball dispensed")
        machine.set_state(GumballStatus.DEPLETED)
        return _accept(machine, GumballEvent.DISPENSE, "gumball dispensed, machine is empty")

    def refill(self, machine: MachineHandle, amount: int) -> Transition:
        return _refill(machine, amount)


class DepletedState:
    name: ClassVar[str] = GumballStatus.DEPLETED

    def insert_coin(self, machine: MachineHandle) -> Transition:
        return _reject(machine, GumballEvent.INSERT_COIN, "machine is sold out")

    def eject_coin(self, machine: MachineHandle) -> Transition:
        return _reject(machine, GumballEvent.EJECT_COIN, "machine is sold out")

    def turn_crank(self, machine: MachineHandle) -> Transition:
        return _reject(machine, GumballEvent.TURN_CRANK, "nothing to dispense")

    def dispense(self, machine: MachineHandle) -> Transition:
        return _reject(machine, GumballEvent.DISPENSE, "nothing to dispense")

    def refill(self, machine: MachineHandle, amount: int) -> Transition:
        result = _refill(machine, amount)
        if not result.accepted:
            return result
        machine.set_state(GumballStatus.NO_COIN)
        return _accept(machine, GumballEvent.REFILL, result.message)


def default_gumball_states() -> list[GumballState]:
    return [NoCoinState(), HasCoinState(), DispensingState(), DepletedState()]


class GumballMachine:
    """Context object: holds the current state and the gumball count.

    The machine itself has no conditional logic about events; it only
    forwards them and exposes the :class:`MachineHandle` operations.
    """

    def __init__(self, count: int = 10, states: Iterable[GumballState] | None = None) -> None:
        if count < 0:
            msg = f"Gumball count cannot be negative: {count}"
            raise ValueError(msg)
        resolved = list(states) if states is not None else default_gumball_states()
        self._states: dict[str, GumballState] = {s.name: s for s in resolved}
        missing = {s.value for s in GumballStatus} - set(self._states)
        if missing:
            msg = f"Missing gumball states: {sorted(missing)}"
            raise ValueError(msg)
        self._count = count
        self._dispensed = 0
        initial = GumballStatus.NO_COIN if count > 0 else GumballStatus.DEPLETED
        self._current = self._states[initial]

    # -- MachineHandle --------------------------------------------------

    @property
    def state(self) -> str:
        return self._current.name

    @property
    def count(self) -> int:
        return self._count

    @property
    def dispensed(self) -> int:
        """Gumballs handed out over the machine's lifetime."""
        return self._dispensed

    def state_at(self, name: str) -> GumballState:
        return self._states[name]

    def set_state(self, name: str) -> None:
        if not is_valid_transition(self._current.name, name, GUMBALL_TRANSITIONS):
            msg = f"Gumball machine cannot move from {self._current.name} to {name}"
            raise ValueError(msg)
        logger.debug("Gumball machine %s -> %s", self._current.name, name)
        self._current = self._states[name]

    def decrement(self) -> None:
        self._count -= 1
        self._dispensed += 1

    def add(self, amount: int) -> None:
        self._count += amount

    # -- Events ---------------------------------------------------------

    def insert_coin(self) -> Transition:
        return self._current.insert_coin(self)

    def eject_coin(self) -> Transition:
        return self._current.eject_coin(self)

    def turn_crank(self) -> Transition:
        """Turn the crank; an accepted turn dispenses straight away."""
        turned = self._current.turn_crank(self)
        if not turned.accepted or self.state != GumballStatus.DISPENSING:
            return turned
        dispensed = self._current.dispense(self)
        return Transition(
            accepted=True,
            event=GumballEvent.TURN_CRANK,
            state=dispensed.state,
            message=f"{turned.message}; {dispensed.message}",
        )

    def dispense(self) -> Transition:
        return self._current.dispense(self)

    def refill(self, amount: int) -> Transition:
        return self._current.refill(self, amount)

    def handle(self, event: str, amount: int = 0) -> Transition:
        """Deliver *event* by name (``refill`` uses *amount*)."""
        match GumballEvent(event):
            case GumballEvent.INSERT_COIN:
                return self.insert_coin()
            case GumballEvent.EJECT_COIN:
                return self.eject_coin()
            case GumballEvent.TURN_CRANK:
                return self.turn_crank()
            case GumballEvent.DISPENSE:
                return self.dispense()
            case GumballEvent.REFILL:
                return self.refill(amount)


# ---------------------------------------------------------------------------
# Traffic light
# ---------------------------------------------------------------------------


class LightStatus(StrEnum):
    STOP = "stop"
    GO = "go"
    YIELD = "yield"


TRAFFIC_TRANSITIONS: dict[str, list[str]] = {
    "stop": ["go"],
    "go": ["yield"],
    "yield": ["stop"],
}


class LightHandle(Protocol):
    def set_state(self, name: str) -> None: ...


class LightState(Protocol):
    name: ClassVar[str]
    color: ClassVar[str]

    def next(self, light: LightHandle) -> None: ...


class StopState:
    name: ClassVar[str] = LightStatus.STOP
    color: ClassVar[str] = "red"

    def next(self, light: LightHandle) -> None:
        light.set_state(LightStatus.GO)


class GoState:
    name: ClassVar[str] = LightStatus.GO
    color: ClassVar[str] = "green"

    def next(self, light: LightHandle) -> None:
        light.set_state(LightStatus.YIELD)


class YieldState:
    name: ClassVar[str] = LightStatus.YIELD
    color: ClassVar[str] = "yellow"

    def next(self, light: LightHandle) -> None:
        light.set_state(LightStatus.STOP)


class TrafficLight:
    """Cycles stop -> go -> yield -> stop. Starts stopped."""

    def __init__(self) -> None:
        self._states: dict[str, LightState] = {
            s.name: s for s in (StopState(), GoState(), YieldState())
        }
        self._current = self._states[LightStatus.STOP]

    @property
    def state(self) -> str:
        return self._current.name

    def set_state(self, name: str) -> None:
        if not is_valid_transition(self._current.name, name, TRAFFIC_TRANSITIONS):
            msg = f"Traffic light cannot move from {self._current.name} to {name}"
            raise ValueError(msg)
        self._current = self._states[name]

    def display(self) -> str:
        return self._current.color

    def next(self) -> str:
        """Advance one phase and return the new colour."""
        self._current.next(self)
        return self._current.color
