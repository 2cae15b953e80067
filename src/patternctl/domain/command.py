"""Command pattern: a remote control with undo.

A command is an immutable binding of one receiver to one action. Reversible
commands implement ``undo()`` as the exact inverse of ``execute()``; the
others raise :class:`~patternctl.domain.errors.UndoNotSupported`.

History policy: unbounded unless the remote is built with
``history_limit``, in which case the oldest entries are discarded first.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import ClassVar, Protocol

from patternctl.domain.errors import UndoNotSupported

logger = logging.getLogger(__name__)


# --- Receivers ---


class Light:
    def __init__(self, location: str = "living room") -> None:
        self.location = location
        self.is_on = False

    def on(self) -> None:
        self.is_on = True

    def off(self) -> None:
        self.is_on = False


class GarageDoor:
    def __init__(self) -> None:
        self.is_open = False
        self.light_on = False

    def up(self) -> None:
        self.is_open = True

    def down(self) -> None:
        self.is_open = False

    def light(self, on: bool) -> None:
        self.light_on = on


# --- Commands ---


class Command(Protocol):
    reversible: ClassVar[bool]

    def execute(self) -> None: ...

    def undo(self) -> None: ...


@dataclass(frozen=True)
class LightOnCommand:
    light: Light
    reversible: ClassVar[bool] = True

    def execute(self) -> None:
        self.light.on()

    def undo(self) -> None:
        self.light.off()


@dataclass(frozen=True)
class LightOffCommand:
    light: Light
    reversible: ClassVar[bool] = True

    def execute(self) -> None:
        self.light.off()

    def undo(self) -> None:
        self.light.on()


@dataclass(frozen=True)
class GarageDoorOpenCommand:
    door: GarageDoor
    reversible: ClassVar[bool] = False

    def execute(self) -> None:
        self.door.light(True)
        self.door.up()

    def undo(self) -> None:
        raise UndoNotSupported(type(self).__name__)


@dataclass(frozen=True)
class MacroCommand:
    """Runs several commands as one; undoes them in reverse order."""

    commands: tuple[Command, ...]

    @property
    def reversible(self) -> bool:
        return all(c.reversible for c in self.commands)

    def execute(self) -> None:
        for command in self.commands:
            command.execute()

    def undo(self) -> None:
        if not self.reversible:
            raise UndoNotSupported(type(self).__name__)
        for command in reversed(self.commands):
            command.undo()


# --- Invokers ---


class SimpleRemoteControl:
    """One slot, one button."""

    def __init__(self) -> None:
        self._slot: Command | None = None

    def set_command(self, command: Command) -> None:
        self._slot = command

    def press(self) -> bool:
        """Execute the slot's command. Returns False for an empty slot."""
        if self._slot is None:
            return False
        self._slot.execute()
        return True


class RemoteControl:
    """Fixed on/off slot pairs plus an undo button."""

    def __init__(self, slot_count: int = 7, *, history_limit: int | None = None) -> None:
        if slot_count < 1:
            msg = f"A remote needs at least one slot, got {slot_count}"
            raise ValueError(msg)
        if history_limit is not None and history_limit < 1:
            msg = f"history_limit must be positive, got {history_limit}"
            raise ValueError(msg)
        self._on: list[Command | None] = [None] * slot_count
        self._off: list[Command | None] = [None] * slot_count
        self._history: deque[Command] = deque(maxlen=history_limit)

    @property
    def slot_count(self) -> int:
        return len(self._on)

    @property
    def history(self) -> list[Command]:
        """Executed commands, most recent first."""
        return list(reversed(self._history))

    def set_command(self, index: int, on: Command | None, off: Command | None) -> None:
        self._check_index(index)
        self._on[index] = on
        self._off[index] = off

    def press_on(self, index: int) -> bool:
        self._check_index(index)
        return self._run(self._on[index])

    def press_off(self, index: int) -> bool:
        self._check_index(index)
        return self._run(self._off[index])

    def press_undo(self) -> Command | None:
        """Undo the most recent command and return it (None if no history).

        The command leaves the history even when its ``undo()`` raises.
        """
        if not self._history:
            return None
        command = self._history.pop()
        command.undo()
        logger.debug("Undid %s", type(command).__name__)
        return command

    def _run(self, command: Command | None) -> bool:
        if command is None:
            return False
        command.execute()
        self._history.append(command)
        return True

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._on):
            msg = f"Slot {index} out of range 0..{len(self._on) - 1}"
            raise IndexError(msg)
