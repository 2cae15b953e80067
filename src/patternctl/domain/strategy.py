"""Strategy pattern: ducks composed from swappable behaviours.

A duck owns three named slots (``sound``, ``water``, ``air``). Each slot
holds an independent behaviour object or nothing at all. Kinds of duck
differ only in their metadata, never in how a slot is implemented.

``Mute`` is a real behaviour that happens to make no sound; an unset
``sound`` slot is something else and raises :class:`MissingBehavior`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar, Protocol

from patternctl.domain.errors import MissingBehavior


class Slot(StrEnum):
    SOUND = "sound"
    WATER = "water"
    AIR = "air"


class QuackBehavior(Protocol):
    def quack(self) -> str: ...


class SwimBehavior(Protocol):
    def swim(self) -> str: ...


class FlyBehavior(Protocol):
    def fly(self) -> str: ...


# --- sound ---


class Quacker:
    def quack(self) -> str:
        return "quack quack"


class Squeaker:
    def quack(self) -> str:
        return "squeak squeak"


class Mute:
    def quack(self) -> str:
        return ""


# --- water ---


class Swimmer:
    def swim(self) -> str:
        return "swimming"


class Floater:
    def swim(self) -> str:
        return "floating"


# --- air ---


class FlyingHigh:
    def fly(self) -> str:
        return "flying high"


class CantFly:
    def fly(self) -> str:
        return "can't fly"


class RocketPowered:
    def fly(self) -> str:
        return "blast off!"


BEHAVIORS: dict[Slot, dict[str, type[Any]]] = {
    Slot.SOUND: {"quacker": Quacker, "squeaker": Squeaker, "mute": Mute},
    Slot.WATER: {"swimmer": Swimmer, "floater": Floater},
    Slot.AIR: {"flying-high": FlyingHigh, "cant-fly": CantFly, "rocket": RocketPowered},
}


def make_behavior(slot: str, name: str) -> Any:
    """Instantiate the behaviour registered as *name* for *slot*.

    Raises:
        KeyError: if *slot* or *name* is unknown.
    """
    return BEHAVIORS[Slot(slot)][name]()


class Duck:
    """Composite with three independently swappable behaviour slots."""

    description: ClassVar[str] = "duck"

    def __init__(
        self,
        *,
        sound: QuackBehavior | None = None,
        water: SwimBehavior | None = None,
        air: FlyBehavior | None = None,
    ) -> None:
        self.sound = sound
        self.water = water
        self.air = air

    def behavior(self, slot: str) -> Any:
        """Return whatever is bound to *slot* (None when unset)."""
        return getattr(self, Slot(slot).value)

    def set_behavior(self, slot: str, behavior: Any) -> None:
        """Bind (or with None, unbind) *slot*. Other slots are untouched."""
        setattr(self, Slot(slot).value, behavior)

    def bound_slots(self) -> list[str]:
        return [s.value for s in Slot if getattr(self, s.value) is not None]

    def perform_quack(self) -> str:
        if self.sound is None:
            raise MissingBehavior(Slot.SOUND, self.description)
        return self.sound.quack()

    def perform_swim(self) -> str:
        if self.water is None:
            raise MissingBehavior(Slot.WATER, self.description)
        return self.water.swim()

    def perform_fly(self) -> str:
        if self.air is None:
            raise MissingBehavior(Slot.AIR, self.description)
        return self.air.fly()


class MallardDuck(Duck):
    description: ClassVar[str] = "mallard duck"


class RubberDuck(Duck):
    description: ClassVar[str] = "rubber duck"


class DecoyDuck(Duck):
    description: ClassVar[str] = "decoy duck"


DUCK_KINDS: dict[str, type[Duck]] = {
    "mallard": MallardDuck,
    "rubber": RubberDuck,
    "decoy": DecoyDuck,
}
