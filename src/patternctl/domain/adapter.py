"""Adapter pattern: a turkey passed off as a duck.

Callers that only speak the :class:`Duck` interface can use a turkey once it
is wrapped in :class:`TurkeyAdapter`. Turkeys only fly short distances, so
one duck-sized flight is emulated with :data:`FLIGHT_HOPS` turkey flights.
"""

from __future__ import annotations

from typing import Protocol

FLIGHT_HOPS = 5


class Duck(Protocol):
    def quack(self) -> str: ...

    def fly(self) -> str: ...


class Turkey(Protocol):
    def gobble(self) -> str: ...

    def fly(self) -> str: ...


class Mallard:
    def quack(self) -> str:
        return "quack!"

    def fly(self) -> str:
        return "flying high!"


class WildTurkey:
    def __init__(self) -> None:
        self.flights = 0

    def gobble(self) -> str:
        return "gobble gobble"

    def fly(self) -> str:
        self.flights += 1
        return "flying a short distance"


class TurkeyAdapter:
    """Exposes the duck interface over a privately held turkey."""

    __slots__ = ("__turkey",)

    def __init__(self, turkey: Turkey) -> None:
        self.__turkey = turkey

    def quack(self) -> str:
        return self.__turkey.gobble()

    def fly(self) -> str:
        hops = [self.__turkey.fly() for _ in range(FLIGHT_HOPS)]
        return ", ".join(hops)


def exercise(duck: Duck) -> list[str]:
    """Drive anything duck-shaped through its full interface."""
    return [duck.fly(), duck.quack()]
