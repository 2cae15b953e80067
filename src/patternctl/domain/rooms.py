"""Abstract Factory: families of themed rooms.

A :class:`RoomFactory` produces rooms of exactly one family. The factory is
generic over its room type, so a type checker rejects mixing families, and
``connect`` refuses rooms from another family at run time as well.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Generic, Self, TypeVar

from patternctl.domain.errors import FamilyMismatch


class Theme(StrEnum):
    ORDINARY = "ordinary"
    ENCHANTED = "enchanted"


@dataclass(eq=False)
class OrdinaryRoom:
    number: int
    connections: list[Self] = field(default_factory=list)

    theme = Theme.ORDINARY

    def connect(self, other: Self) -> None:
        if type(other) is not type(self):
            raise FamilyMismatch(type(self).__name__, type(other).__name__)
        self.connections.append(other)

    def describe(self) -> str:
        return f"room {self.number}"


@dataclass(eq=False)
class EnchantedRoom:
    number: int
    spell: str = "needs a spell to open"
    connections: list[Self] = field(default_factory=list)

    theme = Theme.ENCHANTED

    def connect(self, other: Self) -> None:
        if type(other) is not type(self):
            raise FamilyMismatch(type(self).__name__, type(other).__name__)
        self.connections.append(other)

    def describe(self) -> str:
        return f"enchanted room {self.number} ({self.spell})"


R = TypeVar("R", OrdinaryRoom, EnchantedRoom)


class RoomFactory(ABC, Generic[R]):
    """Creates same-family rooms and wires them together."""

    @abstractmethod
    def make_room(self, number: int) -> R: ...

    def build_pair(self, first: int = 1, second: int = 2) -> tuple[R, R]:
        """Build two rooms and connect *first* to *second*."""
        room_a = self.make_room(first)
        room_b = self.make_room(second)
        room_a.connect(room_b)
        return room_a, room_b


class OrdinaryRoomFactory(RoomFactory[OrdinaryRoom]):
    def make_room(self, number: int) -> OrdinaryRoom:
        return OrdinaryRoom(number)


class EnchantedRoomFactory(RoomFactory[EnchantedRoom]):
    def make_room(self, number: int) -> EnchantedRoom:
        return EnchantedRoom(number)


def room_factory_for(theme: str) -> RoomFactory[OrdinaryRoom] | RoomFactory[EnchantedRoom]:
    """Select a room family by theme name. Unknown themes are ordinary."""
    if theme.lower() == Theme.ENCHANTED:
        return EnchantedRoomFactory()
    return OrdinaryRoomFactory()
