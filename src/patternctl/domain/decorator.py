"""Decorator pattern: beverages wrapped in condiments.

Every condiment wraps exactly one inner beverage and satisfies the same
capability set. Cost and description are computed recursively: own
contribution plus whatever the inner beverage reports.

Description order: base first, then condiment fragments from innermost to
outermost, so ``Mocha(Milk(HouseBlend()))`` reads ``"House Blend milk mocha"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Protocol


class Beverage(Protocol):
    def description(self) -> str: ...

    def cost(self) -> Decimal: ...


# --- Concrete bases (chain terminators) ---


@dataclass(frozen=True)
class HouseBlend:
    def description(self) -> str:
        return "House Blend"

    def cost(self) -> Decimal:
        return Decimal("0.89")


@dataclass(frozen=True)
class DarkRoast:
    def description(self) -> str:
        return "Dark Roast"

    def cost(self) -> Decimal:
        return Decimal("1.29")


@dataclass(frozen=True)
class Decaf:
    def description(self) -> str:
        return "Decaf"

    def cost(self) -> Decimal:
        return Decimal("1.00")


@dataclass(frozen=True)
class Espresso:
    def description(self) -> str:
        return "Espresso"

    def cost(self) -> Decimal:
        return Decimal("1.99")


# --- Condiments (decorators) ---


@dataclass(frozen=True)
class Condiment:
    """Wraps one beverage and adds a fixed surcharge and text fragment."""

    beverage: Beverage

    surcharge: ClassVar[Decimal] = Decimal("0")
    fragment: ClassVar[str] = ""

    def description(self) -> str:
        return f"{self.beverage.description()} {self.fragment}"

    def cost(self) -> Decimal:
        return self.surcharge + self.beverage.cost()


@dataclass(frozen=True)
class Milk(Condiment):
    surcharge: ClassVar[Decimal] = Decimal("0.10")
    fragment: ClassVar[str] = "milk"


@dataclass(frozen=True)
class Mocha(Condiment):
    surcharge: ClassVar[Decimal] = Decimal("0.50")
    fragment: ClassVar[str] = "mocha"


@dataclass(frozen=True)
class Soy(Condiment):
    surcharge: ClassVar[Decimal] = Decimal("0.60")
    fragment: ClassVar[str] = "soy"


@dataclass(frozen=True)
class Whip(Condiment):
    surcharge: ClassVar[Decimal] = Decimal("1.00")
    fragment: ClassVar[str] = "whip"


BASES: dict[str, type[Beverage]] = {
    "house-blend": HouseBlend,
    "dark-roast": DarkRoast,
    "decaf": Decaf,
    "espresso": Espresso,
}

CONDIMENTS: dict[str, type[Condiment]] = {
    "milk": Milk,
    "mocha": Mocha,
    "soy": Soy,
    "whip": Whip,
}


def decorate(base: Beverage, *condiments: type[Condiment]) -> Beverage:
    """Wrap *base* in *condiments*; the last one becomes the chain head."""
    head = base
    for condiment in condiments:
        head = condiment(head)
    return head


def chain_depth(beverage: Beverage) -> int:
    """Number of condiments between the chain head and its base."""
    depth = 0
    while isinstance(beverage, Condiment):
        depth += 1
        beverage = beverage.beverage
    return depth
