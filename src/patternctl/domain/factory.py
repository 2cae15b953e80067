"""Simple Factory: pizza variants, the factory, and the store.

The store never names a concrete pizza class. It receives a factory at
construction time (constructor injection) and asks it for products by
selector, so a stub factory can stand in during tests.

INVARIANT: ``create_pizza`` never fails for a well-formed registry. Selectors
are matched case-insensitively and unknown ones resolve to the factory's
default variant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class PizzaKind(StrEnum):
    """Selectors recognised by the built-in pizza registry."""

    CHEESE = "cheese"
    VEGGIE = "veggie"
    MEAT = "meat"


@runtime_checkable
class Pizza(Protocol):
    """Capability set every pizza variant satisfies."""

    kind: ClassVar[str]

    @property
    def description(self) -> str: ...

    def prepare(self) -> str: ...

    def cook(self) -> str: ...

    def cost(self) -> int: ...


@dataclass(frozen=True)
class CheesePizza:
    kind: ClassVar[str] = PizzaKind.CHEESE

    @property
    def description(self) -> str:
        return "cheese"

    def prepare(self) -> str:
        return f"preparing {self.description}"

    def cook(self) -> str:
        return f"cooking {self.description}"

    def cost(self) -> int:
        return 10


@dataclass(frozen=True)
class VeggiePizza:
    kind: ClassVar[str] = PizzaKind.VEGGIE

    @property
    def description(self) -> str:
        return "veggie"

    def prepare(self) -> str:
        return f"preparing {self.description}"

    def cook(self) -> str:
        return f"cooking {self.description}"

    def cost(self) -> int:
        return 11


@dataclass(frozen=True)
class MeatLoversPizza:
    kind: ClassVar[str] = PizzaKind.MEAT

    @property
    def description(self) -> str:
        return "meat lovers"

    def prepare(self) -> str:
        return f"preparing {self.description}"

    def cook(self) -> str:
        return f"cooking {self.description}"

    def cost(self) -> int:
        return 14


PIZZA_REGISTRY: dict[str, type[Pizza]] = {
    PizzaKind.CHEESE: CheesePizza,
    PizzaKind.VEGGIE: VeggiePizza,
    PizzaKind.MEAT: MeatLoversPizza,
}

DEFAULT_PIZZA_KIND: str = PizzaKind.CHEESE


class PizzaFactory(Protocol):
    """Anything that turns a selector into a pizza."""

    def create_pizza(self, selector: str) -> Pizza: ...


class SimplePizzaFactory:
    """Creates pizzas from a selector-to-class registry.

    New kinds are added by passing a larger registry (see
    :meth:`patternctl.plugins.manager.PluginManager.build_pizza_registry`),
    never by editing this class.
    """

    def __init__(
        self,
        registry: dict[str, type[Pizza]] | None = None,
        *,
        default: str = DEFAULT_PIZZA_KIND,
    ) -> None:
        self._registry = dict(PIZZA_REGISTRY if registry is None else registry)
        if default not in self._registry:
            msg = f"Default pizza kind '{default}' is not registered"
            raise ValueError(msg)
        self._default = default

    @property
    def default_kind(self) -> str:
        return self._default

    def known_kinds(self) -> list[str]:
        return sorted(self._registry)

    def knows(self, selector: str) -> bool:
        return selector.lower() in self._registry

    def create_pizza(self, selector: str) -> Pizza:
        """Build the pizza for *selector*, matched case-insensitively."""
        pizza_cls = self._registry.get(selector.lower())
        if pizza_cls is None:
            logger.debug("Unknown pizza selector %r, using %s", selector, self._default)
            pizza_cls = self._registry[self._default]
        return pizza_cls()


class PizzaStore:
    """Orders pizzas through an injected factory."""

    def __init__(self, factory: PizzaFactory) -> None:
        self._factory = factory
        self._ordered: Pizza | None = None

    @property
    def ordered(self) -> Pizza | None:
        """The most recently ordered pizza, or None."""
        return self._ordered

    def order(self, selector: str) -> Pizza:
        self._ordered = self._factory.create_pizza(selector)
        return self._ordered

    def cost(self) -> int | None:
        """Cost of the last order, or None when nothing has been ordered."""
        if self._ordered is None:
            return None
        return self._ordered.cost()
