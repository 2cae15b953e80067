"""Factory Method: regional internet providers.

The client holds an abstract :class:`InternetProvider`. Each concrete
provider overrides the factory method :meth:`InternetProvider.create_service`
to decide which service class is instantiated for a plan.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import Protocol


class Plan(StrEnum):
    BABY = "baby"
    POWER = "power"


class Region(StrEnum):
    ONTARIO = "ontario"
    MONTREAL = "montreal"


class InternetService(Protocol):
    """Capability set for a home internet package."""

    @property
    def plan(self) -> str: ...

    @property
    def speed(self) -> int: ...

    def cost(self) -> Decimal: ...


@dataclass(frozen=True)
class BabyService:
    plan: str = Plan.BABY
    speed: int = 30

    def cost(self) -> Decimal:
        return Decimal("40.00")


@dataclass(frozen=True)
class PowerUserService:
    plan: str = Plan.POWER
    speed: int = 60

    def cost(self) -> Decimal:
        return Decimal("55.00")


@dataclass(frozen=True)
class DiscountedService:
    """Wraps a service and takes a fixed percentage off its price."""

    base: InternetService
    discount: Decimal

    @property
    def plan(self) -> str:
        return self.base.plan

    @property
    def speed(self) -> int:
        return self.base.speed

    def cost(self) -> Decimal:
        price = self.base.cost()
        return (price - price * self.discount).quantize(Decimal("0.01"))


class InternetProvider(ABC):
    """Abstract creator. ``subscribe`` defers instantiation to subclasses."""

    region: str

    @abstractmethod
    def create_service(self, plan: str) -> InternetService:
        """Factory method: return the service sold for *plan* in this region."""
        ...

    def subscribe(self, plan: str) -> InternetService:
        """Sign up for *plan*. Unknown plans fall back to the baby plan."""
        normalized = plan.lower()
        if normalized not in {p.value for p in Plan}:
            normalized = Plan.BABY
        return self.create_service(normalized)


class OntarioProvider(InternetProvider):
    """Standard pricing for every package."""

    region = Region.ONTARIO

    def create_service(self, plan: str) -> InternetService:
        if plan == Plan.POWER:
            return PowerUserService()
        return BabyService()


class MontrealProvider(InternetProvider):
    """Power users pay 10% less in Montreal."""

    region = Region.MONTREAL
    POWER_DISCOUNT = Decimal("0.10")

    def create_service(self, plan: str) -> InternetService:
        if plan == Plan.POWER:
            return DiscountedService(PowerUserService(), self.POWER_DISCOUNT)
        return BabyService()


PROVIDER_REGISTRY: dict[str, type[InternetProvider]] = {
    Region.ONTARIO: OntarioProvider,
    Region.MONTREAL: MontrealProvider,
}


def provider_for(region: str) -> InternetProvider:
    """Pick the creator at run time. Unknown regions get Ontario pricing."""
    provider_cls = PROVIDER_REGISTRY.get(region.lower(), OntarioProvider)
    return provider_cls()
