"""CreationalService: factory, factory method, abstract factory, singleton.

Each method runs one scenario end to end and reports what was built.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from patternctl.domain.errors import PatternError, SingletonConstructionError
from patternctl.domain.factory import PIZZA_REGISTRY, PizzaStore, SimplePizzaFactory
from patternctl.domain.providers import provider_for
from patternctl.domain.rooms import room_factory_for
from patternctl.domain.singleton import ApiClient, NetworkManager
from patternctl.services.base import PLUGIN_FAILURE, BaseService
from patternctl.services.result import ServiceResult

if TYPE_CHECKING:
    from patternctl.config.settings import PatternSettings
    from patternctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class CreationalService(BaseService):
    """Scenarios for the creational patterns."""

    def __init__(
        self,
        settings: PatternSettings | None = None,
        *,
        plugins: PluginManager | None = None,
    ) -> None:
        super().__init__(settings)
        self._plugins = plugins

    def order_pizza(self, selector: str) -> ServiceResult:
        """Order through a store whose factory knows built-in and plugin kinds."""
        op = "order_pizza"
        registry = (
            self._plugins.build_pizza_registry()
            if self._plugins is not None
            else dict(PIZZA_REGISTRY)
        )
        try:
            factory = SimplePizzaFactory(registry, default=self.settings.pizza.default_kind)
        except ValueError as exc:
            return self._failure(op, exc, known=sorted(registry))

        store = PizzaStore(factory)
        try:
            pizza = store.order(selector)
            steps = [pizza.prepare(), pizza.cook()]
            cost = store.cost()
            description = pizza.description
        except Exception as exc:
            logger.debug("Pizza %r could not be made", selector, exc_info=True)
            return self._failure(op, exc, code=PLUGIN_FAILURE, selector=selector)
        warnings: list[str] = []
        fallback = not factory.knows(selector)
        if fallback:
            warnings.append(f"Unknown pizza {selector!r}; served {factory.default_kind}")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "selector": selector,
                "kind": str(pizza.kind),
                "description": description,
                "steps": steps,
                "cost": cost,
                "fallback": fallback,
            },
            warnings=warnings,
            meta={"known_kinds": factory.known_kinds()},
        )

    def subscribe_isp(self, region: str, plan: str) -> ServiceResult:
        provider = provider_for(region)
        service = provider.subscribe(plan)
        return ServiceResult(
            ok=True,
            op="subscribe_isp",
            data={
                "region": str(provider.region),
                "provider": type(provider).__name__,
                "plan": str(service.plan),
                "speed": service.speed,
                "cost": str(service.cost()),
            },
        )

    def build_rooms(self, theme: str) -> ServiceResult:
        op = "build_rooms"
        factory = room_factory_for(theme)
        try:
            first, second = factory.build_pair()
        except PatternError as exc:
            return self._failure(op, exc)
        rooms: list[dict[str, Any]] = [
            {
                "number": room.number,
                "description": room.describe(),
                "connected_to": [other.number for other in room.connections],
            }
            for room in (first, second)
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={"theme": str(first.theme), "factory": type(factory).__name__, "rooms": rooms},
        )

    def demonstrate_singleton(self) -> ServiceResult:
        """Show that ``instance()`` is stable and direct construction is refused."""
        op = "singleton"
        was_initialized = NetworkManager.is_initialized()
        client = ApiClient()
        response = client.fetch("status")
        first = NetworkManager.instance()
        second = NetworkManager.instance()
        try:
            NetworkManager()
            direct = "allowed"
        except SingletonConstructionError as exc:
            direct = str(exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "same_instance": first is second and client.network_manager is first,
                "serial": first.serial,
                "was_initialized": was_initialized,
                "response": response,
                "requests": len(first.requests),
                "direct_construction": direct,
            },
        )
