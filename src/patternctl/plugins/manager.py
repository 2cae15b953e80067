"""Plugin discovery, loading, and factory-registry extension.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints
in the ``patternctl.plugins`` group, plus direct registration.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from patternctl.plugins.hookspecs import PatternctlHookSpec

if TYPE_CHECKING:
    from patternctl.domain.factory import Pizza

PROJECT_NAME = "patternctl"
ENTRY_POINT_GROUP = "patternctl.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(PatternctlHookSpec)

    def discover_and_load(self) -> list[str]:
        """Discover plugins from entry points. Returns loaded plugin names."""
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def build_pizza_registry(
        self, base: dict[str, type[Pizza]] | None = None
    ) -> dict[str, type[Pizza]]:
        """Merge plugin-contributed pizza kinds over *base*.

        Built-in selectors win: a plugin that tries to replace one is
        logged and skipped, as is a plugin whose hook raises.
        Each entry must be a class whose ``kind`` equals its lower-case
        selector; anything else is skipped too.
        """
        from patternctl.domain.factory import PIZZA_REGISTRY

        registry = dict(PIZZA_REGISTRY if base is None else base)
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            hook = getattr(plugin, "register_pizzas", None)
            if hook is None:
                continue
            try:
                contributed = hook()
            except Exception:
                logger.warning(
                    "Failed to collect pizzas from plugin %s", plugin_name, exc_info=True
                )
                continue
            if contributed is None:
                continue
            if not isinstance(contributed, dict):
                logger.warning("Plugin %s returned non-dict pizza registrations", plugin_name)
                continue
            for selector, pizza_cls in contributed.items():
                if selector in registry:
                    logger.warning(
                        "Skipping pizza %r from plugin %s: already registered",
                        selector,
                        plugin_name,
                    )
                    continue
                if not _is_pizza_class(selector, pizza_cls):
                    logger.warning(
                        "Skipping pizza %r from plugin %s: not a pizza class of that kind",
                        selector,
                        plugin_name,
                    )
                    continue
                registry[selector] = pizza_cls
        return registry

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("patternctl")`` sets a ``patternctl_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "patternctl_impl", None):
                return True
        return False


def _is_pizza_class(selector: object, pizza_cls: object) -> bool:
    return (
        isinstance(selector, str)
        and selector == selector.lower()
        and inspect.isclass(pizza_cls)
        and getattr(pizza_cls, "kind", None) == selector
    )
