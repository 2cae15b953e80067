"""Pluggy hook specifications for patternctl extensions.

Plugins extend the pizza factory with new kinds without touching it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from patternctl.domain.factory import Pizza

hookspec = pluggy.HookspecMarker("patternctl")
hookimpl = pluggy.HookimplMarker("patternctl")


class PatternctlHookSpec:
    """Hook specifications for the patternctl plugin system."""

    @hookspec
    def register_pizzas(self) -> dict[str, type[Pizza]] | None:
        """Return selector -> pizza class mappings to extend the factory registry."""
