"""CatalogService: lists the patterns shipped with patternctl."""

from __future__ import annotations

from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult

# (pattern, category, module, scenario command)
PATTERNS: tuple[tuple[str, str, str, str], ...] = (
    ("Simple Factory", "creational", "patternctl.domain.factory", "factory pizza"),
    ("Factory Method", "creational", "patternctl.domain.providers", "factory isp"),
    ("Abstract Factory", "creational", "patternctl.domain.rooms", "factory rooms"),
    ("Singleton", "creational", "patternctl.domain.singleton", "singleton"),
    ("Lazy Initialization", "creational", "patternctl.domain.singleton", "singleton"),
    ("Decorator", "structural", "patternctl.domain.decorator", "decorator coffee"),
    ("Facade", "structural", "patternctl.domain.facade", "facade theater"),
    ("Adapter", "structural", "patternctl.domain.adapter", "adapter turkey"),
    ("State", "behavioral", "patternctl.domain.state", "state gumball"),
    ("Strategy", "behavioral", "patternctl.domain.strategy", "strategy duck"),
    ("Observer", "behavioral", "patternctl.domain.observer", "observer weather"),
    ("Command", "behavioral", "patternctl.domain.command", "remote"),
)


class CatalogService(BaseService):
    """Read-only view over the pattern catalog."""

    def list_patterns(self, *, category: str | None = None) -> ServiceResult:
        op = "catalog"
        categories = sorted({row[1] for row in PATTERNS})
        if category is not None and category not in categories:
            return self._failure(
                op,
                ValueError(f"Unknown category: {category!r}"),
                allowed=categories,
            )
        items = [
            {"pattern": name, "category": cat, "module": module, "command": command}
            for name, cat, module, command in PATTERNS
            if category is None or cat == category
        ]
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})
