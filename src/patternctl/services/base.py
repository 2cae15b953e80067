"""BaseService: shared foundation for the scenario services.

Every service is built from a :class:`PatternSettings` (defaults when
omitted) and an optional :class:`ObserverBus` used for best-effort
notifications. Domain failures never escape a service: they are turned
into ``ServiceResult(ok=False)`` by :meth:`BaseService._failure`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from patternctl.domain.errors import PatternError
from patternctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from patternctl.config.settings import PatternSettings
    from patternctl.domain.observer import ObserverBus

logger = logging.getLogger(__name__)

INVALID_ARGUMENT = "INVALID_ARGUMENT"
PLUGIN_FAILURE = "PLUGIN_FAILURE"


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CatalogService(BaseService):
            def order_pizza(self, selector: str) -> ServiceResult:
                try:
                    ...
                except PatternError as exc:
                    return self._failure("order_pizza", exc)
    """

    def __init__(
        self,
        settings: PatternSettings | None = None,
        *,
        bus: ObserverBus | None = None,
    ) -> None:
        if settings is None:
            from patternctl.config.settings import PatternSettings

            settings = PatternSettings()
        self._settings = settings
        self._bus = bus

    @property
    def settings(self) -> PatternSettings:
        return self._settings

    def _failure(
        self, op: str, exc: Exception, *, code: str | None = None, **detail: Any
    ) -> ServiceResult:
        """Convert a caught exception into a failed ServiceResult.

        *code* overrides the code derived from the exception type.
        """
        if code is None:
            code = exc.code if isinstance(exc, PatternError) else INVALID_ARGUMENT
        message = str(exc.args[0]) if isinstance(exc, KeyError) and exc.args else str(exc)
        logger.debug("%s failed with %s: %s", op, code, message)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    def _dispatch_event(
        self,
        event_name: str,
        payload: Any,
        warnings: list[str],
    ) -> int:
        """Publish *event_name* on the service bus. No-op without a bus.

        INVARIANT: Subscriber failures are warnings, never errors.
        Returns the number of subscribers reached (0 on failure).
        """
        if self._bus is None:
            return 0
        bus = self._bus
        return self._deliver(event_name, lambda: bus.publish(event_name, payload), warnings)

    @staticmethod
    def _deliver(event_name: str, send: Callable[[], int], warnings: list[str]) -> int:
        """Run *send* and turn any subscriber failure into a warning."""
        try:
            return send()
        except Exception:
            logger.debug("Event dispatch failed for %s", event_name, exc_info=True)
            warnings.append(f"Event dispatch failed for {event_name}")
            return 0
