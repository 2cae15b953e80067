"""Singleton and lazy initialization.

:class:`Singleton` gives every subclass exactly one instance per process,
created on the first call to ``instance()`` and kept until interpreter
shutdown. Calling the class directly raises
:class:`~patternctl.domain.errors.SingletonConstructionError`.

First access is guarded by a re-entrant lock with a double check, so
concurrent callers observe either nothing or the fully initialized
instance. The lock is re-entrant because a singleton's ``__init__`` may
itself ask for another singleton.
"""

from __future__ import annotations

import itertools
import logging
import threading
from functools import cached_property
from typing import Any, ClassVar, Self

from patternctl.domain.errors import SingletonConstructionError

logger = logging.getLogger(__name__)

_INSTANCES: dict[type, Any] = {}
_LOCK = threading.RLock()
_construction = threading.local()


class Singleton:
    """Base class for process-wide, lazily created singletons.

    Subclasses must be constructible without arguments.

    Usage::

        class Registry(Singleton):
            def __init__(self) -> None:
                self.entries = {}

        Registry.instance() is Registry.instance()  # True
        Registry()  # raises SingletonConstructionError
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> Self:
        if getattr(_construction, "target", None) is not cls:
            raise SingletonConstructionError(cls.__name__)
        return super().__new__(cls)

    @classmethod
    def instance(cls) -> Self:
        existing = _INSTANCES.get(cls)
        if existing is not None:
            return existing
        with _LOCK:
            existing = _INSTANCES.get(cls)
            if existing is None:
                previous = getattr(_construction, "target", None)
                _construction.target = cls
                try:
                    existing = cls()
                finally:
                    _construction.target = previous
                _INSTANCES[cls] = existing
                logger.debug("Created singleton %s", cls.__name__)
        return existing

    @classmethod
    def is_initialized(cls) -> bool:
        """Whether ``instance()`` has already built this class."""
        return cls in _INSTANCES


_ids = itertools.count(1)


class NetworkManager(Singleton):
    """The shared network manager every client talks through."""

    def __init__(self) -> None:
        self.serial = next(_ids)
        self.requests: list[str] = []

    def request(self, url: str) -> str:
        self.requests.append(url)
        return f"GET {url}"


class ApiClient:
    """Resolves its network manager lazily, on first use only."""

    base_url: ClassVar[str] = "https://example.com"

    @cached_property
    def network_manager(self) -> NetworkManager:
        logger.debug("Resolving network manager on first use")
        return NetworkManager.instance()

    def fetch(self, path: str) -> str:
        return self.network_manager.request(f"{self.base_url}/{path.lstrip('/')}")
