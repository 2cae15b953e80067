"""Typed failures raised by the pattern catalog.

Every failure a caller can trigger through the public API derives from
:class:`PatternError` and carries a stable ``code`` used by the service
layer when it converts exceptions into ``ServiceResult`` errors.
"""

from __future__ import annotations


class PatternError(Exception):
    """Base class for all catalog failures."""

    code = "PATTERN_ERROR"


class MissingBehavior(PatternError):
    """A strategy slot was invoked while unset."""

    code = "MISSING_BEHAVIOR"

    def __init__(self, slot: str, owner: str) -> None:
        self.slot = slot
        self.owner = owner
        super().__init__(f"{owner} has no behavior bound to slot '{slot}'")


class UndoNotSupported(PatternError):
    """``undo()`` was requested from a command that has no inverse."""

    code = "UNDO_NOT_SUPPORTED"

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"{command} cannot be undone")


class SingletonConstructionError(PatternError):
    """A singleton class was constructed outside of ``instance()``."""

    code = "SINGLETON_CONSTRUCTION"

    def __init__(self, cls_name: str) -> None:
        self.cls_name = cls_name
        super().__init__(f"{cls_name} is a singleton; use {cls_name}.instance()")


class FamilyMismatch(PatternError):
    """Two products from different abstract-factory families were combined."""

    code = "FAMILY_MISMATCH"

    def __init__(self, expected: str, got: str) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"Cannot connect a {got} to a {expected}")
