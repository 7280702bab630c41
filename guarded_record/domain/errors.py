"""Error kinds raised or reported by guarded records."""
from __future__ import annotations


class GuardedRecordError(Exception):
    """Base class for every record failure."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.message = message

    def __str__(self) -> str:
        return self.message


class DuplicateFieldError(GuardedRecordError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"Field {name!r} is already registered")


class UnknownFieldError(GuardedRecordError, KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"Field {name!r} is not registered")


class ReadOnlyFieldError(GuardedRecordError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"Field {name!r} is computed and cannot be assigned")


class ValidationError(GuardedRecordError):
    """A candidate value was rejected by the field's validator."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(name, f"Rejected value for {name!r}: {reason}")
        self.reason = reason


class NotRemovableError(GuardedRecordError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"Field {name!r} is not removable")


class DerivationError(GuardedRecordError):
    """A computed field read a stored field that is no longer registered."""

    def __init__(self, name: str, missing: str) -> None:
        super().__init__(name, f"Computed field {name!r} depends on unregistered field {missing!r}")
        self.missing = missing
