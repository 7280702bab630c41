"""Outcomes of record write operations."""
from __future__ import annotations

from dataclasses import dataclass

from .errors import GuardedRecordError


@dataclass(frozen=True)
class OperationResult:
    name: str
    operation: str
    error: GuardedRecordError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    @property
    def reason(self) -> str:
        if self.error is None:
            return ""
        return getattr(self.error, "reason", self.error.message)

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def succeeded(name: str, operation: str) -> OperationResult:
    return OperationResult(name=name, operation=operation)


def failed(name: str, operation: str, error: GuardedRecordError) -> OperationResult:
    return OperationResult(name=name, operation=operation, error=error)
