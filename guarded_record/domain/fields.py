"""Field descriptors attached to a guarded record.

Descriptors are frozen: once attached, a field's kind, derivation or
validator never changes. Validated fields keep their value in the record's
private backing slots, not on the descriptor.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Union


class FieldKind(str, Enum):
    PLAIN = "plain"
    COMPUTED = "computed"
    VALIDATED = "validated"


@dataclass(frozen=True)
class Verdict:
    """Outcome of a validator call."""

    accepted: bool
    reason: str = ""

    @classmethod
    def coerce(cls, outcome: Verdict | bool) -> Verdict:
        if isinstance(outcome, Verdict):
            return outcome
        if outcome is True:
            return ACCEPT
        if outcome is False:
            return cls(accepted=False, reason="rejected by validator")
        raise TypeError(f"Validator must return a Verdict or bool, got {type(outcome)!r}")


ACCEPT = Verdict(accepted=True)


def accept() -> Verdict:
    return ACCEPT


def reject(reason: str) -> Verdict:
    return Verdict(accepted=False, reason=reason)


# derive(view) -> value, where view is a read-only mapping of stored fields.
DeriveFn = Callable[[Mapping[str, Any]], Any]
# validate(candidate, snapshot) -> Verdict | bool
ValidateFn = Callable[[Any, Mapping[str, Any]], Union[Verdict, bool]]


@dataclass(frozen=True)
class PlainField:
    name: str
    removable: bool = False

    @property
    def kind(self) -> FieldKind:
        return FieldKind.PLAIN


@dataclass(frozen=True)
class ComputedField:
    """Derived field; ``derive`` must be free of side effects."""

    name: str
    derive: DeriveFn
    removable: bool = False

    @property
    def kind(self) -> FieldKind:
        return FieldKind.COMPUTED


@dataclass(frozen=True)
class ValidatedField:
    name: str
    validate: ValidateFn
    removable: bool = False

    @property
    def kind(self) -> FieldKind:
        return FieldKind.VALIDATED

    def check(self, candidate: Any, snapshot: Mapping[str, Any]) -> Verdict:
        return Verdict.coerce(self.validate(candidate, snapshot))


FieldDescriptor = Union[PlainField, ComputedField, ValidatedField]
