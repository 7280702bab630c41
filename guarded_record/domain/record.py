"""The guarded record: named fields with computed and validated access paths.

A record keeps three kinds of field side by side:

* plain fields, stored and freely assignable;
* computed fields, derived on every read from the stored fields and never
  assignable;
* validated fields, stored in a private backing slot that is only replaced
  when the field's validator accepts the candidate value.

Derivations and validators always receive their inputs as arguments
(``derive(view)`` and ``validate(candidate, snapshot)``). Nothing is bound
to an implicit receiver, so handing one of these functions around as a bare
callback never changes what it reads.

Records are not thread-safe. Callers sharing one across threads must
serialize access themselves.
"""
from __future__ import annotations

import copy
import json
import logging
from dataclasses import asdict, is_dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from guarded_record.config import SETTINGS, RejectionPolicy

from .errors import (
    DerivationError,
    DuplicateFieldError,
    NotRemovableError,
    ReadOnlyFieldError,
    UnknownFieldError,
    ValidationError,
)
from .fields import (
    ComputedField,
    DeriveFn,
    FieldDescriptor,
    FieldKind,
    PlainField,
    ValidatedField,
    ValidateFn,
)
from .results import OperationResult, failed, succeeded

logger = logging.getLogger(__name__)


class RecordView(Mapping[str, Any]):
    """Live, read-only mapping over a record's plain and validated fields."""

    def __init__(self, record: Record) -> None:
        self._record = record

    def __getitem__(self, name: str) -> Any:
        return self._record._stored_value(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._record._stored_names())

    def __len__(self) -> int:
        return len(self._record._stored_names())

    def __repr__(self) -> str:
        return f"RecordView({dict(self)!r})"


class Record:
    def __init__(self, policy: RejectionPolicy | None = None) -> None:
        self._fields: dict[str, FieldDescriptor] = {}
        self._values: dict[str, Any] = {}
        self._slots: dict[str, Any] = {}
        self._policy = RejectionPolicy(policy or SETTINGS.rejection_policy)
        self._view = RecordView(self)

    @classmethod
    def create(
        cls,
        initial: Mapping[str, Any] | None = None,
        removable: Iterable[str] = (),
        policy: RejectionPolicy | None = None,
    ) -> Record:
        """Build a record whose initial fields are all plain.

        ``removable`` names the initial fields that ``remove`` may delete;
        names not present in ``initial`` are ignored.
        """
        record = cls(policy=policy)
        removable_names = set(removable)
        for name, value in (initial or {}).items():
            record._register(PlainField(name=name, removable=name in removable_names))
            record._values[name] = value
        return record

    @property
    def policy(self) -> RejectionPolicy:
        return self._policy

    def attach_plain(self, name: str, value: Any, removable: bool = False) -> None:
        self._ensure_free(name)
        self._register(PlainField(name=name, removable=removable))
        self._values[name] = value

    def attach_computed(self, name: str, derive: DeriveFn, removable: bool = False) -> None:
        """Register a computed field.

        ``derive`` receives a read-only view of the plain and validated fields
        and must not mutate anything reachable through it.
        """
        self._ensure_free(name)
        self._register(ComputedField(name=name, derive=derive, removable=removable))

    def attach_validated(
        self,
        name: str,
        initial: Any,
        validate: ValidateFn,
        removable: bool = False,
    ) -> None:
        """Register a validated field whose initial value must pass ``validate``."""
        self._ensure_free(name)
        descriptor = ValidatedField(name=name, validate=validate, removable=removable)
        verdict = descriptor.check(initial, self.snapshot())
        if not verdict.accepted:
            logger.info("Rejected initial value for %s: %s", name, verdict.reason)
            raise ValidationError(name, verdict.reason)
        self._register(descriptor)
        self._slots[name] = initial

    def get(self, name: str) -> Any:
        """Current value of ``name``.

        Raises ``UnknownFieldError`` when ``name`` is not registered and
        ``DerivationError`` when a computed field reads a stored field that has
        since been removed.
        """
        descriptor = self._descriptor(name)
        if isinstance(descriptor, ComputedField):
            try:
                return descriptor.derive(self._view)
            except UnknownFieldError as exc:
                raise DerivationError(name, exc.name) from exc
        if isinstance(descriptor, ValidatedField):
            return self._slots[name]
        return self._values[name]

    def set(self, name: str, value: Any) -> OperationResult:
        descriptor = self._fields.get(name)
        if descriptor is None:
            return self._settle(failed(name, "set", UnknownFieldError(name)))
        if isinstance(descriptor, ComputedField):
            logger.info("Ignored write to computed field %s", name)
            return self._settle(failed(name, "set", ReadOnlyFieldError(name)))
        if isinstance(descriptor, ValidatedField):
            verdict = descriptor.check(value, self.snapshot())
            if not verdict.accepted:
                logger.info("Rejected value for %s: %s", name, verdict.reason)
                return self._settle(failed(name, "set", ValidationError(name, verdict.reason)))
            self._slots[name] = value
            return succeeded(name, "set")
        self._values[name] = value
        return succeeded(name, "set")

    def remove(self, name: str) -> OperationResult:
        descriptor = self._fields.get(name)
        if descriptor is None:
            return self._settle(failed(name, "remove", UnknownFieldError(name)))
        if not descriptor.removable:
            logger.info("Refused to remove field %s", name)
            return self._settle(failed(name, "remove", NotRemovableError(name)))
        del self._fields[name]
        self._values.pop(name, None)
        self._slots.pop(name, None)
        logger.debug("Removed %s field %s", descriptor.kind.value, name)
        return succeeded(name, "remove")

    def names(self) -> tuple[str, ...]:
        return tuple(self._fields)

    def kind(self, name: str) -> FieldKind:
        return self._descriptor(name).kind

    def is_removable(self, name: str) -> bool:
        return self._descriptor(name).removable

    def view(self) -> RecordView:
        return self._view

    def snapshot(self) -> Mapping[str, Any]:
        """Read-only copy of the current plain and validated values.

        Values are deep-copied; a value that cannot be deep-copied (a lock, an
        open handle) is shallow-copied, or passed as-is when that fails too.
        """
        values = {name: _detached(self._stored_value(name)) for name in self._stored_names()}
        return MappingProxyType(values)

    def to_dict(self) -> dict[str, Any]:
        return {name: self.get(name) for name in self._fields}

    def serialize(self, indent: int | None = None) -> str:
        """JSON text of every field's current value in declaration order."""
        if indent is None:
            indent = SETTINGS.json_indent
        return json.dumps(self.to_dict(), indent=indent, default=_json_default)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}: {d.kind.value}" for name, d in self._fields.items())
        return f"Record({fields})"

    def _descriptor(self, name: str) -> FieldDescriptor:
        try:
            return self._fields[name]
        except KeyError:
            raise UnknownFieldError(name) from None

    def _ensure_free(self, name: str) -> None:
        if name in self._fields:
            raise DuplicateFieldError(name)

    def _register(self, descriptor: FieldDescriptor) -> None:
        self._fields[descriptor.name] = descriptor
        logger.debug("Attached %s field %s", descriptor.kind.value, descriptor.name)

    def _stored_names(self) -> list[str]:
        return [name for name, d in self._fields.items() if not isinstance(d, ComputedField)]

    def _stored_value(self, name: str) -> Any:
        descriptor = self._fields.get(name)
        if isinstance(descriptor, PlainField):
            return self._values[name]
        if isinstance(descriptor, ValidatedField):
            return self._slots[name]
        raise UnknownFieldError(name)

    def _settle(self, result: OperationResult) -> OperationResult:
        if self._policy is RejectionPolicy.RAISE:
            result.raise_for_error()
        return result


def _detached(value: Any) -> Any:
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error):
        pass
    try:
        return copy.copy(value)
    except (TypeError, copy.Error):
        return value


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, (set, frozenset)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
