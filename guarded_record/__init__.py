"""Records with computed and validated fields."""
from guarded_record.config import RejectionPolicy
from guarded_record.domain.errors import (
    DerivationError,
    DuplicateFieldError,
    GuardedRecordError,
    NotRemovableError,
    ReadOnlyFieldError,
    UnknownFieldError,
    ValidationError,
)
from guarded_record.domain.fields import FieldKind, Verdict, accept, reject
from guarded_record.domain.record import Record
from guarded_record.domain.results import OperationResult

__all__ = [
    "Record",
    "RejectionPolicy",
    "FieldKind",
    "OperationResult",
    "Verdict",
    "accept",
    "reject",
    "GuardedRecordError",
    "DerivationError",
    "DuplicateFieldError",
    "UnknownFieldError",
    "ReadOnlyFieldError",
    "ValidationError",
    "NotRemovableError",
]
