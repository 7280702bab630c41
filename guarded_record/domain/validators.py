"""Stock validators for validated fields."""
from __future__ import annotations

import math
from decimal import Decimal
from numbers import Rational, Real
from typing import Any, Iterable, Mapping

from .fields import ValidateFn, Verdict, accept, reject


def numeric_only(candidate: Any, snapshot: Mapping[str, Any]) -> Verdict:
    # bool is an int subclass but never a meaningful number here
    if isinstance(candidate, bool) or not isinstance(candidate, (Real, Decimal)):
        return reject(f"{candidate!r} is not a number")
    if _is_nan(candidate):
        return reject("NaN is not a number")
    return accept()


def _is_nan(number: Any) -> bool:
    if isinstance(number, Decimal):
        return number.is_nan()
    if isinstance(number, Rational):
        return False
    return math.isnan(number)


def non_negative(candidate: Any, snapshot: Mapping[str, Any]) -> Verdict:
    verdict = numeric_only(candidate, snapshot)
    if not verdict.accepted:
        return verdict
    if candidate < 0:
        return reject(f"{candidate!r} is negative")
    return accept()


def one_of(choices: Iterable[Any]) -> ValidateFn:
    allowed = tuple(choices)

    def validate(candidate: Any, snapshot: Mapping[str, Any]) -> Verdict:
        if candidate in allowed:
            return accept()
        return reject(f"{candidate!r} is not one of {list(allowed)!r}")

    return validate


def all_of(*validators: ValidateFn) -> ValidateFn:
    """Combine validators; the first rejection wins."""

    def validate(candidate: Any, snapshot: Mapping[str, Any]) -> Verdict:
        for validator in validators:
            verdict = Verdict.coerce(validator(candidate, snapshot))
            if not verdict.accepted:
                return verdict
        return accept()

    return validate
