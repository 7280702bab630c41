"""Demonstration scenarios reproducing the record behaviors end to end.

Each scenario builds a fresh record, exercises it, and returns the lines it
would print together with the record it ended with.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from guarded_record.application.cart import add_item, make_cart
from guarded_record.domain.errors import UnknownFieldError
from guarded_record.domain.record import Record
from guarded_record.domain.validators import numeric_only


@dataclass(slots=True)
class ScenarioOutcome:
    name: str
    record: Record
    lines: list[str] = field(default_factory=list)


def run_cart() -> ScenarioOutcome:
    cart = make_cart()
    outcome = ScenarioOutcome(name="cart", record=cart)

    add_item(cart, unit_cost=500, qty=2)
    outcome.lines.append(str(cart.get("total")))

    result = cart.set("total", 83838)
    outcome.lines.append(f"set total -> {result.reason or 'ok'}")
    outcome.lines.append(str(cart.get("total")))
    outcome.lines.append(cart.serialize())
    return outcome


def run_validated_age() -> ScenarioOutcome:
    person = Record.create()
    person.attach_validated("age", 0, numeric_only)
    outcome = ScenarioOutcome(name="age", record=person)

    result = person.set("age", 26)
    outcome.lines.append(f"set age 26 -> {result.reason or 'ok'}")
    outcome.lines.append(str(person.get("age")))

    result = person.set("age", "chickenjoy")
    outcome.lines.append(f"set age 'chickenjoy' -> {result.reason or 'ok'}")
    outcome.lines.append(str(person.get("age")))
    return outcome


def run_selective_removal() -> ScenarioOutcome:
    record = Record.create({"p": 1, "r": 2}, removable=("r",))
    outcome = ScenarioOutcome(name="removal", record=record)

    for name in ("p", "r"):
        result = record.remove(name)
        outcome.lines.append(f"remove {name} -> {result.error or 'ok'}")
        try:
            outcome.lines.append(f"{name} = {record.get(name)}")
        except UnknownFieldError as exc:
            outcome.lines.append(f"{name}: {exc}")
    outcome.lines.append(record.serialize())
    return outcome


SCENARIOS: dict[str, Callable[[], ScenarioOutcome]] = {
    "cart": run_cart,
    "age": run_validated_age,
    "removal": run_selective_removal,
}
