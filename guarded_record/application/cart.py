"""Shopping cart built on a guarded record.

The cart's ``total`` is a computed field: it is derived from ``items`` on
every read and cannot be assigned.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from guarded_record.config import RejectionPolicy
from guarded_record.domain.record import Record


@dataclass(frozen=True)
class TotalCostCapability:
    """Behavior composed onto any mapping that carries ``items``."""

    owner: Mapping[str, Any]

    def get_total_cost(self) -> int | float:
        total = 0
        for item in self.owner["items"]:
            total += item["unit_cost"] * item["qty"]
        return total


def can_compute_total_cost(owner: Mapping[str, Any]) -> TotalCostCapability:
    return TotalCostCapability(owner=owner)


def cart_total(view: Mapping[str, Any]) -> int | float:
    return can_compute_total_cost(view).get_total_cost()


def make_cart(policy: RejectionPolicy | None = None) -> Record:
    cart = Record.create({"items": []}, policy=policy)
    cart.attach_computed("total", cart_total)
    return cart


def add_item(cart: Record, unit_cost: int | float, qty: int) -> None:
    cart.get("items").append({"unit_cost": unit_cost, "qty": qty})
