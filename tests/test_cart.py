import json

import pytest

from guarded_record import ReadOnlyFieldError, RejectionPolicy
from guarded_record.application.cart import add_item, can_compute_total_cost, cart_total, make_cart


def test_total_follows_items():
    cart = make_cart()
    assert cart.get("total") == 0

    add_item(cart, unit_cost=500, qty=2)

    assert cart.get("total") == 1000


def test_direct_write_to_total_is_rejected():
    cart = make_cart()
    add_item(cart, unit_cost=500, qty=2)

    result = cart.set("total", 83838)

    assert not result.ok
    assert isinstance(result.error, ReadOnlyFieldError)
    assert cart.get("total") == 1000


def test_replacing_items_updates_total():
    cart = make_cart()
    add_item(cart, unit_cost=500, qty=2)

    cart.set("items", [{"unit_cost": 3, "qty": 4}, {"unit_cost": 1.5, "qty": 2}])

    assert cart.get("total") == 15


def test_serialize_includes_derived_total():
    cart = make_cart()
    add_item(cart, unit_cost=500, qty=2)

    assert json.loads(cart.serialize()) == {
        "items": [{"unit_cost": 500, "qty": 2}],
        "total": 1000,
    }


def test_total_capability_is_receiver_free():
    items = {"items": [{"unit_cost": 2, "qty": 3}]}
    get_total_cost = can_compute_total_cost(items).get_total_cost
    derive = cart_total

    assert get_total_cost() == 6
    assert derive(items) == 6


def test_strict_cart_raises_on_total_write():
    cart = make_cart(policy=RejectionPolicy.RAISE)

    with pytest.raises(ReadOnlyFieldError):
        cart.set("total", 1)
