from decimal import Decimal

from guarded_record.domain.validators import all_of, non_negative, numeric_only, one_of


def test_numeric_only():
    assert numeric_only(26, {}).accepted
    assert numeric_only(2.5, {}).accepted
    assert numeric_only(Decimal("1.1"), {}).accepted
    assert not numeric_only("26", {}).accepted
    assert not numeric_only(True, {}).accepted
    assert not numeric_only(float("nan"), {}).accepted


def test_non_negative():
    assert non_negative(0, {}).accepted
    verdict = non_negative(-1, {})
    assert not verdict.accepted
    assert verdict.reason == "-1 is negative"


def test_one_of_and_all_of():
    size = one_of(["S", "M", "L"])
    assert size("M", {}).accepted
    assert not size("XL", {}).accepted

    bounded = all_of(non_negative, lambda value, snapshot: value <= snapshot["max"])
    assert bounded(3, {"max": 5}).accepted
    assert bounded(7, {"max": 5}).reason == "rejected by validator"
    assert bounded("x", {"max": 5}).reason == "'x' is not a number"


def test_numeric_only_rejects_decimal_nans():
    assert numeric_only(Decimal("sNaN"), {}).reason == "NaN is not a number"
    assert not numeric_only(Decimal("NaN"), {}).accepted
    assert numeric_only(10**400, {}).accepted
