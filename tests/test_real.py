"""Tests for numtower.scalars.real."""

import math
import threading

import numpy as np
import pytest

from numtower.scalars.base import random_generator, seed_random
from numtower.scalars.real import DBL, Float64Member


def _apply(name: str, x: float) -> float:
    b = Float64Member()
    getattr(DBL, name)(Float64Member(x), b)
    return float(b)


@pytest.mark.parametrize(
    ("name", "x"),
    [("log", -1.0), ("sqrt", -4.0), ("asin", 2.0), ("acos", -1.5), ("acosh", 0.5), ("atanh", 2.0), ("log1p", -2.0)],
)
def test_out_of_domain_is_nan(name: str, x: float) -> None:
    assert math.isnan(_apply(name, x))


@pytest.mark.parametrize(
    ("name", "x", "expected"),
    [
        ("exp", 1.0, math.e),
        ("expm1", 1e-10, math.expm1(1e-10)),
        ("log", math.e, 1.0),
        ("log1p", 1e-10, math.log1p(1e-10)),
        ("cbrt", -27.0, -3.0),
        ("tan", 0.5, math.tan(0.5)),
        ("acot", 2.0, math.atan(0.5)),
        ("asec", 2.0, math.acos(0.5)),
        ("acsch", 2.0, math.asinh(0.5)),
        ("coth", 0.5, 1.0 / math.tanh(0.5)),
        ("sinc", 0.5, math.sin(0.5) / 0.5),
        ("sinchpi", 0.5, math.sinh(math.pi / 2.0) / (math.pi / 2.0)),
    ],
)
def test_functions(name: str, x: float, expected: float) -> None:
    assert _apply(name, x) == pytest.approx(expected, rel=1e-12)


def test_divide_and_invert_by_zero_are_nan() -> None:
    c = Float64Member()
    DBL.divide(Float64Member(1.0), Float64Member(0.0), c)
    assert DBL.is_nan(c)
    DBL.invert(Float64Member(0.0), c)
    assert DBL.is_nan(c)


def test_power() -> None:
    b = Float64Member()
    DBL.power(3, Float64Member(2.0), b)
    assert float(b) == 8.0
    DBL.power(-2, Float64Member(2.0), b)
    assert float(b) == 0.25
    DBL.power(0, Float64Member(5.0), b)
    assert DBL.is_unity(b)
    DBL.power(0, Float64Member(0.0), b)
    assert DBL.is_nan(b)


def test_pow() -> None:
    c = Float64Member()
    DBL.pow(Float64Member(4.0), Float64Member(0.5), c)
    assert float(c) == 2.0
    DBL.pow(Float64Member(0.0), Float64Member(2.0), c)
    assert DBL.is_zero(c)
    DBL.pow(Float64Member(0.0), Float64Member(-1.0), c)
    assert DBL.is_nan(c)


def test_ordering() -> None:
    one, two = Float64Member(1.0), Float64Member(2.0)
    assert DBL.compare(one, two) == -1
    assert DBL.compare(two, one) == 1
    assert DBL.compare(one, Float64Member(1.0)) == 0
    assert DBL.is_less(one, two)
    assert DBL.is_less_equal(one, one)
    assert DBL.is_greater(two, one)
    assert DBL.is_greater_equal(two, two)
    assert one < two <= Float64Member(2.0)
    assert sorted([two, one]) == [one, two]


def test_compare_nan_raises() -> None:
    with pytest.raises(ValueError):
        DBL.compare(Float64Member(np.nan), Float64Member(1.0))


def test_min_max_abs_signum() -> None:
    c = Float64Member()
    DBL.min(Float64Member(-3.0), Float64Member(2.0), c)
    assert float(c) == -3.0
    DBL.max(Float64Member(-3.0), Float64Member(2.0), c)
    assert float(c) == 2.0
    DBL.abs(Float64Member(-3.0), c)
    assert float(c) == 3.0
    assert DBL.signum(Float64Member(-0.5)) == -1
    assert DBL.signum(Float64Member(0.0)) == 0


def test_within() -> None:
    assert DBL.within(Float64Member(0.1), Float64Member(1.0), Float64Member(1.05))
    assert not DBL.within(0.01, Float64Member(1.0), Float64Member(1.05))
    assert not DBL.within(1.0, Float64Member(np.nan), Float64Member(np.nan))
    with pytest.raises(ValueError):
        DBL.within(-1.0, Float64Member(1.0), Float64Member(1.0))


def test_constants() -> None:
    b = Float64Member()
    DBL.pi(b)
    assert float(b) == math.pi
    DBL.e(b)
    assert float(b) == math.e
    DBL.phi(b)
    assert float(b) == pytest.approx((1.0 + math.sqrt(5.0)) / 2.0)
    DBL.gamma(b)
    assert float(b) == pytest.approx(0.5772156649015329)
    with pytest.raises(ValueError):
        DBL.imaginary_unit(1, b)


def test_scale_by_two_and_one_half() -> None:
    b = Float64Member()
    DBL.scale_by_two(3, Float64Member(1.5), b)
    assert float(b) == 12.0
    DBL.scale_by_one_half(2, Float64Member(1.0), b)
    assert float(b) == 0.25
    with pytest.raises(ValueError):
        DBL.scale_by_two(-1, Float64Member(1.0), b)


def test_random_in_unit_interval_and_seeded() -> None:
    a = Float64Member()
    seed_random(7)
    first = []
    for _ in range(20):
        DBL.random(a)
        assert 0.0 <= float(a) < 1.0
        first.append(float(a))
    seed_random(7)
    second = []
    for _ in range(20):
        DBL.random(a)
        second.append(float(a))
    assert first == second


def test_random_generator_is_per_thread() -> None:
    generators = []
    thread = threading.Thread(target=lambda: generators.append(random_generator()))
    thread.start()
    thread.join()
    assert generators[0] is not random_generator()


def test_string_round_trip() -> None:
    a = Float64Member(0.1)
    assert str(a) == "0.1"
    assert Float64Member(str(a)) == a
    assert repr(a) == "Float64Member(0.1)"
    with pytest.raises(ValueError):
        Float64Member("[1,2]")


def test_ordering_and_extrema_with_nan() -> None:
    nan, one = Float64Member(np.nan), Float64Member(1.0)
    for name in ("is_less", "is_less_equal", "is_greater", "is_greater_equal"):
        assert not getattr(DBL, name)(nan, one)
        assert not getattr(DBL, name)(one, nan)
    c = Float64Member()
    DBL.min(nan, one, c)
    assert DBL.is_nan(c)
    DBL.max(one, nan, c)
    assert DBL.is_nan(c)


def test_component_access_checks_index() -> None:
    a = Float64Member(2.5)
    assert Float64Member.component_count() == 1
    a.set_component(0, 4.0)
    assert a.get_component(0) == 4.0
    with pytest.raises(ValueError, match="out of range"):
        a.get_component(1)
    with pytest.raises(ValueError, match="out of range"):
        a.set_component(1, 0.0)
    b = a.duplicate()
    b.set_component(0, 0.0)
    assert float(a) == 4.0
