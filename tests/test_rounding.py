"""Tests for numtower.rounding and the kernel round operations."""

import math

import pytest

from numtower.rounding import RoundMode, round_value
from numtower.scalars.complex import CDBL, ComplexFloat64Member
from numtower.scalars.real import Float64Member


@pytest.mark.parametrize(
    ("mode", "value", "expected"),
    [
        (RoundMode.NEAREST_EVEN, 2.5, 2.0),
        (RoundMode.NEAREST_EVEN, 3.5, 4.0),
        (RoundMode.NEAREST, 2.5, 3.0),
        (RoundMode.NEAREST, -2.5, -3.0),
        (RoundMode.NEAREST, 2.4, 2.0),
        (RoundMode.TOWARDS_ORIGIN, -2.7, -2.0),
        (RoundMode.TOWARDS_ORIGIN, 2.7, 2.0),
        (RoundMode.AWAY_FROM_ORIGIN, 2.1, 3.0),
        (RoundMode.AWAY_FROM_ORIGIN, -2.1, -3.0),
        (RoundMode.POSITIVE, -2.7, -2.0),
        (RoundMode.POSITIVE, 2.1, 3.0),
        (RoundMode.NEGATIVE, 2.7, 2.0),
        (RoundMode.NEGATIVE, -2.1, -3.0),
    ],
)
def test_round_to_integers(mode: RoundMode, value: float, expected: float) -> None:
    assert round_value(mode, 1.0, value) == expected


def test_round_to_step() -> None:
    assert round_value(RoundMode.NEAREST, 0.5, 1.3) == 1.5
    assert round_value(RoundMode.NEGATIVE, 0.25, 1.3) == 1.25
    assert round_value(RoundMode.NEAREST, 0.1, 0.26) == 0.3


def test_round_accepts_mode_names() -> None:
    assert round_value("nearest_even", 1.0, 0.5) == 0.0


def test_zero_result_keeps_sign() -> None:
    result = round_value(RoundMode.NEAREST, 1.0, -0.2)
    assert result == 0.0
    assert math.copysign(1.0, result) == -1.0


def test_non_finite_values_pass_through() -> None:
    assert math.isnan(round_value(RoundMode.NEAREST, 1.0, math.nan))
    assert round_value(RoundMode.NEAREST, 1.0, -math.inf) == -math.inf


def test_huge_values_are_already_integral() -> None:
    assert round_value(RoundMode.NEAREST, 1.0, 1e300) == 1e300


@pytest.mark.parametrize("delta", [0.0, -1.0, math.inf, math.nan])
def test_invalid_step(delta: float) -> None:
    with pytest.raises(ValueError):
        round_value(RoundMode.NEAREST, delta, 1.0)


def test_kernel_rounds_every_component() -> None:
    b = ComplexFloat64Member()
    CDBL.round(RoundMode.NEAREST, Float64Member(1.0), ComplexFloat64Member(2.5, -2.5), b)
    assert b == ComplexFloat64Member(3.0, -3.0)
    CDBL.round(RoundMode.NEAREST_EVEN, 1.0, ComplexFloat64Member(2.5, -2.5), b)
    assert b == ComplexFloat64Member(2.0, -2.0)
