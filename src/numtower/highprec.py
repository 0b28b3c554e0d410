"""Scaling of float components by high-precision decimal and rational factors.

Each component is converted exactly to ``Decimal``, scaled in a context with
``Settings.high_precision_digits`` significant digits and rounded back once.
"""

from __future__ import annotations

import decimal
from decimal import Decimal
from fractions import Fraction

import numpy as np

from numtower.config import get_settings


def high_precision_context() -> decimal.Context:
    """Context with the configured precision; nothing traps, so NaN and infinity propagate."""
    return decimal.Context(
        prec=get_settings().high_precision_digits,
        rounding=decimal.ROUND_HALF_EVEN,
        traps=[],
    )


def to_decimal(value: float | int | str | Decimal | Fraction) -> Decimal:
    """Exact decimal form of a factor; fractions are divided out in the high-precision context."""
    match value:
        case Decimal():
            return value
        case Fraction():
            ctx = high_precision_context()
            return ctx.divide(Decimal(value.numerator), Decimal(value.denominator))
        case float() | np.floating():
            return Decimal(repr(float(value)))
        case int() | str():
            return Decimal(value)
        case _:
            error_message = f"Cannot convert {type(value).__name__} to Decimal."
            raise ValueError(error_message)


def scale_by_high_prec(factor: Decimal, value: float) -> float:
    """Return ``factor * value`` rounded once to float."""
    ctx = high_precision_context()
    return float(ctx.multiply(to_decimal(factor), Decimal(repr(float(value)))))


def scale_by_rational(factor: Fraction, value: float) -> float:
    """Return ``value * numerator / denominator`` rounded once to float."""
    ctx = high_precision_context()
    scaled = ctx.multiply(Decimal(repr(float(value))), Decimal(factor.numerator))
    return float(ctx.divide(scaled, Decimal(factor.denominator)))


def scale_components_by_high_prec(factor: Decimal, data: np.ndarray) -> np.ndarray:
    """Apply :func:`scale_by_high_prec` to every entry of a float array."""
    factor = to_decimal(factor)
    return np.array([scale_by_high_prec(factor, x) for x in data.ravel()], dtype=np.float64).reshape(data.shape)


def scale_components_by_rational(factor: Fraction, data: np.ndarray) -> np.ndarray:
    """Apply :func:`scale_by_rational` to every entry of a float array."""
    factor = Fraction(factor)
    return np.array([scale_by_rational(factor, x) for x in data.ravel()], dtype=np.float64).reshape(data.shape)
