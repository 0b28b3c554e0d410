"""Rounding of float components to integral multiples of a step."""

from __future__ import annotations

import decimal
import enum
import math
from decimal import Decimal

# Beyond this quotient magnitude every float is already an integral multiple.
_EXACT_QUOTIENT = 2.0**53


class RoundMode(enum.StrEnum):
    """Rounding directions applied independently to each component."""

    TOWARDS_ORIGIN = "towards_origin"
    AWAY_FROM_ORIGIN = "away_from_origin"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEAREST = "nearest"
    NEAREST_EVEN = "nearest_even"


_DECIMAL_ROUNDING = {
    RoundMode.TOWARDS_ORIGIN: decimal.ROUND_DOWN,
    RoundMode.AWAY_FROM_ORIGIN: decimal.ROUND_UP,
    RoundMode.POSITIVE: decimal.ROUND_CEILING,
    RoundMode.NEGATIVE: decimal.ROUND_FLOOR,
    RoundMode.NEAREST: decimal.ROUND_HALF_UP,
    RoundMode.NEAREST_EVEN: decimal.ROUND_HALF_EVEN,
}


def round_value(mode: RoundMode, delta: float, value: float) -> float:
    """Round ``value`` to ``k * delta`` for an integer ``k`` chosen by ``mode``.

    The quotient is formed in decimal arithmetic so ties such as 2.5 are seen
    exactly. NaN and infinite values are returned unchanged.

    Args:
        mode (RoundMode): Rounding direction.
        delta (float): Positive step size.
        value (float): Value to round.

    Returns:
        float: The rounded value.
    """
    mode = RoundMode(mode)
    if not delta > 0 or math.isinf(delta):
        error_message = f"Rounding step must be positive and finite; got {delta}."
        raise ValueError(error_message)
    if not math.isfinite(value):
        return value
    if abs(value / delta) >= _EXACT_QUOTIENT:
        return value

    step = Decimal(repr(float(delta)))
    with decimal.localcontext() as ctx:
        ctx.prec = 60
        quotient = Decimal(repr(float(value))) / step
        multiple = quotient.quantize(Decimal(1), rounding=_DECIMAL_ROUNDING[mode])
        result = float(multiple * step)
    # Keep the sign of zero results consistent with the input.
    if result == 0.0:
        return math.copysign(0.0, value)
    return result
