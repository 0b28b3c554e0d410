"""Fixed-length Taylor series evaluated in a ring with unity.

The series are true ring functions (powers of ``a``), not element-wise maps.
``algebra`` must provide ``construct(a)`` (a copy), ``unity``, ``add``,
``subtract``, ``multiply`` (output distinct from inputs), ``scale_by_double``,
``invert`` and ``assign``.
"""

from __future__ import annotations

import math
from typing import Any

from numtower.capabilities import Unital


def exp(algebra: Unital, terms: int, a: Any, b: Any) -> None:
    """b = sum of a^k / k! for k < terms."""
    result, term, scratch = algebra.construct(a), algebra.construct(a), algebra.construct(a)
    algebra.unity(result)
    algebra.unity(term)
    for k in range(1, terms):
        algebra.multiply(term, a, scratch)
        algebra.scale_by_double(1.0 / k, scratch, term)
        algebra.add(result, term, result)
    algebra.assign(result, b)


def log(algebra: Unital, terms: int, a: Any, b: Any) -> None:
    """b = sum of (-1)^(k+1) (a - 1)^k / k for 1 <= k <= terms; converges for |a - 1| < 1."""
    x, power, term, scratch, result = (algebra.construct(a) for _ in range(5))
    algebra.unity(scratch)
    algebra.subtract(a, scratch, x)
    algebra.assign(x, power)
    algebra.assign(x, result)
    for k in range(2, terms + 1):
        algebra.multiply(power, x, scratch)
        algebra.assign(scratch, power)
        algebra.scale_by_double((-1.0) ** (k + 1) / k, power, term)
        algebra.add(result, term, result)
    algebra.assign(result, b)


def _series(algebra: Unital, terms: int, a: Any, b: Any, start_with_a: bool, first_factorial: int, alternating: bool) -> None:
    """Sum of terms whose ratio is +-a^2 / ((m + 2k - 1)(m + 2k)), m = ``first_factorial``."""
    square, term, scratch, result = (algebra.construct(a) for _ in range(4))
    algebra.multiply(a, a, square)
    if not start_with_a:
        algebra.unity(term)
    sign = -1.0 if alternating else 1.0
    algebra.assign(term, result)
    for k in range(1, terms):
        denominator = (first_factorial + 2 * k - 1) * (first_factorial + 2 * k)
        algebra.multiply(term, square, scratch)
        algebra.scale_by_double(sign / denominator, scratch, term)
        algebra.add(result, term, result)
    algebra.assign(result, b)


def sin(algebra: Unital, terms: int, a: Any, b: Any) -> None:
    _series(algebra, terms, a, b, start_with_a=True, first_factorial=1, alternating=True)


def cos(algebra: Unital, terms: int, a: Any, b: Any) -> None:
    _series(algebra, terms, a, b, start_with_a=False, first_factorial=0, alternating=True)


def sinh(algebra: Unital, terms: int, a: Any, b: Any) -> None:
    _series(algebra, terms, a, b, start_with_a=True, first_factorial=1, alternating=False)


def cosh(algebra: Unital, terms: int, a: Any, b: Any) -> None:
    _series(algebra, terms, a, b, start_with_a=False, first_factorial=0, alternating=False)


def sinc(algebra: Unital, terms: int, a: Any, b: Any) -> None:
    """sin(a)/a as the even series sum of (-1)^k a^(2k) / (2k+1)!; unity at zero."""
    _series(algebra, terms, a, b, start_with_a=False, first_factorial=1, alternating=True)


def sinch(algebra: Unital, terms: int, a: Any, b: Any) -> None:
    """sinh(a)/a as the even series sum of a^(2k) / (2k+1)!."""
    _series(algebra, terms, a, b, start_with_a=False, first_factorial=1, alternating=False)


def scaled_by_pi(algebra: Unital, a: Any) -> Any:
    scaled = algebra.construct(a)
    algebra.scale_by_double(math.pi, a, scaled)
    return scaled


def ratio(algebra: Unital, numerator: Any, denominator: Any, b: Any) -> None:
    """b = numerator * inv(denominator); both are series in the same ``a`` and so commute."""
    inverse, result = algebra.construct(denominator), algebra.construct(numerator)
    algebra.invert(denominator, inverse)
    algebra.multiply(numerator, inverse, result)
    algebra.assign(result, b)
