"""Real numbers at float64 precision."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from numtower.scalars.base import HypercomplexAlgebra, ScalarMember, component_property


class Float64Member(ScalarMember):
    """A single float64 value."""

    __slots__ = []

    COMPONENTS = ("r",)

    r = component_property(0, "real")

    def __float__(self) -> float:
        return float(self._data[0])

    def __lt__(self, other: Float64Member) -> bool:
        return float(self) < float(other)

    def __le__(self, other: Float64Member) -> bool:
        return float(self) <= float(other)


def _reciprocal(x: float) -> float:
    return np.inf if x == 0.0 else 1.0 / x


_REAL_INVERSES: dict[str, Callable[[float], float]] = {
    "asin": np.arcsin,
    "acos": np.arccos,
    "atan": np.arctan,
    "acsc": lambda x: np.arcsin(_reciprocal(x)),
    "asec": lambda x: np.arccos(_reciprocal(x)),
    "acot": lambda x: np.arctan(_reciprocal(x)),
    "asinh": np.arcsinh,
    "acosh": np.arccosh,
    "atanh": np.arctanh,
    "acsch": lambda x: np.arcsinh(_reciprocal(x)),
    "asech": lambda x: np.arccosh(_reciprocal(x)),
    "acoth": lambda x: np.arctanh(_reciprocal(x)),
}


class Float64Algebra(HypercomplexAlgebra):
    """Ordered field of float64 reals.

    Functions outside their real domain (``log(-1)``, ``asin(2)``) give NaN.
    """

    member_class = Float64Member

    def _apply(self, function: Callable[[float], float], a: Float64Member, b: Float64Member) -> None:
        with np.errstate(all="ignore"):
            b._data[0] = function(a._data[0])

    def _product(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return x * y

    def multiply(self, a: Float64Member, b: Float64Member, c: Float64Member) -> None:
        with np.errstate(over="ignore", invalid="ignore"):
            np.multiply(a._data, b._data, out=c._data)

    def divide(self, a: Float64Member, b: Float64Member, c: Float64Member) -> None:
        if b._data[0] == 0.0:
            self.nan(c)
            return
        with np.errstate(over="ignore", invalid="ignore"):
            np.divide(a._data, b._data, out=c._data)

    def invert(self, a: Float64Member, b: Float64Member) -> None:
        if a._data[0] == 0.0:
            self.nan(b)
            return
        with np.errstate(over="ignore"):
            np.divide(1.0, a._data, out=b._data)

    def norm(self, a: Float64Member, b: Float64Member) -> None:
        b._data[0] = abs(a._data[0])

    def power(self, n: int, a: Float64Member, b: Float64Member) -> None:
        x = a._data[0]
        if x == 0.0 and n <= 0:
            self.nan(b)
            return
        self._apply(lambda value: np.power(value, float(n)), a, b)

    def pow(self, a: Float64Member, b: Float64Member, c: Float64Member) -> None:
        if a._data[0] == 0.0:
            if b._data[0] > 0.0:
                self.zero(c)
            else:
                self.nan(c)
            return
        with np.errstate(all="ignore"):
            c._data[0] = np.power(a._data[0], b._data[0])

    def exp(self, a: Float64Member, b: Float64Member) -> None:
        self._apply(np.exp, a, b)

    def expm1(self, a: Float64Member, b: Float64Member) -> None:
        self._apply(np.expm1, a, b)

    def log(self, a: Float64Member, b: Float64Member) -> None:
        self._apply(np.log, a, b)

    def log1p(self, a: Float64Member, b: Float64Member) -> None:
        self._apply(np.log1p, a, b)

    def sqrt(self, a: Float64Member, b: Float64Member) -> None:
        self._apply(np.sqrt, a, b)

    def cbrt(self, a: Float64Member, b: Float64Member) -> None:
        self._apply(np.cbrt, a, b)

    def sin(self, a: Float64Member, b: Float64Member) -> None:
        self._apply(np.sin, a, b)

    def cos(self, a: Float64Member, b: Float64Member) -> None:
        self._apply(np.cos, a, b)

    def tan(self, a: Float64Member, b: Float64Member) -> None:
        self._apply(np.tan, a, b)

    def sinh(self, a: Float64Member, b: Float64Member) -> None:
        self._apply(np.sinh, a, b)

    def cosh(self, a: Float64Member, b: Float64Member) -> None:
        self._apply(np.cosh, a, b)

    def tanh(self, a: Float64Member, b: Float64Member) -> None:
        self._apply(np.tanh, a, b)

    def _inverse(self, name: str, a: Float64Member, b: Float64Member) -> None:
        self._apply(_REAL_INVERSES[name], a, b)

    # Ordering

    def compare(self, a: Float64Member, b: Float64Member) -> int:
        """-1, 0 or 1; NaN compares as unordered and raises."""
        x, y = a._data[0], b._data[0]
        if np.isnan(x) or np.isnan(y):
            error_message = "Cannot order NaN values."
            raise ValueError(error_message)
        return int(x > y) - int(x < y)

    def is_less(self, a: Float64Member, b: Float64Member) -> bool:
        """True when a < b; false when either is NaN."""
        return bool(a._data[0] < b._data[0])

    def is_less_equal(self, a: Float64Member, b: Float64Member) -> bool:
        """True when a <= b; false when either is NaN."""
        return bool(a._data[0] <= b._data[0])

    def is_greater(self, a: Float64Member, b: Float64Member) -> bool:
        """True when a > b; false when either is NaN."""
        return bool(a._data[0] > b._data[0])

    def is_greater_equal(self, a: Float64Member, b: Float64Member) -> bool:
        """True when a >= b; false when either is NaN."""
        return bool(a._data[0] >= b._data[0])

    def min(self, a: Float64Member, b: Float64Member, c: Float64Member) -> None:
        """c = the smaller of a and b; NaN if either is NaN."""
        c._data[0] = np.minimum(a._data[0], b._data[0])

    def max(self, a: Float64Member, b: Float64Member, c: Float64Member) -> None:
        """c = the larger of a and b; NaN if either is NaN."""
        c._data[0] = np.maximum(a._data[0], b._data[0])

    def abs(self, a: Float64Member, b: Float64Member) -> None:
        """b = |a|."""
        b._data[0] = abs(a._data[0])

    def signum(self, a: Float64Member) -> int:
        """-1, 0 or 1 by the sign of a."""
        return int(np.sign(a._data[0]))


DBL = Float64Algebra()
Float64Member.algebra = DBL
