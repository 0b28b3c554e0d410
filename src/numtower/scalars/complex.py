"""Complex numbers at float64 precision."""

from __future__ import annotations

import math

import numpy as np

from numtower.scalars.base import COMPLEX_INVERSES, HypercomplexAlgebra, ScalarMember, component_property


class ComplexFloat64Member(ScalarMember):
    """Complex value (r, i)."""

    __slots__ = []

    COMPONENTS = ("r", "i")

    r = component_property(0, "real")
    i = component_property(1, "imaginary")

    def __complex__(self) -> complex:
        return complex(self._data[0], self._data[1])


def _constant(r: float, i: float) -> ComplexFloat64Member:
    member = ComplexFloat64Member(r, i)
    member._data.flags.writeable = False
    return member


ONE_HALF = _constant(0.5, 0.0)
ONE_THIRD = _constant(1.0 / 3.0, 0.0)
I = _constant(0.0, 1.0)
MINUS_I = _constant(0.0, -1.0)
I_OVER_TWO = _constant(0.0, 0.5)
TWO_I = _constant(0.0, 2.0)


def _normalized(data: np.ndarray) -> tuple[float, float, float]:
    """Largest magnitude and the components divided by it."""
    scale = float(np.max(np.abs(data)))
    if scale == 0.0 or not math.isfinite(scale):
        return scale, float(data[0]), float(data[1])
    return scale, float(data[0]) / scale, float(data[1]) / scale


class ComplexFloat64Algebra(HypercomplexAlgebra):
    """Field of float64 complex numbers.

    Products and quotients normalize each operand by its largest component so
    that intermediate sums of squares neither overflow nor underflow.
    """

    member_class = ComplexFloat64Member

    def _product(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return np.array([x[0] * y[0] - x[1] * y[1], x[0] * y[1] + x[1] * y[0]], dtype=np.float64)

    def i(self, a: ComplexFloat64Member) -> None:
        self.imaginary_unit(1, a)

    def multiply(self, a: ComplexFloat64Member, b: ComplexFloat64Member, c: ComplexFloat64Member) -> None:
        """c = a * b; NaN and infinite components reach the product even against zero."""
        sa, ar, ai = _normalized(a._data)
        sb, br, bi = _normalized(b._data)
        with np.errstate(over="ignore", invalid="ignore"):
            if not (math.isfinite(sa) and math.isfinite(sb)):
                self._store(c, self._product(a._data, b._data))
                return
            if sa == 0.0 or sb == 0.0:
                self.zero(c)
                return
            scale = np.float64(sa) * np.float64(sb)
            self._store(c, [(ar * br - ai * bi) * scale, (ar * bi + ai * br) * scale])

    def divide(self, a: ComplexFloat64Member, b: ComplexFloat64Member, c: ComplexFloat64Member) -> None:
        """c = a / b; a zero divisor gives NaN."""
        sb, br, bi = _normalized(b._data)
        if sb == 0.0:
            self.nan(c)
            return
        sa, ar, ai = _normalized(a._data)
        with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
            if not (math.isfinite(sa) and math.isfinite(sb)):
                quotient = np.complex128(complex(*a._data)) / np.complex128(complex(*b._data))
                self._store(c, [quotient.real, quotient.imag])
                return
            if sa == 0.0:
                self.zero(c)
                return
            denominator = br * br + bi * bi
            scale = np.float64(sa) / np.float64(sb)
            self._store(c, [(ar * br + ai * bi) / denominator * scale, (ai * br - ar * bi) / denominator * scale])

    def invert(self, a: ComplexFloat64Member, b: ComplexFloat64Member) -> None:
        one = ComplexFloat64Member(1.0, 0.0)
        self.divide(one, a, b)

    def get_argument(self, a: ComplexFloat64Member) -> float:
        """Principal argument in (-pi, pi]; NaN for zero."""
        x, y = float(a._data[0]), float(a._data[1])
        if x == 0.0:
            if y > 0.0:
                return math.pi / 2.0
            if y < 0.0:
                return -math.pi / 2.0
            return math.nan
        if y == 0.0:
            if x > 0.0:
                return 0.0
            if x < 0.0:
                return math.pi
            return math.nan
        return math.atan2(y, x)

    def power(self, n: int, a: ComplexFloat64Member, b: ComplexFloat64Member) -> None:
        """Polar form |a|^n (cos n theta, sin n theta)."""
        if self.is_zero(a):
            if n > 0:
                self.zero(b)
            else:
                self.nan(b)
            return
        if n == 0:
            self.unity(b)
            return
        angle = n * self.get_argument(a)
        with np.errstate(over="ignore", under="ignore"):
            modulus = float(np.power(np.float64(np.hypot(a._data[0], a._data[1])), n))
            self._store(b, [modulus * np.cos(angle), modulus * np.sin(angle)])

    def log(self, a: ComplexFloat64Member, b: ComplexFloat64Member) -> None:
        """(ln |a|, arg a)."""
        with np.errstate(divide="ignore"):
            modulus = float(np.log(np.hypot(a._data[0], a._data[1])))
        self._store(b, [modulus, self.get_argument(a)])

    def cbrt(self, a: ComplexFloat64Member, b: ComplexFloat64Member) -> None:
        self.pow(a, ONE_THIRD, b)

    def sqrt(self, a: ComplexFloat64Member, b: ComplexFloat64Member) -> None:
        self.pow(a, ONE_HALF, b)

    def _exponential_pair(self, z: ComplexFloat64Member) -> tuple[ComplexFloat64Member, ComplexFloat64Member]:
        """exp(z) and exp(-z)."""
        positive, negative = ComplexFloat64Member(), ComplexFloat64Member()
        self.exp(z, positive)
        self.negate(z, negative)
        self.exp(negative, negative)
        return positive, negative

    def sin(self, a: ComplexFloat64Member, b: ComplexFloat64Member) -> None:
        """(e^{iz} - e^{-iz}) / 2i."""
        iz = ComplexFloat64Member()
        self.multiply(I, a, iz)
        positive, negative = self._exponential_pair(iz)
        self.subtract(positive, negative, positive)
        self.divide(positive, TWO_I, b)

    def cos(self, a: ComplexFloat64Member, b: ComplexFloat64Member) -> None:
        """(e^{iz} + e^{-iz}) / 2."""
        iz = ComplexFloat64Member()
        self.multiply(I, a, iz)
        positive, negative = self._exponential_pair(iz)
        self.add(positive, negative, positive)
        self.scale_by_double(0.5, positive, b)

    def sinh(self, a: ComplexFloat64Member, b: ComplexFloat64Member) -> None:
        """(e^z - e^{-z}) / 2."""
        positive, negative = self._exponential_pair(a)
        self.subtract(positive, negative, positive)
        self.scale_by_double(0.5, positive, b)

    def cosh(self, a: ComplexFloat64Member, b: ComplexFloat64Member) -> None:
        """(e^z + e^{-z}) / 2."""
        positive, negative = self._exponential_pair(a)
        self.add(positive, negative, positive)
        self.scale_by_double(0.5, positive, b)

    def _inverse(self, name: str, a: ComplexFloat64Member, b: ComplexFloat64Member) -> None:
        with np.errstate(all="ignore"):
            w = complex(COMPLEX_INVERSES[name](np.complex128(complex(a._data[0], a._data[1]))))
        self._store(b, [w.real, w.imag])


CDBL = ComplexFloat64Algebra()
ComplexFloat64Member.algebra = CDBL
