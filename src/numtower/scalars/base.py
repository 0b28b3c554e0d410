"""Shared machinery for scalar members and their hypercomplex algebra kernels.

A scalar member is a fixed-length float64 component array. Kernels are
stateless: every operation reads its inputs and writes into caller-owned
output members, so outputs may alias inputs.
"""

from __future__ import annotations

import math
import threading
from collections.abc import Callable
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any, ClassVar

import numpy as np

from numtower import highprec, literals
from numtower.algorithm import power as power_algorithm
from numtower.rounding import RoundMode, round_value

if TYPE_CHECKING:
    from numtower.scalars.real import Float64Member

GAMMA = 0.57721566490153286060
PHI = 1.61803398874989484820

_thread_state = threading.local()


def random_generator() -> np.random.Generator:
    """Generator owned by the calling thread, created on first use."""
    rng = getattr(_thread_state, "rng", None)
    if rng is None:
        rng = np.random.default_rng()
        _thread_state.rng = rng
    return rng


def seed_random(seed: int | None) -> None:
    """Reseed the calling thread's generator."""
    _thread_state.rng = np.random.default_rng(seed)


def max_normalized_norm(data: np.ndarray) -> float:
    """Euclidean norm computed after dividing by the largest magnitude.

    Squares of the normalized components lie in [0, 1], so neither overflow nor
    underflow occurs for components near the float64 limits.
    """
    if data.size == 0:
        return 0.0
    scale = float(np.max(np.abs(data)))
    if scale == 0.0 or not math.isfinite(scale):
        return scale
    scaled = data / scale
    return scale * math.sqrt(float(np.dot(scaled, scaled)))


def safe_sinc(x: float) -> float:
    """sin(x)/x using its Taylor expansion near zero."""
    x2 = x * x
    if x2 < 1e-8:
        return 1.0 - x2 / 6.0 + (x2 * x2) / 120.0
    with np.errstate(invalid="ignore"):
        return float(np.sin(x) / x)


def safe_sinhc(x: float) -> float:
    """sinh(x)/x using its Taylor expansion near zero."""
    x2 = x * x
    if x2 < 1e-8:
        return 1.0 + x2 / 6.0 + (x2 * x2) / 120.0
    with np.errstate(over="ignore"):
        return float(np.sinh(x) / x)


def real_value(value: Any) -> float:
    """Accept a Float64Member or a plain number where a real parameter is expected."""
    if isinstance(value, ScalarMember):
        if value.component_count() != 1:
            error_message = f"Expected a real value; got {type(value).__name__}."
            raise ValueError(error_message)
        return float(value._data[0])
    return float(value)


def _scale_unreal(v: np.ndarray, factor: float) -> np.ndarray:
    """v * factor, keeping exact zeros where v is zero (avoids inf * 0)."""
    with np.errstate(invalid="ignore", over="ignore"):
        return np.where(v == 0.0, 0.0, v * factor)


def component_property(index: int, name: str) -> property:
    def getter(self: ScalarMember) -> float:
        return float(self._data[index])

    def setter(self: ScalarMember, value: float) -> None:
        self._data[index] = value

    return property(getter, setter, doc=f"The {name} component.")


class ScalarMember:
    """Packed float64 components of one scalar value."""

    __slots__ = ["_data"]

    COMPONENTS: ClassVar[tuple[str, ...]] = ("r",)
    algebra: ClassVar[HypercomplexAlgebra]

    def __init__(self, *values: Any) -> None:
        """Zero, explicit components, a copy of another member, or a literal string."""
        self._data = np.zeros(len(self.COMPONENTS), dtype=np.float64)
        if len(values) == 1 and isinstance(values[0], str):
            literal = literals.parse(values[0])
            if literal.rank != 0:
                error_message = f"Expected a scalar literal; got rank {literal.rank}: {values[0]!r}"
                raise ValueError(error_message)
            self._data[:] = literals.element_components(literal.values[0], len(self.COMPONENTS))
        elif len(values) == 1 and isinstance(values[0], ScalarMember):
            self.set(values[0])
        elif values:
            if len(values) > len(self.COMPONENTS):
                error_message = f"{type(self).__name__} takes at most {len(self.COMPONENTS)} components; got {len(values)}."
                raise ValueError(error_message)
            self._data[: len(values)] = [float(x) for x in values]

    @classmethod
    def from_components(cls, data: np.ndarray) -> ScalarMember:
        """Build a member from a component array of the right length."""
        data = np.asarray(data, dtype=np.float64).ravel()
        if data.size != len(cls.COMPONENTS):
            error_message = f"{cls.__name__} needs {len(cls.COMPONENTS)} components; got {data.size}."
            raise ValueError(error_message)
        member = cls()
        member._data[:] = data
        return member

    @classmethod
    def component_count(cls) -> int:
        """Number of float64 components in this kind."""
        return len(cls.COMPONENTS)

    def components(self) -> np.ndarray:
        """Copy of the component array."""
        return self._data.copy()

    def get_component(self, index: int) -> float:
        """Component at ``index``; an index past this kind's components is an error."""
        if not 0 <= index < self._data.size:
            error_message = f"Component index {index} out of range for {type(self).__name__}."
            raise ValueError(error_message)
        return float(self._data[index])

    def set_component(self, index: int, value: float) -> None:
        """Overwrite the component at ``index``."""
        if not 0 <= index < self._data.size:
            error_message = f"Component index {index} out of range for {type(self).__name__}."
            raise ValueError(error_message)
        self._data[index] = value

    def get_component_safe(self, index: int) -> float:
        """Component value, or 0.0 for an index past this kind's components."""
        if index < 0:
            error_message = f"Negative component index {index}."
            raise ValueError(error_message)
        return float(self._data[index]) if index < self._data.size else 0.0

    def set_component_safe(self, index: int, value: float) -> None:
        """Set a component; writing zero past the end is a no-op, anything else is an error."""
        if 0 <= index < self._data.size:
            self._data[index] = value
        elif index < 0 or value != 0.0:
            error_message = f"Cannot store {value} in component {index} of {type(self).__name__}."
            raise ValueError(error_message)

    def set(self, other: ScalarMember) -> None:
        """Deep copy ``other`` into this member, converting between kinds when exact."""
        if type(other) is type(self):
            np.copyto(self._data, other._data)
            return
        dropped = other._data[self._data.size :]
        if np.any(dropped != 0.0):
            error_message = f"Cannot convert {other!r} to {type(self).__name__} without losing components."
            raise ValueError(error_message)
        self._data.fill(0.0)
        count = min(self._data.size, other._data.size)
        self._data[:count] = other._data[:count]

    def get(self, other: ScalarMember) -> None:
        """Deep copy this member into ``other``."""
        other.set(self)

    def duplicate(self) -> ScalarMember:
        """New member with the same components."""
        return type(self).from_components(self._data)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self._data.tolist())))

    def __str__(self) -> str:
        return literals.format_value(self._data)

    def __repr__(self) -> str:
        args = ", ".join(repr(float(x)) for x in self._data)
        return f"{type(self).__name__}({args})"

    def _binary(self, other: Any, operation: str) -> ScalarMember:
        out = type(self)()
        getattr(self.algebra, operation)(self, other, out)
        return out

    def __add__(self, other: Any) -> ScalarMember:
        if type(other) is not type(self):
            return NotImplemented
        return self._binary(other, "add")

    def __sub__(self, other: Any) -> ScalarMember:
        if type(other) is not type(self):
            return NotImplemented
        return self._binary(other, "subtract")

    def __mul__(self, other: Any) -> ScalarMember:
        if isinstance(other, (float, int, np.number)):
            out = type(self)()
            self.algebra.scale_by_double(float(other), self, out)
            return out
        if type(other) is not type(self):
            return NotImplemented
        return self._binary(other, "multiply")

    def __rmul__(self, other: Any) -> ScalarMember:
        if isinstance(other, (float, int, np.number)):
            return self * other
        return NotImplemented

    def __truediv__(self, other: Any) -> ScalarMember:
        if isinstance(other, (float, int, np.number)):
            out = type(self)()
            with np.errstate(divide="ignore", invalid="ignore"):
                out._data[:] = self._data / float(other)
            return out
        if type(other) is not type(self):
            return NotImplemented
        return self._binary(other, "divide")

    def __neg__(self) -> ScalarMember:
        out = type(self)()
        self.algebra.negate(self, out)
        return out

    def __abs__(self) -> float:
        return max_normalized_norm(self._data)


class HypercomplexAlgebra:
    """Operation contract shared by the float64 real, complex, quaternion and octonion kernels.

    Subclasses supply the member class and the basis multiplication. Every
    other operation is written in terms of the real part ``r`` and the unreal
    part ``v`` so that it reduces to the real formula when ``v`` is zero.
    """

    member_class: ClassVar[type[ScalarMember]] = ScalarMember

    def __init__(self) -> None:
        count = self.member_class.component_count()
        self._conj_mask = np.array([1.0] + [-1.0] * (count - 1), dtype=np.float64)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def component_count(self) -> int:
        """Number of float64 components in this kind."""
        return self.member_class.component_count()

    def construct(self, *values: Any) -> ScalarMember:
        """New member: zero, from components, a copy, or parsed from a literal."""
        return self.member_class(*values)

    def _product(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        """Basis multiplication table of the kind."""
        raise NotImplementedError

    @staticmethod
    def _store(out: ScalarMember, values: np.ndarray | list[float]) -> None:
        out._data[:] = values

    # Constants and fills

    def zero(self, a: ScalarMember) -> None:
        a._data.fill(0.0)

    def unity(self, a: ScalarMember) -> None:
        a._data.fill(0.0)
        a._data[0] = 1.0

    def _real_constant(self, value: float, a: ScalarMember) -> None:
        a._data.fill(0.0)
        a._data[0] = value

    def pi(self, a: ScalarMember) -> None:
        self._real_constant(math.pi, a)

    def e(self, a: ScalarMember) -> None:
        self._real_constant(math.e, a)

    def gamma(self, a: ScalarMember) -> None:
        self._real_constant(GAMMA, a)

    def phi(self, a: ScalarMember) -> None:
        self._real_constant(PHI, a)

    def imaginary_unit(self, index: int, a: ScalarMember) -> None:
        """Fill ``a`` with the basis unit at component ``index`` (1 for the first imaginary unit)."""
        if not 1 <= index < self.component_count():
            error_message = f"No imaginary unit {index} in {self.member_class.__name__}."
            raise ValueError(error_message)
        a._data.fill(0.0)
        a._data[index] = 1.0

    def nan(self, a: ScalarMember) -> None:
        a._data.fill(np.nan)

    def infinite(self, a: ScalarMember) -> None:
        a._data.fill(np.inf)

    def random(self, a: ScalarMember) -> None:
        """Each component drawn independently from uniform [0, 1)."""
        a._data[:] = random_generator().random(a._data.size)

    # Predicates

    def is_zero(self, a: ScalarMember) -> bool:
        return not np.any(a._data)

    def is_unity(self, a: ScalarMember) -> bool:
        return bool(a._data[0] == 1.0 and not np.any(a._data[1:]))

    def is_nan(self, a: ScalarMember) -> bool:
        return bool(np.any(np.isnan(a._data)))

    def is_infinite(self, a: ScalarMember) -> bool:
        return not self.is_nan(a) and bool(np.any(np.isinf(a._data)))

    def is_equal(self, a: ScalarMember, b: ScalarMember) -> bool:
        return bool(np.array_equal(a._data, b._data))

    def is_not_equal(self, a: ScalarMember, b: ScalarMember) -> bool:
        return not self.is_equal(a, b)

    def within(self, tolerance: Float64Member | float, a: ScalarMember, b: ScalarMember) -> bool:
        """True when every component of ``a`` is within ``tolerance`` of the one in ``b``."""
        tol = real_value(tolerance)
        if not tol >= 0.0:
            error_message = f"Tolerance must be non-negative; got {tol}."
            raise ValueError(error_message)
        with np.errstate(invalid="ignore"):
            return bool(np.all(np.abs(a._data - b._data) <= tol))

    def assign(self, a: ScalarMember, b: ScalarMember) -> None:
        """b = a."""
        b.set(a)

    # Arithmetic

    def add(self, a: ScalarMember, b: ScalarMember, c: ScalarMember) -> None:
        np.add(a._data, b._data, out=c._data)

    def subtract(self, a: ScalarMember, b: ScalarMember, c: ScalarMember) -> None:
        np.subtract(a._data, b._data, out=c._data)

    def negate(self, a: ScalarMember, b: ScalarMember) -> None:
        np.negative(a._data, out=b._data)

    def multiply(self, a: ScalarMember, b: ScalarMember, c: ScalarMember) -> None:
        with np.errstate(over="ignore", invalid="ignore"):
            product = self._product(a._data, b._data)
        self._store(c, product)

    def conjugate(self, a: ScalarMember, b: ScalarMember) -> None:
        np.multiply(a._data, self._conj_mask, out=b._data)

    def norm(self, a: ScalarMember, b: Float64Member) -> None:
        b._data[0] = max_normalized_norm(a._data)

    def invert(self, a: ScalarMember, b: ScalarMember) -> None:
        """b = conj(a) / |a|^2; a zero modulus gives NaN."""
        modulus = max_normalized_norm(a._data)
        if modulus == 0.0:
            self.nan(b)
            return
        with np.errstate(over="ignore", under="ignore", invalid="ignore"):
            self._store(b, a._data * self._conj_mask / modulus / modulus)

    def divide(self, a: ScalarMember, b: ScalarMember, c: ScalarMember) -> None:
        """c = a * inv(b)."""
        inverse = self.construct()
        self.invert(b, inverse)
        self.multiply(a, inverse, c)

    def power(self, n: int, a: ScalarMember, b: ScalarMember) -> None:
        """b = a^n; a zero base to the power 0 is NaN."""
        if n == 0:
            if self.is_zero(a):
                self.nan(b)
            else:
                self.unity(b)
            return
        power_algorithm.power(self, n, a, b)

    def pow(self, a: ScalarMember, b: ScalarMember, c: ScalarMember) -> None:
        """c = exp(b * log(a)). A zero base gives zero for a positive real exponent part, NaN otherwise."""
        if self.is_zero(a):
            if b._data[0] > 0.0:
                self.zero(c)
            else:
                self.nan(c)
            return
        logarithm = self.construct()
        self.log(a, logarithm)
        self.multiply(b, logarithm, logarithm)
        self.exp(logarithm, c)

    def real(self, a: ScalarMember, b: Float64Member) -> None:
        b._data[0] = a._data[0]

    def unreal(self, a: ScalarMember, b: ScalarMember) -> None:
        np.copyto(b._data, a._data)
        b._data[0] = 0.0

    # Scaling

    def scale(self, factor: ScalarMember, a: ScalarMember, b: ScalarMember) -> None:
        """b = factor * a."""
        self.multiply(factor, a, b)

    def scale_components(self, factor: Float64Member | float, a: ScalarMember, b: ScalarMember) -> None:
        self.scale_by_double(real_value(factor), a, b)

    def scale_by_double(self, factor: float, a: ScalarMember, b: ScalarMember) -> None:
        with np.errstate(over="ignore", invalid="ignore"):
            np.multiply(a._data, float(factor), out=b._data)

    def scale_by_high_prec(self, factor: Decimal, a: ScalarMember, b: ScalarMember) -> None:
        self._store(b, highprec.scale_components_by_high_prec(factor, a._data))

    def scale_by_rational(self, factor: Fraction, a: ScalarMember, b: ScalarMember) -> None:
        self._store(b, highprec.scale_components_by_rational(factor, a._data))

    def _scale_repeatedly(self, factor: float, times: int, a: ScalarMember, b: ScalarMember) -> None:
        if times < 0:
            error_message = f"Repeat count must be non-negative; got {times}."
            raise ValueError(error_message)
        values = a._data.copy()
        with np.errstate(over="ignore", under="ignore"):
            for _ in range(times):
                values *= factor
        self._store(b, values)

    def scale_by_two(self, times: int, a: ScalarMember, b: ScalarMember) -> None:
        self._scale_repeatedly(2.0, times, a, b)

    def scale_by_one_half(self, times: int, a: ScalarMember, b: ScalarMember) -> None:
        self._scale_repeatedly(0.5, times, a, b)

    def round(self, mode: RoundMode, delta: Float64Member | float, a: ScalarMember, b: ScalarMember) -> None:
        """Round each component to a multiple of ``delta``."""
        step = real_value(delta)
        self._store(b, [round_value(mode, step, float(x)) for x in a._data])

    # Exponential and logarithm

    def _split(self, a: ScalarMember) -> tuple[float, np.ndarray, float]:
        r = float(a._data[0])
        v = a._data[1:].copy()
        return r, v, max_normalized_norm(v)

    def exp(self, a: ScalarMember, b: ScalarMember) -> None:
        """exp(r + v) = e^r (cos|v|, sinc(|v|) v)."""
        r, v, n = self._split(a)
        with np.errstate(over="ignore", invalid="ignore"):
            er = float(np.exp(r))
            out = np.empty_like(a._data)
            out[0] = er * np.cos(n)
            out[1:] = _scale_unreal(v, er * safe_sinc(n))
        self._store(b, out)

    def expm1(self, a: ScalarMember, b: ScalarMember) -> None:
        """exp(a) - 1 with the real part formed without cancellation."""
        r, v, n = self._split(a)
        with np.errstate(over="ignore", invalid="ignore"):
            out = np.empty_like(a._data)
            half_sine = np.sin(n / 2.0)
            out[0] = float(np.expm1(r)) * np.cos(n) - 2.0 * half_sine * half_sine
            out[1:] = _scale_unreal(v, float(np.exp(r)) * safe_sinc(n))
        self._store(b, out)

    def log(self, a: ScalarMember, b: ScalarMember) -> None:
        """log(a) = (ln|a|, v * atan2(|v|, r) / |v|); negative reals map to pi along i."""
        r, v, n = self._split(a)
        out = np.zeros_like(a._data)
        with np.errstate(divide="ignore", invalid="ignore"):
            out[0] = np.log(max_normalized_norm(a._data))
        if n == 0.0:
            if r < 0.0:
                out[1] = math.pi
            elif math.isnan(r):
                out[1:] = np.nan
        else:
            out[1:] = v * (math.atan2(n, r) / n)
        self._store(b, out)

    def log1p(self, a: ScalarMember, b: ScalarMember) -> None:
        """log(1 + a), accurate for small ``a``."""
        r, v, n = self._split(a)
        if max_normalized_norm(a._data) >= 0.5:
            shifted = self.construct(a)
            shifted._data[0] += 1.0
            self.log(shifted, b)
            return
        out = np.zeros_like(a._data)
        out[0] = 0.5 * math.log1p(2.0 * r + r * r + n * n)
        if n != 0.0:
            out[1:] = v * (math.atan2(n, 1.0 + r) / n)
        self._store(b, out)

    def sqrt(self, a: ScalarMember, b: ScalarMember) -> None:
        self.pow(a, self.construct(0.5), b)

    def cbrt(self, a: ScalarMember, b: ScalarMember) -> None:
        self.pow(a, self.construct(1.0 / 3.0), b)

    # Trigonometric and hyperbolic

    def sin(self, a: ScalarMember, b: ScalarMember) -> None:
        """sin(r + v) = (sin r cosh|v|, cos r sinhc(|v|) v)."""
        r, v, n = self._split(a)
        with np.errstate(over="ignore", invalid="ignore"):
            out = np.empty_like(a._data)
            out[0] = np.sin(r) * float(np.cosh(n))
            out[1:] = _scale_unreal(v, np.cos(r) * safe_sinhc(n))
        self._store(b, out)

    def cos(self, a: ScalarMember, b: ScalarMember) -> None:
        """cos(r + v) = (cos r cosh|v|, -sin r sinhc(|v|) v)."""
        r, v, n = self._split(a)
        with np.errstate(over="ignore", invalid="ignore"):
            out = np.empty_like(a._data)
            out[0] = np.cos(r) * float(np.cosh(n))
            out[1:] = _scale_unreal(v, -np.sin(r) * safe_sinhc(n))
        self._store(b, out)

    def sinh(self, a: ScalarMember, b: ScalarMember) -> None:
        """sinh(r + v) = (sinh r cos|v|, cosh r sinc(|v|) v)."""
        r, v, n = self._split(a)
        with np.errstate(over="ignore", invalid="ignore"):
            out = np.empty_like(a._data)
            out[0] = float(np.sinh(r)) * np.cos(n)
            out[1:] = _scale_unreal(v, float(np.cosh(r)) * safe_sinc(n))
        self._store(b, out)

    def cosh(self, a: ScalarMember, b: ScalarMember) -> None:
        """cosh(r + v) = (cosh r cos|v|, sinh r sinc(|v|) v)."""
        r, v, n = self._split(a)
        with np.errstate(over="ignore", invalid="ignore"):
            out = np.empty_like(a._data)
            out[0] = float(np.cosh(r)) * np.cos(n)
            out[1:] = _scale_unreal(v, float(np.sinh(r)) * safe_sinc(n))
        self._store(b, out)

    def sin_and_cos(self, a: ScalarMember, s: ScalarMember, c: ScalarMember) -> None:
        sine, cosine = self.construct(), self.construct()
        self.sin(a, sine)
        self.cos(a, cosine)
        s.set(sine)
        c.set(cosine)

    def sinh_and_cosh(self, a: ScalarMember, s: ScalarMember, c: ScalarMember) -> None:
        sine, cosine = self.construct(), self.construct()
        self.sinh(a, sine)
        self.cosh(a, cosine)
        s.set(sine)
        c.set(cosine)

    def _ratio(self, numerator: Callable, denominator: Callable, a: ScalarMember, b: ScalarMember) -> None:
        # Both functions of ``a`` share its axis, so the product commutes.
        top, bottom = self.construct(), self.construct()
        numerator(a, top)
        denominator(a, bottom)
        self.invert(bottom, bottom)
        self.multiply(top, bottom, b)

    def _reciprocal_of(self, function: Callable, a: ScalarMember, b: ScalarMember) -> None:
        value = self.construct()
        function(a, value)
        self.invert(value, b)

    def tan(self, a: ScalarMember, b: ScalarMember) -> None:
        self._ratio(self.sin, self.cos, a, b)

    def cot(self, a: ScalarMember, b: ScalarMember) -> None:
        self._ratio(self.cos, self.sin, a, b)

    def csc(self, a: ScalarMember, b: ScalarMember) -> None:
        self._reciprocal_of(self.sin, a, b)

    def sec(self, a: ScalarMember, b: ScalarMember) -> None:
        self._reciprocal_of(self.cos, a, b)

    def tanh(self, a: ScalarMember, b: ScalarMember) -> None:
        self._ratio(self.sinh, self.cosh, a, b)

    def coth(self, a: ScalarMember, b: ScalarMember) -> None:
        self._ratio(self.cosh, self.sinh, a, b)

    def csch(self, a: ScalarMember, b: ScalarMember) -> None:
        self._reciprocal_of(self.sinh, a, b)

    def sech(self, a: ScalarMember, b: ScalarMember) -> None:
        self._reciprocal_of(self.cosh, a, b)

    # Cardinal sine family; all equal unity at zero.

    def _cardinal(self, function: Callable, scale: float, a: ScalarMember, b: ScalarMember) -> None:
        if self.is_zero(a):
            self.unity(b)
            return
        x, value = self.construct(), self.construct()
        self.scale_by_double(scale, a, x)
        function(x, value)
        self.invert(x, x)
        self.multiply(value, x, b)

    def sinc(self, a: ScalarMember, b: ScalarMember) -> None:
        self._cardinal(self.sin, 1.0, a, b)

    def sincpi(self, a: ScalarMember, b: ScalarMember) -> None:
        self._cardinal(self.sin, math.pi, a, b)

    def sinch(self, a: ScalarMember, b: ScalarMember) -> None:
        self._cardinal(self.sinh, 1.0, a, b)

    def sinchpi(self, a: ScalarMember, b: ScalarMember) -> None:
        self._cardinal(self.sinh, math.pi, a, b)

    # Inverse functions, lifted from the complex plane.

    def _inverse(self, name: str, a: ScalarMember, b: ScalarMember) -> None:
        """Evaluate the principal complex inverse on the slice r + i|v| and map it back along v/|v|.

        With a zero unreal part the imaginary result lands on the first imaginary unit.
        """
        r, v, n = self._split(a)
        with np.errstate(all="ignore"):
            w = complex(COMPLEX_INVERSES[name](np.complex128(complex(r, n))))
        out = np.zeros_like(a._data)
        out[0] = w.real
        if n == 0.0:
            out[1] = w.imag
        else:
            out[1:] = v * (w.imag / n)
        self._store(b, out)

    def asin(self, a: ScalarMember, b: ScalarMember) -> None:
        self._inverse("asin", a, b)

    def acos(self, a: ScalarMember, b: ScalarMember) -> None:
        self._inverse("acos", a, b)

    def atan(self, a: ScalarMember, b: ScalarMember) -> None:
        self._inverse("atan", a, b)

    def acsc(self, a: ScalarMember, b: ScalarMember) -> None:
        self._inverse("acsc", a, b)

    def asec(self, a: ScalarMember, b: ScalarMember) -> None:
        self._inverse("asec", a, b)

    def acot(self, a: ScalarMember, b: ScalarMember) -> None:
        self._inverse("acot", a, b)

    def asinh(self, a: ScalarMember, b: ScalarMember) -> None:
        self._inverse("asinh", a, b)

    def acosh(self, a: ScalarMember, b: ScalarMember) -> None:
        self._inverse("acosh", a, b)

    def atanh(self, a: ScalarMember, b: ScalarMember) -> None:
        self._inverse("atanh", a, b)

    def acsch(self, a: ScalarMember, b: ScalarMember) -> None:
        self._inverse("acsch", a, b)

    def asech(self, a: ScalarMember, b: ScalarMember) -> None:
        self._inverse("asech", a, b)

    def acoth(self, a: ScalarMember, b: ScalarMember) -> None:
        self._inverse("acoth", a, b)


def complex_reciprocal(z: complex) -> np.complex128:
    """1/z, NaN for a zero modulus."""
    z = np.complex128(z)
    if z == 0:
        return np.complex128(complex(np.nan, np.nan))
    return np.complex128(1.0) / z


COMPLEX_INVERSES: dict[str, Callable[[np.complex128], np.complex128]] = {
    "asin": np.arcsin,
    "acos": np.arccos,
    "atan": np.arctan,
    "acsc": lambda z: np.arcsin(complex_reciprocal(z)),
    "asec": lambda z: np.arccos(complex_reciprocal(z)),
    "acot": lambda z: np.arctan(complex_reciprocal(z)),
    "asinh": np.arcsinh,
    "acosh": np.arccosh,
    "atanh": np.arctanh,
    "acsch": lambda z: np.arcsinh(complex_reciprocal(z)),
    "asech": lambda z: np.arccosh(complex_reciprocal(z)),
    "acoth": lambda z: np.arctanh(complex_reciprocal(z)),
}
