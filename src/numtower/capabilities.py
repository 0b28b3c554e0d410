"""Capability contracts satisfied by the algebra kernels.

Each protocol names one independently testable group of operations. A kernel
satisfies every protocol whose methods it provides; ``isinstance`` checks are
structural.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Additive(Protocol):
    """Abelian group under addition."""

    def zero(self, a: Any) -> None: ...

    def add(self, a: Any, b: Any, c: Any) -> None: ...

    def subtract(self, a: Any, b: Any, c: Any) -> None: ...

    def negate(self, a: Any, b: Any) -> None: ...


@runtime_checkable
class Unital(Protocol):
    """Multiplication with a unity element and integer powers."""

    def unity(self, a: Any) -> None: ...

    def multiply(self, a: Any, b: Any, c: Any) -> None: ...

    def power(self, n: int, a: Any, b: Any) -> None: ...


@runtime_checkable
class Invertible(Protocol):
    """Multiplicative inverses; zero-modulus inputs give NaN."""

    def invert(self, a: Any, b: Any) -> None: ...

    def divide(self, a: Any, b: Any, c: Any) -> None: ...


@runtime_checkable
class Conjugate(Protocol):
    def conjugate(self, a: Any, b: Any) -> None: ...


@runtime_checkable
class Normed(Protocol):
    """Euclidean norm written into a real member."""

    def norm(self, a: Any, b: Any) -> None: ...


@runtime_checkable
class Predicates(Protocol):
    def is_zero(self, a: Any) -> bool: ...

    def is_nan(self, a: Any) -> bool: ...

    def is_infinite(self, a: Any) -> bool: ...

    def is_equal(self, a: Any, b: Any) -> bool: ...

    def within(self, tolerance: Any, a: Any, b: Any) -> bool: ...


@runtime_checkable
class Scalable(Protocol):
    """Multiplication by real, high-precision and rational factors."""

    def scale_by_double(self, factor: float, a: Any, b: Any) -> None: ...

    def scale_by_high_prec(self, factor: Any, a: Any, b: Any) -> None: ...

    def scale_by_rational(self, factor: Any, a: Any, b: Any) -> None: ...

    def scale_by_two(self, times: int, a: Any, b: Any) -> None: ...

    def scale_by_one_half(self, times: int, a: Any, b: Any) -> None: ...


@runtime_checkable
class Roundable(Protocol):
    def round(self, mode: Any, delta: Any, a: Any, b: Any) -> None: ...


@runtime_checkable
class Randomizable(Protocol):
    def random(self, a: Any) -> None: ...


@runtime_checkable
class Exponential(Protocol):
    def exp(self, a: Any, b: Any) -> None: ...

    def log(self, a: Any, b: Any) -> None: ...


@runtime_checkable
class Trigonometric(Protocol):
    def sin(self, a: Any, b: Any) -> None: ...

    def cos(self, a: Any, b: Any) -> None: ...

    def tan(self, a: Any, b: Any) -> None: ...

    def sin_and_cos(self, a: Any, s: Any, c: Any) -> None: ...


@runtime_checkable
class Hyperbolic(Protocol):
    def sinh(self, a: Any, b: Any) -> None: ...

    def cosh(self, a: Any, b: Any) -> None: ...

    def tanh(self, a: Any, b: Any) -> None: ...

    def sinh_and_cosh(self, a: Any, s: Any, c: Any) -> None: ...


@runtime_checkable
class InverseTrigonometric(Protocol):
    def asin(self, a: Any, b: Any) -> None: ...

    def acos(self, a: Any, b: Any) -> None: ...

    def atan(self, a: Any, b: Any) -> None: ...

    def asinh(self, a: Any, b: Any) -> None: ...

    def acosh(self, a: Any, b: Any) -> None: ...

    def atanh(self, a: Any, b: Any) -> None: ...


@runtime_checkable
class Ordered(Protocol):
    """Total order on non-NaN values."""

    def compare(self, a: Any, b: Any) -> int: ...

    def min(self, a: Any, b: Any, c: Any) -> None: ...

    def max(self, a: Any, b: Any, c: Any) -> None: ...


@runtime_checkable
class VectorSpace(Protocol):
    def dot_product(self, a: Any, b: Any, c: Any) -> None: ...

    def cross_product(self, a: Any, b: Any, c: Any) -> None: ...

    def perp_dot_product(self, a: Any, b: Any, c: Any) -> None: ...


@runtime_checkable
class MatrixRing(Protocol):
    def transpose(self, a: Any, b: Any) -> None: ...

    def conjugate_transpose(self, a: Any, b: Any) -> None: ...

    def det(self, a: Any, d: Any) -> None: ...


@runtime_checkable
class TensorProduct(Protocol):
    def outer_product(self, a: Any, b: Any, c: Any) -> None: ...

    def contract(self, i: int, j: int, a: Any, b: Any) -> None: ...

    def inner_product(self, i: int, j: int, a: Any, b: Any, c: Any) -> None: ...

    def raise_index(self, index: int, a: Any, b: Any) -> None: ...

    def lower_index(self, index: int, a: Any, b: Any) -> None: ...
