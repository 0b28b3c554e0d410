"""Vectors over a scalar kernel, forming an R-module.

Operands of different lengths are zero-extended to the longer length, except
for the cross and perp-dot products which are only defined in 3 and 2
dimensions.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any

from numtower.aggregates.base import AggregateAlgebra, AggregateMember
from numtower.aggregates.matrix import MatrixMember
from numtower.scalars.base import HypercomplexAlgebra, ScalarMember
from numtower.scalars.real import Float64Member


class VectorMember(AggregateMember):
    """One-dimensional aggregate of ``length`` elements."""

    __slots__ = []

    def __init__(
        self,
        algebra: HypercomplexAlgebra,
        value: int | str | VectorMember | Sequence[ScalarMember] = 0,
    ) -> None:
        super().__init__(algebra, (0,))
        if isinstance(value, str):
            self.load_literal(value)
        elif isinstance(value, VectorMember):
            self.set(value)
        elif isinstance(value, int):
            self.alloc(value)
        else:
            self.alloc(len(value))
            for position, element in enumerate(value):
                self.set_v((position,), element)

    def _check_dims(self, dims: tuple[int, ...]) -> None:
        if len(dims) != 1:
            error_message = f"A vector has exactly one axis; got dims {dims}."
            raise ValueError(error_message)

    def length(self) -> int:
        return self._dims[0]

    def alloc(self, dims: int | Sequence[int]) -> bool:
        return super().alloc((dims,) if isinstance(dims, int) else dims)

    def init(self, dims: int | Sequence[int]) -> None:
        super().init((dims,) if isinstance(dims, int) else dims)

    def reshape(self, dims: int | Sequence[int]) -> None:
        super().reshape((dims,) if isinstance(dims, int) else dims)


class VectorAlgebra(AggregateAlgebra):
    """R-module operations over vectors of one scalar kind."""

    member_type = VectorMember

    def construct(self, *args: Any) -> VectorMember:
        return VectorMember(self._element, *args)

    def _element_or_zero(self, a: VectorMember, position: int, value: ScalarMember) -> ScalarMember:
        if position < a.length():
            a.get_v((position,), value)
        else:
            self._element.zero(value)
        return value

    def _padded_pairs(self, a: VectorMember, b: VectorMember) -> Iterator[tuple[ScalarMember, ScalarMember]]:
        x, y = self._element.construct(), self._element.construct()
        for position in range(max(a.length(), b.length())):
            yield self._element_or_zero(a, position, x), self._element_or_zero(b, position, y)

    def _combine(self, op: Callable[[Any, Any, Any], None], a: VectorMember, b: VectorMember, c: VectorMember) -> None:
        result = self.construct(max(a.length(), b.length()))
        z = self._element.construct()
        for position, (x, y) in enumerate(self._padded_pairs(a, b)):
            op(x, y, z)
            result.set_v((position,), z)
        c.set(result)

    def add(self, a: VectorMember, b: VectorMember, c: VectorMember) -> None:
        self._combine(self._element.add, a, b, c)

    def subtract(self, a: VectorMember, b: VectorMember, c: VectorMember) -> None:
        self._combine(self._element.subtract, a, b, c)

    def multiply_elements(self, a: VectorMember, b: VectorMember, c: VectorMember) -> None:
        self._combine(self._element.multiply, a, b, c)

    def divide_elements(self, a: VectorMember, b: VectorMember, c: VectorMember) -> None:
        self._combine(self._element.divide, a, b, c)

    def is_equal(self, a: VectorMember, b: VectorMember) -> bool:
        return all(self._element.is_equal(x, y) for x, y in self._padded_pairs(a, b))

    def within(self, tolerance: Float64Member | float, a: VectorMember, b: VectorMember) -> bool:
        return all(self._element.within(tolerance, x, y) for x, y in self._padded_pairs(a, b))

    def dot_product(self, a: VectorMember, b: VectorMember, c: ScalarMember) -> None:
        """c = sum of a[k] * b[k]; no conjugation is applied."""
        total, term = self._element.construct(), self._element.construct()
        for x, y in self._padded_pairs(a, b):
            self._element.multiply(x, y, term)
            self._element.add(total, term, total)
        c.set(total)

    def _leading(self, a: VectorMember, count: int, operation: str) -> list[ScalarMember]:
        """First ``count`` elements; any non-zero element past them is an error."""
        elements = [self._element_or_zero(a, position, self._element.construct()) for position in range(count)]
        value = self._element.construct()
        for position in range(count, a.length()):
            a.get_v((position,), value)
            if not self._element.is_zero(value):
                error_message = f"{operation} is only defined for {count} dimensions; element {position} is non-zero."
                raise ValueError(error_message)
        return elements

    def _difference_of_products(self, p: ScalarMember, q: ScalarMember, s: ScalarMember, t: ScalarMember, out: ScalarMember) -> None:
        """out = p*q - s*t."""
        left, right = self._element.construct(), self._element.construct()
        self._element.multiply(p, q, left)
        self._element.multiply(s, t, right)
        self._element.subtract(left, right, out)

    def cross_product(self, a: VectorMember, b: VectorMember, c: VectorMember) -> None:
        """c = a x b for three-dimensional operands."""
        a0, a1, a2 = self._leading(a, 3, "cross product")
        b0, b1, b2 = self._leading(b, 3, "cross product")
        result = self.construct(3)
        value = self._element.construct()
        self._difference_of_products(a1, b2, a2, b1, value)
        result.set_v((0,), value)
        self._difference_of_products(a2, b0, a0, b2, value)
        result.set_v((1,), value)
        self._difference_of_products(a0, b1, a1, b0, value)
        result.set_v((2,), value)
        c.set(result)

    def perp_dot_product(self, a: VectorMember, b: VectorMember, c: ScalarMember) -> None:
        """c = a0*b1 - a1*b0 for two-dimensional operands."""
        a0, a1 = self._leading(a, 2, "perp dot product")
        b0, b1 = self._leading(b, 2, "perp dot product")
        value = self._element.construct()
        self._difference_of_products(a0, b1, a1, b0, value)
        c.set(value)

    def vector_triple_product(self, a: VectorMember, b: VectorMember, c: VectorMember, d: VectorMember) -> None:
        """d = a x (b x c)."""
        inner = self.construct()
        self.cross_product(b, c, inner)
        self.cross_product(a, inner, d)

    def scalar_triple_product(self, a: VectorMember, b: VectorMember, c: VectorMember, d: ScalarMember) -> None:
        """d = a . (b x c)."""
        inner = self.construct()
        self.cross_product(b, c, inner)
        self.dot_product(a, inner, d)

    def direct_product(self, a: VectorMember, b: VectorMember, c: MatrixMember) -> None:
        """c[r][k] = a[r] * b[k], a matrix of len(a) rows and len(b) columns."""
        result = MatrixMember(self._element, a.length(), b.length())
        x, y, z = self._element.construct(), self._element.construct(), self._element.construct()
        for row in range(a.length()):
            a.get_v((row,), x)
            for col in range(b.length()):
                b.get_v((col,), y)
                self._element.multiply(x, y, z)
                result.set_value(row, col, z)
        c.set(result)
