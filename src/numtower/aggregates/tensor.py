"""Cartesian tensors over a scalar kernel.

Every axis of a Cartesian tensor shares one extent, ``dim_count``, and every
index is covariant. With no metric, raising an index is undefined and
lowering one leaves the tensor unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from numtower import literals
from numtower.aggregates.base import AggregateAlgebra, AggregateMember
from numtower.algorithm import tensor as tensor_algorithm
from numtower.scalars.base import HypercomplexAlgebra, ScalarMember


class CartesianTensorMember(AggregateMember):
    """Tensor of ``rank`` axes, each of extent ``dim_count``."""

    __slots__ = ["_dim_count"]

    def __init__(
        self,
        algebra: HypercomplexAlgebra,
        rank: int | str | CartesianTensorMember = 0,
        dim_count: int = 0,
        values: Sequence[ScalarMember] | None = None,
    ) -> None:
        self._dim_count = 0
        super().__init__(algebra, ())
        if isinstance(rank, str):
            self.load_literal(rank)
        elif isinstance(rank, CartesianTensorMember):
            self.set(rank)
        else:
            self.alloc(rank, dim_count)
        if values is not None:
            if len(values) != self.num_elems():
                error_message = f"Expected {self.num_elems()} values; got {len(values)}."
                raise ValueError(error_message)
            for offset, value in enumerate(values):
                self._storage.set(offset, value)

    def _check_dims(self, dims: tuple[int, ...]) -> None:
        if any(extent != dims[0] for extent in dims[1:]):
            error_message = f"Cartesian tensor axes must share one extent; got dims {dims}."
            raise ValueError(error_message)

    def dim_count(self) -> int:
        return self._dim_count

    def _sync_dim_count(self, dim_count: int | None = None) -> None:
        """Take ``dim_count`` from the first axis; a rank 0 shape keeps ``dim_count`` or the current extent."""
        if self._dims:
            self._dim_count = self._dims[0]
        elif dim_count is not None:
            self._dim_count = dim_count

    def alloc(self, rank: int | Sequence[int], dim_count: int | None = None) -> bool:
        """Adopt ``rank`` axes of extent ``dim_count``, or raw per-axis dims."""
        reallocated = super().alloc(self._dims_for(rank, dim_count))
        self._sync_dim_count(dim_count)
        return reallocated

    def init(self, rank: int | Sequence[int], dim_count: int | None = None) -> None:
        if not self.alloc(rank, dim_count):
            self._storage.fill_zero()

    def reshape(self, rank: int | Sequence[int], dim_count: int | None = None) -> None:
        super().reshape(self._dims_for(rank, dim_count))
        self._sync_dim_count(dim_count)

    @staticmethod
    def _dims_for(rank: int | Sequence[int], dim_count: int | None) -> tuple[int, ...]:
        if dim_count is None:
            return tuple(rank)
        if rank < 0:
            error_message = f"Tensor rank must be non-negative; got {rank}."
            raise ValueError(error_message)
        return (dim_count,) * rank

    def load_literal(self, text: str) -> None:
        """Parse a literal; one holding no elements gives extent 0 at its bracket depth."""
        literal = literals.parse(text)
        if literal.rank and not literal.values:
            self.init(literal.rank, 0)
            return
        super().load_literal(text)
        self._sync_dim_count()

    def __str__(self) -> str:
        # Every axis shares one extent, so an empty tensor nests its brackets to keep the rank.
        if self.rank() and self.num_elems() == 0:
            return "[" * self.rank() + "]" * self.rank()
        return super().__str__()

    def set(self, other: AggregateMember) -> None:
        """Deep copy ``other``; vectors and matrices become rank 1 and rank 2 tensors."""
        super().set(other)
        if isinstance(other, CartesianTensorMember) and not self._dims:
            self._dim_count = other.dim_count()
        else:
            self._sync_dim_count()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.rank():
            error_message = f"Index {index} out of range for a rank {self.rank()} tensor."
            raise ValueError(error_message)

    def index_is_lower(self, index: int) -> bool:
        self._check_index(index)
        return True

    def index_is_upper(self, index: int) -> bool:
        self._check_index(index)
        return False


class CartesianTensorAlgebra(AggregateAlgebra):
    """Tensor product algebra over Cartesian tensors of one scalar kind.

    ``multiply`` is the tensor (outer) product; element-wise products are
    available as ``multiply_elements``.
    """

    member_type = CartesianTensorMember

    def construct(self, *args: Any) -> CartesianTensorMember:
        return CartesianTensorMember(self._element, *args)

    def unity(self, a: CartesianTensorMember) -> None:
        """Generalized Kronecker delta: one where all indices agree, zero elsewhere."""
        a.storage.fill_zero()
        one = self._element.construct()
        self._element.unity(one)
        if a.rank() == 0:
            a.storage.set(0, one)
            return
        for k in range(a.dim_count()):
            a.set_v((k,) * a.rank(), one)

    def is_unity(self, a: CartesianTensorMember) -> bool:
        expected = self.construct(a)
        self.unity(expected)
        return self.is_equal(a, expected)

    def outer_product(self, a: CartesianTensorMember, b: CartesianTensorMember, c: CartesianTensorMember) -> None:
        """c = a (x) b. The output may not alias an operand."""
        if c is a or c is b:
            error_message = "Outer product cannot write into one of its operands."
            raise ValueError(error_message)
        if a.rank() and b.rank() and a.dim_count() != b.dim_count():
            error_message = f"Dimension counts differ: {a.dim_count()} vs {b.dim_count()}."
            raise ValueError(error_message)
        dim_count = a.dim_count() if a.rank() else b.dim_count()
        c.alloc(a.rank() + b.rank(), dim_count)
        tensor_algorithm.outer_product(self._element, a, b, c)

    def multiply(self, a: CartesianTensorMember, b: CartesianTensorMember, c: CartesianTensorMember) -> None:
        """Tensor multiplication is the outer product."""
        self.outer_product(a, b, c)

    def contract(self, i: int, j: int, a: CartesianTensorMember, b: CartesianTensorMember) -> None:
        """b = a summed over the diagonal of axes i and j, rank a.rank - 2."""
        if a.rank() < 2:
            error_message = f"Contraction needs rank >= 2; got rank {a.rank()}."
            raise ValueError(error_message)
        if i == j:
            error_message = f"Contraction axes must differ; got {i} twice."
            raise ValueError(error_message)
        for axis in (i, j):
            if not 0 <= axis < a.rank():
                error_message = f"Contraction axis {axis} out of range for rank {a.rank()}."
                raise ValueError(error_message)
        result = self.construct(a.rank() - 2, a.dim_count())
        tensor_algorithm.contract(self._element, i, j, a, result)
        b.set(result)

    def inner_product(
        self,
        i: int,
        j: int,
        a: CartesianTensorMember,
        b: CartesianTensorMember,
        c: CartesianTensorMember,
    ) -> None:
        """c = contraction of a (x) b over a's axis i and b's axis j."""
        if not 0 <= i < a.rank():
            error_message = f"Axis {i} out of range for the first operand of rank {a.rank()}."
            raise ValueError(error_message)
        if not 0 <= j < b.rank():
            error_message = f"Axis {j} out of range for the second operand of rank {b.rank()}."
            raise ValueError(error_message)
        product = self.construct()
        self.outer_product(a, b, product)
        self.contract(i, a.rank() + j, product, c)

    def raise_index(self, index: int, a: CartesianTensorMember, b: CartesianTensorMember) -> None:
        """Cartesian tensors have no metric, so indices cannot be raised."""
        error_message = f"Cannot raise index {index}: Cartesian tensor indices are all covariant."
        raise ValueError(error_message)

    def lower_index(self, index: int, a: CartesianTensorMember, b: CartesianTensorMember) -> None:
        """Indices are already covariant; validates ``index`` and copies a into b."""
        a.index_is_lower(index)
        self.assign(a, b)

    def power(self, n: int, a: CartesianTensorMember, b: CartesianTensorMember) -> None:
        """b = n-fold outer product of a; n = 0 gives the rank 0 unity."""
        if n < 0:
            error_message = f"Tensor power needs a non-negative exponent; got {n}."
            raise ValueError(error_message)
        if n == 0:
            b.init(0, a.dim_count())
            self.unity(b)
            return
        tensor_algorithm.power(self, n, a, b)

    def _derivative(self, index: int, a: CartesianTensorMember, b: CartesianTensorMember) -> None:
        if not 0 <= index < a.dim_count():
            error_message = f"Derivative index {index} out of range for dimension count {a.dim_count()}."
            raise ValueError(error_message)
        b.init(a.rank() + 1, a.dim_count())

    def semicolon_derivative(self, index: int, a: CartesianTensorMember, b: CartesianTensorMember) -> None:
        """Covariant derivative along coordinate ``index`` of a tensor field constant over space.

        Cartesian coordinates have vanishing connection coefficients and a single
        tensor value is a constant field, so the result is the zero tensor of rank a.rank + 1.
        """
        self._derivative(index, a, b)

    def comma_derivative(self, index: int, a: CartesianTensorMember, b: CartesianTensorMember) -> None:
        """Partial derivative along coordinate ``index``; zero of rank a.rank + 1 for a constant field."""
        self._derivative(index, a, b)
