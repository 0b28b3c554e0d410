"""Shape-carrying members shared by vectors, matrices and Cartesian tensors."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from fractions import Fraction
from typing import Any, ClassVar

import numpy as np

from numtower import literals
from numtower.aggregates import storage
from numtower.aggregates.storage import ArrayStorage
from numtower.algorithm import transform
from numtower.rounding import RoundMode
from numtower.scalars.base import HypercomplexAlgebra, ScalarMember, max_normalized_norm
from numtower.scalars.real import Float64Member


class AggregateMember:
    """Elements of one scalar kind laid out over ``dims`` in flat storage.

    ``dims[0]`` is the fastest varying axis. Storage always holds exactly
    ``prod(dims)`` elements, one for rank 0.
    """

    __slots__ = ["_algebra", "_dims", "_multipliers", "_storage"]

    def __init__(self, algebra: HypercomplexAlgebra, dims: Sequence[int] = ()) -> None:
        self._algebra = algebra
        self._dims: tuple[int, ...] = ()
        self._multipliers: tuple[int, ...] = ()
        self._storage = ArrayStorage(algebra.member_class, 1)
        self.alloc(dims)

    @property
    def algebra(self) -> HypercomplexAlgebra:
        """Kernel of the element kind."""
        return self._algebra

    @property
    def dims(self) -> tuple[int, ...]:
        return self._dims

    @property
    def storage(self) -> ArrayStorage:
        return self._storage

    def rank(self) -> int:
        return len(self._dims)

    def dimension(self, d: int) -> int:
        """Extent of axis ``d``; axes past the rank have extent 1."""
        if d < 0:
            error_message = f"Negative dimension index {d}."
            raise ValueError(error_message)
        return self._dims[d] if d < len(self._dims) else 1

    def num_elems(self) -> int:
        return self._storage.size

    def _check_dims(self, dims: tuple[int, ...]) -> None:
        """Hook for shape restrictions of a specific aggregate."""

    def alloc(self, dims: Sequence[int]) -> bool:
        """Adopt ``dims``; storage is replaced only when the element count changes.

        Returns:
            bool: True when new (zeroed) storage was allocated.
        """
        dims = storage.validate_dims(dims)
        if dims == self._dims:
            return False
        self._check_dims(dims)
        self._dims = dims
        self._multipliers = storage.calc_multipliers(dims)
        count = storage.num_elements(dims)
        if count != self._storage.size:
            self._storage = ArrayStorage(self._algebra.member_class, count)
            return True
        return False

    def init(self, dims: Sequence[int]) -> None:
        """Adopt ``dims`` with every element zero."""
        if not self.alloc(dims):
            self._storage.fill_zero()

    def reshape(self, dims: Sequence[int]) -> None:
        """Adopt ``dims``, keeping the values at indices present in both shapes."""
        dims = storage.validate_dims(dims)
        if dims == self._dims:
            return
        self._check_dims(dims)
        old_dims, old_multipliers, old_storage = self._dims, self._multipliers, self._storage
        self._dims = dims
        self._multipliers = storage.calc_multipliers(dims)
        self._storage = ArrayStorage(self._algebra.member_class, storage.num_elements(dims))
        value = self._algebra.construct()
        for offset in range(self._storage.size):
            index = storage.offset_to_index(dims, self._multipliers, offset)
            if storage.component_out_of_bounds(old_dims, index):
                continue
            old_index = index[: len(old_dims)] + (0,) * (len(old_dims) - len(index))
            old_storage.get(storage.index_to_offset(old_dims, old_multipliers, old_index), value)
            self._storage.set(offset, value)

    def offset(self, index: Sequence[int]) -> int:
        return storage.index_to_offset(self._dims, self._multipliers, index)

    def index(self, offset: int) -> tuple[int, ...]:
        return storage.offset_to_index(self._dims, self._multipliers, offset)

    def get_v(self, index: Sequence[int], value: ScalarMember) -> None:
        """Copy the element at ``index`` into ``value``."""
        self._storage.get(self.offset(index), value)

    def set_v(self, index: Sequence[int], value: ScalarMember) -> None:
        """Copy ``value`` into the element at ``index``."""
        self._storage.set(self.offset(index), value)

    def element(self, index: Sequence[int]) -> ScalarMember:
        """New member holding the element at ``index``."""
        value = self._algebra.construct()
        self.get_v(index, value)
        return value

    def get_component_safe(self, index: Sequence[int], component: int) -> float:
        """Component value, 0.0 when ``index`` or ``component`` is past the extents."""
        if component < 0:
            error_message = f"Negative component index {component}."
            raise ValueError(error_message)
        if storage.component_out_of_bounds(self._dims, index) or component >= self._algebra.component_count():
            return 0.0
        return float(self._storage.data[self.offset(self._padded(index)), component])

    def set_component_safe(self, index: Sequence[int], component: int, value: float) -> None:
        """Set a component; zero outside the extents is a no-op, anything else there is an error."""
        if component < 0:
            error_message = f"Negative component index {component}."
            raise ValueError(error_message)
        if storage.component_out_of_bounds(self._dims, index) or component >= self._algebra.component_count():
            if value != 0.0:
                error_message = f"Cannot store {value} at index {tuple(index)}, component {component}: out of bounds."
                raise ValueError(error_message)
            return
        self._storage.data[self.offset(self._padded(index)), component] = value

    def _padded(self, index: Sequence[int]) -> tuple[int, ...]:
        """In-bounds index trimmed or zero-padded to this member's rank."""
        index = tuple(index)[: len(self._dims)]
        return index + (0,) * (len(self._dims) - len(index))

    def components(self) -> np.ndarray:
        """Copy of the (elements, components) storage array."""
        return self._storage.data.copy()

    def set(self, other: AggregateMember) -> None:
        """Deep copy ``other`` into this member."""
        if other is self:
            return
        if other.algebra is not self._algebra:
            error_message = f"Cannot copy {other.algebra!r} elements into {self._algebra!r} storage."
            raise ValueError(error_message)
        self._check_dims(other.dims)
        self._dims = other.dims
        self._multipliers = other._multipliers
        self._storage = other.storage.duplicate()

    def get(self, other: AggregateMember) -> None:
        """Deep copy this member into ``other``."""
        other.set(self)

    def duplicate(self) -> AggregateMember:
        copy = type(self).__new__(type(self))
        AggregateMember.__init__(copy, self._algebra, ())
        copy.set(self)
        return copy

    def load_literal(self, text: str) -> None:
        """Replace shape and contents with a parsed bracketed literal."""
        literal = literals.parse(text)
        self._check_dims(literal.dims)
        self.alloc(literal.dims)
        count = self._algebra.component_count()
        for offset, element in enumerate(literal.values):
            self._storage.data[offset] = literals.element_components(element, count)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            other.algebra is self._algebra
            and other.dims == self._dims
            and bool(np.array_equal(other.storage.data, self._storage.data))
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._dims, tuple(self._storage.data.ravel().tolist())))

    def __str__(self) -> str:
        elements = [literals.format_value(row) for row in self._storage.data]
        return literals.format_nested(self._dims, elements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._algebra!r}, {str(self)!r})"


class AggregateAlgebra:
    """Operations every aggregate kernel lifts element by element from its scalar kernel."""

    member_type: ClassVar[type[AggregateMember]] = AggregateMember

    def __init__(self, element_algebra: HypercomplexAlgebra) -> None:
        self._element = element_algebra

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._element!r})"

    @property
    def element_algebra(self) -> HypercomplexAlgebra:
        return self._element

    def construct(self, *args: Any) -> AggregateMember:
        return self.member_type(self._element, *args)

    def _check_member(self, *members: AggregateMember) -> None:
        for member in members:
            if member.algebra is not self._element:
                error_message = f"{type(self).__name__} over {self._element!r} cannot use {member.algebra!r} elements."
                raise ValueError(error_message)

    # Fills and predicates

    def zero(self, a: AggregateMember) -> None:
        a.storage.fill_zero()

    def nan(self, a: AggregateMember) -> None:
        transform.fill(self._element.nan, a)

    def infinite(self, a: AggregateMember) -> None:
        transform.fill(self._element.infinite, a)

    def random(self, a: AggregateMember) -> None:
        transform.fill(self._element.random, a)

    def is_zero(self, a: AggregateMember) -> bool:
        return transform.all_elements(self._element.is_zero, a)

    def is_nan(self, a: AggregateMember) -> bool:
        return transform.any_element(self._element.is_nan, a)

    def is_infinite(self, a: AggregateMember) -> bool:
        return not self.is_nan(a) and transform.any_element(self._element.is_infinite, a)

    def is_equal(self, a: AggregateMember, b: AggregateMember) -> bool:
        return a.dims == b.dims and transform.all_pairs(self._element.is_equal, a, b)

    def is_not_equal(self, a: AggregateMember, b: AggregateMember) -> bool:
        return not self.is_equal(a, b)

    def within(self, tolerance: Float64Member | float, a: AggregateMember, b: AggregateMember) -> bool:
        if a.dims != b.dims:
            return False
        return transform.all_pairs(lambda x, y: self._element.within(tolerance, x, y), a, b)

    def assign(self, a: AggregateMember, b: AggregateMember) -> None:
        """b = a."""
        self._check_member(a, b)
        b.set(a)

    # Element-wise arithmetic

    def add(self, a: AggregateMember, b: AggregateMember, c: AggregateMember) -> None:
        transform.transform2(self._element.add, a, b, c)

    def subtract(self, a: AggregateMember, b: AggregateMember, c: AggregateMember) -> None:
        transform.transform2(self._element.subtract, a, b, c)

    def negate(self, a: AggregateMember, b: AggregateMember) -> None:
        transform.transform1(self._element.negate, a, b)

    def conjugate(self, a: AggregateMember, b: AggregateMember) -> None:
        transform.transform1(self._element.conjugate, a, b)

    def multiply_elements(self, a: AggregateMember, b: AggregateMember, c: AggregateMember) -> None:
        transform.transform2(self._element.multiply, a, b, c)

    def divide_elements(self, a: AggregateMember, b: AggregateMember, c: AggregateMember) -> None:
        transform.transform2(self._element.divide, a, b, c)

    def add_scalar(self, scalar: ScalarMember, a: AggregateMember, b: AggregateMember) -> None:
        transform.transform1(lambda x, y: self._element.add(x, scalar, y), a, b)

    def subtract_scalar(self, scalar: ScalarMember, a: AggregateMember, b: AggregateMember) -> None:
        transform.transform1(lambda x, y: self._element.subtract(x, scalar, y), a, b)

    def multiply_by_scalar(self, scalar: ScalarMember, a: AggregateMember, b: AggregateMember) -> None:
        """b[k] = a[k] * scalar (right multiplication)."""
        transform.transform1(lambda x, y: self._element.multiply(x, scalar, y), a, b)

    def divide_by_scalar(self, scalar: ScalarMember, a: AggregateMember, b: AggregateMember) -> None:
        transform.transform1(lambda x, y: self._element.divide(x, scalar, y), a, b)

    # Scaling

    def scale(self, factor: ScalarMember, a: AggregateMember, b: AggregateMember) -> None:
        """b[k] = factor * a[k] (left multiplication)."""
        transform.transform_with(self._element.multiply, factor, a, b)

    def scale_components(self, factor: Float64Member | float, a: AggregateMember, b: AggregateMember) -> None:
        transform.transform_with(self._element.scale_components, factor, a, b)

    def scale_by_double(self, factor: float, a: AggregateMember, b: AggregateMember) -> None:
        transform.transform_with(self._element.scale_by_double, factor, a, b)

    def scale_by_high_prec(self, factor: Decimal, a: AggregateMember, b: AggregateMember) -> None:
        transform.transform_with(self._element.scale_by_high_prec, factor, a, b)

    def scale_by_rational(self, factor: Fraction, a: AggregateMember, b: AggregateMember) -> None:
        transform.transform_with(self._element.scale_by_rational, factor, a, b)

    def scale_by_two(self, times: int, a: AggregateMember, b: AggregateMember) -> None:
        transform.transform_with(self._element.scale_by_two, times, a, b)

    def scale_by_one_half(self, times: int, a: AggregateMember, b: AggregateMember) -> None:
        transform.transform_with(self._element.scale_by_one_half, times, a, b)

    def round(self, mode: RoundMode, delta: Float64Member | float, a: AggregateMember, b: AggregateMember) -> None:
        transform.transform1(lambda x, y: self._element.round(mode, delta, x, y), a, b)

    def norm(self, a: AggregateMember, b: Float64Member) -> None:
        """Euclidean norm over all element norms, max-normalized."""
        element = self._element.construct()
        element_norm = Float64Member()
        norms = np.empty(a.num_elems(), dtype=np.float64)
        for offset in range(a.num_elems()):
            a.storage.get(offset, element)
            self._element.norm(element, element_norm)
            norms[offset] = float(element_norm)
        b.set_component(0, max_normalized_norm(norms))
