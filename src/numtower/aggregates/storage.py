"""Flat storage and mixed-radix indexing shared by vectors, matrices and tensors.

Axis 0 varies fastest: for dims ``(d0, d1, ..., dn-1)`` the element at index
``(x0, ..., xn-1)`` lives at ``sum(xi * prod(dims[:i]))``.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from numtower.scalars.base import ScalarMember


def validate_dims(dims: Sequence[int]) -> tuple[int, ...]:
    dims = tuple(int(d) for d in dims)
    for axis, extent in enumerate(dims):
        if extent < 0:
            error_message = f"Dimension {axis} is negative: {extent}."
            raise ValueError(error_message)
    return dims


def calc_multipliers(dims: Sequence[int]) -> tuple[int, ...]:
    """Stride of each axis; the first axis has stride 1."""
    multipliers = []
    stride = 1
    for extent in dims:
        multipliers.append(stride)
        stride *= extent
    return tuple(multipliers)


def num_elements(dims: Sequence[int]) -> int:
    """Product of the extents; a rank 0 shape holds one element."""
    count = 1
    for extent in dims:
        count *= extent
    return count


def index_to_offset(dims: Sequence[int], multipliers: Sequence[int], index: Sequence[int]) -> int:
    if len(index) != len(dims):
        error_message = f"Index {tuple(index)} has rank {len(index)}; expected {len(dims)}."
        raise ValueError(error_message)
    offset = 0
    for axis, (position, extent, stride) in enumerate(zip(index, dims, multipliers, strict=True)):
        if not 0 <= position < extent:
            error_message = f"Index {position} out of bounds for axis {axis} of extent {extent}."
            raise ValueError(error_message)
        offset += position * stride
    return offset


def offset_to_index(dims: Sequence[int], multipliers: Sequence[int], offset: int) -> tuple[int, ...]:
    """Inverse of :func:`index_to_offset`, peeling the most significant axis first."""
    total = num_elements(dims)
    if not 0 <= offset < total:
        error_message = f"Offset {offset} out of bounds for {total} elements."
        raise ValueError(error_message)
    index = [0] * len(dims)
    for axis in reversed(range(len(dims))):
        index[axis], offset = divmod(offset, multipliers[axis])
    return tuple(index)


def component_out_of_bounds(dims: Sequence[int], index: Sequence[int]) -> bool:
    """True when ``index`` falls outside the extents.

    Missing trailing positions count as 0 and axes past the rank have extent 1.
    """
    for axis in range(max(len(dims), len(index))):
        position = index[axis] if axis < len(index) else 0
        if position < 0:
            error_message = f"Negative index {position} on axis {axis}."
            raise ValueError(error_message)
        extent = dims[axis] if axis < len(dims) else 1
        if position >= extent:
            return True
    return False


class ArrayStorage:
    """In-memory storage: one row of float64 components per element."""

    __slots__ = ["_data", "_member_class"]

    def __init__(self, member_class: type[ScalarMember], size: int) -> None:
        if size < 0:
            error_message = f"Storage size must be non-negative; got {size}."
            raise ValueError(error_message)
        self._member_class = member_class
        self._data = np.zeros((size, member_class.component_count()), dtype=np.float64)

    @property
    def size(self) -> int:
        return self._data.shape[0]

    @property
    def data(self) -> np.ndarray:
        """The (size, components) backing array."""
        return self._data

    def _check(self, offset: int) -> None:
        if not 0 <= offset < self.size:
            error_message = f"Offset {offset} out of bounds for storage of size {self.size}."
            raise ValueError(error_message)

    def get(self, offset: int, value: ScalarMember) -> None:
        """Copy element ``offset`` into ``value``."""
        self._check(offset)
        value._data[:] = self._data[offset]

    def set(self, offset: int, value: ScalarMember) -> None:
        """Copy ``value`` into element ``offset``."""
        self._check(offset)
        self._data[offset] = value._data

    def fill_zero(self) -> None:
        self._data.fill(0.0)

    def duplicate(self) -> ArrayStorage:
        copy = ArrayStorage(self._member_class, 0)
        copy._data = self._data.copy()
        return copy
