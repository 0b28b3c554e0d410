"""Tests for numtower.aggregates.storage."""

import numpy as np
import pytest

from numtower.aggregates import storage
from numtower.aggregates.storage import ArrayStorage
from numtower.scalars.complex import ComplexFloat64Member


def test_multipliers_and_element_count() -> None:
    assert storage.calc_multipliers((2, 3, 4)) == (1, 2, 6)
    assert storage.num_elements((2, 3, 4)) == 24
    assert storage.num_elements(()) == 1
    assert storage.num_elements((3, 0)) == 0


def test_index_offset_round_trip() -> None:
    dims = (2, 3, 4)
    multipliers = storage.calc_multipliers(dims)
    assert storage.index_to_offset(dims, multipliers, (1, 2, 3)) == 23
    for offset in range(storage.num_elements(dims)):
        index = storage.offset_to_index(dims, multipliers, offset)
        assert storage.index_to_offset(dims, multipliers, index) == offset


def test_first_axis_varies_fastest() -> None:
    dims = (3, 2)
    multipliers = storage.calc_multipliers(dims)
    assert storage.offset_to_index(dims, multipliers, 1) == (1, 0)
    assert storage.offset_to_index(dims, multipliers, 3) == (0, 1)


def test_out_of_range_indices() -> None:
    dims = (2, 2)
    multipliers = storage.calc_multipliers(dims)
    with pytest.raises(ValueError):
        storage.index_to_offset(dims, multipliers, (2, 0))
    with pytest.raises(ValueError):
        storage.index_to_offset(dims, multipliers, (0,))
    with pytest.raises(ValueError):
        storage.offset_to_index(dims, multipliers, 4)
    with pytest.raises(ValueError):
        storage.validate_dims((2, -1))


def test_component_out_of_bounds() -> None:
    assert not storage.component_out_of_bounds((2, 2), (1, 1))
    assert storage.component_out_of_bounds((2, 2), (2, 0))
    assert not storage.component_out_of_bounds((2, 2), (1,))
    assert storage.component_out_of_bounds((2, 2), (0, 0, 1))
    assert not storage.component_out_of_bounds((2, 2), (0, 0, 0))
    with pytest.raises(ValueError):
        storage.component_out_of_bounds((2, 2), (-1, 0))


def test_array_storage_copies_values() -> None:
    store = ArrayStorage(ComplexFloat64Member, 3)
    assert store.size == 3
    assert store.data.shape == (3, 2)
    value = ComplexFloat64Member(1.0, 2.0)
    store.set(1, value)
    value.r = 9.0
    out = ComplexFloat64Member()
    store.get(1, out)
    assert out == ComplexFloat64Member(1.0, 2.0)
    with pytest.raises(ValueError):
        store.get(3, out)


def test_duplicate_is_deep() -> None:
    store = ArrayStorage(ComplexFloat64Member, 2)
    store.set(0, ComplexFloat64Member(1.0, 1.0))
    copy = store.duplicate()
    store.fill_zero()
    assert np.array_equal(copy.data[0], [1.0, 1.0])
    assert not np.any(store.data)
