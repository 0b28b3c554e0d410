"""Tests for numtower.aggregates.tensor."""

import numpy as np
import pytest

from numtower.aggregates.matrix import MatrixMember
from numtower.aggregates.tensor import CartesianTensorMember
from numtower.aggregates.vector import VectorMember
from numtower.algebras import CDBL_TEN, DBL_TEN
from numtower.scalars.complex import CDBL
from numtower.scalars.real import DBL, Float64Member


def _tensor(literal: str) -> CartesianTensorMember:
    return CartesianTensorMember(DBL, literal)


def _value(t: CartesianTensorMember, *index: int) -> float:
    return float(t.element(index))


def test_literal_shape() -> None:
    t = _tensor("[[[1,2],[3,4]],[[5,6],[7,8]]]")
    assert t.rank() == 3
    assert t.dim_count() == 2
    assert _value(t, 1, 0, 0) == 2.0
    assert _value(t, 0, 1, 0) == 3.0
    assert _value(t, 0, 0, 1) == 5.0
    assert str(t) == "[[[1.0,2.0],[3.0,4.0]],[[5.0,6.0],[7.0,8.0]]]"
    assert _tensor(str(t)) == t


def test_axes_must_share_one_extent() -> None:
    with pytest.raises(ValueError):
        _tensor("[[1,2,3],[4,5,6]]")
    t = DBL_TEN.construct(2, 3)
    with pytest.raises(ValueError):
        t.alloc((2, 3))


def test_values_fill_storage() -> None:
    t = CartesianTensorMember(DBL, 2, 2, values=[Float64Member(x) for x in (1.0, 2.0, 3.0, 4.0)])
    assert t == _tensor("[[1,2],[3,4]]")
    with pytest.raises(ValueError):
        CartesianTensorMember(DBL, 2, 2, values=[Float64Member(1.0)])


def test_scalar_tensor() -> None:
    t = DBL_TEN.construct()
    assert t.rank() == 0
    assert t.num_elems() == 1
    assert t.dimension(5) == 1


def test_unity_is_kronecker_delta() -> None:
    t = DBL_TEN.construct(2, 3)
    DBL_TEN.unity(t)
    assert np.array_equal(t.components()[:, 0].reshape(3, 3), np.eye(3))
    assert DBL_TEN.is_unity(t)
    cube = DBL_TEN.construct(3, 2)
    DBL_TEN.unity(cube)
    assert _value(cube, 1, 1, 1) == 1.0
    assert _value(cube, 1, 1, 0) == 0.0


def test_outer_product_layout() -> None:
    a, b = _tensor("[1,2,3]"), _tensor("[4,5,6]")
    c = DBL_TEN.construct()
    DBL_TEN.outer_product(a, b, c)
    assert c.rank() == 2
    for p in range(3):
        for q in range(3):
            assert _value(c, p, q) == (p + 1) * (q + 4)
    product = DBL_TEN.construct()
    DBL_TEN.multiply(a, b, product)
    assert product == c


def test_outer_product_rejects_bad_operands() -> None:
    a = _tensor("[1,2]")
    with pytest.raises(ValueError):
        DBL_TEN.outer_product(a, a, a)
    with pytest.raises(ValueError):
        DBL_TEN.outer_product(a, _tensor("[1,2,3]"), DBL_TEN.construct())


def test_outer_product_with_scalar_tensor() -> None:
    scalar = CartesianTensorMember(DBL, 0, 3, values=[Float64Member(2.0)])
    c = DBL_TEN.construct()
    DBL_TEN.outer_product(scalar, _tensor("[1,2,3]"), c)
    assert c == _tensor("[2,4,6]")


def test_contraction_of_outer_product_is_dot_product() -> None:
    a, b = _tensor("[1,2,3]"), _tensor("[4,5,6]")
    c, trace = DBL_TEN.construct(), DBL_TEN.construct()
    DBL_TEN.outer_product(a, b, c)
    DBL_TEN.contract(0, 1, c, trace)
    assert trace.rank() == 0
    assert _value(trace) == 32.0


def test_contraction_of_rank_three() -> None:
    x, y, z = _tensor("[1,2]"), _tensor("[3,4]"), _tensor("[5,6]")
    xy, xyz, result = DBL_TEN.construct(), DBL_TEN.construct(), DBL_TEN.construct()
    DBL_TEN.outer_product(x, y, xy)
    DBL_TEN.outer_product(xy, z, xyz)
    DBL_TEN.contract(0, 2, xyz, result)
    # (x . z) y
    assert result == _tensor("[51,68]")


def test_contraction_rejects_bad_axes() -> None:
    matrix = _tensor("[[1,2],[3,4]]")
    out = DBL_TEN.construct()
    with pytest.raises(ValueError):
        DBL_TEN.contract(0, 1, _tensor("[1,2]"), out)
    with pytest.raises(ValueError):
        DBL_TEN.contract(1, 1, matrix, out)
    with pytest.raises(ValueError):
        DBL_TEN.contract(0, 2, matrix, out)
    DBL_TEN.contract(0, 1, matrix, out)
    assert _value(out) == 5.0


def test_inner_product() -> None:
    matrix, vector = _tensor("[[1,2],[3,4]]"), _tensor("[5,6]")
    c = DBL_TEN.construct()
    DBL_TEN.inner_product(0, 0, vector, vector, c)
    assert _value(c) == 61.0
    # Axis 0 runs within each inner group of the literal.
    DBL_TEN.inner_product(0, 0, matrix, vector, c)
    assert c == _tensor("[17,39]")
    with pytest.raises(ValueError):
        DBL_TEN.inner_product(1, 0, vector, vector, c)


def test_complex_outer_product_does_not_conjugate() -> None:
    a = CartesianTensorMember(CDBL, "[(0,1)]")
    c, trace = CDBL_TEN.construct(), CDBL_TEN.construct()
    CDBL_TEN.outer_product(a, a, c)
    CDBL_TEN.contract(0, 1, c, trace)
    assert complex(trace.element(())) == -1.0


def test_index_variance() -> None:
    t = _tensor("[[1,2],[3,4]]")
    out = DBL_TEN.construct()
    assert t.index_is_lower(1)
    assert not t.index_is_upper(0)
    with pytest.raises(ValueError):
        t.index_is_lower(2)
    DBL_TEN.lower_index(0, t, out)
    assert out == t
    with pytest.raises(ValueError):
        DBL_TEN.lower_index(2, t, out)
    with pytest.raises(ValueError):
        DBL_TEN.raise_index(0, t, out)


def test_power() -> None:
    a = _tensor("[1,2]")
    b, expected = DBL_TEN.construct(), DBL_TEN.construct()
    DBL_TEN.power(0, a, b)
    assert b.rank() == 0
    assert _value(b) == 1.0
    assert b.dim_count() == 2
    DBL_TEN.power(1, a, b)
    assert b == a
    DBL_TEN.power(2, a, b)
    DBL_TEN.outer_product(a, a, expected)
    assert b == expected
    DBL_TEN.power(3, a, b)
    assert b.rank() == 3
    assert _value(b, 1, 1, 1) == 8.0
    with pytest.raises(ValueError):
        DBL_TEN.power(-1, a, b)


@pytest.mark.parametrize("name", ["semicolon_derivative", "comma_derivative"])
def test_derivatives_of_constant_fields(name: str) -> None:
    derivative = getattr(DBL_TEN, name)
    a, b = _tensor("[[1,2,3],[4,5,6],[7,8,9]]"), DBL_TEN.construct()
    derivative(2, a, b)
    assert b.rank() == 3
    assert b.dim_count() == 3
    assert DBL_TEN.is_zero(b)
    with pytest.raises(ValueError):
        derivative(3, a, b)


def test_reshape_keeps_overlap() -> None:
    t = _tensor("[[1,2],[3,4]]")
    t.reshape(2, 3)
    assert t.dims == (3, 3)
    assert t.dim_count() == 3
    assert _value(t, 1, 0) == 2.0
    assert _value(t, 0, 1) == 3.0
    assert _value(t, 1, 1) == 4.0
    assert _value(t, 2, 2) == 0.0
    t.reshape(1, 2)
    assert t == _tensor("[1,2]")


def test_alloc_and_init() -> None:
    t = _tensor("[[1,2],[3,4]]")
    assert not t.alloc(2, 2)
    assert _value(t, 1, 1) == 4.0
    t.init(2, 2)
    assert DBL_TEN.is_zero(t)
    assert t.alloc(3, 2)
    assert t.num_elems() == 8


def test_predicates() -> None:
    t = DBL_TEN.construct(2, 2)
    assert DBL_TEN.is_zero(t)
    t.set_component_safe((1, 0), 0, float("inf"))
    assert DBL_TEN.is_infinite(t)
    t.set_component_safe((0, 1), 0, float("nan"))
    assert DBL_TEN.is_nan(t)
    assert not DBL_TEN.is_infinite(t)
    assert t.get_component_safe((2, 0), 0) == 0.0
    with pytest.raises(ValueError):
        t.set_component_safe((2, 0), 0, 1.0)


def test_elementwise_arithmetic() -> None:
    a, b = _tensor("[[1,2],[3,4]]"), _tensor("[[4,3],[2,1]]")
    c = DBL_TEN.construct()
    DBL_TEN.add(a, b, c)
    assert c == _tensor("[[5,5],[5,5]]")
    DBL_TEN.multiply_elements(a, b, c)
    assert c == _tensor("[[4,6],[6,4]]")
    DBL_TEN.scale_by_double(2.0, a, c)
    assert c == _tensor("[[2,4],[6,8]]")
    n = Float64Member()
    DBL_TEN.norm(_tensor("[[3,0],[0,4]]"), n)
    assert float(n) == 5.0


def test_vector_copied_into_tensor_is_rank_one() -> None:
    t = DBL_TEN.construct()
    t.set(VectorMember(DBL, "[1,2,3]"))
    assert t.dims == (3,)
    assert t.dim_count() == 3
    product, trace = DBL_TEN.construct(), DBL_TEN.construct()
    DBL_TEN.outer_product(t, t, product)
    assert product.rank() == 2
    assert product.dim_count() == 3
    DBL_TEN.contract(0, 1, product, trace)
    assert _value(trace) == 14.0


def test_matrix_copied_into_tensor_is_rank_two() -> None:
    t = DBL_TEN.construct()
    t.set(MatrixMember(DBL, "[[1,2],[3,4]]"))
    assert t.dim_count() == 2
    trace = DBL_TEN.construct()
    DBL_TEN.contract(0, 1, t, trace)
    assert _value(trace) == 5.0
    with pytest.raises(ValueError):
        t.set(MatrixMember(DBL, "[[1,2,3],[4,5,6]]"))


@pytest.mark.parametrize("rank", [1, 2, 3])
def test_empty_tensor_string_keeps_rank(rank: int) -> None:
    t = CartesianTensorMember(DBL, rank, 0)
    text = str(t)
    assert text == "[" * rank + "]" * rank
    back = CartesianTensorMember(DBL, text)
    assert back.dims == (0,) * rank
    assert back.dim_count() == 0
    assert back == t
