"""Tests for numtower.scalars.octonion."""

import numpy as np

from numtower.scalars.octonion import ODBL, OctonionFloat64Member

_TRIALS = 2_000
_NAMES = ("r", "i", "j", "k", "l", "i0", "j0", "k0")


def _unit_octonions(n: int, seed: int = 42) -> list[OctonionFloat64Member]:
    rng = np.random.default_rng(seed)
    units = []
    for _ in range(n):
        data = rng.standard_normal(8)
        units.append(OctonionFloat64Member.from_components(data / np.linalg.norm(data)))
    return units


def _basis(name: str) -> OctonionFloat64Member:
    member = OctonionFloat64Member()
    member.set_component(_NAMES.index(name), 1.0)
    return member


def _product(a: OctonionFloat64Member, b: OctonionFloat64Member) -> OctonionFloat64Member:
    c = OctonionFloat64Member()
    ODBL.multiply(a, b, c)
    return c


def test_i_times_i0() -> None:
    """i*i0 = l while i0*i = -l."""
    assert _product(_basis("i"), _basis("i0")) == _basis("l")
    assert _product(_basis("i0"), _basis("i")) == -_basis("l")


def test_basis_squares_are_minus_one() -> None:
    minus_one = OctonionFloat64Member(-1.0)
    for name in _NAMES[1:]:
        assert _product(_basis(name), _basis(name)) == minus_one


def test_distinct_units_anticommute() -> None:
    for a in _NAMES[1:]:
        for b in _NAMES[1:]:
            if a != b:
                assert _product(_basis(a), _basis(b)) == -_product(_basis(b), _basis(a))


def test_unit_accessors() -> None:
    for index, name in enumerate(_NAMES[1:], start=1):
        member = OctonionFloat64Member()
        getattr(ODBL, name)(member)
        assert member.get_component(index) == 1.0
        assert getattr(member, name) == 1.0


def test_norm_preservation() -> None:
    """|q1 * q2| == |q1| * |q2| (division algebra property)."""
    q_unit = _unit_octonions(_TRIALS)
    for i in range(_TRIALS):
        q1, q2 = q_unit[i], q_unit[(i + 1) % _TRIALS]
        assert np.isclose(abs(q1 * q2), abs(q1) * abs(q2), atol=1e-12)


def test_alternative_property() -> None:
    """(q * q) * q2 == q * (q * q2) (octonions are alternative)."""
    q_unit = _unit_octonions(_TRIALS)
    for i in range(_TRIALS):
        q, q2 = q_unit[i], q_unit[(i + 1) % _TRIALS]
        left = ((q * q) * q2).components()
        right = (q * (q * q2)).components()
        assert np.allclose(left, right, atol=1e-12)
        left = (q2 * (q * q)).components()
        right = ((q2 * q) * q).components()
        assert np.allclose(left, right, atol=1e-12)


def test_exp_log_symmetry() -> None:
    """exp(log(q)) == q for unit octonions."""
    logarithm, back = OctonionFloat64Member(), OctonionFloat64Member()
    for q in _unit_octonions(500):
        ODBL.log(q, logarithm)
        ODBL.exp(logarithm, back)
        assert np.allclose(back.components(), q.components(), atol=1e-10)


def test_small_angle_stability() -> None:
    """exp of a tiny unreal part does not produce NaNs."""
    rng = np.random.default_rng(42)
    b = OctonionFloat64Member()
    for _ in range(500):
        v_tiny = np.zeros(8)
        v_tiny[1:] = rng.standard_normal(7) * 1e-10
        ODBL.exp(OctonionFloat64Member.from_components(v_tiny), b)
        assert not ODBL.is_nan(b)
        assert np.isclose(b.r, 1.0)


def test_associator_and_commutator() -> None:
    i, j, k, l = (_basis(name) for name in ("i", "j", "k", "l"))
    out = OctonionFloat64Member()
    ODBL.associator(i, j, k, out)
    assert ODBL.is_zero(out)
    ODBL.associator(i, j, l, out)
    assert not ODBL.is_zero(out)
    ODBL.commutator(i, j, out)
    assert out == 2.0 * k


def test_invert_times_self_is_unity() -> None:
    inverse, product = OctonionFloat64Member(), OctonionFloat64Member()
    for q in _unit_octonions(200):
        scaled = 3.0 * q
        ODBL.invert(scaled, inverse)
        ODBL.multiply(scaled, inverse, product)
        assert ODBL.within(1e-12, product, OctonionFloat64Member(1.0))


def test_conjugate_twice_is_identity() -> None:
    once, twice = OctonionFloat64Member(), OctonionFloat64Member()
    for q in _unit_octonions(100):
        ODBL.conjugate(q, once)
        ODBL.conjugate(once, twice)
        assert twice == q


def test_string_round_trip() -> None:
    q = OctonionFloat64Member(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.5)
    assert str(q) == "(1.0,2.0,3.0,4.0,5.0,6.0,7.0,8.5)"
    assert OctonionFloat64Member(str(q)) == q
