"""Octonions at float64 precision."""

from __future__ import annotations

import numpy as np

from numtower.scalars.base import HypercomplexAlgebra, ScalarMember, component_property


class OctonionFloat64Member(ScalarMember):
    """Octonion value (r, i, j, k, l, i0, j0, k0)."""

    __slots__ = []

    COMPONENTS = ("r", "i", "j", "k", "l", "i0", "j0", "k0")

    r = component_property(0, "real")
    i = component_property(1, "i")
    j = component_property(2, "j")
    k = component_property(3, "k")
    l = component_property(4, "l")  # noqa: E741
    i0 = component_property(5, "i0")
    j0 = component_property(6, "j0")
    k0 = component_property(7, "k0")


# Basis products e_a * e_b = _SIGNS[a, b] * e_{_INDICES[a, b]}, basis order r, i, j, k, l, i0, j0, k0.
# The first four units span the quaternions; i * i0 = l and i0 * i = -l.
_INDICES = np.array(
    [
        [0, 1, 2, 3, 4, 5, 6, 7],
        [1, 0, 3, 2, 5, 4, 7, 6],
        [2, 3, 0, 1, 6, 7, 4, 5],
        [3, 2, 1, 0, 7, 6, 5, 4],
        [4, 5, 6, 7, 0, 1, 2, 3],
        [5, 4, 7, 6, 1, 0, 3, 2],
        [6, 7, 4, 5, 2, 3, 0, 1],
        [7, 6, 5, 4, 3, 2, 1, 0],
    ],
    dtype=np.intp,
)
_SIGNS = np.array(
    [
        [1, 1, 1, 1, 1, 1, 1, 1],
        [1, -1, 1, -1, -1, 1, -1, 1],
        [1, -1, -1, 1, 1, -1, -1, 1],
        [1, 1, -1, -1, 1, 1, -1, -1],
        [1, 1, -1, -1, -1, -1, 1, 1],
        [1, -1, 1, -1, 1, -1, 1, -1],
        [1, 1, 1, 1, -1, -1, -1, -1],
        [1, -1, -1, 1, -1, 1, 1, -1],
    ],
    dtype=np.float64,
)


class OctonionFloat64Algebra(HypercomplexAlgebra):
    """Division algebra of float64 octonions.

    Multiplication is neither commutative nor associative, though it is
    alternative: ``(a a) b == a (a b)``.
    """

    member_class = OctonionFloat64Member

    def _product(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        out = np.zeros(8, dtype=np.float64)
        np.add.at(out, _INDICES, _SIGNS * np.outer(x, y))
        return out

    def i(self, a: OctonionFloat64Member) -> None:
        self.imaginary_unit(1, a)

    def j(self, a: OctonionFloat64Member) -> None:
        self.imaginary_unit(2, a)

    def k(self, a: OctonionFloat64Member) -> None:
        self.imaginary_unit(3, a)

    def l(self, a: OctonionFloat64Member) -> None:  # noqa: E743
        self.imaginary_unit(4, a)

    def i0(self, a: OctonionFloat64Member) -> None:
        self.imaginary_unit(5, a)

    def j0(self, a: OctonionFloat64Member) -> None:
        self.imaginary_unit(6, a)

    def k0(self, a: OctonionFloat64Member) -> None:
        self.imaginary_unit(7, a)

    def commutator(self, a: OctonionFloat64Member, b: OctonionFloat64Member, c: OctonionFloat64Member) -> None:
        """c = a*b - b*a."""
        ab, ba = self.construct(), self.construct()
        self.multiply(a, b, ab)
        self.multiply(b, a, ba)
        self.subtract(ab, ba, c)

    def associator(
        self,
        a: OctonionFloat64Member,
        b: OctonionFloat64Member,
        c: OctonionFloat64Member,
        d: OctonionFloat64Member,
    ) -> None:
        """d = a*(b*c) - (a*b)*c."""
        left, right = self.construct(), self.construct()
        self.multiply(b, c, left)
        self.multiply(a, left, left)
        self.multiply(a, b, right)
        self.multiply(right, c, right)
        self.subtract(left, right, d)


ODBL = OctonionFloat64Algebra()
OctonionFloat64Member.algebra = ODBL
