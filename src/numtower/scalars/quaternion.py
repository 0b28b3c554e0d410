"""Quaternions at float64 precision."""

from __future__ import annotations

import numpy as np
import quaternion

from numtower.scalars.base import HypercomplexAlgebra, ScalarMember, component_property


class QuaternionFloat64Member(ScalarMember):
    """Quaternion value (r, i, j, k)."""

    __slots__ = []

    COMPONENTS = ("r", "i", "j", "k")

    r = component_property(0, "real")
    i = component_property(1, "i")
    j = component_property(2, "j")
    k = component_property(3, "k")

    def as_quaternion(self) -> quaternion.quaternion:
        """Convert to a numpy-quaternion value (w, x, y, z)."""
        return quaternion.quaternion(*self._data)

    @classmethod
    def from_quaternion(cls, q: quaternion.quaternion) -> QuaternionFloat64Member:
        """Build from a numpy-quaternion value."""
        return cls(q.w, q.x, q.y, q.z)


def _quat_mul(u: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Hamilton product: i*j = k, j*k = i, k*i = j."""
    return np.array(
        [
            u[0] * v[0] - u[1] * v[1] - u[2] * v[2] - u[3] * v[3],
            u[0] * v[1] + u[1] * v[0] + u[2] * v[3] - u[3] * v[2],
            u[0] * v[2] - u[1] * v[3] + u[2] * v[0] + u[3] * v[1],
            u[0] * v[3] + u[1] * v[2] - u[2] * v[1] + u[3] * v[0],
        ],
        dtype=np.float64,
    )


class QuaternionFloat64Algebra(HypercomplexAlgebra):
    """Skew field of float64 quaternions. Multiplication is not commutative."""

    member_class = QuaternionFloat64Member

    def _product(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return _quat_mul(x, y)

    def i(self, a: QuaternionFloat64Member) -> None:
        self.imaginary_unit(1, a)

    def j(self, a: QuaternionFloat64Member) -> None:
        self.imaginary_unit(2, a)

    def k(self, a: QuaternionFloat64Member) -> None:
        self.imaginary_unit(3, a)


QDBL = QuaternionFloat64Algebra()
QuaternionFloat64Member.algebra = QDBL
