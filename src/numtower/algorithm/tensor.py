"""Outer products, contractions and tensor powers over flat tensor storage."""

from __future__ import annotations

from typing import Any

from numtower.capabilities import TensorProduct


def outer_product(element: Any, a: Any, b: Any, c: Any) -> None:
    """c = a (x) b with ``c.rank == a.rank + b.rank``.

    Axis 0 is fastest, so the element at a's offset ``p`` and b's offset ``q``
    lands at ``p + a.num_elems() * q``.
    """
    x, y, z = element.construct(), element.construct(), element.construct()
    count_a = a.num_elems()
    for q in range(b.num_elems()):
        b.storage.get(q, y)
        for p in range(count_a):
            a.storage.get(p, x)
            element.multiply(x, y, z)
            c.storage.set(p + count_a * q, z)


def contract(element: Any, i: int, j: int, a: Any, b: Any) -> None:
    """b = trace of ``a`` over axes i and j; b must already have rank a.rank - 2."""
    dim_count = a.dimension(0)
    kept_axes = [axis for axis in range(a.rank()) if axis not in (i, j)]
    x, total = element.construct(), element.construct()
    for offset in range(b.num_elems()):
        out_index = b.index(offset)
        full_index = [0] * a.rank()
        for axis, position in zip(kept_axes, out_index, strict=True):
            full_index[axis] = position
        element.zero(total)
        for k in range(dim_count):
            full_index[i] = k
            full_index[j] = k
            a.get_v(full_index, x)
            element.add(total, x, total)
        b.storage.set(offset, total)


def power(algebra: TensorProduct, n: int, a: Any, b: Any) -> None:
    """b = a (x) a (x) ... (x) a, n >= 1 factors."""
    total, scratch = algebra.construct(a), algebra.construct(a)
    for _ in range(n - 1):
        algebra.outer_product(total, a, scratch)
        total, scratch = scratch, total
    algebra.assign(total, b)
