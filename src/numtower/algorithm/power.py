"""Integer powers by repeated multiplication."""

from __future__ import annotations

from typing import Any

from numtower.capabilities import Unital


def power(algebra: Unital, n: int, a: Any, b: Any) -> None:
    """b = a^n for non-zero n; a negative exponent inverts ``a`` first.

    Only ``construct``, ``invert``, ``multiply`` and ``assign`` are used, so any
    kernel whose ``construct(a)`` copies its argument works, including matrix
    kernels whose ``multiply`` refuses aliased outputs.
    """
    if n == 0:
        error_message = "Exponent 0 must be handled by the calling kernel."
        raise ValueError(error_message)
    base = algebra.construct(a)
    if n < 0:
        algebra.invert(a, base)
        n = -n
    total = algebra.construct(base)
    scratch = algebra.construct(base)
    for _ in range(n - 1):
        algebra.multiply(total, base, scratch)
        total, scratch = scratch, total
    algebra.assign(total, b)
