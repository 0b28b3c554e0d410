"""Lift scalar kernel operations over every element of an aggregate."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def check_same_shape(a: Any, b: Any) -> None:
    if a.dims != b.dims:
        error_message = f"Shape mismatch: {a.dims} vs {b.dims}."
        raise ValueError(error_message)


def fill(op: Callable[[Any], None], a: Any) -> None:
    """Apply a filling operation such as ``zero`` or ``nan`` to every element of ``a``."""
    value = a.algebra.construct()
    for offset in range(a.num_elems()):
        op(value)
        a.storage.set(offset, value)


def transform1(op: Callable[[Any, Any], None], a: Any, b: Any) -> None:
    """b[k] = op(a[k]); ``b`` takes the shape of ``a``."""
    b.alloc(a.dims)
    x, y = a.algebra.construct(), a.algebra.construct()
    for offset in range(a.num_elems()):
        a.storage.get(offset, x)
        op(x, y)
        b.storage.set(offset, y)


def transform2(op: Callable[[Any, Any, Any], None], a: Any, b: Any, c: Any) -> None:
    """c[k] = op(a[k], b[k]) for operands of identical shape."""
    check_same_shape(a, b)
    c.alloc(a.dims)
    x, y, z = a.algebra.construct(), a.algebra.construct(), a.algebra.construct()
    for offset in range(a.num_elems()):
        a.storage.get(offset, x)
        b.storage.get(offset, y)
        op(x, y, z)
        c.storage.set(offset, z)


def transform_with(op: Callable[[Any, Any, Any], None], parameter: Any, a: Any, b: Any) -> None:
    """b[k] = op(parameter, a[k]) for a fixed leading parameter such as a scale factor."""
    b.alloc(a.dims)
    x, y = a.algebra.construct(), a.algebra.construct()
    for offset in range(a.num_elems()):
        a.storage.get(offset, x)
        op(parameter, x, y)
        b.storage.set(offset, y)


def all_elements(predicate: Callable[[Any], bool], a: Any) -> bool:
    value = a.algebra.construct()
    for offset in range(a.num_elems()):
        a.storage.get(offset, value)
        if not predicate(value):
            return False
    return True


def any_element(predicate: Callable[[Any], bool], a: Any) -> bool:
    value = a.algebra.construct()
    for offset in range(a.num_elems()):
        a.storage.get(offset, value)
        if predicate(value):
            return True
    return False


def all_pairs(predicate: Callable[[Any, Any], bool], a: Any, b: Any) -> bool:
    """True when ``predicate`` holds for every pair of elements at the same offset."""
    check_same_shape(a, b)
    x, y = a.algebra.construct(), a.algebra.construct()
    for offset in range(a.num_elems()):
        a.storage.get(offset, x)
        b.storage.get(offset, y)
        if not predicate(x, y):
            return False
    return True
