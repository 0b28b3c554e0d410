"""Booleans as the degenerate member of the scalar tower."""

from __future__ import annotations

import numpy as np

from numtower.scalars.base import random_generator

_TRUE_TEXT = {"true", "1"}
_FALSE_TEXT = {"false", "0"}


class BooleanMember:
    """A single boolean value."""

    __slots__ = ["_data"]

    def __init__(self, value: bool | str | BooleanMember = False) -> None:
        self._data = np.zeros(1, dtype=np.bool_)
        if isinstance(value, BooleanMember):
            self.set(value)
        elif isinstance(value, str):
            text = value.strip().lower()
            if text not in _TRUE_TEXT | _FALSE_TEXT:
                error_message = f"Not a boolean literal: {value!r}"
                raise ValueError(error_message)
            self._data[0] = text in _TRUE_TEXT
        else:
            self._data[0] = bool(value)

    @property
    def value(self) -> bool:
        return bool(self._data[0])

    @value.setter
    def value(self, value: bool) -> None:
        self._data[0] = bool(value)

    def set(self, other: BooleanMember) -> None:
        self._data[0] = other._data[0]

    def get(self, other: BooleanMember) -> None:
        other.set(self)

    def duplicate(self) -> BooleanMember:
        return BooleanMember(self.value)

    def __bool__(self) -> bool:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BooleanMember):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __str__(self) -> str:
        return "true" if self.value else "false"

    def __repr__(self) -> str:
        return f"BooleanMember({self.value})"


class BooleanAlgebra:
    """Boolean ring with False as zero and True as unity."""

    def __repr__(self) -> str:
        return "BooleanAlgebra()"

    def construct(self, value: bool | str | BooleanMember = False) -> BooleanMember:
        return BooleanMember(value)

    def zero(self, a: BooleanMember) -> None:
        a.value = False

    def unity(self, a: BooleanMember) -> None:
        a.value = True

    def is_zero(self, a: BooleanMember) -> bool:
        return not a.value

    def is_unity(self, a: BooleanMember) -> bool:
        return a.value

    def assign(self, a: BooleanMember, b: BooleanMember) -> None:
        b.set(a)

    def is_equal(self, a: BooleanMember, b: BooleanMember) -> bool:
        return a.value == b.value

    def is_not_equal(self, a: BooleanMember, b: BooleanMember) -> bool:
        return a.value != b.value

    def logical_and(self, a: BooleanMember, b: BooleanMember, c: BooleanMember) -> None:
        c.value = a.value and b.value

    def logical_or(self, a: BooleanMember, b: BooleanMember, c: BooleanMember) -> None:
        c.value = a.value or b.value

    def logical_xor(self, a: BooleanMember, b: BooleanMember, c: BooleanMember) -> None:
        c.value = a.value != b.value

    def logical_not(self, a: BooleanMember, b: BooleanMember) -> None:
        b.value = not a.value

    def logical_nand(self, a: BooleanMember, b: BooleanMember, c: BooleanMember) -> None:
        c.value = not (a.value and b.value)

    def logical_nor(self, a: BooleanMember, b: BooleanMember, c: BooleanMember) -> None:
        c.value = not (a.value or b.value)

    def compare(self, a: BooleanMember, b: BooleanMember) -> int:
        """False orders before True."""
        return int(a.value) - int(b.value)

    def is_less(self, a: BooleanMember, b: BooleanMember) -> bool:
        return self.compare(a, b) < 0

    def is_greater(self, a: BooleanMember, b: BooleanMember) -> bool:
        return self.compare(a, b) > 0

    def min(self, a: BooleanMember, b: BooleanMember, c: BooleanMember) -> None:
        c.value = a.value and b.value

    def max(self, a: BooleanMember, b: BooleanMember, c: BooleanMember) -> None:
        c.value = a.value or b.value

    def random(self, a: BooleanMember) -> None:
        a.value = bool(random_generator().random() < 0.5)


BOOL = BooleanAlgebra()
