"""Bracketed literal syntax for scalars, vectors, matrices and tensors.

Grammar::

    value  := number | group | list
    group  := "(" number ("," number)* ")" | "{" number ("," number)* "}"
    list   := "[" [value ("," value)*] "]"

A group holds the components of one scalar element (at most eight). Lists nest
one level per tensor axis: the outermost list is the last (slowest) axis and the
innermost list is axis 0, so reading order is flat storage order.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from typing import NamedTuple

import numpy as np

MAX_COMPONENTS = 8

_TOKEN = re.compile(
    r"\s*(?:(?P<punct>[\[\](){},])|(?P<number>[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)))",
    re.IGNORECASE,
)
_CLOSING = {"(": ")", "{": "}"}


class LiteralError(ValueError):
    """Raised for text that is not a well-formed literal."""


class TensorLiteral(NamedTuple):
    """Normalized parse result.

    Attributes:
        dims: Per-axis extents, axis 0 first. Empty for a scalar.
        values: One tuple of decimal components per element, in storage order.
    """

    dims: tuple[int, ...]
    values: list[tuple[Decimal, ...]]

    @property
    def rank(self) -> int:
        return len(self.dims)


def _tokenize(text: str) -> list[str]:
    tokens = []
    position = 0
    stripped_end = len(text.rstrip())
    while position < stripped_end:
        match = _TOKEN.match(text, position)
        if match is None:
            error_message = f"Unexpected character at position {position} in literal {text!r}"
            raise LiteralError(error_message)
        tokens.append(match.group("punct") or match.group("number"))
        position = match.end()
    return tokens


class _Parser:
    """Recursive descent over the token list."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.tokens = _tokenize(text)
        self.position = 0

    def _peek(self) -> str | None:
        return self.tokens[self.position] if self.position < len(self.tokens) else None

    def _next(self) -> str:
        token = self._peek()
        if token is None:
            error_message = f"Unexpected end of literal {self.text!r}"
            raise LiteralError(error_message)
        self.position += 1
        return token

    def _expect(self, expected: str) -> None:
        token = self._next()
        if token != expected:
            error_message = f"Expected {expected!r} but found {token!r} in literal {self.text!r}"
            raise LiteralError(error_message)

    def _number(self) -> Decimal:
        token = self._next()
        try:
            return Decimal(token)
        except InvalidOperation as exc:
            error_message = f"Expected a number but found {token!r} in literal {self.text!r}"
            raise LiteralError(error_message) from exc

    def parse(self) -> tuple[tuple[int, ...], list[tuple[Decimal, ...]]]:
        shape, values = self._value()
        if self._peek() is not None:
            error_message = f"Trailing text after literal {self.text!r}"
            raise LiteralError(error_message)
        return shape, values

    def _value(self) -> tuple[tuple[int, ...], list[tuple[Decimal, ...]]]:
        token = self._peek()
        if token == "[":
            return self._list()
        if token in _CLOSING:
            return (), [self._group()]
        return (), [(self._number(),)]

    def _group(self) -> tuple[Decimal, ...]:
        opening = self._next()
        components = [self._number()]
        while self._peek() == ",":
            self._next()
            components.append(self._number())
        self._expect(_CLOSING[opening])
        if len(components) > MAX_COMPONENTS:
            error_message = f"Element has {len(components)} components; at most {MAX_COMPONENTS} allowed."
            raise LiteralError(error_message)
        return tuple(components)

    def _list(self) -> tuple[tuple[int, ...], list[tuple[Decimal, ...]]]:
        self._expect("[")
        if self._peek() == "]":
            self._next()
            return (0,), []
        child_shape, values = self._value()
        count = 1
        while self._peek() == ",":
            self._next()
            shape, more = self._value()
            if shape != child_shape:
                error_message = f"Ragged nesting in literal {self.text!r}: {shape} vs {child_shape}"
                raise LiteralError(error_message)
            values.extend(more)
            count += 1
        self._expect("]")
        return (count, *child_shape), values


def parse(text: str) -> TensorLiteral:
    """Parse a literal into its dims and flat element values."""
    shape, values = _Parser(text).parse()
    return TensorLiteral(dims=tuple(reversed(shape)), values=values)


def element_components(element: Sequence[Decimal], component_count: int) -> np.ndarray:
    """Convert one parsed element into ``component_count`` float components.

    Missing components are zero; a non-zero component beyond the kind's count is an error.
    """
    out = np.zeros(component_count, dtype=np.float64)
    for index, value in enumerate(element):
        if index < component_count:
            out[index] = float(value)
        elif value != 0:
            error_message = f"Component {index} = {value} does not fit a kind with {component_count} components."
            raise ValueError(error_message)
    return out


def format_number(value: float) -> str:
    """Shortest text that parses back to the same float."""
    return repr(float(value))


def format_value(components: Sequence[float] | np.ndarray) -> str:
    """A single component prints bare; several print as a parenthesized group."""
    if len(components) == 1:
        return format_number(components[0])
    return "(" + ",".join(format_number(x) for x in components) + ")"


def format_nested(dims: Sequence[int], elements: Sequence[str]) -> str:
    """Wrap already-formatted elements in one bracket level per axis."""
    if not dims:
        return elements[0]
    shape = list(reversed(dims))

    def _render(axis: int, offset: int) -> str:
        extent = shape[axis]
        if axis == len(shape) - 1:
            return "[" + ",".join(elements[offset : offset + extent]) + "]"
        stride = int(np.prod(shape[axis + 1 :]))
        return "[" + ",".join(_render(axis + 1, offset + k * stride) for k in range(extent)) + "]"

    return _render(0, 0)
