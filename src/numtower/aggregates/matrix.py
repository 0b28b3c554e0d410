"""Matrices over a scalar kernel, forming a ring with unity.

Elements are stored row-major: element (r, c) sits at offset ``r * cols + c``,
which makes the storage dims ``(cols, rows)``.

Determinants use LU elimination and inverses Gauss-Jordan elimination, both
with partial pivoting on the element of largest norm. Pivoting keeps the
multipliers bounded by one, which is stable in practice for well-conditioned
matrices but offers no guarantee for ill-conditioned ones; no scaling or
iterative refinement is attempted. For quaternion elements both algorithms
apply row operations by left multiplication, so the inverse is exact, while the
"determinant" is the signed product of pivots and is not a multiplicative
invariant. Octonion elements are not associative, so results there are only
approximate.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from numtower import literals
from numtower.aggregates.base import AggregateAlgebra, AggregateMember
from numtower.algorithm import power as power_algorithm
from numtower.algorithm import taylor
from numtower.config import get_settings
from numtower.scalars.base import HypercomplexAlgebra, ScalarMember
from numtower.scalars.real import Float64Member

logger = logging.getLogger(__name__)


class MatrixMember(AggregateMember):
    """Two-dimensional aggregate of ``rows`` x ``cols`` elements."""

    __slots__ = []

    def __init__(
        self,
        algebra: HypercomplexAlgebra,
        rows: int | str | MatrixMember = 0,
        cols: int = 0,
        values: Sequence[ScalarMember] | None = None,
    ) -> None:
        """Empty, ``rows`` x ``cols`` zeros (or ``values`` in row-major order), a copy, or a literal."""
        super().__init__(algebra, (0, 0))
        if isinstance(rows, str):
            self.load_literal(rows)
        elif isinstance(rows, MatrixMember):
            self.set(rows)
        else:
            self.alloc(rows, cols)
        if values is not None:
            if len(values) != self.num_elems():
                error_message = f"Expected {self.num_elems()} values; got {len(values)}."
                raise ValueError(error_message)
            for offset, value in enumerate(values):
                self._storage.set(offset, value)

    def _check_dims(self, dims: tuple[int, ...]) -> None:
        if len(dims) != 2:
            error_message = f"A matrix has exactly two axes; got dims {dims}."
            raise ValueError(error_message)

    def rows(self) -> int:
        return self._dims[1]

    def cols(self) -> int:
        return self._dims[0]

    def alloc(self, rows: int | Sequence[int], cols: int | None = None) -> bool:
        """Adopt a ``rows`` x ``cols`` shape, or raw storage dims ``(cols, rows)``."""
        return super().alloc(rows if cols is None else (cols, rows))

    def init(self, rows: int | Sequence[int], cols: int | None = None) -> None:
        super().init(rows if cols is None else (cols, rows))

    def reshape(self, rows: int | Sequence[int], cols: int | None = None) -> None:
        super().reshape(rows if cols is None else (cols, rows))

    def load_literal(self, text: str) -> None:
        """Parse a nested-list literal; ``[]`` is the 0 x 0 matrix."""
        if literals.parse(text).dims == (0,):
            self.init(0, 0)
            return
        super().load_literal(text)

    def get_value(self, row: int, col: int, value: ScalarMember) -> None:
        self.get_v((col, row), value)

    def set_value(self, row: int, col: int, value: ScalarMember) -> None:
        self.set_v((col, row), value)


class MatrixAlgebra(AggregateAlgebra):
    """Ring operations over square and rectangular matrices of one scalar kind."""

    member_type = MatrixMember

    def construct(self, *args: Any) -> MatrixMember:
        return MatrixMember(self._element, *args)

    def _rows(self, a: MatrixMember) -> list[list[ScalarMember]]:
        """Copies of the elements, row by row."""
        rows = []
        for row in range(a.rows()):
            values = []
            for col in range(a.cols()):
                value = self._element.construct()
                a.get_value(row, col, value)
                values.append(value)
            rows.append(values)
        return rows

    def _from_rows(self, rows: list[list[ScalarMember]], cols: int, b: MatrixMember) -> None:
        b.alloc(len(rows), cols)
        for row, values in enumerate(rows):
            for col, value in enumerate(values):
                b.set_value(row, col, value)

    def _require_square(self, a: MatrixMember, operation: str) -> int:
        if a.rows() != a.cols():
            error_message = f"{operation} needs a square matrix; got {a.rows()}x{a.cols()}."
            raise ValueError(error_message)
        return a.rows()

    # Unity and constants fill the leading diagonal.

    def _diagonal(self, fill: Callable[[ScalarMember], None], a: MatrixMember) -> None:
        a.storage.fill_zero()
        value = self._element.construct()
        fill(value)
        for position in range(min(a.rows(), a.cols())):
            a.set_value(position, position, value)

    def unity(self, a: MatrixMember) -> None:
        self._diagonal(self._element.unity, a)

    def pi(self, a: MatrixMember) -> None:
        self._diagonal(self._element.pi, a)

    def e(self, a: MatrixMember) -> None:
        self._diagonal(self._element.e, a)

    def gamma(self, a: MatrixMember) -> None:
        self._diagonal(self._element.gamma, a)

    def phi(self, a: MatrixMember) -> None:
        self._diagonal(self._element.phi, a)

    def is_unity(self, a: MatrixMember) -> bool:
        value = self._element.construct()
        for row in range(a.rows()):
            for col in range(a.cols()):
                a.get_value(row, col, value)
                expected = self._element.is_unity if row == col else self._element.is_zero
                if not expected(value):
                    return False
        return True

    # Ring operations

    def multiply(self, a: MatrixMember, b: MatrixMember, c: MatrixMember) -> None:
        """c = a b. The output may not alias an operand."""
        if c is a or c is b:
            error_message = "Matrix multiply cannot write into one of its operands."
            raise ValueError(error_message)
        if a.cols() != b.rows():
            error_message = f"Inner dimensions differ: {a.rows()}x{a.cols()} times {b.rows()}x{b.cols()}."
            raise ValueError(error_message)
        c.init(a.rows(), b.cols())
        x, y, term, total = (self._element.construct() for _ in range(4))
        for row in range(a.rows()):
            for col in range(b.cols()):
                self._element.zero(total)
                for k in range(a.cols()):
                    a.get_value(row, k, x)
                    b.get_value(k, col, y)
                    self._element.multiply(x, y, term)
                    self._element.add(total, term, total)
                c.set_value(row, col, total)

    def power(self, n: int, a: MatrixMember, b: MatrixMember) -> None:
        """b = a^n; n = 0 gives the identity of a's shape and n < 0 inverts first."""
        if n == 0:
            b.alloc(a.dims)
            self.unity(b)
            return
        power_algorithm.power(self, n, a, b)

    def transpose(self, a: MatrixMember, b: MatrixMember) -> None:
        self._transpose(lambda x, y: y.set(x), a, b)

    def conjugate_transpose(self, a: MatrixMember, b: MatrixMember) -> None:
        self._transpose(self._element.conjugate, a, b)

    def _transpose(self, op: Callable[[ScalarMember, ScalarMember], None], a: MatrixMember, b: MatrixMember) -> None:
        if a is b:
            error_message = "Transpose cannot be done in place."
            raise ValueError(error_message)
        b.alloc(a.cols(), a.rows())
        x, y = self._element.construct(), self._element.construct()
        for row in range(a.rows()):
            for col in range(a.cols()):
                a.get_value(row, col, x)
                op(x, y)
                b.set_value(col, row, y)

    def _pivot(self, rows: list[list[ScalarMember]], col: int) -> int | None:
        """Row at or below ``col`` whose entry in ``col`` has the largest non-zero norm."""
        best, best_norm = None, 0.0
        norm = Float64Member()
        for row in range(col, len(rows)):
            self._element.norm(rows[row][col], norm)
            if float(norm) > best_norm:
                best, best_norm = row, float(norm)
        return best

    def det(self, a: MatrixMember, d: ScalarMember) -> None:
        """d = det(a) by LU elimination with partial pivoting."""
        n = self._require_square(a, "det")
        if self.is_nan(a):
            self._element.nan(d)
            return
        el = self._element
        rows = self._rows(a)
        result, inverse, factor, term = (el.construct() for _ in range(4))
        el.unity(result)
        negate = False
        for col in range(n):
            pivot = self._pivot(rows, col)
            if pivot is None:
                el.zero(d)
                return
            if pivot != col:
                rows[col], rows[pivot] = rows[pivot], rows[col]
                negate = not negate
            el.invert(rows[col][col], inverse)
            for row in range(col + 1, n):
                el.multiply(rows[row][col], inverse, factor)
                for k in range(col, n):
                    el.multiply(factor, rows[col][k], term)
                    el.subtract(rows[row][k], term, rows[row][k])
            el.multiply(result, rows[col][col], result)
        if negate:
            el.negate(result, result)
        d.set(result)

    def invert(self, a: MatrixMember, b: MatrixMember) -> None:
        """b = inv(a) by Gauss-Jordan elimination; a singular matrix gives all NaN."""
        n = self._require_square(a, "invert")
        el = self._element
        rows = self._rows(a)
        inverse_rows = [[el.construct() for _ in range(n)] for _ in range(n)]
        for position in range(n):
            el.unity(inverse_rows[position][position])
        scale, factor, term = (el.construct() for _ in range(3))
        for col in range(n):
            pivot = self._pivot(rows, col)
            if pivot is None:
                logger.debug("Singular %dx%d matrix; inverse is NaN.", n, n)
                b.alloc(a.dims)
                self.nan(b)
                return
            rows[col], rows[pivot] = rows[pivot], rows[col]
            inverse_rows[col], inverse_rows[pivot] = inverse_rows[pivot], inverse_rows[col]
            el.invert(rows[col][col], scale)
            for k in range(n):
                el.multiply(scale, rows[col][k], rows[col][k])
                el.multiply(scale, inverse_rows[col][k], inverse_rows[col][k])
            for row in range(n):
                if row == col:
                    continue
                el.assign(rows[row][col], factor)
                for k in range(n):
                    el.multiply(factor, rows[col][k], term)
                    el.subtract(rows[row][k], term, rows[row][k])
                    el.multiply(factor, inverse_rows[col][k], term)
                    el.subtract(inverse_rows[row][k], term, inverse_rows[row][k])
        self._from_rows(inverse_rows, n, b)

    def divide(self, a: MatrixMember, b: MatrixMember, c: MatrixMember) -> None:
        """c = a * inv(b)."""
        inverse, result = self.construct(), self.construct()
        self.invert(b, inverse)
        self.multiply(a, inverse, result)
        c.set(result)

    # Matrix functions as Taylor series

    def exp(self, a: MatrixMember, b: MatrixMember) -> None:
        self._require_square(a, "exp")
        taylor.exp(self, get_settings().taylor_terms.exp, a, b)

    def log(self, a: MatrixMember, b: MatrixMember) -> None:
        """Series about the identity; accurate only when a is close to the identity."""
        self._require_square(a, "log")
        taylor.log(self, get_settings().taylor_terms.log, a, b)

    def sin(self, a: MatrixMember, b: MatrixMember) -> None:
        self._require_square(a, "sin")
        taylor.sin(self, get_settings().taylor_terms.trig, a, b)

    def cos(self, a: MatrixMember, b: MatrixMember) -> None:
        self._require_square(a, "cos")
        taylor.cos(self, get_settings().taylor_terms.trig, a, b)

    def sin_and_cos(self, a: MatrixMember, s: MatrixMember, c: MatrixMember) -> None:
        sine, cosine = self.construct(), self.construct()
        self.sin(a, sine)
        self.cos(a, cosine)
        s.set(sine)
        c.set(cosine)

    def tan(self, a: MatrixMember, b: MatrixMember) -> None:
        sine, cosine = self.construct(), self.construct()
        self.sin_and_cos(a, sine, cosine)
        taylor.ratio(self, sine, cosine, b)

    def sinh(self, a: MatrixMember, b: MatrixMember) -> None:
        self._require_square(a, "sinh")
        taylor.sinh(self, get_settings().taylor_terms.hyperbolic, a, b)

    def cosh(self, a: MatrixMember, b: MatrixMember) -> None:
        self._require_square(a, "cosh")
        taylor.cosh(self, get_settings().taylor_terms.hyperbolic, a, b)

    def sinh_and_cosh(self, a: MatrixMember, s: MatrixMember, c: MatrixMember) -> None:
        sine, cosine = self.construct(), self.construct()
        self.sinh(a, sine)
        self.cosh(a, cosine)
        s.set(sine)
        c.set(cosine)

    def tanh(self, a: MatrixMember, b: MatrixMember) -> None:
        sine, cosine = self.construct(), self.construct()
        self.sinh_and_cosh(a, sine, cosine)
        taylor.ratio(self, sine, cosine, b)

    def sinc(self, a: MatrixMember, b: MatrixMember) -> None:
        self._require_square(a, "sinc")
        taylor.sinc(self, get_settings().taylor_terms.sinc, a, b)

    def sincpi(self, a: MatrixMember, b: MatrixMember) -> None:
        self.sinc(taylor.scaled_by_pi(self, a), b)

    def sinch(self, a: MatrixMember, b: MatrixMember) -> None:
        self._require_square(a, "sinch")
        taylor.sinch(self, get_settings().taylor_terms.sinc, a, b)

    def sinchpi(self, a: MatrixMember, b: MatrixMember) -> None:
        self.sinch(taylor.scaled_by_pi(self, a), b)
