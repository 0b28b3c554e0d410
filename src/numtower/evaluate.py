"""Evaluate one kernel operation on a bracketed literal from the command line.

Example:
    python -m numtower.evaluate --kind complex --op exp "(0,3.141592653589793)"
"""

from __future__ import annotations

import argparse
import enum
import inspect
import logging
from pathlib import Path
from typing import Any

from numtower import algebras, literals
from numtower.config import configure, get_settings, load_settings
from numtower.logger import setup_logging
from numtower.scalars.real import Float64Member

logger = logging.getLogger(__name__)


class Kind(enum.StrEnum):
    REAL = "real"
    COMPLEX = "complex"
    QUATERNION = "quaternion"
    OCTONION = "octonion"


SCALAR_ALGEBRAS = {
    Kind.REAL: algebras.DBL,
    Kind.COMPLEX: algebras.CDBL,
    Kind.QUATERNION: algebras.QDBL,
    Kind.OCTONION: algebras.ODBL,
}
VECTOR_ALGEBRAS = {
    Kind.REAL: algebras.DBL_VEC,
    Kind.COMPLEX: algebras.CDBL_VEC,
    Kind.QUATERNION: algebras.QDBL_VEC,
    Kind.OCTONION: algebras.ODBL_VEC,
}
MATRIX_ALGEBRAS = {
    Kind.REAL: algebras.DBL_MAT,
    Kind.COMPLEX: algebras.CDBL_MAT,
    Kind.QUATERNION: algebras.QDBL_MAT,
    Kind.OCTONION: algebras.ODBL_MAT,
}
TENSOR_ALGEBRAS = {
    Kind.REAL: algebras.DBL_TEN,
    Kind.COMPLEX: algebras.CDBL_TEN,
    Kind.QUATERNION: algebras.QDBL_TEN,
    Kind.OCTONION: algebras.ODBL_TEN,
}


def select_algebra(kind: Kind, rank: int, tensor: bool = False) -> Any:
    """Kernel for a literal of ``rank`` over ``kind``; ranks above 2 need ``tensor``."""
    kind = Kind(kind)
    if tensor:
        return TENSOR_ALGEBRAS[kind]
    match rank:
        case 0:
            return SCALAR_ALGEBRAS[kind]
        case 1:
            return VECTOR_ALGEBRAS[kind]
        case 2:
            return MATRIX_ALGEBRAS[kind]
        case _:
            error_message = f"A rank {rank} literal needs --tensor."
            raise ValueError(error_message)


def _result_member(op: str, kind: Kind, algebra: Any) -> Any:
    if op == "norm":
        return Float64Member()
    if op == "det":
        return SCALAR_ALGEBRAS[kind].construct()
    return algebra.construct()


def evaluate(kind: Kind, op: str, literal: str, tensor: bool = False) -> str:
    """Apply the unary operation ``op`` to ``literal`` and format the result.

    Operations taking the value alone are queries (predicates print as
    true/false) or fills (printed as the filled value); all others write into
    a fresh output member.

    Args:
        kind (Kind): Scalar kind of the elements.
        op (str): Kernel method name, e.g. ``exp`` or ``conjugate``.
        literal (str): Bracketed literal for the operand.
        tensor (bool): Treat the literal as a Cartesian tensor of any rank.

    Returns:
        str: The result in literal form.
    """
    kind = Kind(kind)
    algebra = select_algebra(kind, literals.parse(literal).rank, tensor)
    operation = None if op.startswith("_") else getattr(algebra, op, None)
    if not callable(operation):
        error_message = f"{type(algebra).__name__} has no operation {op!r}."
        raise ValueError(error_message)

    value = algebra.construct(literal)
    arity = len(inspect.signature(operation).parameters)
    logger.debug("Applying %s.%s to %s", type(algebra).__name__, op, value)
    if arity == 1:
        outcome = operation(value)
        if outcome is None:
            return str(value)
        if isinstance(outcome, bool):
            return str(outcome).lower()
        return str(outcome)
    if arity != 2:
        error_message = f"{op!r} is not a unary operation."
        raise ValueError(error_message)
    result = _result_member(op, kind, algebra)
    operation(value, result)
    return str(result)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Evaluate a numeric tower operation on a literal.")
    parser.add_argument("--kind", type=Kind, choices=list(Kind), default=Kind.REAL)
    parser.add_argument("--op", required=True, help="Kernel operation name, e.g. exp, norm, conjugate.")
    parser.add_argument("--tensor", action="store_true", help="Treat the literal as a Cartesian tensor.")
    parser.add_argument("--config-path", type=Path, default=None)
    parser.add_argument("--log-level", default=None)
    parser.add_argument("literal")
    args = parser.parse_args(argv)

    if args.config_path is not None:
        configure(load_settings(args.config_path))
    setup_logging(args.log_level or get_settings().log_level)

    print(evaluate(args.kind, args.op, args.literal, tensor=args.tensor))


if __name__ == "__main__":
    main()
