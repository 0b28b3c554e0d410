"""Algebraic numeric tower over float64 real, complex, quaternion and octonion scalars."""

from . import capabilities
from .aggregates import CartesianTensorMember
from .aggregates import MatrixMember
from .aggregates import VectorMember
from .algebras import BOOL
from .algebras import CDBL
from .algebras import CDBL_MAT
from .algebras import CDBL_TEN
from .algebras import CDBL_VEC
from .algebras import DBL
from .algebras import DBL_MAT
from .algebras import DBL_TEN
from .algebras import DBL_VEC
from .algebras import ODBL
from .algebras import ODBL_MAT
from .algebras import ODBL_TEN
from .algebras import ODBL_VEC
from .algebras import QDBL
from .algebras import QDBL_MAT
from .algebras import QDBL_TEN
from .algebras import QDBL_VEC
from .literals import LiteralError
from .rounding import RoundMode
from .scalars import BooleanMember
from .scalars import ComplexFloat64Member
from .scalars import Float64Member
from .scalars import OctonionFloat64Member
from .scalars import QuaternionFloat64Member

__all__ = [
    "BOOL",
    "CDBL",
    "CDBL_MAT",
    "CDBL_TEN",
    "CDBL_VEC",
    "DBL",
    "DBL_MAT",
    "DBL_TEN",
    "DBL_VEC",
    "ODBL",
    "ODBL_MAT",
    "ODBL_TEN",
    "ODBL_VEC",
    "QDBL",
    "QDBL_MAT",
    "QDBL_TEN",
    "QDBL_VEC",
    "BooleanMember",
    "CartesianTensorMember",
    "ComplexFloat64Member",
    "Float64Member",
    "LiteralError",
    "MatrixMember",
    "OctonionFloat64Member",
    "QuaternionFloat64Member",
    "RoundMode",
    "VectorMember",
    "capabilities",
]
