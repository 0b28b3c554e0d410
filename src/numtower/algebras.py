"""Process-wide algebra kernels, one per scalar kind and aggregate shape.

Kernels hold no mutable state and may be shared freely between threads; the
members passed to them may not.
"""

from numtower.aggregates.matrix import MatrixAlgebra
from numtower.aggregates.tensor import CartesianTensorAlgebra
from numtower.aggregates.vector import VectorAlgebra
from numtower.scalars.boolean import BOOL
from numtower.scalars.complex import CDBL
from numtower.scalars.octonion import ODBL
from numtower.scalars.quaternion import QDBL
from numtower.scalars.real import DBL

DBL_VEC = VectorAlgebra(DBL)
CDBL_VEC = VectorAlgebra(CDBL)
QDBL_VEC = VectorAlgebra(QDBL)
ODBL_VEC = VectorAlgebra(ODBL)

DBL_MAT = MatrixAlgebra(DBL)
CDBL_MAT = MatrixAlgebra(CDBL)
QDBL_MAT = MatrixAlgebra(QDBL)
ODBL_MAT = MatrixAlgebra(ODBL)

DBL_TEN = CartesianTensorAlgebra(DBL)
CDBL_TEN = CartesianTensorAlgebra(CDBL)
QDBL_TEN = CartesianTensorAlgebra(QDBL)
ODBL_TEN = CartesianTensorAlgebra(ODBL)

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
]
