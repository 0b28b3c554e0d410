"""Scalar members and their algebra kernels."""

from .base import GAMMA
from .base import PHI
from .base import HypercomplexAlgebra
from .base import ScalarMember
from .base import seed_random
from .boolean import BOOL
from .boolean import BooleanAlgebra
from .boolean import BooleanMember
from .complex import CDBL
from .complex import ComplexFloat64Algebra
from .complex import ComplexFloat64Member
from .octonion import ODBL
from .octonion import OctonionFloat64Algebra
from .octonion import OctonionFloat64Member
from .quaternion import QDBL
from .quaternion import QuaternionFloat64Algebra
from .quaternion import QuaternionFloat64Member
from .real import DBL
from .real import Float64Algebra
from .real import Float64Member

__all__ = [
    "BOOL",
    "CDBL",
    "DBL",
    "GAMMA",
    "ODBL",
    "PHI",
    "QDBL",
    "BooleanAlgebra",
    "BooleanMember",
    "ComplexFloat64Algebra",
    "ComplexFloat64Member",
    "Float64Algebra",
    "Float64Member",
    "HypercomplexAlgebra",
    "OctonionFloat64Algebra",
    "OctonionFloat64Member",
    "QuaternionFloat64Algebra",
    "QuaternionFloat64Member",
    "ScalarMember",
    "seed_random",
]
