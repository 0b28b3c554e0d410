"""Vectors, matrices and Cartesian tensors built on flat storage."""

from .base import AggregateAlgebra
from .base import AggregateMember
from .matrix import MatrixAlgebra
from .matrix import MatrixMember
from .storage import ArrayStorage
from .tensor import CartesianTensorAlgebra
from .tensor import CartesianTensorMember
from .vector import VectorAlgebra
from .vector import VectorMember

__all__ = [
    "AggregateAlgebra",
    "AggregateMember",
    "ArrayStorage",
    "CartesianTensorAlgebra",
    "CartesianTensorMember",
    "MatrixAlgebra",
    "MatrixMember",
    "VectorAlgebra",
    "VectorMember",
]
