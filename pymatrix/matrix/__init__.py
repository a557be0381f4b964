"""
Dense matrix and vector containers.

Public API:
    Dimensions(rows, cols)
    Matrix, matrix([[...], ...])
    Vector, vector(*values)
"""

from pymatrix.matrix.dimensions import Dimensions
from pymatrix.matrix.matrix import Matrix, matrix
from pymatrix.matrix.vector import Vector, vector

__all__ = [
    "Dimensions",
    "Matrix",
    "Vector",
    "matrix",
    "vector",
]
