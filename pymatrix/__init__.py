"""
PyMatrix: dense linear algebra over generic numeric element types.

Row-major matrices and shape-tagged vectors backed by numpy, with exact
arithmetic available through object arrays of Python numbers
(fractions.Fraction).

Submodules:
    matrix: Dimensions, Matrix and Vector containers
    decomposition: LU, determinant, inversion and reduced row echelon form
    core: Exceptions, validation, capabilities and result envelope
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    InvalidDimensionsError,
    InvalidInputDimensionsError,
    DimensionMismatchError,
    NotSquareError,
    NotVectorShapedError,
    IndexOutOfBoundsError,
    CapabilityError,
    NumericalError,
    DivisionByZeroError,
)
from pymatrix.matrix import Dimensions, Matrix, Vector, matrix, vector
from pymatrix.decomposition import det, inv, inv_solution, lu_decompose, rref

__all__ = [
    "__version__",
    # Containers
    "Dimensions",
    "Matrix",
    "Vector",
    "matrix",
    "vector",
    # Decompositions
    "lu_decompose",
    "det",
    "inv",
    "inv_solution",
    "rref",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionsError",
    "InvalidInputDimensionsError",
    "DimensionMismatchError",
    "NotSquareError",
    "NotVectorShapedError",
    "IndexOutOfBoundsError",
    "CapabilityError",
    "NumericalError",
    "DivisionByZeroError",
]
