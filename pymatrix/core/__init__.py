"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the matrix
containers and the decomposition engine.

Key components:
    protocols: Element-type and container protocols
    capabilities: Numeric capability strings and checks
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numerical tolerances
"""

from pymatrix.core.protocols import (
    NumericContainer,
    SupportsMultiplicative,
)
from pymatrix.core.result import Result
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

__all__ = [
    # Protocols
    "NumericContainer",
    "SupportsMultiplicative",
    # Result
    "Result",
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
