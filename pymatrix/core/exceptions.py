"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Errors that mirror a builtin (IndexError,
ZeroDivisionError, TypeError) inherit from it as well so that generic
Python code keeps working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pymatrix.matrix.dimensions import Dimensions


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Dimensions are invalid or inconsistent.

    Base class for every shape-related failure: zero-sized construction,
    wrong-length input data, operands that do not fit together, and
    operations that need a square matrix.
    """
    pass


class InvalidDimensionsError(DimensionError):
    """
    A matrix or vector was requested with a size of less than 1.

    Attributes:
        rows: Requested row count
        cols: Requested column count
    """

    def __init__(self, rows: int, cols: int, message: str | None = None):
        if message is None:
            message = (
                f"Dimensions with a size of less than 1 are invalid "
                f"(got rows={rows}, cols={cols})."
            )
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class InvalidInputDimensionsError(DimensionError):
    """
    Supplied data does not have the length the requested shape needs.

    Attributes:
        actual: Length of the data that was supplied
        expected: Length the requested shape requires
    """

    def __init__(self, actual: int, expected: int):
        super().__init__(
            f"Invalid input dimensions. Input has length {actual}, "
            f"but should have length {expected}."
        )
        self.actual = actual
        self.expected = expected


class DimensionMismatchError(DimensionError):
    """
    Two operands have incompatible dimensions for an operation.

    Attributes:
        left: Dimensions of the left operand
        right: Dimensions of the right operand
        operation: Name of the operation ('add', 'subtract', 'multiply')
    """

    def __init__(self, left: 'Dimensions', right: 'Dimensions', operation: str):
        super().__init__(
            f"Dimensions of two matrices do not match in the correct way. "
            f"Cannot {operation} {left} matrix with {right} matrix."
        )
        self.left = left
        self.right = right
        self.operation = operation


class NotSquareError(DimensionError):
    """
    An operation that requires a square matrix received a non-square one.

    Attributes:
        dims: Dimensions of the offending matrix
        operation: Name of the operation, if known
    """

    def __init__(self, dims: 'Dimensions', operation: str | None = None):
        message = "Not a square matrix. Rows and cols need to be the same"
        if operation is not None:
            message += f" to {operation}"
        super().__init__(f"{message} (got {dims}).")
        self.dims = dims
        self.operation = operation


class NotVectorShapedError(DimensionError):
    """
    A matrix cannot be viewed as a vector because neither dimension is 1.

    Attributes:
        dims: Dimensions of the matrix
    """

    def __init__(self, dims: 'Dimensions'):
        super().__init__(
            f"Could not convert {dims} matrix into vector: "
            f"one of its dimensions must be 1."
        )
        self.dims = dims


class IndexOutOfBoundsError(PyMatrixError, IndexError):
    """
    Row, column or entry access beyond the container's bounds.

    Attributes:
        index: The index that was requested
        bound: Number of valid positions along that axis
        axis: 'row', 'col' or 'entry'
    """

    def __init__(self, index: int, bound: int | None = None, axis: str = 'row'):
        message = (
            f"Tried to access a matrix at index `{index}`, "
            f"which is out of bounds."
        )
        if bound is not None:
            message += f" Valid {axis} indices are 0..{bound - 1}."
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class CapabilityError(ValidationError, TypeError):
    """
    The element type lacks a numeric capability an operation needs.

    Attributes:
        capability: The missing capability string
        dtype: The element dtype that lacks it
        operation: Name of the operation that required it
    """

    def __init__(self, capability: str, dtype: object, operation: str):
        super().__init__(
            f"Cannot {operation}: element type {dtype} does not support "
            f"the '{capability}' capability."
        )
        self.capability = capability
        self.dtype = dtype
        self.operation = operation


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """
    A matrix or vector was divided by the additive zero of its type.

    Raised before any arithmetic happens, also for floating point element
    types where numpy would otherwise produce inf/nan entries.

    Attributes:
        operation: Name of the operation ('divide')
    """

    def __init__(self, operation: str = 'divide'):
        super().__init__(f"Cannot {operation} by zero.")
        self.operation = operation
