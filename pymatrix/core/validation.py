"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion: integer entries stay integers, Fractions
      stay Fractions (the element type is generic)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    DivisionByZeroError,
    IndexOutOfBoundsError,
    InvalidDimensionsError,
    InvalidInputDimensionsError,
    ValidationError,
)


def is_number(value: Any) -> bool:
    """True for a single Python or numpy number (booleans excluded)."""
    return isinstance(value, numbers.Number) and not isinstance(value, (bool, np.bool_))


def check_entries(values: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and copy a flat sequence of matrix entries.

    Accepts any array-like of numbers and returns a fresh 1D numpy array,
    so the caller owns its storage. Numeric dtypes are preserved.
    Object dtype is accepted only when every element is a Python number
    (e.g. fractions.Fraction), which keeps exact arithmetic available.

    Args:
        values: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with ndim == 1

    Raises:
        ValidationError: If input cannot be converted or is non-numeric
        DimensionError: If input is not one-dimensional
    """
    try:
        result = np.array(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.ndim != 1:
        raise DimensionError(
            f"{name}: expected a flat sequence, got {result.ndim}D with shape {result.shape}"
        )

    if result.dtype == object:
        bad = [type(v).__name__ for v in result if not is_number(v)]
        if bad:
            raise ValidationError(
                f"{name}: converted to object dtype with non-numeric entries "
                f"(first offending type: {bad[0]})"
            )
        return result

    # Reject non-numeric dtypes (bool, strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_scalar(value: Any, name: str) -> None:
    """
    Verify a value is a single number.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not a number (booleans are rejected)
    """
    if not is_number(value):
        raise ValidationError(
            f"{name}: expected a number, got {type(value).__name__}"
        )


def check_dtype(dtype: DTypeLike, name: str = 'dtype') -> np.dtype:
    """
    Validate a requested element dtype.

    Args:
        dtype: Anything np.dtype() accepts
        name: Parameter name for error messages

    Returns:
        The normalised numpy dtype

    Raises:
        ValidationError: If the dtype is not numeric (object is allowed)
    """
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a dtype: {e}") from e

    if result != object and not np.issubdtype(result, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result}, expected a numeric dtype"
        )
    return result


def check_castable(values: Any, dtype: DTypeLike, name: str) -> None:
    """
    Verify that storing `values` in `dtype` storage loses nothing.

    Casts within a kind (int64 into int32, float64 into float32) and
    widening casts (int into float, float into complex) are accepted.
    Narrowing the kind (float into int, complex into float) is not.
    Object storage accepts any number; Python numbers held in object
    arrays go into integer storage only when they are Integral.

    Args:
        values: A number or an array of numbers
        dtype: Dtype of the target storage
        name: Parameter name for error messages

    Raises:
        ValidationError: If the assignment would truncate or drop a part
    """
    target = np.dtype(dtype)
    if target == object:
        return

    source = np.asarray(values)
    if source.dtype == object:
        if np.issubdtype(target, np.inexact):
            return
        ok = all(isinstance(v, numbers.Integral) for v in source.ravel())
    elif np.issubdtype(source.dtype, np.integer) and np.issubdtype(target, np.integer):
        ok = True
    else:
        ok = np.can_cast(source.dtype, target, 'same_kind')

    if not ok:
        raise ValidationError(
            f"{name}: cannot store {source.dtype} values in a {target} "
            f"matrix without losing information"
        )


def check_size(rows: Any, cols: Any) -> None:
    """
    Verify a requested shape is made of positive integers.

    Args:
        rows: Requested row count
        cols: Requested column count

    Raises:
        ValidationError: If either value is not an integer
        InvalidDimensionsError: If either value is less than 1
    """
    for name, value in (('rows', rows), ('cols', cols)):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise ValidationError(
                f"{name}: expected an integer, got {type(value).__name__}"
            )
    if rows < 1 or cols < 1:
        raise InvalidDimensionsError(int(rows), int(cols))


def check_length(values: NDArray[Any], expected: int) -> None:
    """
    Verify a flat entry array has exactly the expected length.

    Args:
        values: 1D entry array
        expected: Required length

    Raises:
        InvalidInputDimensionsError: If the lengths differ
    """
    if len(values) != expected:
        raise InvalidInputDimensionsError(len(values), expected)


def check_nonzero_divisor(value: Any, operation: str = 'divide') -> None:
    """
    Verify a scalar divisor is not the additive zero.

    Applied to every element type, floating point included, so that a
    division never silently fills a matrix with inf or nan.

    Args:
        value: Divisor
        operation: Operation name for the error message

    Raises:
        DivisionByZeroError: If value == 0
    """
    if value == 0:
        raise DivisionByZeroError(operation)


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify an index lies in [0, bound).

    Negative indices are rejected rather than counted from the end.

    Args:
        index: Requested index
        bound: Number of valid positions
        axis: 'row', 'col' or 'entry' (for error messages)

    Returns:
        The index as a Python int

    Raises:
        TypeError: If index is not an integer
        IndexOutOfBoundsError: If index < 0 or index >= bound
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"{axis} index must be an integer, got {type(index).__name__}")
    if index < 0 or index >= bound:
        raise IndexOutOfBoundsError(int(index), bound, axis)
    return int(index)
