"""
Vector: a matrix with one dimension equal to 1.

A vector is tagged by its Dimensions as column-shaped (N x 1) or
row-shaped (1 x N). The tag decides how it takes part in a matrix product;
to_row_vector() / to_col_vector() re-tag a copy without moving any entry.
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.capabilities import (
    CAPABILITY_ADDITIVE,
    CAPABILITY_DIVISIBLE,
    CAPABILITY_MULTIPLICATIVE,
    CAPABILITY_SIGNED,
    dtype_supports,
    require,
)
from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    InvalidDimensionsError,
    NotVectorShapedError,
)
from pymatrix.core.protocols import SupportsMultiplicative
from pymatrix.core.validation import (
    check_castable,
    check_entries,
    check_index,
    check_length,
    check_nonzero_divisor,
    check_scalar,
    is_number,
)
from pymatrix.matrix._arithmetic import ordered_dot, render_rows
from pymatrix.matrix.dimensions import Dimensions
from pymatrix.matrix.matrix import Matrix


class Vector:
    """
    Dense vector with a row/column shape tag.

    Parameters
    ----------
    dims : Dimensions
        (n, 1) for a column vector or (1, n) for a row vector.
    entries : NDArray
        Flat entries of length n. The vector takes ownership of the array.

    Raises
    ------
    NotVectorShapedError
        If neither dimension is 1.
    InvalidInputDimensionsError
        If the entry count does not match the dimensions.
    """

    __array_ufunc__ = None

    def __init__(self, dims: Dimensions, entries: NDArray[Any]) -> None:
        if not dims.is_vector_shaped():
            raise NotVectorShapedError(dims)
        if entries.ndim != 1:
            raise DimensionError(
                f"entries: expected a flat array, got {entries.ndim}D with shape {entries.shape}"
            )
        check_length(entries, dims.size)
        self._dims = dims
        self._entries = entries

    @classmethod
    def new(cls, size: int, init: Any) -> Vector:
        """Column vector of length `size` with every entry set to `init`."""
        dims = Dimensions(size, 1)
        check_scalar(init, 'init')
        return cls(dims, np.full(size, init))

    @classmethod
    def from_sequence(cls, values: ArrayLike) -> Vector:
        """Column vector holding a copy of `values`."""
        entries = check_entries(values, 'values')
        if len(entries) == 0:
            raise InvalidDimensionsError(0, 1)
        return cls(Dimensions(len(entries), 1), entries)

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> Vector:
        """
        View a 1 x N or N x 1 matrix as a vector, keeping its shape tag.

        Raises
        ------
        NotVectorShapedError
            If neither dimension of the matrix is 1.
        """
        if not matrix.dims.is_vector_shaped():
            raise NotVectorShapedError(matrix.dims)
        return cls(matrix.dims, matrix.storage)

    # --- Shape ---

    @property
    def dims(self) -> Dimensions:
        return self._dims

    @property
    def size(self) -> int:
        return len(self._entries)

    @property
    def dtype(self) -> np.dtype:
        return self._entries.dtype

    @property
    def entries(self) -> NDArray[Any]:
        """Copy of the entries."""
        return self._entries.copy()

    def is_row(self) -> bool:
        return self._dims.rows == 1

    def is_column(self) -> bool:
        return self._dims.cols == 1

    def supports(self, capability: str) -> bool:
        """Check if the element type supports a numeric capability."""
        return dtype_supports(self.dtype, capability, self._entries)

    def to_row_vector(self) -> Vector:
        """Copy tagged 1 x N. Entries keep their order."""
        return Vector(Dimensions(1, self.size), self._entries.copy())

    def to_col_vector(self) -> Vector:
        """Copy tagged N x 1. Entries keep their order."""
        return Vector(Dimensions(self.size, 1), self._entries.copy())

    def to_matrix(self) -> Matrix:
        """The vector as a 1 x N or N x 1 matrix, according to its tag."""
        return Matrix(self._dims, self._entries.copy())

    def to_array(self) -> NDArray[Any]:
        return self._entries.copy()

    # --- Access ---

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, i: int) -> Any:
        return self._entries[check_index(i, self.size, 'entry')]

    def __setitem__(self, i: int, value: Any) -> None:
        i = check_index(i, self.size, 'entry')
        check_scalar(value, 'value')
        check_castable(value, self.dtype, 'value')
        self._entries[i] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries)

    # --- Comparison and rendering ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._dims == other._dims and bool(np.array_equal(self._entries, other._entries))

    __hash__ = None  # type: ignore[assignment]

    def allclose(
        self,
        other: Vector,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """Approximate equality of entries and shape tag."""
        return self.to_matrix().allclose(other.to_matrix(), rtol=rtol, atol=atol)

    def __str__(self) -> str:
        return render_rows(self._entries, self._dims.rows, self._dims.cols)

    def __repr__(self) -> str:
        shape = 'row' if self.is_row() else 'col'
        return (
            f"Vector(size={self.size}, shape={shape}, dtype={self.dtype}, "
            f"entries={self._entries.tolist()})"
        )

    # --- Arithmetic ---

    def _check_same_length(self, other: Vector, operation: str) -> None:
        if self.size != other.size:
            raise DimensionMismatchError(self._dims, other._dims, operation)

    def _assign(self, values: NDArray[Any]) -> None:
        if values.dtype == self._entries.dtype:
            self._entries[...] = values
        else:
            self._entries = values

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_length(other, 'add')
        require(self, CAPABILITY_ADDITIVE, 'add')
        require(other, CAPABILITY_ADDITIVE, 'add')
        return Vector(self._dims, self._entries + other._entries)

    def __iadd__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_length(other, 'add')
        require(self, CAPABILITY_ADDITIVE, 'add')
        require(other, CAPABILITY_ADDITIVE, 'add')
        self._assign(self._entries + other._entries)
        return self

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_length(other, 'subtract')
        require(self, CAPABILITY_ADDITIVE, 'subtract')
        require(other, CAPABILITY_ADDITIVE, 'subtract')
        return Vector(self._dims, self._entries - other._entries)

    def __isub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_length(other, 'subtract')
        require(self, CAPABILITY_ADDITIVE, 'subtract')
        require(other, CAPABILITY_ADDITIVE, 'subtract')
        self._assign(self._entries - other._entries)
        return self

    def __neg__(self) -> Vector:
        require(self, CAPABILITY_ADDITIVE, 'negate')
        require(self, CAPABILITY_SIGNED, 'negate')
        return Vector(self._dims, -self._entries)

    def dot(self, other: Vector) -> Any:
        """
        Dot product: sum of self[i] * other[i], accumulated left to right.

        The shape tags are ignored; only the lengths must agree.

        Raises
        ------
        DimensionMismatchError
            If the vectors have different lengths.
        """
        self._check_same_length(other, 'multiply')
        for operand in (self, other):
            require(operand, CAPABILITY_ADDITIVE, 'multiply')
            require(operand, CAPABILITY_MULTIPLICATIVE, 'multiply')
        return ordered_dot(self._entries, other._entries)

    def _times_matrix(self, matrix: Matrix) -> Vector:
        return Vector.from_matrix(self.to_matrix() * matrix)

    def _scale(self, scalar: SupportsMultiplicative) -> NDArray[Any]:
        require(self, CAPABILITY_MULTIPLICATIVE, 'scale')
        return self._entries * scalar

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, Matrix):
            return self._times_matrix(other)
        if is_number(other):
            return Vector(self._dims, self._scale(other))
        return NotImplemented

    def __rmul__(self, other: Any) -> Vector:
        if is_number(other):
            return Vector(self._dims, self._scale(other))
        return NotImplemented

    def __imul__(self, other: Any) -> Vector:
        if is_number(other):
            self._assign(self._scale(other))
            return self
        return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, Matrix):
            return self._times_matrix(other)
        return NotImplemented

    def _divide(self, divisor: Any) -> NDArray[Any]:
        require(self, CAPABILITY_DIVISIBLE, 'divide')
        check_nonzero_divisor(divisor, 'divide')
        return self._entries / divisor

    def __truediv__(self, other: Any) -> Vector:
        if not is_number(other):
            return NotImplemented
        return Vector(self._dims, self._divide(other))

    def __itruediv__(self, other: Any) -> Vector:
        if not is_number(other):
            return NotImplemented
        self._assign(self._divide(other))
        return self


def vector(*values: Any) -> Vector:
    """
    Shorthand for a column vector.

    >>> vector(1, 2, 3).to_row_vector().dims
    Dimensions(rows=1, cols=3)
    """
    return Vector.from_sequence(list(values))
