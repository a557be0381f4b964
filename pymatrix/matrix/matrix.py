"""
Matrix: dense, row-major container over a generic numeric element type.

Entry (i, j) lives at storage[i * cols + j] of a flat, exclusively owned
numpy array. The element type is whatever numpy dtype the entries have:
integers stay integers, floats stay floats, and object arrays of Python
numbers (Fraction, Decimal) give exact arithmetic. Each operation checks
only the numeric capabilities it actually needs.

Construction:
    Matrix.new(rows, cols, init)
    Matrix.from_sequence(rows, cols, values)
    Matrix.zero(rows, cols) / Matrix.one(dim)
    Matrix.diag(dim, init) / Matrix.diag_with(dim, entries)
    Matrix.from_rows([[1, 2], [3, 4]]) / Matrix.from_array(ndarray)
"""

from __future__ import annotations

from typing import Any, Iterator, Literal, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.capabilities import (
    CAPABILITY_ADDITIVE,
    CAPABILITY_DIVISIBLE,
    CAPABILITY_MULTIPLICATIVE,
    CAPABILITY_SIGNED,
    dtype_supports,
    one_of,
    require,
    zero_of,
)
from pymatrix.core.compute.tolerances import select_tolerance
from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    InvalidDimensionsError,
    InvalidInputDimensionsError,
    ValidationError,
)
from pymatrix.core.protocols import SupportsMultiplicative
from pymatrix.core.validation import (
    check_castable,
    check_dtype,
    check_entries,
    check_index,
    check_length,
    check_nonzero_divisor,
    check_scalar,
    is_number,
)
from pymatrix.matrix._arithmetic import ordered_matmul, render_rows
from pymatrix.matrix.dimensions import Dimensions

if TYPE_CHECKING:
    from pymatrix.decomposition.solution import LUSolution
    from pymatrix.matrix.vector import Vector


class Matrix:
    """
    Dense row-major matrix.

    Prefer the classmethod constructors; __init__ takes already-validated
    storage and only enforces the length invariant.

    Parameters
    ----------
    dims : Dimensions
        Shape of the matrix.
    storage : NDArray
        Flat entries of length dims.rows * dims.cols, row-major. The
        matrix takes ownership of the array.

    Raises
    ------
    InvalidInputDimensionsError
        If the storage length does not match the dimensions.
    """

    # Make numpy defer binary operators (np.float64(2) * m) to Matrix
    __array_ufunc__ = None

    def __init__(self, dims: Dimensions, storage: NDArray[Any]) -> None:
        if storage.ndim != 1:
            raise DimensionError(
                f"storage: expected a flat array, got {storage.ndim}D with shape {storage.shape}"
            )
        check_length(storage, dims.size)
        self._dims = dims
        self._storage = storage

    # --- Construction ---

    @classmethod
    def new(cls, rows: int, cols: int, init: Any) -> Matrix:
        """
        Create a rows x cols matrix with every entry set to `init`.

        Raises
        ------
        InvalidDimensionsError
            If rows or cols is 0.
        """
        dims = Dimensions(rows, cols)
        check_scalar(init, 'init')
        return cls(dims, np.full(dims.size, init))

    @classmethod
    def from_sequence(cls, rows: int, cols: int, values: ArrayLike) -> Matrix:
        """
        Create a matrix from a flat row-major sequence.

        `values[i * cols + j]` becomes the entry in row i, column j.

        Raises
        ------
        InvalidDimensionsError
            If rows or cols is 0.
        InvalidInputDimensionsError
            If len(values) != rows * cols.
        """
        dims = Dimensions(rows, cols)
        entries = check_entries(values, 'values')
        check_length(entries, dims.size)
        return cls(dims, entries)

    @classmethod
    def zero(cls, rows: int, cols: int, dtype: DTypeLike = np.float64) -> Matrix:
        """Matrix of additive identities."""
        dims = Dimensions(rows, cols)
        dtype = check_dtype(dtype)
        return cls(dims, np.full(dims.size, zero_of(dtype), dtype=dtype))

    @classmethod
    def one(cls, dim: int, dtype: DTypeLike = np.float64) -> Matrix:
        """Identity matrix of size dim x dim."""
        res = cls.zero(dim, dim, dtype=dtype)
        res._storage[::dim + 1] = one_of(res.dtype)
        return res

    @classmethod
    def diag(cls, dim: int, init: Any) -> Matrix:
        """Scalar multiple of the identity: `init` on the diagonal."""
        check_scalar(init, 'init')
        return cls.one(dim, dtype=np.asarray(init).dtype) * init

    @classmethod
    def diag_with(cls, dim: int, entries: ArrayLike) -> Matrix:
        """
        Diagonal matrix with the given diagonal entries.

        Raises
        ------
        InvalidInputDimensionsError
            If len(entries) != dim.
        """
        Dimensions.square(dim)
        values = check_entries(entries, 'entries')
        if len(values) != dim:
            raise InvalidInputDimensionsError(len(values), dim)
        res = cls.one(dim, dtype=values.dtype)
        res._storage[::dim + 1] = values
        return res

    @classmethod
    def from_rows(cls, rows: Any) -> Matrix:
        """
        Create a matrix from a nested sequence of rows.

        Parameters
        ----------
        rows : sequence of sequences
            e.g. [[1, 2, 3], [3, 2, 1]]. All rows must have the same width.

        Raises
        ------
        InvalidDimensionsError
            If there are no rows or the rows are empty.
        InvalidInputDimensionsError
            If a row's width differs from the first row's.
        """
        try:
            row_list = [list(r) for r in rows]
        except TypeError as e:
            raise ValidationError(f"rows: expected a sequence of sequences: {e}") from e

        if not row_list:
            raise InvalidDimensionsError(0, 0)

        width = len(row_list[0])
        for r in row_list:
            if len(r) != width:
                raise InvalidInputDimensionsError(len(r), width)

        flat = [x for r in row_list for x in r]
        return cls.from_sequence(len(row_list), width, flat)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """Create a matrix from a 2D array (copied)."""
        a = np.asarray(array)
        if a.ndim != 2:
            raise DimensionError(
                f"array: expected 2D array, got {a.ndim}D with shape {a.shape}"
            )
        return cls.from_sequence(a.shape[0], a.shape[1], a.ravel())

    # --- Shape and element type ---

    @property
    def dims(self) -> Dimensions:
        return self._dims

    @property
    def rows(self) -> int:
        return self._dims.rows

    @property
    def cols(self) -> int:
        return self._dims.cols

    @property
    def size(self) -> int:
        return self._dims.size

    @property
    def dtype(self) -> np.dtype:
        return self._storage.dtype

    @property
    def storage(self) -> NDArray[Any]:
        """Copy of the flat row-major entries."""
        return self._storage.copy()

    def is_square(self) -> bool:
        return self._dims.is_square()

    def supports(self, capability: str) -> bool:
        """Check if the element type supports a numeric capability."""
        return dtype_supports(self.dtype, capability, self._storage)

    # --- Access ---

    def _row_slice(self, i: int) -> slice:
        start = i * self.cols
        return slice(start, start + self.cols)

    def row(self, i: int) -> NDArray[Any]:
        """
        View of row i.

        The returned array shares memory with the matrix: writing into it
        mutates the matrix.

        Raises
        ------
        IndexOutOfBoundsError
            If i < 0 or i >= rows.
        """
        i = check_index(i, self.rows, 'row')
        return self._storage[self._row_slice(i)]

    def entry(self, i: int, j: int) -> Any:
        """Entry in row i, column j."""
        i = check_index(i, self.rows, 'row')
        j = check_index(j, self.cols, 'col')
        return self._storage[i * self.cols + j]

    def set_entry(self, i: int, j: int, value: Any) -> None:
        """Overwrite the entry in row i, column j.

        Raises ValidationError if the value does not fit the matrix dtype
        (e.g. 0.5 into an integer matrix).
        """
        i = check_index(i, self.rows, 'row')
        j = check_index(j, self.cols, 'col')
        check_scalar(value, 'value')
        check_castable(value, self.dtype, 'value')
        self._storage[i * self.cols + j] = value

    def __getitem__(self, key: int | tuple[int, int]) -> Any:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(f"expected m[i] or m[i, j], got {len(key)} indices")
            return self.entry(*key)
        return self.row(key)

    def __setitem__(self, key: int | tuple[int, int], value: Any) -> None:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(f"expected m[i] or m[i, j], got {len(key)} indices")
            self.set_entry(key[0], key[1], value)
            return
        i = check_index(key, self.rows, 'row')
        values = check_entries(value, 'row')
        check_length(values, self.cols)
        check_castable(values, self.dtype, 'row')
        self._storage[self._row_slice(i)] = values

    def __len__(self) -> int:
        return self.rows

    def __iter__(self) -> Iterator[NDArray[Any]]:
        for i in range(self.rows):
            yield self._storage[self._row_slice(i)]

    # --- Conversion ---

    def to_array(self) -> NDArray[Any]:
        """2D copy of the entries, shape (rows, cols)."""
        return self._as_2d().copy()

    def _as_2d(self) -> NDArray[Any]:
        return self._storage.reshape(self.rows, self.cols)

    def copy(self) -> Matrix:
        return Matrix(self._dims, self._storage.copy())

    def astype(self, dtype: DTypeLike) -> Matrix:
        """Copy with entries converted to `dtype`."""
        return Matrix(self._dims, self._storage.astype(check_dtype(dtype)))

    def transpose(self) -> Matrix:
        """
        Transposed copy: entry (j, i) of the result is entry (i, j) of self.
        """
        return Matrix(self._dims.transposed(), self._as_2d().T.ravel())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    # --- Comparison and rendering ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._dims == other._dims and bool(np.array_equal(self._storage, other._storage))

    __hash__ = None  # type: ignore[assignment]

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Approximate equality.

        Dimensions must match exactly. Default tolerances come from the
        tier for the promoted element dtype (exact for integers/objects).
        """
        if self._dims != other._dims:
            return False
        tier = select_tolerance(np.result_type(self.dtype, other.dtype))
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        return bool(np.allclose(
            _as_inexact(self._storage), _as_inexact(other._storage),
            rtol=rtol, atol=atol,
        ))

    def __str__(self) -> str:
        return render_rows(self._storage, self.rows, self.cols)

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self.rows}, cols={self.cols}, dtype={self.dtype}, "
            f"entries={self._as_2d().tolist()})"
        )

    # --- Arithmetic ---

    def _check_same_dims(self, other: Matrix, operation: str) -> None:
        if self._dims != other._dims:
            raise DimensionMismatchError(self._dims, other._dims, operation)

    def _assign(self, values: NDArray[Any]) -> None:
        """Store an in-place result, keeping row views valid when the dtype is unchanged."""
        if values.dtype == self._storage.dtype:
            self._storage[...] = values
        else:
            self._storage = values

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_dims(other, 'add')
        require(self, CAPABILITY_ADDITIVE, 'add')
        require(other, CAPABILITY_ADDITIVE, 'add')
        return Matrix(self._dims, self._storage + other._storage)

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_dims(other, 'add')
        require(self, CAPABILITY_ADDITIVE, 'add')
        require(other, CAPABILITY_ADDITIVE, 'add')
        self._assign(self._storage + other._storage)
        return self

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_dims(other, 'subtract')
        require(self, CAPABILITY_ADDITIVE, 'subtract')
        require(other, CAPABILITY_ADDITIVE, 'subtract')
        return Matrix(self._dims, self._storage - other._storage)

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_dims(other, 'subtract')
        require(self, CAPABILITY_ADDITIVE, 'subtract')
        require(other, CAPABILITY_ADDITIVE, 'subtract')
        self._assign(self._storage - other._storage)
        return self

    def __neg__(self) -> Matrix:
        require(self, CAPABILITY_ADDITIVE, 'negate')
        require(self, CAPABILITY_SIGNED, 'negate')
        return Matrix(self._dims, -self._storage)

    def _matmul(self, other: Matrix) -> Matrix:
        if self.cols != other.rows:
            raise DimensionMismatchError(self._dims, other._dims, 'multiply')
        for operand in (self, other):
            require(operand, CAPABILITY_ADDITIVE, 'multiply')
            require(operand, CAPABILITY_MULTIPLICATIVE, 'multiply')
        product = ordered_matmul(self._as_2d(), other._as_2d())
        return Matrix(Dimensions(self.rows, other.cols), product.ravel())

    def _matvec(self, vector: Vector) -> Vector:
        from pymatrix.matrix.vector import Vector

        return Vector.from_matrix(self._matmul(vector.to_matrix()))

    def _scale(self, scalar: SupportsMultiplicative) -> NDArray[Any]:
        require(self, CAPABILITY_MULTIPLICATIVE, 'scale')
        return self._storage * scalar

    def __mul__(self, other: Any) -> Matrix | Vector:
        from pymatrix.matrix.vector import Vector

        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, Vector):
            return self._matvec(other)
        if is_number(other):
            return Matrix(self._dims, self._scale(other))
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if is_number(other):
            return Matrix(self._dims, self._scale(other))
        return NotImplemented

    def __imul__(self, other: Any) -> Matrix:
        if is_number(other):
            self._assign(self._scale(other))
            return self
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix | Vector:
        from pymatrix.matrix.vector import Vector

        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, Vector):
            return self._matvec(other)
        return NotImplemented

    def _divide(self, divisor: Any) -> NDArray[Any]:
        require(self, CAPABILITY_DIVISIBLE, 'divide')
        check_nonzero_divisor(divisor, 'divide')
        return self._storage / divisor

    def __truediv__(self, other: Any) -> Matrix:
        if not is_number(other):
            return NotImplemented
        return Matrix(self._dims, self._divide(other))

    def __itruediv__(self, other: Any) -> Matrix:
        if not is_number(other):
            return NotImplemented
        self._assign(self._divide(other))
        return self

    # --- Derived operations ---

    def lu_decompose(self) -> LUSolution | None:
        """LU decomposition with pivoting; None if the matrix is singular."""
        from pymatrix.decomposition.solvers import lu_decompose

        return lu_decompose(self)

    def det(self) -> float:
        """Determinant via LU decomposition."""
        from pymatrix.decomposition.solvers import det

        return det(self)

    def inv(self, *, method: Literal['gauss_jordan', 'lu'] = 'gauss_jordan') -> Matrix | None:
        """Inverse, or None if the matrix is singular."""
        from pymatrix.decomposition.solvers import inv

        return inv(self, method=method)

    def rref(self) -> Matrix:
        """Reduced row echelon form (self is not modified)."""
        from pymatrix.decomposition.solvers import rref

        return rref(self)


def _as_inexact(values: NDArray[Any]) -> NDArray[Any]:
    """Float/complex view of entries for tolerance comparisons."""
    if values.dtype != object:
        return values
    try:
        return values.astype(np.float64)
    except TypeError:
        return values.astype(np.complex128)


def matrix(rows: Any) -> Matrix:
    """
    Shorthand for Matrix.from_rows.

    >>> round(matrix([[1, 2, 3], [3, 2, 1], [2, 1, 3]]).det())
    -12
    """
    return Matrix.from_rows(rows)
