"""
Matrix inversion kernels.

gauss_jordan_inverse: reduce [A | I] to reduced row echelon form. A is
    invertible exactly when the left half becomes the identity, and the
    right half is then A^-1. Exact for object (Fraction) entries.

lu_inverse: solve L·U·Y = I column by column with forward and back
    substitution, then undo the column pivoting. Since A·Q = L·U,
    A^-1 = Q·(L·U)^-1, i.e. row k of Y is row p[k] of A^-1.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.capabilities import one_of, zero_of
from pymatrix.core.compute.tolerances import zero_tolerance
from pymatrix.decomposition._rref import reduce_row_echelon, reduction_copy


def gauss_jordan_inverse(a: NDArray[Any]) -> NDArray[Any] | None:
    """Invert a square array by Gauss-Jordan elimination.

    Parameters
    ----------
    a : NDArray
        (dim, dim) array. Not modified.

    Returns
    -------
    NDArray or None
        The inverse, or None if `a` is singular.
    """
    dim = a.shape[0]
    work = reduction_copy(a)

    identity = np.full((dim, dim), zero_of(work.dtype), dtype=work.dtype)
    np.fill_diagonal(identity, one_of(work.dtype))

    # Zero threshold from the A block only, not from [A | I].
    tol = zero_tolerance(work)
    augmented = np.concatenate([work, identity], axis=1)
    reduce_row_echelon(augmented, tol=tol)

    if not np.array_equal(augmented[:, :dim], identity):
        return None
    return augmented[:, dim:].copy()


def lu_inverse(lu: NDArray, permutation: tuple[int, ...]) -> NDArray:
    """Invert from packed LU factors.

    Parameters
    ----------
    lu : NDArray
        (dim, dim) packed factors from lu_factor().
    permutation : tuple of int
        Pivot permutation from lu_factor().

    Returns
    -------
    NDArray
        (dim, dim) float64 inverse of the original matrix.
    """
    dim = lu.shape[0]
    y = np.zeros((dim, dim), dtype=np.float64)

    for j in range(dim):
        x = np.zeros(dim, dtype=np.float64)
        for i in range(dim):
            x[i] = 1.0 if i == j else 0.0
            for k in range(i):
                x[i] -= lu[i, k] * x[k]

        for i in range(dim - 1, -1, -1):
            for k in range(i + 1, dim):
                x[i] -= lu[i, k] * x[k]
            x[i] /= lu[i, i]

        y[:, j] = x

    inverse = np.empty_like(y)
    inverse[list(permutation[:dim])] = y
    return inverse
