"""
LU factorization with pivoting.

For pivot row i the largest |a[i][k]|, k >= i, is brought onto the
diagonal by exchanging columns i and k (right-multiplication by a
transposition matrix). The factorization therefore satisfies

    A · Q = L · U

where Q is the permutation matrix with Q[p[k], k] = 1, L is unit lower
triangular and U is upper triangular. L (without its unit diagonal) and U
are returned packed in a single array.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.tolerances import PIVOT_TOLERANCE
from pymatrix.decomposition._common import LUParams


def lu_factor(a: NDArray, tol: float = PIVOT_TOLERANCE) -> LUParams | None:
    """Factor a square float array.

    Parameters
    ----------
    a : NDArray
        (dim, dim) float64 working array. Overwritten with the packed factors.
    tol : float
        Largest candidate pivot below this absolute value means singular.

    Returns
    -------
    LUParams or None
        None when the matrix is numerically singular.
    """
    dim = a.shape[0]
    p = list(range(dim + 1))

    for i in range(dim):
        max_a = 0.0
        imax = i
        for k in range(i, dim):
            abs_a = abs(a[i, k])
            if abs_a > max_a:
                max_a = abs_a
                imax = k

        if max_a < tol:
            return None

        if imax != i:
            p[i], p[imax] = p[imax], p[i]
            a[:, [i, imax]] = a[:, [imax, i]]
            p[dim] += 1

        for j in range(i + 1, dim):
            a[j, i] /= a[i, i]
            a[j, i + 1:] -= a[j, i] * a[i, i + 1:]

    diag = np.abs(np.diag(a))
    return LUParams(
        lu=a,
        permutation=tuple(p),
        pivot_ratio=float(diag.min() / diag.max()),
    )


def lu_determinant(lu: NDArray, permutation: tuple[int, ...]) -> float:
    """Product of the U diagonal, negated for an odd number of swaps."""
    dim = lu.shape[0]
    det = 1.0
    for i in range(dim):
        det *= float(lu[i, i])
    if (permutation[dim] - dim) % 2 == 1:
        det = -det
    return det
