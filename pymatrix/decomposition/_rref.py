"""
Gauss-Jordan reduction to reduced row echelon form.

Walks (row, col) from (0, 0). A zero pivot candidate is replaced by the
first nonzero entry below it; a column with no such entry is skipped
without advancing the row. Each pivot row is normalised to a leading one
and the pivot column is cleared from every other row.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.capabilities import one_of, zero_of
from pymatrix.core.compute.tolerances import zero_tolerance


def reduction_copy(a: NDArray[Any]) -> NDArray[Any]:
    """Copy of `a` in a dtype that supports division.

    Integers are promoted to float64. Floating, complex and object
    (Fraction, Decimal) entries keep their dtype.
    """
    if np.issubdtype(a.dtype, np.integer):
        return a.astype(np.float64)
    return a.copy()


def reduce_row_echelon(a: NDArray[Any], tol: float | None = None) -> NDArray[Any]:
    """Reduce `a` in place and return it.

    Parameters
    ----------
    a : NDArray
        (rows, cols) array in a dtype that supports division.
    tol : float, optional
        Threshold at or below which a pivot candidate counts as zero.
        Defaults to zero_tolerance(a).

    Returns
    -------
    NDArray
        The same array, now in reduced row echelon form.
    """
    rows, cols = a.shape
    if tol is None:
        tol = zero_tolerance(a)
    zero = zero_of(a.dtype)
    one = one_of(a.dtype)

    row = 0
    col = 0
    while row < rows and col < cols:
        if abs(a[row, col]) <= tol:
            below = [r for r in range(row + 1, rows) if abs(a[r, col]) > tol]
            if not below:
                a[row:, col] = zero
                col += 1
                continue
            swap = below[0]
            a[[row, swap]] = a[[swap, row]]

        a[row] = a[row] / a[row, col]
        a[row, col] = one

        for r in range(rows):
            if r != row:
                factor = a[r, col]
                if factor != zero:
                    a[r] = a[r] - factor * a[row]
                a[r, col] = zero

        row += 1
        col += 1

    return a
