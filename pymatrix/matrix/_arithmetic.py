"""
Arithmetic kernels shared by Matrix and Vector.

The matrix product is defined by the plain triple loop

    result[i][j] = zero + left[i][0] * right[0][j] + ... + left[i][n-1] * right[n-1][j]

The kernel vectorises over output cells but keeps the reduction over k
strictly left to right, starting from the additive zero, so floating point
results are identical to the triple loop. numpy's BLAS-backed matmul does
not guarantee this order and is therefore not used.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.capabilities import zero_of


def ordered_matmul(left: NDArray[Any], right: NDArray[Any]) -> NDArray[Any]:
    """
    Matrix product with deterministic left-to-right accumulation.

    Parameters
    ----------
    left : NDArray
        (m, n) array.
    right : NDArray
        (n, p) array.

    Returns
    -------
    NDArray
        (m, p) array in the promoted dtype of the operands.
    """
    m, n = left.shape
    p = right.shape[1]
    dtype = np.result_type(left.dtype, right.dtype)

    acc = np.full((m, p), zero_of(dtype), dtype=dtype)
    for k in range(n):
        acc = acc + np.multiply.outer(left[:, k], right[k, :])
    return acc


def ordered_dot(left: NDArray[Any], right: NDArray[Any]) -> Any:
    """Sum of left[i] * right[i], accumulated left to right."""
    return ordered_matmul(left.reshape(1, -1), right.reshape(-1, 1))[0, 0]


def render_rows(storage: NDArray[Any], rows: int, cols: int) -> str:
    """
    Human-readable rendering: tab-separated entries, one row per line.

    The last row is not newline-terminated.
    """
    lines = []
    for i in range(rows):
        row = storage[i * cols:(i + 1) * cols]
        lines.append("\t".join(str(x) for x in row))
    return "\n".join(lines)
