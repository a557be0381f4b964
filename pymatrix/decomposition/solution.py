"""
Solution wrappers for decomposition results.

Each Solution wraps a Result[Params] and exposes user-friendly properties
plus a summary() method.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.result import Result
from pymatrix.decomposition._common import InverseParams, LUParams
from pymatrix.decomposition._lu import lu_determinant
from pymatrix.matrix.matrix import Matrix


class LUSolution:
    """LU factorization A·Q = L·U of a square matrix.

    `lu` holds L strictly below the diagonal (its unit diagonal is implicit)
    and U on and above it. `permutation` has dim + 1 slots: the first dim
    give the column order (column k of A·Q is column p[k] of A), the last
    is dim plus the number of swaps performed.
    """

    __slots__ = ('_result',)

    def __init__(self, _result: Result[LUParams]) -> None:
        self._result = _result

    @property
    def dim(self) -> int:
        return self._result.params.lu.shape[0]

    @property
    def lu(self) -> Matrix:
        """Packed L and U factors."""
        return Matrix.from_array(self._result.params.lu)

    @property
    def permutation(self) -> tuple[int, ...]:
        return self._result.params.permutation

    @property
    def column_order(self) -> tuple[int, ...]:
        """Original column index of each column of A·Q."""
        return self.permutation[:self.dim]

    @property
    def n_swaps(self) -> int:
        return self.permutation[self.dim] - self.dim

    @property
    def sign(self) -> int:
        """Sign of the permutation: -1 for an odd number of swaps."""
        return -1 if self.n_swaps % 2 else 1

    @property
    def lower(self) -> Matrix:
        """Unit lower triangular factor L."""
        lower = np.tril(self._result.params.lu, k=-1)
        np.fill_diagonal(lower, 1.0)
        return Matrix.from_array(lower)

    @property
    def upper(self) -> Matrix:
        """Upper triangular factor U."""
        return Matrix.from_array(np.triu(self._result.params.lu))

    @property
    def permutation_matrix(self) -> Matrix:
        """Q, with Q[p[k], k] = 1."""
        q = np.zeros((self.dim, self.dim), dtype=np.float64)
        q[list(self.column_order), range(self.dim)] = 1.0
        return Matrix.from_array(q)

    def reconstruct(self) -> Matrix:
        """L·U·Qᵀ, which equals the factored matrix up to rounding."""
        return self.lower * self.upper * self.permutation_matrix.T

    @property
    def determinant(self) -> float:
        return lu_determinant(self._result.params.lu, self.permutation)

    @property
    def pivot_ratio(self) -> float:
        """Smallest over largest |U_ii|; tiny values mean ill-conditioning."""
        return self._result.params.pivot_ratio

    @property
    def info(self) -> dict:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def timing(self):
        return self._result.timing

    def summary(self) -> str:
        lines = []
        lines.append("Call: lu_decompose()")
        lines.append("")
        lines.append(f"  dim={self.dim}, swaps={self.n_swaps}, sign={self.sign:+d}")
        lines.append(f"  column order: {list(self.column_order)}")
        lines.append(f"  determinant = {self.determinant:.6g}")
        lines.append(f"  pivot ratio = {self.pivot_ratio:.3e}")
        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"LUSolution(dim={self.dim}, n_swaps={self.n_swaps})"


class InverseSolution:
    """Result of a matrix inversion.

    `inverse` is None when the matrix is singular.
    """

    __slots__ = ('_result',)

    def __init__(self, _result: Result[InverseParams]) -> None:
        self._result = _result

    @property
    def inverse(self) -> Matrix | None:
        inverse = self._result.params.inverse
        if inverse is None:
            return None
        return Matrix.from_array(inverse)

    @property
    def invertible(self) -> bool:
        return self._result.params.invertible

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def info(self) -> dict:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def timing(self):
        return self._result.timing

    def summary(self) -> str:
        lines = []
        lines.append(f"Call: inv(method='{self.method}')")
        lines.append("")
        lines.append(f"  dim={self.info['dim']}, invertible={self.invertible}")
        if self.invertible:
            lines.append("")
            lines.append(str(self.inverse))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"InverseSolution(method={self.method!r}, invertible={self.invertible})"
