"""
SquareDesign: validated square input for decompositions.

Checks shape and element capabilities once, at construction time, so the
kernels downstream can assume a square array of a usable type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.capabilities import require
from pymatrix.core.exceptions import NotSquareError, ValidationError
from pymatrix.matrix.matrix import Matrix


@dataclass(frozen=True)
class SquareDesign:
    """Immutable square-matrix container.

    Parameters
    ----------
    matrix : Matrix
        The caller's matrix. Never modified.
    dim : int
        Number of rows (== number of columns).
    """

    matrix: Matrix
    dim: int

    @classmethod
    def for_matrix(
        cls,
        matrix: Matrix,
        *,
        operation: str,
        capabilities: Iterable[str] = (),
    ) -> SquareDesign:
        """Create and validate a square design.

        Parameters
        ----------
        matrix : Matrix
            Input matrix.
        operation : str
            Operation name used in error messages (e.g. 'determinant').
        capabilities : iterable of str
            CAPABILITY_* constants the operation needs.

        Returns
        -------
        SquareDesign

        Raises
        ------
        ValidationError
            If `matrix` is not a Matrix.
        NotSquareError
            If the matrix is not square.
        CapabilityError
            If the element type lacks a required capability.
        """
        if not isinstance(matrix, Matrix):
            raise ValidationError(
                f"{operation}: expected a Matrix, got {type(matrix).__name__}"
            )
        if not matrix.is_square():
            raise NotSquareError(matrix.dims, operation)
        for capability in capabilities:
            require(matrix, capability, operation)

        return cls(matrix=matrix, dim=matrix.rows)

    @property
    def working(self) -> NDArray:
        """(dim, dim) float64 copy for the pivoting kernels (Fractions and integers included)."""
        return self.matrix.to_array().astype(np.float64)

