"""
Dimensions: immutable (rows, cols) pair shared by Matrix and Vector.

Validated at construction time, so downstream code trusts that both
sizes are at least 1.
"""

from __future__ import annotations

from dataclasses import dataclass

from pymatrix.core.validation import check_size


@dataclass(frozen=True)
class Dimensions:
    """
    Shape of a matrix or vector.

    Parameters
    ----------
    rows : int
        Row count, at least 1.
    cols : int
        Column count, at least 1.

    Raises
    ------
    InvalidDimensionsError
        If rows or cols is less than 1.
    """

    rows: int
    cols: int

    def __post_init__(self) -> None:
        check_size(self.rows, self.cols)
        # Normalise numpy integers so equality and hashing stay structural
        object.__setattr__(self, 'rows', int(self.rows))
        object.__setattr__(self, 'cols', int(self.cols))

    @classmethod
    def square(cls, dim: int) -> Dimensions:
        """Dimensions of a dim x dim matrix."""
        return cls(dim, dim)

    @property
    def size(self) -> int:
        """Number of entries (rows * cols)."""
        return self.rows * self.cols

    def is_square(self) -> bool:
        return self.rows == self.cols

    def is_vector_shaped(self) -> bool:
        """True if one of the two dimensions is 1."""
        return min(self.rows, self.cols) == 1

    def transposed(self) -> Dimensions:
        return Dimensions(self.cols, self.rows)

    def __str__(self) -> str:
        return f"{self.rows}x{self.cols}"
