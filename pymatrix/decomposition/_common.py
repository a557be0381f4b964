"""
Parameter payloads for decomposition results.

Each dataclass is a frozen payload carried inside a Result[P] envelope.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import NDArray


@dataclass(frozen=True)
class LUParams:
    """Combined LU factors and the pivot permutation."""

    lu: NDArray                  # (dim, dim) strict lower part = L, upper part = U
    permutation: tuple[int, ...] # dim + 1 slots; last slot is dim + number of swaps
    pivot_ratio: float           # min |U_ii| / max |U_ii|


@dataclass(frozen=True)
class InverseParams:
    """Matrix inverse, or None when the input is singular."""

    inverse: NDArray | None      # (dim, dim)
    method: str                  # 'gauss_jordan' or 'lu'
    invertible: bool
