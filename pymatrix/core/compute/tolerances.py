"""
Numerical thresholds and tolerance tiers.

Defines the constants the decomposition kernels use to decide that a
pivot is zero, plus precision expectations for comparing results:
- EXACT: integer and Python-number (Fraction) matrices
- FP64: double precision
- FP32: single precision (float32/complex64)

Used by the kernels, Matrix.allclose() and the test suite.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import DTypeLike, NDArray


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer and object (Fraction) entries: no rounding is involved
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic, entries must be equal',
)

# float64 / complex128
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision',
)

# float32 / complex64
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision',
)

# LU decomposition treats the matrix as singular when the largest
# candidate pivot falls below this absolute value.
PIVOT_TOLERANCE = 1e-6

# Smallest/largest |U_ii| ratio below which an LU factorization is
# reported as ill-conditioned.
CONDITION_WARNING_RATIO = 1e-10


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """Select the tolerance tier appropriate for an element dtype."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.inexact):
        if np.finfo(dtype).bits <= 32:
            return FP32
        return FP64
    return EXACT


def zero_tolerance(a: NDArray[Any]) -> float:
    """
    Threshold at or below which an entry counts as zero during reduction.

    For inexact dtypes the threshold scales with matrix size, machine
    epsilon and the largest entry, mirroring the usual numerical-rank rule.
    Exact dtypes (object entries such as Fraction) use 0.

    Args:
        a: 2D working array

    Returns:
        Non-negative threshold
    """
    if not np.issubdtype(a.dtype, np.inexact) or a.size == 0:
        return 0.0
    scale = float(np.max(np.abs(a)))
    return max(a.shape) * float(np.finfo(a.dtype).eps) * scale
