"""
Shared compute infrastructure for PyMatrix.

This module provides timing utilities and numerical tolerances that are
shared across the matrix containers and the decomposition kernels.

Submodules:
    timing: Execution timing utilities
    tolerances: Pivot thresholds and comparison tolerance tiers
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    FP64,
    FP32,
    PIVOT_TOLERANCE,
    CONDITION_WARNING_RATIO,
    select_tolerance,
    zero_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP32",
    "PIVOT_TOLERANCE",
    "CONDITION_WARNING_RATIO",
    "select_tolerance",
    "zero_tolerance",
]
