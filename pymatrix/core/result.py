"""
Generic result container for PyMatrix decompositions.

The Result class provides a standardized envelope that decomposition
results use. This enables shared tooling for timing, warnings and
reproducibility while letting each operation define its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, swap count, diagnostics)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

from __future__ import annotations

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library and interpreter versions at the time a result is built."""
    import numpy as np
    from pymatrix import __version__

    return {
        'pymatrix_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The operation-specific parameter payload type

    Attributes:
        params: Operation-specific payload (LU factors, inverse, etc.)
        info: Structured metadata (method, swap count, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used to compute the result

    Examples:
        >>> Result(
        ...     params=LUParams(lu=lu, permutation=p, pivot_ratio=0.5),
        ...     info={'method': 'partial_pivoting', 'n_swaps': 1},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_lu'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
