"""
Numeric capability constants for PyMatrix.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Instead of one monolithic "numeric" requirement, every operation declares
the capability sets it needs from the element type. Addition only needs
CAPABILITY_ADDITIVE; LU pivoting needs CAPABILITY_ORDERED and
CAPABILITY_SIGNED; and so on.

Usage:
    from pymatrix.core.capabilities import (
        CAPABILITY_ADDITIVE,
        CAPABILITY_ORDERED,
        require,
    )

    require(matrix, CAPABILITY_ORDERED, 'decompose')
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pymatrix.core.exceptions import CapabilityError
from pymatrix.core.protocols import NumericContainer

# +, - and an additive identity ("zero")
CAPABILITY_ADDITIVE = 'additive'

# * and a multiplicative identity ("one")
CAPABILITY_MULTIPLICATIVE = 'multiplicative'

# / with field semantics (scalar division, RREF, inversion)
CAPABILITY_DIVISIBLE = 'divisible'

# total order plus abs() (pivot search)
CAPABILITY_ORDERED = 'ordered'

# negation that stays inside the element type
CAPABILITY_SIGNED = 'signed'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_ADDITIVE,
    CAPABILITY_MULTIPLICATIVE,
    CAPABILITY_DIVISIBLE,
    CAPABILITY_ORDERED,
    CAPABILITY_SIGNED,
})


def dtype_supports(
    dtype: DTypeLike,
    capability: str,
    entries: NDArray[Any] | None = None,
) -> bool:
    """
    Check whether an element dtype provides a capability.

    Args:
        dtype: numpy dtype of the entries
        capability: One of the CAPABILITY_* constants
        entries: The entries themselves. Only consulted for object dtype,
                 where the answer depends on the Python number types stored.

    Returns:
        True if the capability is available, False otherwise

    Note:
        Unknown capabilities return False, never raise.
    """
    if capability not in ALL_CAPABILITIES:
        return False

    dtype = np.dtype(dtype)

    if np.issubdtype(dtype, np.unsignedinteger):
        return capability != CAPABILITY_SIGNED
    if np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating):
        return True
    if np.issubdtype(dtype, np.complexfloating):
        return capability != CAPABILITY_ORDERED
    if dtype == object:
        if entries is None:
            return False
        if capability == CAPABILITY_ORDERED:
            return all(isinstance(x, numbers.Real) for x in entries)
        return all(isinstance(x, numbers.Number) for x in entries)
    return False


def require(container: NumericContainer, capability: str, operation: str) -> None:
    """
    Raise CapabilityError unless `container` supports `capability`.

    Args:
        container: Matrix or Vector (anything with supports() and dtype)
        capability: One of the CAPABILITY_* constants
        operation: Operation name for the error message

    Raises:
        CapabilityError: If the capability is missing
    """
    if not container.supports(capability):
        raise CapabilityError(capability, container.dtype, operation)


def zero_of(dtype: DTypeLike) -> Any:
    """Additive identity for `dtype` (a plain int 0 for object dtype)."""
    dtype = np.dtype(dtype)
    if dtype == object:
        return 0
    return dtype.type(0)


def one_of(dtype: DTypeLike) -> Any:
    """Multiplicative identity for `dtype` (a plain int 1 for object dtype)."""
    dtype = np.dtype(dtype)
    if dtype == object:
        return 1
    return dtype.type(1)


__all__ = [
    'CAPABILITY_ADDITIVE',
    'CAPABILITY_MULTIPLICATIVE',
    'CAPABILITY_DIVISIBLE',
    'CAPABILITY_ORDERED',
    'CAPABILITY_SIGNED',
    'ALL_CAPABILITIES',
    'dtype_supports',
    'require',
    'zero_of',
    'one_of',
]
