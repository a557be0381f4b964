"""
Core protocols for PyMatrix.

These define structural interfaces for element types and containers.
We use Protocol (structural typing) rather than ABC (nominal typing) so that
numpy scalars, Python numbers and user number types (Fraction, Decimal)
all qualify without registration.

Design Principles:
    - Minimal contracts: a protocol names only what its callers use
    - Capability-driven: containers answer supports() for the element type
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsMultiplicative(Protocol):
    """Scalar operands of Matrix/Vector scaling (CAPABILITY_MULTIPLICATIVE)."""

    def __mul__(self, other: Any, /) -> Any: ...


@runtime_checkable
class NumericContainer(Protocol):
    """
    Minimal protocol shared by Matrix and Vector.

    Exists so capability checks and validators can be written once for
    both containers.
    """

    @property
    def dims(self) -> Any:
        """Dimensions of the container."""
        ...

    @property
    def dtype(self) -> Any:
        """numpy dtype of the entries."""
        ...

    def supports(self, capability: str) -> bool:
        """
        Check if the element type supports a numeric capability.

        Note:
            Unknown capabilities MUST return False, never raise.
        """
        ...
