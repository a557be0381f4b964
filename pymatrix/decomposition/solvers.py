"""
Public API for decompositions.

    lu_decompose(A) → LUSolution | None
    det(A) → float
    inv(A, method='gauss_jordan') → Matrix | None
    inv_solution(A, method='gauss_jordan') → InverseSolution
    rref(A) → Matrix

Each function validates its input, times the kernel, and wraps the
outcome in a Result. A singular matrix is not an error: LU returns None,
the determinant is 0.0 and the inverse is None.
"""

from __future__ import annotations

import warnings
from typing import Literal

from pymatrix.core.capabilities import (
    CAPABILITY_ADDITIVE,
    CAPABILITY_DIVISIBLE,
    CAPABILITY_MULTIPLICATIVE,
    CAPABILITY_ORDERED,
    CAPABILITY_SIGNED,
    require,
)
from pymatrix.core.compute.timing import timed
from pymatrix.core.compute.tolerances import CONDITION_WARNING_RATIO
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.result import Result
from pymatrix.decomposition._common import InverseParams
from pymatrix.decomposition._inverse import gauss_jordan_inverse, lu_inverse
from pymatrix.decomposition._lu import lu_determinant, lu_factor
from pymatrix.decomposition._rref import reduce_row_echelon, reduction_copy
from pymatrix.decomposition.design import SquareDesign
from pymatrix.decomposition.solution import InverseSolution, LUSolution
from pymatrix.matrix.matrix import Matrix

_LU_CAPABILITIES = (CAPABILITY_ORDERED, CAPABILITY_SIGNED)
_GAUSS_JORDAN_CAPABILITIES = (CAPABILITY_SIGNED, CAPABILITY_DIVISIBLE)
_INVERSION_METHODS = ('gauss_jordan', 'lu')


def lu_decompose(matrix: Matrix) -> LUSolution | None:
    """LU decomposition with pivoting.

    Parameters
    ----------
    matrix : Matrix
        Square matrix with real entries.

    Returns
    -------
    LUSolution or None
        None if the matrix is numerically singular (no pivot of absolute
        value at least PIVOT_TOLERANCE).

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    CapabilityError
        If the entries are not ordered (e.g. complex).

    Warns
    -----
    RuntimeWarning
        If the ratio of smallest to largest pivot is below
        CONDITION_WARNING_RATIO.
    """
    design = SquareDesign.for_matrix(
        matrix, operation='lu_decompose', capabilities=_LU_CAPABILITIES,
    )

    with timed() as timer:
        with timer.section('factorize'):
            params = lu_factor(design.working)

    if params is None:
        return None

    result_warnings = []
    if params.pivot_ratio < CONDITION_WARNING_RATIO:
        msg = (
            f"LU factorization is ill-conditioned: pivot ratio "
            f"{params.pivot_ratio:.3e} is below {CONDITION_WARNING_RATIO:.0e}"
        )
        result_warnings.append(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)

    result = Result(
        params=params,
        info={
            'method': 'lu_column_pivoting',
            'dim': design.dim,
            'n_swaps': params.permutation[-1] - design.dim,
        },
        timing=timer.result(),
        backend_name='cpu_lu',
        warnings=tuple(result_warnings),
    )

    return LUSolution(_result=result)


def det(matrix: Matrix) -> float:
    """Determinant via LU decomposition.

    Returns 0.0 for a singular matrix. The result is floating point even
    for integer input; round it when an exact integer is expected.

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    """
    design = SquareDesign.for_matrix(
        matrix, operation='determinant', capabilities=_LU_CAPABILITIES,
    )
    params = lu_factor(design.working)
    if params is None:
        return 0.0
    return lu_determinant(params.lu, params.permutation)


def inv_solution(
    matrix: Matrix,
    *,
    method: Literal['gauss_jordan', 'lu'] = 'gauss_jordan',
) -> InverseSolution:
    """Invert a square matrix and keep the diagnostics.

    Parameters
    ----------
    matrix : Matrix
        Square matrix.
    method : str
        'gauss_jordan' (default): reduce [A | I]. Keeps floating, complex
        and exact (Fraction) element types; integers become float64.
        'lu': substitution on the LU factors. Real entries only; float64.

    Returns
    -------
    InverseSolution

    Raises
    ------
    ValidationError
        If `method` is unknown.
    NotSquareError
        If the matrix is not square.
    """
    if method not in _INVERSION_METHODS:
        raise ValidationError(
            f"method: must be one of {_INVERSION_METHODS}, got {method!r}"
        )

    if method == 'lu':
        design = SquareDesign.for_matrix(
            matrix, operation='invert', capabilities=_LU_CAPABILITIES,
        )
    else:
        design = SquareDesign.for_matrix(
            matrix, operation='invert', capabilities=_GAUSS_JORDAN_CAPABILITIES,
        )

    with timed() as timer:
        if method == 'lu':
            with timer.section('factorize'):
                factors = lu_factor(design.working)
            inverse = None
            if factors is not None:
                with timer.section('substitution'):
                    inverse = lu_inverse(factors.lu, factors.permutation)
            backend_name = 'cpu_lu'
        else:
            with timer.section('reduce'):
                inverse = gauss_jordan_inverse(design.matrix.to_array())
            backend_name = 'cpu_gauss_jordan'

    result = Result(
        params=InverseParams(
            inverse=inverse,
            method=method,
            invertible=inverse is not None,
        ),
        info={'method': method, 'dim': design.dim},
        timing=timer.result(),
        backend_name=backend_name,
    )

    return InverseSolution(_result=result)


def inv(
    matrix: Matrix,
    *,
    method: Literal['gauss_jordan', 'lu'] = 'gauss_jordan',
) -> Matrix | None:
    """Inverse of a square matrix, or None if it is singular.

    See inv_solution() for the meaning of `method`.
    """
    return inv_solution(matrix, method=method).inverse


def rref(matrix: Matrix) -> Matrix:
    """Reduced row echelon form of any matrix.

    The input is not modified. Integer entries are promoted to float64;
    object entries such as Fraction are reduced exactly.

    Raises
    ------
    CapabilityError
        If the element type lacks +, * or /.
    """
    if not isinstance(matrix, Matrix):
        raise ValidationError(
            f"rref: expected a Matrix, got {type(matrix).__name__}"
        )
    for capability in (CAPABILITY_ADDITIVE, CAPABILITY_MULTIPLICATIVE, CAPABILITY_DIVISIBLE):
        require(matrix, capability, 'rref')

    reduced = reduce_row_echelon(reduction_copy(matrix.to_array()))
    return Matrix.from_array(reduced)
