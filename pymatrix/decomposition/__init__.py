"""
Square-matrix decompositions.

Public API:
    lu_decompose(A) -> LUSolution | None
    det(A) -> float
    inv(A, method='gauss_jordan') -> Matrix | None
    inv_solution(A, method='gauss_jordan') -> InverseSolution
    rref(A) -> Matrix
"""

from pymatrix.decomposition.solvers import det, inv, inv_solution, lu_decompose, rref
from pymatrix.decomposition.solution import InverseSolution, LUSolution

__all__ = [
    "lu_decompose",
    "det",
    "inv",
    "inv_solution",
    "rref",
    "LUSolution",
    "InverseSolution",
]
