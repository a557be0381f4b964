"""
Tests for Matrix arithmetic.

Validates:
    - Elementwise add/subtract with dimension checks
    - Matrix product: dimension checks, left-to-right accumulation
    - Scalar scale/divide, including the zero-divisor guard
    - Capability errors for element types that lack an operation
    - Algebraic properties (identity, associativity, commutativity)
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix import Dimensions, Matrix, Vector, vector
from pymatrix.core.exceptions import (
    CapabilityError,
    DimensionMismatchError,
    DivisionByZeroError,
)


def _triple_loop(a, b):
    """Reference product with plain Python accumulation."""
    n, m = a.shape
    p = b.shape[1]
    out = np.zeros((n, p))
    for i in range(n):
        for j in range(p):
            acc = 0.0
            for k in range(m):
                acc = acc + float(a[i, k]) * float(b[k, j])
            out[i, j] = acc
    return out


# ═══════════════════════════════════════════════════════════════════════
# Add / subtract / negate
# ═══════════════════════════════════════════════════════════════════════


class TestAddSubtract:

    def test_add(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[10, 20], [30, 40]])
        assert a + b == Matrix.from_rows([[11, 22], [33, 44]])

    def test_subtract(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        assert a - a == Matrix.zero(2, 2)

    def test_add_mismatch(self):
        a, b = Matrix.zero(2, 3), Matrix.zero(3, 2)
        with pytest.raises(DimensionMismatchError) as exc_info:
            a + b
        assert exc_info.value.left == Dimensions(2, 3)
        assert exc_info.value.right == Dimensions(3, 2)
        assert exc_info.value.operation == "add"

    def test_subtract_mismatch_operation_name(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            Matrix.zero(2, 2) - Matrix.zero(2, 3)
        assert exc_info.value.operation == "subtract"

    def test_iadd_in_place(self):
        a = Matrix.from_rows([[1.0, 2.0]])
        row = a[0]
        a += Matrix.from_rows([[1.0, 1.0]])
        np.testing.assert_array_equal(row, [2.0, 3.0])

    def test_isub(self):
        a = Matrix.from_rows([[5, 5]])
        a -= Matrix.from_rows([[1, 2]])
        assert a == Matrix.from_rows([[4, 3]])

    def test_add_scalar_unsupported(self):
        with pytest.raises(TypeError):
            Matrix.one(2) + 1

    def test_negate(self):
        assert -Matrix.from_rows([[1, -2]]) == Matrix.from_rows([[-1, 2]])

    def test_negate_unsigned(self):
        m = Matrix.from_sequence(1, 2, np.array([1, 2], dtype=np.uint8))
        with pytest.raises(CapabilityError) as exc_info:
            -m
        assert exc_info.value.operation == "negate"


class TestAlgebraicProperties:

    def test_commutative(self, rng):
        a = Matrix.from_array(rng.standard_normal((3, 4)))
        b = Matrix.from_array(rng.standard_normal((3, 4)))
        assert a + b == b + a

    def test_associative(self, rng):
        a, b, c = (Matrix.from_array(rng.standard_normal((3, 3))) for _ in range(3))
        assert ((a + b) + c).allclose(a + (b + c))

    def test_associative_exact_for_fractions(self, fraction_matrix):
        b = Matrix.diag(3, Fraction(1, 7))
        assert (fraction_matrix + b) + b == fraction_matrix + (b + b)

    @pytest.mark.parametrize("n", [1, 2, 5, 10])
    def test_identity_idempotent(self, n):
        assert Matrix.one(n) * Matrix.one(n) == Matrix.one(n)

    def test_identity_neutral(self, m3):
        assert Matrix.one(3, dtype=m3.dtype) * m3 == m3
        assert m3 * Matrix.one(3, dtype=m3.dtype) == m3


# ═══════════════════════════════════════════════════════════════════════
# Products
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixProduct:

    def test_known_product(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[5, 6], [7, 8]])
        assert a * b == Matrix.from_rows([[19, 22], [43, 50]])

    def test_matmul_operator(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        assert a @ a == a * a

    def test_result_shape(self):
        assert (Matrix.zero(2, 3) * Matrix.zero(3, 5)).dims == Dimensions(2, 5)

    def test_mismatch(self):
        a, b = Matrix.zero(3, 4), Matrix.zero(3, 3)
        with pytest.raises(DimensionMismatchError) as exc_info:
            a * b
        assert exc_info.value.left == Dimensions(3, 4)
        assert exc_info.value.right == Dimensions(3, 3)
        assert exc_info.value.operation == "multiply"

    def test_bitwise_equal_to_triple_loop(self, rng):
        a = rng.standard_normal((5, 7)) * 1e3
        b = rng.standard_normal((7, 4)) * 1e-3
        product = (Matrix.from_array(a) * Matrix.from_array(b)).to_array()
        np.testing.assert_array_equal(product, _triple_loop(a, b))

    def test_fraction_product_exact(self):
        a = Matrix.from_rows([[Fraction(1, 3), Fraction(1, 6)]])
        b = Matrix.from_rows([[Fraction(3)], [Fraction(2)]])
        assert (a * b).entry(0, 0) == Fraction(4, 3)

    def test_mixed_dtypes_promote(self):
        a = Matrix.from_rows([[1, 2]])
        b = Matrix.from_rows([[0.5], [0.25]])
        assert (a * b).dtype == np.float64

    def test_matmul_scalar_unsupported(self):
        with pytest.raises(TypeError):
            Matrix.one(2) @ 2


class TestMatrixVectorProduct:

    def test_column_vector(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        result = m * vector(1, 0, -1)
        assert isinstance(result, Vector)
        assert result.is_column()
        assert list(result) == [-2, -2]

    def test_matmul_operator(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        assert m @ vector(1, 1) == m * vector(1, 1)

    def test_row_vector_mismatch(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        with pytest.raises(DimensionMismatchError) as exc_info:
            m * vector(1, 1).to_row_vector()
        assert exc_info.value.right == Dimensions(1, 2)


# ═══════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════


class TestScalar:

    def test_scale_both_sides(self):
        m = Matrix.from_rows([[1, 2]])
        assert m * 3 == Matrix.from_rows([[3, 6]])
        assert 3 * m == Matrix.from_rows([[3, 6]])

    def test_numpy_scalar_on_left(self):
        m = Matrix.from_rows([[1.0, 2.0]])
        result = np.float64(2.0) * m
        assert isinstance(result, Matrix)
        assert result == Matrix.from_rows([[2.0, 4.0]])

    def test_imul(self):
        m = Matrix.from_rows([[1.5, 2.0]])
        m *= 2
        assert m == Matrix.from_rows([[3.0, 4.0]])

    def test_divide(self):
        m = Matrix.from_rows([[2, 4]])
        assert m / 2 == Matrix.from_rows([[1.0, 2.0]])

    def test_divide_fraction_exact(self):
        m = Matrix.from_rows([[Fraction(1), Fraction(2)]])
        assert (m / 3).entry(0, 1) == Fraction(2, 3)

    @pytest.mark.parametrize("zero", [0, 0.0, Fraction(0)])
    def test_divide_by_zero(self, zero):
        with pytest.raises(DivisionByZeroError):
            Matrix.one(2) / zero

    def test_itruediv_changes_dtype(self):
        m = Matrix.from_rows([[1, 2]])
        m /= 2
        assert m.dtype == np.float64
        assert m == Matrix.from_rows([[0.5, 1.0]])

    def test_itruediv_by_zero_leaves_matrix(self):
        m = Matrix.from_rows([[1.0, 2.0]])
        with pytest.raises(DivisionByZeroError):
            m /= 0
        assert m == Matrix.from_rows([[1.0, 2.0]])

    def test_divide_by_matrix_unsupported(self):
        with pytest.raises(TypeError):
            Matrix.one(2) / Matrix.one(2)
