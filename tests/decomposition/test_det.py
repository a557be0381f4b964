"""
Tests for the determinant.
"""

import numpy as np
import pytest
from scipy import linalg

from pymatrix import Matrix, det
from pymatrix.core.exceptions import NotSquareError


EIGHT_BY_EIGHT = [
    8, 6, 1, 0, 1, 9, 5, 9, 9, 9, 0, 8, 4, 3, 4, 0, 5, 6, 5, 1, 0, 9, 4, 6, 4, 9, 8, 3, 5,
    1, 10, 6, 3, 10, 7, 4, 9, 2, 0, 1, 2, 1, 6, 8, 7, 3, 2, 9, 1, 7, 1, 4, 4, 9, 0, 0, 7,
    6, 4, 0, 10, 4, 5, 9,
]


class TestKnownDeterminants:

    def test_three_by_three(self, m3):
        assert det(m3) == pytest.approx(-12.0)
        assert round(det(m3)) == -12

    def test_two_by_two_odd_swap(self, m2):
        assert det(m2) == pytest.approx(-2.0)

    def test_eight_by_eight(self):
        b = Matrix.from_sequence(8, 8, EIGHT_BY_EIGHT)
        assert round(det(b)) == -15546220

    def test_one_by_one(self):
        assert det(Matrix.from_rows([[4.5]])) == 4.5

    def test_matrix_method(self, m3):
        assert m3.det() == det(m3)


class TestIdentityAndZero:

    @pytest.mark.parametrize("n", [1, 3, 100])
    def test_identity(self, n):
        assert det(Matrix.one(n)) == 1.0

    def test_identity_float32(self):
        assert det(Matrix.one(100, dtype=np.float32)) == 1.0

    def test_zero_matrix_int(self):
        assert det(Matrix.zero(3, 3, dtype=np.int32)) == 0.0

    def test_singular(self, singular3):
        assert det(singular3) == 0.0


class TestAgainstScipy:

    @pytest.mark.parametrize("n", [2, 5, 9])
    def test_random(self, rng, n):
        a = rng.standard_normal((n, n))
        assert det(Matrix.from_array(a)) == pytest.approx(linalg.det(a), rel=1e-9)

    def test_fractions_evaluated_in_float(self, fraction_matrix):
        assert det(fraction_matrix) == pytest.approx(-8 / 42)

    def test_returns_float(self, m3):
        assert isinstance(det(m3), float)


class TestErrors:

    def test_not_square(self):
        with pytest.raises(NotSquareError, match="determinant"):
            det(Matrix.new(3, 4, 1.0))
