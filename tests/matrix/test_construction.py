"""
Tests for Matrix construction.

Validates:
    - Every constructor produces the requested dims and entries
    - Element types are preserved (int, float32, complex, Fraction)
    - Invalid sizes and wrong-length data raise with populated attributes
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix import Dimensions, Matrix, matrix
from pymatrix.core.exceptions import (
    DimensionError,
    InvalidDimensionsError,
    InvalidInputDimensionsError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# new / from_sequence
# ═══════════════════════════════════════════════════════════════════════


class TestNew:

    def test_filled(self):
        m = Matrix.new(2, 3, 7)
        assert m.dims == Dimensions(2, 3)
        assert all(x == 7 for x in m.storage)

    def test_element_type_kept(self):
        assert np.issubdtype(Matrix.new(2, 2, 7).dtype, np.integer)
        assert Matrix.new(2, 2, Fraction(1, 3)).dtype == object

    @pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0)])
    def test_zero_size(self, rows, cols):
        with pytest.raises(InvalidDimensionsError):
            Matrix.new(rows, cols, 1.0)

    def test_non_number_init(self):
        with pytest.raises(ValidationError, match="init"):
            Matrix.new(2, 2, "x")


class TestFromSequence:

    def test_row_major(self):
        m = Matrix.from_sequence(2, 3, [1, 2, 3, 4, 5, 6])
        assert m.entry(0, 2) == 3
        assert m.entry(1, 0) == 4

    def test_copies_input(self):
        data = np.arange(4.0)
        m = Matrix.from_sequence(2, 2, data)
        data[0] = 99.0
        assert m.entry(0, 0) == 0.0

    def test_wrong_length(self):
        with pytest.raises(InvalidInputDimensionsError) as exc_info:
            Matrix.from_sequence(2, 3, [1, 2, 3, 4, 5])
        assert exc_info.value.actual == 5
        assert exc_info.value.expected == 6

    def test_zero_length(self):
        with pytest.raises(InvalidInputDimensionsError) as exc_info:
            Matrix.from_sequence(2, 2, [])
        assert exc_info.value.actual == 0
        assert exc_info.value.expected == 4

    def test_zero_dims_checked_first(self):
        with pytest.raises(InvalidDimensionsError):
            Matrix.from_sequence(0, 2, [])

    def test_float32_preserved(self):
        m = Matrix.from_sequence(1, 2, np.array([1.0, 2.0], dtype=np.float32))
        assert m.dtype == np.float32


# ═══════════════════════════════════════════════════════════════════════
# zero / one / diag / diag_with
# ═══════════════════════════════════════════════════════════════════════


class TestIdentities:

    @pytest.mark.parametrize("rows, cols", [(1, 1), (2, 5), (7, 3)])
    def test_zero(self, rows, cols):
        m = Matrix.zero(rows, cols)
        assert m.dims == Dimensions(rows, cols)
        assert np.all(m.storage == 0.0)

    def test_zero_dtype(self):
        assert Matrix.zero(2, 2, dtype=np.int32).dtype == np.int32

    def test_zero_rejects_bool_dtype(self):
        with pytest.raises(ValidationError):
            Matrix.zero(2, 2, dtype=bool)

    def test_one(self):
        np.testing.assert_array_equal(Matrix.one(3).to_array(), np.eye(3))

    def test_one_object(self):
        m = Matrix.one(2, dtype=object)
        assert m.dtype == object
        assert m.entry(1, 1) == 1
        assert m.entry(0, 1) == 0

    def test_diag(self):
        np.testing.assert_array_equal(Matrix.diag(3, 2.5).to_array(), 2.5 * np.eye(3))

    def test_diag_fraction(self):
        m = Matrix.diag(2, Fraction(1, 2))
        assert m.entry(0, 0) == Fraction(1, 2)
        assert m.entry(0, 1) == 0

    def test_diag_with(self):
        m = Matrix.diag_with(3, [1, 2, 3])
        np.testing.assert_array_equal(m.to_array(), np.diag([1, 2, 3]))

    def test_diag_with_wrong_length(self):
        with pytest.raises(InvalidInputDimensionsError) as exc_info:
            Matrix.diag_with(3, [1, 2])
        assert exc_info.value.actual == 2
        assert exc_info.value.expected == 3


# ═══════════════════════════════════════════════════════════════════════
# from_rows / from_array / matrix()
# ═══════════════════════════════════════════════════════════════════════


class TestFromRows:

    def test_shape_inferred(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert m.dims == Dimensions(2, 3)
        assert m.entry(1, 2) == 6

    def test_matrix_shorthand(self):
        assert matrix([[1, 2], [3, 4]]) == Matrix.from_sequence(2, 2, [1, 2, 3, 4])

    def test_ragged(self):
        with pytest.raises(InvalidInputDimensionsError) as exc_info:
            Matrix.from_rows([[1, 2], [3]])
        assert exc_info.value.actual == 1
        assert exc_info.value.expected == 2

    def test_no_rows(self):
        with pytest.raises(InvalidDimensionsError):
            Matrix.from_rows([])

    def test_empty_rows(self):
        with pytest.raises(InvalidDimensionsError):
            Matrix.from_rows([[]])

    def test_not_nested(self):
        with pytest.raises(ValidationError):
            Matrix.from_rows([1, 2, 3])


class TestFromArray:

    def test_round_trip(self, rng):
        a = rng.standard_normal((3, 4))
        np.testing.assert_array_equal(Matrix.from_array(a).to_array(), a)

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="2D"):
            Matrix.from_array(np.arange(3))


class TestStorageInvariant:

    def test_init_checks_length(self):
        with pytest.raises(InvalidInputDimensionsError):
            Matrix(Dimensions(2, 2), np.zeros(3))

    def test_init_requires_flat_storage(self):
        with pytest.raises(DimensionError):
            Matrix(Dimensions(2, 2), np.zeros((2, 2)))
