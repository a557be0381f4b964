"""
pytest configuration and shared fixtures.
"""

from fractions import Fraction

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m3():
    """3x3 matrix with determinant -12 that needs pivoting."""
    return Matrix.from_rows([[1, 2, 3], [3, 2, 1], [2, 1, 3]])


@pytest.fixture
def m2():
    """2x2 matrix whose inverse is exactly representable in binary."""
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def singular3():
    """Rank-2 3x3 matrix."""
    return Matrix.from_rows([[1, 0, 0], [0, 1, 0], [0, 0, 0]])


@pytest.fixture
def fraction_matrix():
    """3x3 matrix of Fractions, for exact arithmetic."""
    return Matrix.from_rows([
        [Fraction(2), Fraction(1, 3), Fraction(0)],
        [Fraction(1, 2), Fraction(1), Fraction(1, 4)],
        [Fraction(0), Fraction(3), Fraction(5, 7)],
    ])


@pytest.fixture
def random_square(rng):
    """Well-conditioned random 6x6 float matrix."""
    a = rng.standard_normal((6, 6)) + 6.0 * np.eye(6)
    return Matrix.from_array(a)
