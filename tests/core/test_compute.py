"""
Tests for timing utilities and numerical tolerances.
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix.core.compute import (
    EXACT,
    FP32,
    FP64,
    PIVOT_TOLERANCE,
    Timer,
    select_tolerance,
    timed,
    zero_tolerance,
)


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_total_and_sections(self):
        timer = Timer()
        timer.start()
        with timer.section("factorize"):
            pass
        with timer.section("factorize"):
            pass
        timer.stop()
        result = timer.result()
        assert result["total_seconds"] >= 0.0
        assert result["factorize"] >= 0.0
        assert set(result) == {"total_seconds", "factorize"}

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            sum(range(10))
        assert timer.result()["total_seconds"] >= 0.0


# ═══════════════════════════════════════════════════════════════════════
# Tolerances
# ═══════════════════════════════════════════════════════════════════════


class TestSelectTolerance:

    @pytest.mark.parametrize("dtype, tier", [
        (np.float64, FP64),
        (np.complex128, FP64),
        (np.float32, FP32),
        (np.complex64, FP32),
        (np.int64, EXACT),
        (object, EXACT),
    ])
    def test_tier(self, dtype, tier):
        assert select_tolerance(dtype) is tier

    def test_exact_is_zero(self):
        assert EXACT.rtol == 0.0
        assert EXACT.atol == 0.0


class TestZeroTolerance:

    def test_scales_with_shape_and_magnitude(self):
        a = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 10.0]])
        expected = 3 * np.finfo(np.float64).eps * 10.0
        assert zero_tolerance(a) == pytest.approx(expected)

    def test_float32_uses_its_epsilon(self):
        a = np.ones((2, 2), dtype=np.float32)
        assert zero_tolerance(a) == pytest.approx(2 * float(np.finfo(np.float32).eps))

    def test_object_is_exact(self):
        a = np.array([[Fraction(1, 3)]], dtype=object)
        assert zero_tolerance(a) == 0.0

    def test_pivot_tolerance_value(self):
        assert PIVOT_TOLERANCE == 1e-6
