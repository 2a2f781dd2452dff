"""
Unit tests for the amplitude rescaling laws.

Expected values are computed by hand from
    out = sign(v) * (|v| - min|v|) / (max|v| - min|v|) * amplitude
"""

import numpy as np
from soundlib.dxx.converter import (
    rescale_magnitudes, int16s_to_float64s, float32s_to_float64s,
    float64s_to_int16s, float64s_to_float32s, SHORT_AMPLITUDE, FLOAT_AMPLITUDE,
)


class TestRescaleMagnitudes:
    """Tests for the shared rescaling law."""

    def test_bounds_use_absolute_values(self):
        """-200 is not the minimum: magnitudes are 100, 200, 300."""
        result = rescale_magnitudes([100, -200, 300], 10000.0)
        np.testing.assert_array_equal(result, [0.0, -5000.0, 10000.0])

    def test_sign_reapplied(self):
        """The largest magnitude keeps its sign."""
        result = rescale_magnitudes([-4.0, 2.0, 1.0], 1.0)
        np.testing.assert_allclose(result, [-1.0, 1.0 / 3.0, 0.0])

    def test_empty(self):
        result = rescale_magnitudes([], 10000.0)
        assert result.shape == (0,)
        assert result.dtype == np.float64

    def test_constant_magnitude(self):
        """All samples at the minimum magnitude map to zero."""
        result = rescale_magnitudes([5.0, -5.0, 5.0], 10000.0)
        np.testing.assert_array_equal(result, [0.0, 0.0, 0.0])

    def test_no_negative_zero(self):
        result = rescale_magnitudes([-1.0, 3.0], 1.0)
        assert not np.signbit(result[0])


class TestDirectionalConversions:
    """Tests for the per-format helpers."""

    def test_constants(self):
        assert SHORT_AMPLITUDE == 32767
        assert FLOAT_AMPLITUDE == 10000.0

    def test_int16s_to_float64s(self):
        data = np.array([0, 16000, -32000], dtype=np.int16)
        result = int16s_to_float64s(data)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [0.0, 5000.0, -10000.0])

    def test_int16_minimum_magnitude(self):
        """-32768 has magnitude 32768 and must not overflow."""
        data = np.array([-32768, 0], dtype=np.int16)
        np.testing.assert_array_equal(int16s_to_float64s(data), [-10000.0, 0.0])

    def test_float32s_to_float64s(self):
        data = np.array([0.5, -1.0, 2.5], dtype=np.float32)
        np.testing.assert_allclose(float32s_to_float64s(data), [0.0, -2500.0, 10000.0])

    def test_float64s_to_int16s_truncates(self):
        """-16383.5 truncates toward zero."""
        result = float64s_to_int16s([0.0, -5000.0, 10000.0])
        assert result.dtype == np.int16
        np.testing.assert_array_equal(result, [0, -16383, 32767])

    def test_float64s_to_float32s(self):
        result = float64s_to_float32s([1.0, 2.0, -3.0])
        assert result.dtype == np.float32
        np.testing.assert_array_equal(result, np.array([0.0, 5000.0, -10000.0], dtype=np.float32))
