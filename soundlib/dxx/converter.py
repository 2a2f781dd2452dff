"""
Amplitude Conversion Module

Converting between the fixed-point and floating encodings is not a cast:
magnitudes are rescaled into a nominal amplitude band. For every sample

    out = sign(v) * (|v| - min|v|) / (max|v| - min|v|) * amplitude

with min and max taken over the absolute values of the whole buffer. The
smallest magnitude therefore maps to 0 and the largest to the amplitude.
Shorts are scaled to the full signed 16-bit range, floats to 10000.0.
"""

import numpy as np

# Full scale of the 16-bit encodings, 2**15 - 1
SHORT_AMPLITUDE = 32767
# Nominal amplitude of the floating encodings
FLOAT_AMPLITUDE = 10000.0


def rescale_magnitudes(data, amplitude: float) -> np.ndarray:
    """
    Rescale the magnitudes of a buffer into [0, amplitude], keeping signs.

    Args:
        data: Samples of any real dtype
        amplitude: Magnitude the largest sample is mapped to

    Returns:
        float64 array of the same length. If every sample has the same
        magnitude the result is all zeros.
    """
    values = np.asarray(data, dtype=np.float64).ravel()
    if values.size == 0:
        return np.zeros(0, dtype=np.float64)

    magnitudes = np.abs(values)
    max_val = magnitudes.max()
    min_val = magnitudes.min()
    span = max_val - min_val
    if span == 0.0:
        return np.zeros(values.shape, dtype=np.float64)

    scaled = (magnitudes - min_val) / span * amplitude
    # + 0.0 turns -0.0 into 0.0
    return np.where(values < 0, -scaled, scaled) + 0.0


def int16s_to_float64s(data) -> np.ndarray:
    """Shorts read from disk to canonical doubles."""
    return rescale_magnitudes(data, FLOAT_AMPLITUDE)


def float32s_to_float64s(data) -> np.ndarray:
    """Floats read from disk to canonical doubles."""
    return rescale_magnitudes(data, FLOAT_AMPLITUDE)


def float64s_to_int16s(data) -> np.ndarray:
    """Canonical doubles to shorts, truncating toward zero."""
    scaled = rescale_magnitudes(data, SHORT_AMPLITUDE)
    return np.trunc(scaled).astype(np.int16)


def float64s_to_float32s(data) -> np.ndarray:
    """Canonical doubles to floats."""
    return rescale_magnitudes(data, FLOAT_AMPLITUDE).astype(np.float32)
