"""
Linear Convolution Engine

Full discrete linear convolution of two real sequences,

    result[n] = sum_p x[p] * y[n - p],    len(result) = len(x) + len(y) - 1

either by direct summation in the time domain or by zero-padded
multiplication in the frequency domain. Both agree to floating-point
tolerance.
"""

import numpy as np
from scipy import signal

from ..exceptions import ConvolutionError, InvalidArgumentError


def _as_sequence(values) -> np.ndarray:
    array = np.asarray(values, dtype=np.float64)
    if array.ndim != 1:
        raise InvalidArgumentError(f"Convolution inputs must be 1-D, got shape {array.shape}")
    return array


def _check_length(result: np.ndarray, x: np.ndarray, y: np.ndarray) -> np.ndarray:
    expected = len(x) + len(y) - 1
    if len(result) != expected:
        raise ConvolutionError(f"Convolution produced {len(result)} samples, expected {expected}")
    return result


def linear_convolution_time_domain(x, y) -> np.ndarray:
    """Direct O(len(x) * len(y)) convolution."""
    x = _as_sequence(x)
    y = _as_sequence(y)
    if len(x) == 0 or len(y) == 0:
        return np.zeros(0)
    return _check_length(np.convolve(x, y, mode='full'), x, y)


def linear_convolution_fft(x, y) -> np.ndarray:
    """Convolution by zero-padded FFT multiplication."""
    x = _as_sequence(x)
    y = _as_sequence(y)
    if len(x) == 0 or len(y) == 0:
        return np.zeros(0)
    return _check_length(signal.fftconvolve(x, y, mode='full'), x, y)


_ENGINES = {
    'time': linear_convolution_time_domain,
    'fft': linear_convolution_fft,
}


def convolve(x, y, mode: str = 'time') -> np.ndarray:
    """
    Convolve two real sequences.

    Args:
        x: First sequence
        y: Second sequence
        mode: 'time' for direct summation, 'fft' for frequency-domain

    Returns:
        float64 array of len(x) + len(y) - 1 samples, empty if either
        input is empty

    Raises:
        InvalidArgumentError: If mode is unknown or an input is not 1-D
    """
    try:
        engine = _ENGINES[mode]
    except KeyError:
        raise InvalidArgumentError(f"Unknown convolution mode {mode!r}, use one of {sorted(_ENGINES)}") from None
    return engine(x, y)
