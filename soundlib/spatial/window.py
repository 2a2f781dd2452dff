"""
Fade Window Generator

Fade-in and fade-out coefficient sequences built from a 4-term cosine-sum
(Fourier series) window. The two halves are mirror images of each other and
are used to cross-fade consecutive angle steps of a move.
"""

import math
import numpy as np
from typing import Tuple

from ..exceptions import InvalidArgumentError

# Fourier series window coefficients
A0 = (1 + math.sqrt(2)) / 4
A1 = 0.25 + 0.25 * math.sqrt((5 - 2 * math.sqrt(2)) / 2)
A2 = (1 - math.sqrt(2)) / 4
A3 = 0.25 - 0.25 * math.sqrt((5 - 2 * math.sqrt(2)) / 2)


def generate_fade_window(length: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate a fade-in and a fade-out filter of the given length.

    For i in [0, length):

        fade_in[i]  = A0 - A1 cos(pi i / L) + A2 cos(2 pi i / L) - A3 cos(3 pi i / L)
        fade_out[i] = A0 + A1 cos(pi i / L) + A2 cos(2 pi i / L) + A3 cos(3 pi i / L)

    Args:
        length: Number of coefficients, L

    Returns:
        Tuple of (fade_in, fade_out) float64 arrays. A length of 0 gives
        two empty arrays.

    Raises:
        InvalidArgumentError: If length is negative or not an integer

    Examples:
        >>> fade_in, fade_out = generate_fade_window(4)
        >>> round(fade_in[0] + fade_out[0], 12) == round(2 * (A0 + A2), 12)
        True
    """
    if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
        raise InvalidArgumentError(f"Window length must be an integer, got {length!r}")
    if length < 0:
        raise InvalidArgumentError(f"Window length must be non-negative, got {length}")
    if length == 0:
        return np.zeros(0), np.zeros(0)

    phase = np.pi / length * np.arange(length, dtype=np.float64)
    c1 = np.cos(phase)
    c2 = np.cos(2.0 * phase)
    c3 = np.cos(3.0 * phase)

    fade_in = A0 - A1 * c1 + A2 * c2 - A3 * c3
    fade_out = A0 + A1 * c1 + A2 * c2 + A3 * c3
    return fade_in, fade_out
