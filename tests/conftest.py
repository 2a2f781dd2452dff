"""
Pytest configuration file for soundlib tests.
"""

import os
import pytest
import numpy as np
from soundlib.config import RenderConfig
from soundlib.dxx import write_file


@pytest.fixture
def test_config():
    """Return a render configuration with the reference settings."""
    return RenderConfig(sample_rate=48000, convolution_mode='time')


@pytest.fixture
def impulse():
    """A length-4 unit impulse transfer function."""
    return np.array([1.0, 0.0, 0.0, 0.0])


@pytest.fixture
def ramp_sound():
    """A ramp source sound, sample n has value n + 1."""
    return np.arange(1, 12001, dtype=np.float64)


@pytest.fixture
def make_subject(tmp_path):
    """
    Return a factory that writes transfer functions for a subject.

    The factory takes a mapping of angle -> transfer function (or a list of
    angles and one shared transfer function) and the ears to write, and
    returns the subject directory.
    """
    def factory(transfer_functions, shared=None, ears=('L', 'R')):
        subject = tmp_path / 'subject'
        sltf_dir = subject / 'SLTF'
        sltf_dir.mkdir(parents=True, exist_ok=True)
        if shared is not None:
            transfer_functions = {angle: shared for angle in transfer_functions}
        for angle, transfer_function in transfer_functions.items():
            for ear in ears:
                write_file(os.path.join(sltf_dir, f'SLTF_{angle}_{ear}.DDB'), transfer_function)
        return subject

    return factory
